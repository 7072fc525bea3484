"""Method declaration entity."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind, Visibility

if TYPE_CHECKING:
    from calicheck.domain.model.parameter import Parameter
    from calicheck.domain.model.statement import Statement
    from calicheck.domain.model.type_reference import TypeReference


@dataclass(frozen=True, slots=True)
class MethodDeclaration:
    """Method of a type.

    Attributes:
        name: Method name
        parameters: Ordered parameters
        return_type: Declared return type, None for void/constructors
        body: Top-level statements (depth 0)
        visibility: Declared visibility
        is_accessor: Body is a single-field passthrough (getter/setter shape)
        line: Source line if known
    """

    name: str
    parameters: tuple[Parameter, ...] = ()
    return_type: TypeReference | None = None
    body: tuple[Statement, ...] = ()
    visibility: Visibility = Visibility.PUBLIC
    is_accessor: bool = False
    line: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")
        if self.line is not None and self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")

        for statement in self.body:
            if statement.depth != 0:
                raise ValueError(
                    f"top-level statement at position {statement.position} "
                    f"must have depth 0, got {statement.depth}"
                )

        positions = [s.position for s in self.statements()]
        if len(positions) != len(set(positions)):
            raise ValueError(f"statement positions in '{self.name}' must be unique")

        names = [p.name for p in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(f"parameter names in '{self.name}' must be unique")

    @property
    def element_kind(self) -> ElementKind:
        return ElementKind.METHOD

    def statements(self) -> Iterator[Statement]:
        """Yield every statement of the body in pre-order."""
        for statement in self.body:
            yield from statement.walk()

    @property
    def max_nesting_depth(self) -> int:
        """Greatest depth among body statements (0 for an empty body)."""
        return max((s.depth for s in self.statements()), default=0)

    @property
    def statement_count(self) -> int:
        """Number of statements including nested ones."""
        return sum(1 for _ in self.statements())

    def missing_attributes(self) -> tuple[str, ...]:
        return ()
