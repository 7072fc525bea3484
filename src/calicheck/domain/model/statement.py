"""Statement node of a method body."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind, StatementKind

if TYPE_CHECKING:
    from calicheck.domain.model.type_reference import TypeReference


@dataclass(frozen=True, slots=True)
class Statement:
    """One node of the statement tree of a method body.

    Depth is relative to the method body: top-level statements have depth 0,
    statements nested in their bodies depth 1, and so on. An `Else` attached
    to an `If` is a direct child of that `If` and marks the alternative branch
    without opening a level: its children share its depth, so both branch
    bodies of an `If` sit at the same depth.

    Attributes:
        kind: Statement discriminator
        depth: Nesting depth (>= 0)
        position: Pre-order ordinal within the method body (>= 0)
        line: Source line if the front-end supplied one
        children: Nested statements, one level deeper (same depth under `Else`)
        call_chain_length: Chained call segments (METHOD_CALL only)
        call_target: Receiver type of the call chain (METHOD_CALL only)
    """

    kind: StatementKind
    depth: int
    position: int
    line: int | None = None
    children: tuple[Statement, ...] = ()
    call_chain_length: int | None = None
    call_target: TypeReference | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.depth < 0:
            raise ValueError(f"depth must be >= 0, got {self.depth}")
        if self.position < 0:
            raise ValueError(f"position must be >= 0, got {self.position}")
        if self.line is not None and self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.call_chain_length is not None and self.call_chain_length < 0:
            raise ValueError(f"call_chain_length must be >= 0, got {self.call_chain_length}")
        for child in self.children:
            if child.depth != self.child_depth:
                raise ValueError(
                    f"child at position {child.position} has depth {child.depth}, "
                    f"expected {self.child_depth}"
                )

    @property
    def element_kind(self) -> ElementKind:
        return ElementKind.STATEMENT

    @property
    def child_depth(self) -> int:
        """Depth of this statement's children."""
        if self.kind is StatementKind.ELSE:
            return self.depth
        return self.depth + 1

    @property
    def has_else(self) -> bool:
        """True if this is an `If` with an attached `Else`."""
        return self.kind is StatementKind.IF and any(
            child.kind is StatementKind.ELSE for child in self.children
        )

    def walk(self) -> Iterator[Statement]:
        """Yield this statement and all nested statements in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def missing_attributes(self) -> tuple[str, ...]:
        """Attributes a METHOD_CALL needs but the front-end left out."""
        if self.kind is StatementKind.METHOD_CALL and self.call_chain_length is None:
            return ("call_chain_length",)
        return ()
