"""Field declaration entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind, Mutability, Visibility

if TYPE_CHECKING:
    from calicheck.domain.model.type_reference import TypeReference


@dataclass(frozen=True, slots=True)
class FieldDeclaration:
    """Instance field of a type.

    Attributes:
        name: Field name
        type_ref: Declared type, None if unresolved
        mutability: FINAL/MUTABLE
        visibility: Declared visibility
        is_infrastructure_utility: Logger or observability handle
        line: Source line if known
    """

    name: str
    type_ref: TypeReference | None
    mutability: Mutability = Mutability.FINAL
    visibility: Visibility = Visibility.PRIVATE
    is_infrastructure_utility: bool = False
    line: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("field name must not be empty")
        if self.line is not None and self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")

    @property
    def element_kind(self) -> ElementKind:
        return ElementKind.FIELD

    def missing_attributes(self) -> tuple[str, ...]:
        return ("type_ref",) if self.type_ref is None else ()
