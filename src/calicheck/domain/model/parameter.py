"""Method parameter value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind

if TYPE_CHECKING:
    from calicheck.domain.model.type_reference import TypeReference


@dataclass(frozen=True, slots=True)
class Parameter:
    """Method parameter.

    Attributes:
        name: Parameter name
        type_ref: Declared type, None if the front-end could not resolve it
    """

    name: str
    type_ref: TypeReference | None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")

    @property
    def element_kind(self) -> ElementKind:
        return ElementKind.PARAMETER

    def missing_attributes(self) -> tuple[str, ...]:
        return ("type_ref",) if self.type_ref is None else ()
