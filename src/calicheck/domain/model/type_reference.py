"""Type reference value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import TypeTag

if TYPE_CHECKING:
    from calicheck.domain.model.enums import Layer


@dataclass(frozen=True, slots=True)
class TypeReference:
    """Reference to a type from a field, parameter, return or supertype.

    Attributes:
        name: Referenced type name as written in source
        is_primitive_or_builtin_string: Language primitive or built-in string
        is_collection: Built-in collection generic (list, map, set, ...)
        layer: Inferred layer of the referenced type, None if unknown
        tags: Front-end classification of the referenced type
    """

    name: str
    is_primitive_or_builtin_string: bool = False
    is_collection: bool = False
    layer: Layer | None = None
    tags: frozenset[TypeTag] = frozenset()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("type reference name must not be empty")

    @property
    def is_builder(self) -> bool:
        """True if the referenced type is tagged as a builder."""
        return TypeTag.BUILDER in self.tags

    def __str__(self) -> str:
        return self.name
