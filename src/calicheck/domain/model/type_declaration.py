"""Type declaration entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind, TypeTag

if TYPE_CHECKING:
    from calicheck.domain.model.enums import TypeKind
    from calicheck.domain.model.field import FieldDeclaration
    from calicheck.domain.model.method import MethodDeclaration
    from calicheck.domain.model.type_reference import TypeReference


@dataclass(frozen=True, slots=True)
class TypeDeclaration:
    """Class, record, interface or enum declaration.

    Field and method counts are derived from the owned sequences.

    Attributes:
        qualified_name: Fully qualified name (e.g. shop.domain.Order)
        kind: CLASS/RECORD/INTERFACE/ENUM
        fields: Ordered instance fields
        methods: Ordered methods
        supertypes: Implemented/extended types
        references: Other referenced types (fields, signatures, bodies)
        is_exempt: DTO/builder/configuration/utility type, opted out of all rules
        tags: Front-end classification tags
        line: Declaration line if known
        line_span: Number of source lines spanned, None if not supplied
    """

    qualified_name: str
    kind: TypeKind
    fields: tuple[FieldDeclaration, ...] = ()
    methods: tuple[MethodDeclaration, ...] = ()
    supertypes: tuple[TypeReference, ...] = ()
    references: tuple[TypeReference, ...] = ()
    is_exempt: bool = False
    tags: frozenset[TypeTag] = frozenset()
    line: int | None = None
    line_span: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.qualified_name:
            raise ValueError("qualified_name must not be empty")
        if self.line is not None and self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.line_span is not None and self.line_span < 0:
            raise ValueError(f"line_span must be >= 0, got {self.line_span}")

        names = [f.name for f in self.fields]
        if len(names) != len(set(names)):
            raise ValueError(f"field names in '{self.qualified_name}' must be unique")

    @property
    def element_kind(self) -> ElementKind:
        return ElementKind.TYPE

    @property
    def name(self) -> str:
        """Simple name (last component of qualified name)."""
        return self.qualified_name.rsplit(".", 1)[-1]

    @property
    def field_count(self) -> int:
        return len(self.fields)

    @property
    def method_count(self) -> int:
        return len(self.methods)

    @property
    def is_builder(self) -> bool:
        return TypeTag.BUILDER in self.tags

    def all_references(self) -> tuple[TypeReference, ...]:
        """Supertypes, declared references, field/parameter/return types.

        Deduplicated by name, first occurrence wins.
        """
        candidates: list[TypeReference] = [*self.supertypes, *self.references]
        candidates.extend(f.type_ref for f in self.fields if f.type_ref is not None)
        for method in self.methods:
            candidates.extend(p.type_ref for p in method.parameters if p.type_ref is not None)
            if method.return_type is not None:
                candidates.append(method.return_type)

        seen: set[str] = set()
        unique: list[TypeReference] = []
        for ref in candidates:
            if ref.name not in seen:
                seen.add(ref.name)
                unique.append(ref)
        return tuple(unique)

    def missing_attributes(self) -> tuple[str, ...]:
        return ()
