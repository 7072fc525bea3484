"""Layered dependency rule: the domain must not depend on infrastructure."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind, Layer, RuleCategory
from calicheck.domain.model.rule import RuleDefinition
from calicheck.domain.predicates import is_element

if TYPE_CHECKING:
    from calicheck.domain.model.finding import Finding
    from calicheck.domain.model.rule import RuleContext
    from calicheck.domain.model.type_declaration import TypeDeclaration

# source layer -> layers it must not reference
FORBIDDEN_DEPENDENCIES: dict[Layer, frozenset[Layer]] = {
    Layer.DOMAIN: frozenset({Layer.INFRASTRUCTURE}),
}


def check_layered_dependency(type_decl: TypeDeclaration, context: RuleContext) -> Iterator[Finding]:
    """One finding per type listing every forbidden reference.

    References with unknown layer are not judged.
    """
    if context.layer is None:
        return
    forbidden = FORBIDDEN_DEPENDENCIES.get(context.layer, frozenset())
    if not forbidden:
        return

    offending = [
        ref for ref in type_decl.all_references() if ref.layer is not None and ref.layer in forbidden
    ]
    if not offending:
        return

    names = [ref.name for ref in offending]
    yield context.finding(
        type_decl,
        f"{context.layer.value} type '{type_decl.name}' depends on "
        f"{', '.join(sorted({ref.layer.value for ref in offending}))} "
        f"type(s): {', '.join(names)}",
        measured=len(offending),
        threshold=0,
        references=tuple(names),
    )


LAYERED_DEPENDENCY = RuleDefinition(
    rule_id="layered-dependency",
    description="Domain must not depend on infrastructure",
    category=RuleCategory.LAYERING,
    applies_to=is_element(ElementKind.TYPE),
    check=check_layered_dependency,
)
