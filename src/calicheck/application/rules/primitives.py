"""Domain-layer encapsulation rules: wrapped primitives and first-class collections.

Both are shape-based proxies for encapsulation and only fire for types in
the Domain layer; DTOs and infrastructure code are out of scope.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind, Layer, RuleCategory
from calicheck.domain.model.rule import RuleDefinition
from calicheck.domain.predicates import is_element

if TYPE_CHECKING:
    from calicheck.domain.model.field import FieldDeclaration
    from calicheck.domain.model.finding import Finding
    from calicheck.domain.model.parameter import Parameter
    from calicheck.domain.model.rule import RuleContext


def check_wrap_primitives(
    element: FieldDeclaration | Parameter,
    context: RuleContext,
) -> Iterator[Finding]:
    """Flag primitive/string fields and parameters of domain types."""
    if context.layer is not Layer.DOMAIN:
        return
    type_ref = element.type_ref
    if type_ref is None or not type_ref.is_primitive_or_builtin_string:
        return

    if element.element_kind is ElementKind.PARAMETER:
        yield context.finding(
            element,
            f"Parameter '{element.name}' has primitive type '{type_ref}'; wrap it in a value type",
            parameter=element.name,
            type=type_ref.name,
        )
    else:
        yield context.finding(
            element,
            f"Field '{element.name}' has primitive type '{type_ref}'; wrap it in a value type",
            type=type_ref.name,
        )


def check_first_class_collection(field: FieldDeclaration, context: RuleContext) -> Iterator[Finding]:
    """Flag raw collection fields of domain types."""
    if context.layer is not Layer.DOMAIN:
        return
    if field.type_ref is None or not field.type_ref.is_collection:
        return
    yield context.finding(
        field,
        f"Field '{field.name}' is a raw collection '{field.type_ref}'; "
        "wrap it in a first-class collection",
        type=field.type_ref.name,
    )


WRAP_PRIMITIVES = RuleDefinition(
    rule_id="wrap-primitives",
    description="Wrap all primitives and strings",
    category=RuleCategory.CALISTHENICS,
    applies_to=is_element(ElementKind.FIELD, ElementKind.PARAMETER),
    check=check_wrap_primitives,
)

FIRST_CLASS_COLLECTION = RuleDefinition(
    rule_id="first-class-collection",
    description="Use first-class collections",
    category=RuleCategory.CALISTHENICS,
    applies_to=is_element(ElementKind.FIELD),
    check=check_first_class_collection,
)
