"""Encapsulation rules: instance variable count and accessor methods."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind, Layer, RuleCategory
from calicheck.domain.model.rule import RuleConfig, RuleDefinition
from calicheck.domain.predicates import is_element

if TYPE_CHECKING:
    from calicheck.domain.model.finding import Finding
    from calicheck.domain.model.method import MethodDeclaration
    from calicheck.domain.model.rule import RuleContext
    from calicheck.domain.model.type_declaration import TypeDeclaration


def check_instance_variables(type_decl: TypeDeclaration, context: RuleContext) -> Iterator[Finding]:
    """Count fields, excluding logger/observability handles."""
    counted = [f for f in type_decl.fields if not f.is_infrastructure_utility]
    finding = context.exceeds(
        type_decl,
        f"Type '{type_decl.name}' has too many instance variables",
        measured=len(counted),
        option="threshold",
    )
    if finding is not None:
        yield finding


def check_accessor_methods(method: MethodDeclaration, context: RuleContext) -> Iterator[Finding]:
    """Flag getter/setter-shaped methods of domain types.

    Shape only: `is_accessor` is the front-end's single-field passthrough flag.
    """
    if context.layer is not Layer.DOMAIN or not method.is_accessor:
        return
    yield context.finding(
        method,
        f"Method '{method.name}' is a getter/setter; tell, don't ask",
    )


MAX_INSTANCE_VARIABLES = RuleDefinition(
    rule_id="max-instance-variables",
    description="No classes with more than two instance variables",
    category=RuleCategory.CALISTHENICS,
    applies_to=is_element(ElementKind.TYPE),
    check=check_instance_variables,
    defaults=RuleConfig(thresholds={"threshold": 2}),
)

NO_ACCESSOR_METHODS = RuleDefinition(
    rule_id="no-accessor-methods",
    description="No getters/setters/properties",
    category=RuleCategory.CALISTHENICS,
    applies_to=is_element(ElementKind.METHOD),
    check=check_accessor_methods,
)
