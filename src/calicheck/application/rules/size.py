"""Size rules: keep entities small.

max-class-size runs two independent sub-checks (method count, line span),
each producing its own finding. The line ceiling comes from a named
profile: `strict` (50 lines) or `relaxed` (100 lines).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind, RuleCategory, TypeKind
from calicheck.domain.model.rule import RuleConfig, RuleDefinition
from calicheck.domain.predicates import is_element, is_type_of_kind

if TYPE_CHECKING:
    from calicheck.domain.model.finding import Finding
    from calicheck.domain.model.method import MethodDeclaration
    from calicheck.domain.model.rule import RuleContext
    from calicheck.domain.model.type_declaration import TypeDeclaration

CLASS_SIZE_PROFILES: dict[str, dict[str, int]] = {
    "strict": {"max_lines": 50},
    "relaxed": {"max_lines": 100},
}


def check_class_size(type_decl: TypeDeclaration, context: RuleContext) -> Iterator[Finding]:
    """Method count and line span sub-checks.

    The line check is skipped when the front-end supplied no line span.
    """
    methods = context.exceeds(
        type_decl,
        f"Type '{type_decl.name}' has too many methods",
        measured=type_decl.method_count,
        option="max_methods",
        metric="methods",
    )
    if methods is not None:
        yield methods

    if type_decl.line_span is None:
        return
    lines = context.exceeds(
        type_decl,
        f"Type '{type_decl.name}' spans too many lines",
        measured=type_decl.line_span,
        option="max_lines",
        metric="lines",
        profile=context.config.profile,
    )
    if lines is not None:
        yield lines


def check_method_size(method: MethodDeclaration, context: RuleContext) -> Iterator[Finding]:
    finding = context.exceeds(
        method,
        f"Method '{method.name}' has too many statements",
        measured=method.statement_count,
        option="threshold",
    )
    if finding is not None:
        yield finding


def check_interface_methods(type_decl: TypeDeclaration, context: RuleContext) -> Iterator[Finding]:
    """Interface segregation proxy: method count of an interface."""
    finding = context.exceeds(
        type_decl,
        f"Interface '{type_decl.name}' declares too many methods; split it",
        measured=type_decl.method_count,
        option="threshold",
    )
    if finding is not None:
        yield finding


MAX_CLASS_SIZE = RuleDefinition(
    rule_id="max-class-size",
    description="Keep all entities small",
    category=RuleCategory.SIZE,
    applies_to=is_element(ElementKind.TYPE),
    check=check_class_size,
    defaults=RuleConfig(thresholds={"max_methods": 10, "max_lines": 50}, profile="strict"),
    profiles=CLASS_SIZE_PROFILES,
)

MAX_METHOD_SIZE = RuleDefinition(
    rule_id="max-method-size",
    description="Keep methods short",
    category=RuleCategory.SIZE,
    applies_to=is_element(ElementKind.METHOD),
    check=check_method_size,
    defaults=RuleConfig(thresholds={"threshold": 15}),
)

MAX_INTERFACE_METHODS = RuleDefinition(
    rule_id="max-interface-methods",
    description="Prefer narrow, role-specific interfaces",
    category=RuleCategory.SOLID,
    applies_to=is_type_of_kind(TypeKind.INTERFACE),
    check=check_interface_methods,
    defaults=RuleConfig(thresholds={"threshold": 5}),
)
