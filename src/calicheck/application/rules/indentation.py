"""Indentation rules: nesting depth and else branches."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import ElementKind, RuleCategory, StatementKind
from calicheck.domain.model.rule import RuleConfig, RuleDefinition
from calicheck.domain.predicates import is_element, is_statement

if TYPE_CHECKING:
    from calicheck.domain.model.finding import Finding
    from calicheck.domain.model.method import MethodDeclaration
    from calicheck.domain.model.rule import RuleContext
    from calicheck.domain.model.statement import Statement


def check_indentation_depth(method: MethodDeclaration, context: RuleContext) -> Iterator[Finding]:
    """One finding if the deepest body statement exceeds the threshold.

    An `If` without an `Else` still nests its body one level deeper.
    """
    finding = context.exceeds(
        method,
        f"Method '{method.name}' nests statements too deeply",
        measured=method.max_nesting_depth,
        option="threshold",
    )
    if finding is not None:
        yield finding


def check_no_else(statement: Statement, context: RuleContext) -> Iterator[Finding]:
    """One finding per `If` with an attached `Else`."""
    if not statement.has_else:
        return
    else_branch = next(c for c in statement.children if c.kind is StatementKind.ELSE)
    yield context.finding(
        statement,
        "If statement has an else branch; return early or use polymorphism",
        else_position=else_branch.position,
    )


MAX_INDENTATION_DEPTH = RuleDefinition(
    rule_id="max-indentation-depth",
    description="Only one level of indentation per method",
    category=RuleCategory.CALISTHENICS,
    applies_to=is_element(ElementKind.METHOD),
    check=check_indentation_depth,
    defaults=RuleConfig(thresholds={"threshold": 1}),
)

NO_ELSE_BRANCH = RuleDefinition(
    rule_id="no-else-branch",
    description="Don't use the else keyword",
    category=RuleCategory.CALISTHENICS,
    applies_to=is_statement(StatementKind.IF),
    check=check_no_else,
)
