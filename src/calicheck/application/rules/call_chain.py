"""Call chain rule: one dot per line."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from calicheck.domain.model.enums import RuleCategory, StatementKind
from calicheck.domain.model.rule import RuleConfig, RuleDefinition
from calicheck.domain.predicates import is_statement

if TYPE_CHECKING:
    from calicheck.domain.model.finding import Finding
    from calicheck.domain.model.rule import RuleContext
    from calicheck.domain.model.statement import Statement


def check_call_chain(statement: Statement, context: RuleContext) -> Iterator[Finding]:
    """Flag call chains longer than the threshold.

    Fluent builders are exempt: chains whose receiver type is tagged
    as a builder are skipped.
    """
    target = statement.call_target
    if target is not None and target.is_builder:
        return
    if statement.call_chain_length is None:
        raise ValueError(f"statement {statement.position} has no call_chain_length")
    finding = context.exceeds(
        statement,
        "Call chain is too long",
        measured=statement.call_chain_length,
        option="threshold",
    )
    if finding is not None:
        yield finding


MAX_CALL_CHAIN = RuleDefinition(
    rule_id="max-call-chain",
    description="One dot per line (law of Demeter)",
    category=RuleCategory.CALISTHENICS,
    applies_to=is_statement(StatementKind.METHOD_CALL),
    check=check_call_chain,
    defaults=RuleConfig(thresholds={"threshold": 2}),
)
