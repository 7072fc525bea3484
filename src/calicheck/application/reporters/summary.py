"""Findings → Report."""

from __future__ import annotations

from collections.abc import Iterable

from calicheck.domain.model.enums import Severity
from calicheck.domain.model.finding import Finding
from calicheck.domain.model.report import Report


def summarize(
    findings: Iterable[Finding],
    *,
    units_analyzed: int = 0,
    units_skipped: int = 0,
    cancelled: bool = False,
) -> Report:
    """Count findings per severity and per rule.

    Finding order is preserved; callers pass already-sorted findings.

    Args:
        findings: Ordered findings
        units_analyzed: Units evaluated
        units_skipped: Units not evaluated (cancellation)
        cancelled: Run stopped on a cancellation signal

    Returns:
        Report with every severity present in severity_counts and rule
        counts in first-seen order
    """
    ordered = tuple(findings)
    severity_counts = dict.fromkeys(Severity, 0)
    rule_counts: dict[str, int] = {}
    for finding in ordered:
        severity_counts[finding.severity] += 1
        rule_counts[finding.rule_id] = rule_counts.get(finding.rule_id, 0) + 1

    return Report(
        findings=ordered,
        severity_counts=severity_counts,
        rule_counts=rule_counts,
        units_analyzed=units_analyzed,
        units_skipped=units_skipped,
        cancelled=cancelled,
    )
