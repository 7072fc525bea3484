"""Report aggregate."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from calicheck.domain.model.enums import Severity
from calicheck.domain.model.finding import Finding

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass(frozen=True, slots=True)
class Report:
    """Summarized result of one analysis run.

    Immutable aggregate consumed by formatters.

    Attributes:
        findings: All findings in deterministic order
        severity_counts: Finding count per severity (every severity present)
        rule_counts: Finding count per rule id, first-seen order
        units_analyzed: Compilation units evaluated
        units_skipped: Compilation units not evaluated because of cancellation
        cancelled: Run stopped early on a cancellation signal
    """

    findings: tuple[Finding, ...]
    severity_counts: Mapping[Severity, int] = field(hash=False)
    rule_counts: Mapping[str, int] = field(hash=False)
    units_analyzed: int = 0
    units_skipped: int = 0
    cancelled: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if set(self.severity_counts) != set(Severity):
            raise ValueError("severity_counts must have an entry for every severity")
        if sum(self.severity_counts.values()) != len(self.findings):
            raise ValueError("severity_counts must sum to the number of findings")
        if sum(self.rule_counts.values()) != len(self.findings):
            raise ValueError("rule_counts must sum to the number of findings")
        if self.units_analyzed < 0 or self.units_skipped < 0:
            raise ValueError("unit counts must be >= 0")
        object.__setattr__(self, "severity_counts", MappingProxyType(dict(self.severity_counts)))
        object.__setattr__(self, "rule_counts", MappingProxyType(dict(self.rule_counts)))

    @property
    def total(self) -> int:
        return len(self.findings)

    @property
    def error_count(self) -> int:
        return self.severity_counts[Severity.ERROR]

    @property
    def warning_count(self) -> int:
        return self.severity_counts[Severity.WARNING]

    @property
    def info_count(self) -> int:
        return self.severity_counts[Severity.INFO]

    @property
    def passed(self) -> bool:
        """True if no ERROR findings. Warnings and infos never fail a run."""
        return self.error_count == 0

    @property
    def exit_code(self) -> int:
        """Status for a driving CLI: 0 on success, 1 on ERROR findings."""
        return EXIT_SUCCESS if self.passed else EXIT_FAILURE

    def for_rule(self, rule_id: str) -> tuple[Finding, ...]:
        """Findings of one rule, in report order."""
        return tuple(f for f in self.findings if f.rule_id == rule_id)

    @classmethod
    def empty(cls) -> Report:
        """Create empty report (passed, no findings)."""
        return cls(
            findings=(),
            severity_counts=dict.fromkeys(Severity, 0),
            rule_counts={},
        )
