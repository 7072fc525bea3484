"""JSON formatter for machine-readable output.

Stdlib-only formatter: summary counts plus finding records.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from calicheck.application.reporters._base import BaseFormatter
from calicheck.application.reporters.records import to_records

if TYPE_CHECKING:
    from calicheck.domain.model.report import Report


class JSONFormatter(BaseFormatter):
    """JSON formatter for CI/CD integration and parsing by other tools."""

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize formatter.

        Args:
            indent: JSON indentation (default: 2, None for compact)
        """
        self._indent = indent

    def format(self, report: Report) -> str:
        return json.dumps(self._report_to_dict(report), indent=self._indent)

    def _report_to_dict(self, report: Report) -> dict[str, object]:
        """Convert Report to JSON-serializable dict."""
        return {
            "passed": report.passed,
            "exit_code": report.exit_code,
            "summary": {
                "total": report.total,
                "by_severity": {s.value: n for s, n in report.severity_counts.items()},
                "by_rule": dict(report.rule_counts),
                "units_analyzed": report.units_analyzed,
                "units_skipped": report.units_skipped,
                "cancelled": report.cancelled,
            },
            "findings": to_records(report),
        }
