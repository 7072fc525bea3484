"""Plain text formatter.

One summary line per finding:
    <severity>: <ruleId> at <path>:<type>.<member> — measured=<v> threshold=<t>
followed by a totals line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from calicheck.application.reporters._base import BaseFormatter

if TYPE_CHECKING:
    from calicheck.domain.model.report import Report


class PlainTextFormatter(BaseFormatter):
    """Stdlib-only text output."""

    def __init__(self, *, show_messages: bool = False) -> None:
        """Initialize formatter.

        Args:
            show_messages: Add the human-readable message under each line
        """
        self._show_messages = show_messages

    def format(self, report: Report) -> str:
        lines: list[str] = []
        for finding in report.findings:
            lines.append(finding.summary_line())
            if self._show_messages:
                lines.append(f"    {finding.message}")
        lines.append(self._totals(report))
        return "\n".join(lines)

    def _totals(self, report: Report) -> str:
        counts = ", ".join(f"{s.value}={n}" for s, n in report.severity_counts.items())
        status = "PASSED" if report.passed else "FAILED"
        text = f"{report.total} finding(s) ({counts}): {status}"
        if report.cancelled:
            text += f" (cancelled, {report.units_skipped} unit(s) skipped)"
        return text
