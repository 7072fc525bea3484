"""Formatter protocol for report rendering.

Users extend calicheck by implementing this Protocol.
Formatters are pure: they return text, writing it is the caller's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from calicheck.domain.model.report import Report


class FormatterProtocol(Protocol):
    """Contract for report formatters.

    calicheck provides text, records, JSON and console (rich) formatters.
    Users can implement SARIF, HTML, etc.

    Example:
        class CountFormatter:
            def format(self, report: Report) -> str:
                return f"{report.total} findings"
    """

    def format(self, report: Report) -> str:
        """Render report to text.

        Args:
            report: Summarized report

        Returns:
            Rendered output
        """
        ...
