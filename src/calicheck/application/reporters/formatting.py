"""Style dispatch: format_report(report, style)."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from calicheck.application.reporters.console import ConsoleFormatter
from calicheck.application.reporters.json_formatter import JSONFormatter
from calicheck.application.reporters.plain_text import PlainTextFormatter
from calicheck.application.reporters.records import RecordsFormatter

if TYPE_CHECKING:
    from calicheck.domain.model.report import Report
    from calicheck.domain.ports.formatter import FormatterProtocol


class OutputStyle(Enum):
    """Recognized output styles."""

    RECORDS = "records"  # JSON array, one object per finding
    TEXT = "text"  # one summary line per finding
    JSON = "json"  # summary counts + records
    CONSOLE = "console"  # rich tables


def formatter_for(style: OutputStyle | str) -> FormatterProtocol:
    """Default formatter of a style.

    Raises:
        ValueError: If style names no OutputStyle
    """
    match OutputStyle(style):
        case OutputStyle.RECORDS:
            return RecordsFormatter()
        case OutputStyle.TEXT:
            return PlainTextFormatter()
        case OutputStyle.JSON:
            return JSONFormatter()
        case OutputStyle.CONSOLE:
            return ConsoleFormatter()


def format_report(report: Report, style: OutputStyle | str = OutputStyle.TEXT) -> str:
    """Render a report in the given style. Pure; no output is written."""
    return formatter_for(style).format(report)
