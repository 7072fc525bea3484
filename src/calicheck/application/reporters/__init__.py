"""Report summarization and formatting.

Built-in formatters use stdlib only, except ConsoleFormatter (rich).
Users can implement custom formatters via FormatterProtocol.
"""

from calicheck.application.reporters._base import BaseFormatter
from calicheck.application.reporters.console import ConsoleConfig, ConsoleFormatter
from calicheck.application.reporters.formatting import OutputStyle, format_report, formatter_for
from calicheck.application.reporters.json_formatter import JSONFormatter
from calicheck.application.reporters.plain_text import PlainTextFormatter
from calicheck.application.reporters.records import (
    RecordsFormatter,
    finding_to_record,
    to_records,
)
from calicheck.application.reporters.strategies import ByFileStrategy, ByRuleStrategy
from calicheck.application.reporters.summary import summarize

__all__ = [
    "summarize",
    "OutputStyle",
    "format_report",
    "formatter_for",
    "to_records",
    "finding_to_record",
    "BaseFormatter",
    "PlainTextFormatter",
    "RecordsFormatter",
    "JSONFormatter",
    "ConsoleFormatter",
    "ConsoleConfig",
    "ByFileStrategy",
    "ByRuleStrategy",
]
