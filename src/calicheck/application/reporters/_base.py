"""Base formatter class.

Provides default implementation of FormatterProtocol.
Concrete formatters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calicheck.domain.model.report import Report


class BaseFormatter(ABC):
    """Base class for formatters implementing FormatterProtocol.

    Example:
        class CountFormatter(BaseFormatter):
            def format(self, report: Report) -> str:
                return f"{report.total} findings"
    """

    @abstractmethod
    def format(self, report: Report) -> str:
        """Render report to text.

        Args:
            report: Summarized report
        """
