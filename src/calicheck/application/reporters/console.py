"""Console formatter: Report → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console

from calicheck.application.reporters._base import BaseFormatter
from calicheck.application.reporters.strategies import (
    SEVERITY_STYLES,
    ByFileStrategy,
    GroupStrategy,
)

if TYPE_CHECKING:
    from calicheck.domain.model.report import Report


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console formatter.

    Attributes:
        group_by: Strategy for grouping findings. None = ByFileStrategy().
        width: Console width in characters.
        color: Emit ANSI color codes.
    """

    group_by: GroupStrategy | None = None
    width: int = 120
    color: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleFormatter(BaseFormatter):
    """Console formatter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize formatter.

        Args:
            config: Formatter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def format(self, report: Report) -> str:
        """Format report as rich formatted string."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        self._render_header(console, report)
        if report.findings:
            strategy = self._config.group_by or ByFileStrategy()
            strategy.render(console, strategy.group(report.findings))
        self._render_footer(console, report)

        return output.getvalue()

    def _render_header(self, console: Console, report: Report) -> None:
        """Render header with severity counts."""
        console.rule("[bold]CONFORMANCE REPORT[/bold]")
        parts = [f"[bold]Findings:[/bold] {report.total}"]
        for severity, count in report.severity_counts.items():
            style = SEVERITY_STYLES[severity]
            parts.append(f"[{style}]{severity.value}: {count}[/{style}]")
        console.print(" ".join(parts))
        console.print(f"[bold]Units:[/bold] {report.units_analyzed} analyzed")
        console.print()

    def _render_footer(self, console: Console, report: Report) -> None:
        if report.cancelled:
            console.print(
                f"[yellow]Cancelled:[/yellow] {report.units_skipped} unit(s) not analyzed"
            )
        status = "[green]PASSED[/green]" if report.passed else "[bold red]FAILED[/bold red]"
        console.print(f"Result: {status}")
