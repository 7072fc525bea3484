"""Group strategies for the console formatter.

GroupStrategy Protocol defines interface for grouping and rendering findings.
Built-in strategies: ByFileStrategy, ByRuleStrategy.
User can implement custom strategies with same Protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from rich.table import Table

from calicheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from rich.console import Console

    from calicheck.domain.model.finding import Finding

SEVERITY_STYLES: dict[Severity, str] = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "dim",
}


class GroupStrategy(Protocol):
    """Protocol for finding grouping and rendering.

    User can implement custom strategies by satisfying this Protocol.
    Built-in strategies are NOT special - same interface, same status.
    """

    def group(self, findings: tuple[Finding, ...]) -> dict[str, list[Finding]]:
        """Group findings by strategy-specific key.

        Args:
            findings: Findings in report order.

        Returns:
            Dict mapping group key to list of findings, insertion-ordered.
        """
        ...

    def render(self, console: Console, grouped: dict[str, list[Finding]]) -> None:
        """Render grouped findings to console.

        Args:
            console: Rich console for output.
            grouped: Findings grouped by key.
        """
        ...


def format_member(finding: Finding) -> str:
    """Format location as short string: Type.member."""
    location = finding.location
    type_part = (location.type_name or "").rsplit(".", 1)[-1] or "-"
    if location.member_name is None:
        return type_part
    return f"{type_part}.{location.member_name}"


def format_measure(finding: Finding) -> str:
    if "measured" not in finding.payload:
        return "-"
    return f"{finding.measured} > {finding.threshold}"


def _severity_cell(finding: Finding) -> str:
    style = SEVERITY_STYLES[finding.severity]
    return f"[{style}]{finding.severity.value}[/{style}]"


@dataclass(frozen=True, slots=True)
class ByFileStrategy:
    """Group findings by compilation unit path.

    Attributes:
        show_messages: Show the human-readable message column.
    """

    show_messages: bool = True

    def group(self, findings: tuple[Finding, ...]) -> dict[str, list[Finding]]:
        """Group findings by file path."""
        by_file: dict[str, list[Finding]] = {}
        for finding in findings:
            by_file.setdefault(str(finding.location.path), []).append(finding)
        return by_file

    def render(self, console: Console, grouped: dict[str, list[Finding]]) -> None:
        """Render one table per file."""
        for path, findings in grouped.items():
            console.print(f"[bold]{path}[/bold] ({len(findings)})")
            table = Table(show_header=True, header_style="bold", box=None)
            table.add_column("Severity")
            table.add_column("Rule", style="cyan")
            table.add_column("Element")
            table.add_column("Measured", style="dim")
            if self.show_messages:
                table.add_column("Message")

            for finding in findings:
                row = [
                    _severity_cell(finding),
                    finding.rule_id,
                    format_member(finding),
                    format_measure(finding),
                ]
                if self.show_messages:
                    row.append(finding.message)
                table.add_row(*row)

            console.print(table)
            console.print()


@dataclass(frozen=True, slots=True)
class ByRuleStrategy:
    """Group findings by rule id."""

    def group(self, findings: tuple[Finding, ...]) -> dict[str, list[Finding]]:
        """Group findings by rule id."""
        by_rule: dict[str, list[Finding]] = {}
        for finding in findings:
            by_rule.setdefault(finding.rule_id, []).append(finding)
        return by_rule

    def render(self, console: Console, grouped: dict[str, list[Finding]]) -> None:
        """Render one table per rule."""
        for rule_id, findings in grouped.items():
            console.print(f"[bold]{rule_id}[/bold] ({len(findings)})")
            table = Table(show_header=False, box=None, padding=(0, 1))
            table.add_column("severity")
            table.add_column("location", style="cyan")
            table.add_column("measured", style="dim")

            for finding in findings:
                table.add_row(
                    _severity_cell(finding),
                    str(finding.location),
                    format_measure(finding),
                )

            console.print(table)
            console.print()
