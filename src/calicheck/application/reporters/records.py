"""Structured records: one machine-readable entry per finding."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from calicheck.application.reporters._base import BaseFormatter

if TYPE_CHECKING:
    from calicheck.domain.model.finding import Finding
    from calicheck.domain.model.report import Report


def _jsonable(value: object) -> object:
    if isinstance(value, (tuple, list, frozenset, set)):
        return [_jsonable(v) for v in value]
    return value


def finding_to_record(finding: Finding) -> dict[str, object]:
    """Convert Finding to JSON-serializable dict.

    Args:
        finding: Finding to convert

    Returns:
        Dictionary suitable for json.dump()
    """
    location = finding.location
    return {
        "rule_id": finding.rule_id,
        "severity": finding.severity.value,
        "category": finding.category.name,
        "message": finding.message,
        "location": {
            "path": str(location.path),
            "type": location.type_name,
            "member": location.member_name,
            "statement_position": location.statement_position,
            "line": location.line,
        },
        "payload": {key: _jsonable(value) for key, value in finding.payload.items()},
    }


def to_records(report: Report) -> list[dict[str, object]]:
    """Structured record list in report order."""
    return [finding_to_record(f) for f in report.findings]


class RecordsFormatter(BaseFormatter):
    """JSON array of finding records."""

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize formatter.

        Args:
            indent: JSON indentation (default: 2, None for compact)
        """
        self._indent = indent

    def format(self, report: Report) -> str:
        return json.dumps(to_records(report), indent=self._indent)
