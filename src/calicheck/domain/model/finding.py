"""Finding entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calicheck.domain.model.enums import RuleCategory, Severity
    from calicheck.domain.model.location import FindingLocation


@dataclass(frozen=True, slots=True)
class Finding:
    """One violation of one rule against one model element.

    Attributes:
        rule_id: Identifier of the rule that produced it
        severity: ERROR/WARNING/INFO
        location: Offending element
        message: Human-readable message
        category: Rule category
        payload: Machine-readable data, e.g. {"measured": 4, "threshold": 3}
    """

    rule_id: str
    severity: Severity
    location: FindingLocation
    message: str
    category: RuleCategory
    payload: Mapping[str, object] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        # freeze payload
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    @property
    def measured(self) -> object | None:
        return self.payload.get("measured")

    @property
    def threshold(self) -> object | None:
        return self.payload.get("threshold")

    @property
    def sort_key(self) -> tuple[str, str, str, int]:
        return self.location.sort_key

    def summary_line(self) -> str:
        """Format as '<severity>: <ruleId> at <location> — measured=<v> threshold=<t>'."""
        line = f"{self.severity.value}: {self.rule_id} at {self.location}"
        if "measured" in self.payload or "threshold" in self.payload:
            line += f" — measured={self.measured} threshold={self.threshold}"
        return line

    def __str__(self) -> str:
        return f"{self.summary_line()}\n  {self.message}"
