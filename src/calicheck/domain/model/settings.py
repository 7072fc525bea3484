"""Run settings for multi-unit analysis."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RunSettings:
    """Engine-level settings.

    None = feature disabled.

    Attributes:
        max_workers: Worker threads for parallel unit evaluation. None = serial.
        time_budget_s: Per-unit evaluation budget in seconds. None = unbounded.
        strict_options: Unknown option keys raise instead of producing diagnostics.
    """

    max_workers: int | None = None
    time_budget_s: float | None = None
    strict_options: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.time_budget_s is not None and self.time_budget_s <= 0:
            raise ValueError(f"time_budget_s must be > 0, got {self.time_budget_s}")

    @property
    def is_parallel(self) -> bool:
        return self.max_workers is not None and self.max_workers > 1
