"""Evaluation-time exceptions.

Never escape a run: the evaluator converts them into INFO findings.
"""

from pathlib import Path

from calicheck.domain.exceptions.base import CalicheckError


class EvaluationTimeout(CalicheckError):
    """Unit evaluation exceeded its time budget.

    Attributes:
        path: Compilation unit being evaluated
        budget_s: Configured budget in seconds (must be > 0)
    """

    def __init__(self, path: Path, budget_s: float) -> None:
        if budget_s <= 0:
            raise ValueError(f"budget_s must be > 0, got {budget_s}")

        self.path = path
        self.budget_s = budget_s
        super().__init__(f"Evaluation of '{path}' exceeded {budget_s:g}s budget")
