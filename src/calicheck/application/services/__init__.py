"""Application services: evaluator, runner, facade."""

from calicheck.application.services.checker import ConformanceChecker
from calicheck.application.services.evaluator import (
    INCOMPLETE_MODEL_DATA,
    RULE_FAULT,
    Evaluator,
    sort_findings,
)
from calicheck.application.services.runner import ConformanceRunner

__all__ = [
    "ConformanceChecker",
    "ConformanceRunner",
    "Evaluator",
    "sort_findings",
    "INCOMPLETE_MODEL_DATA",
    "RULE_FAULT",
]
