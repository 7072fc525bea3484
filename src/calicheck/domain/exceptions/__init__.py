"""Domain exceptions."""

from calicheck.domain.exceptions.base import CalicheckError
from calicheck.domain.exceptions.configuration import (
    DuplicateRuleError,
    InvalidRuleOptionError,
    RuleConfigurationError,
    UnknownRuleError,
    UnknownRuleOptionError,
)
from calicheck.domain.exceptions.evaluation import EvaluationTimeout

__all__ = [
    "CalicheckError",
    "RuleConfigurationError",
    "DuplicateRuleError",
    "UnknownRuleError",
    "UnknownRuleOptionError",
    "InvalidRuleOptionError",
    "EvaluationTimeout",
]
