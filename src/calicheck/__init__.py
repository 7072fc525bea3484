"""calicheck - structural conformance engine for object-oriented code models."""

__version__ = "0.1.0"

from calicheck.application.reporters import OutputStyle, format_report, summarize
from calicheck.application.rules import builtin_rules, default_registry
from calicheck.application.services import ConformanceChecker, Evaluator

__all__ = [
    "ConformanceChecker",
    "Evaluator",
    "builtin_rules",
    "default_registry",
    "summarize",
    "format_report",
    "OutputStyle",
    "__version__",
]
