"""Built-in rules.

Order matters: it is the registration order of `default_registry()` and
therefore the order in which rules run on each element.
"""

from calicheck.application.registry.rule_registry import RuleRegistry
from calicheck.application.rules.call_chain import MAX_CALL_CHAIN
from calicheck.application.rules.encapsulation import MAX_INSTANCE_VARIABLES, NO_ACCESSOR_METHODS
from calicheck.application.rules.indentation import MAX_INDENTATION_DEPTH, NO_ELSE_BRANCH
from calicheck.application.rules.layering import LAYERED_DEPENDENCY
from calicheck.application.rules.naming import NO_ABBREVIATION
from calicheck.application.rules.primitives import FIRST_CLASS_COLLECTION, WRAP_PRIMITIVES
from calicheck.application.rules.size import MAX_CLASS_SIZE, MAX_INTERFACE_METHODS, MAX_METHOD_SIZE
from calicheck.domain.model.rule import RuleDefinition

_BUILTIN_RULES: tuple[RuleDefinition, ...] = (
    MAX_INDENTATION_DEPTH,
    NO_ELSE_BRANCH,
    WRAP_PRIMITIVES,
    FIRST_CLASS_COLLECTION,
    MAX_CALL_CHAIN,
    NO_ABBREVIATION,
    MAX_CLASS_SIZE,
    MAX_INSTANCE_VARIABLES,
    NO_ACCESSOR_METHODS,
    LAYERED_DEPENDENCY,
    MAX_INTERFACE_METHODS,
    MAX_METHOD_SIZE,
)


def builtin_rules() -> tuple[RuleDefinition, ...]:
    """All built-in rule definitions in canonical order."""
    return _BUILTIN_RULES


def default_registry() -> RuleRegistry:
    """Fresh registry with every built-in rule at its default configuration."""
    return RuleRegistry(_BUILTIN_RULES)


__all__ = [
    "builtin_rules",
    "default_registry",
    "MAX_INDENTATION_DEPTH",
    "NO_ELSE_BRANCH",
    "WRAP_PRIMITIVES",
    "FIRST_CLASS_COLLECTION",
    "MAX_CALL_CHAIN",
    "NO_ABBREVIATION",
    "MAX_CLASS_SIZE",
    "MAX_INSTANCE_VARIABLES",
    "NO_ACCESSOR_METHODS",
    "LAYERED_DEPENDENCY",
    "MAX_INTERFACE_METHODS",
    "MAX_METHOD_SIZE",
]
