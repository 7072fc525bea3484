"""Rule registry and configuration."""

from calicheck.application.registry.config_file import (
    FileConfiguration,
    load_configuration,
    parse_configuration,
)
from calicheck.application.registry.options import ConfigDiagnostic, resolve_options
from calicheck.application.registry.rule_registry import (
    ActiveRule,
    ActiveRuleSet,
    RuleRegistry,
)

__all__ = [
    "ActiveRule",
    "ActiveRuleSet",
    "RuleRegistry",
    "ConfigDiagnostic",
    "resolve_options",
    "FileConfiguration",
    "load_configuration",
    "parse_configuration",
]
