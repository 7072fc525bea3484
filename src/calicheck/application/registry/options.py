"""Rule option parsing: raw option mappings -> RuleConfig.

Recognized keys: `enabled`, `severity`, the rule's threshold names and,
for rules with profiles, `profile`. Unknown keys become INFO diagnostics
(or UnknownRuleOptionError in strict mode).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from calicheck.domain.exceptions import InvalidRuleOptionError, UnknownRuleOptionError
from calicheck.domain.model.enums import Severity
from calicheck.domain.model.rule import PROFILE_OPTION

if TYPE_CHECKING:
    from calicheck.domain.model.rule import RuleConfig, RuleDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConfigDiagnostic:
    """Non-fatal configuration diagnostic.

    Attributes:
        rule_id: Rule that was configured
        option: Offending option key
        message: Human-readable message
        severity: Always INFO for ignored options
    """

    rule_id: str
    option: str
    message: str
    severity: Severity = Severity.INFO

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.rule_id}.{self.option}: {self.message}"


def _parse_enabled(rule_id: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise InvalidRuleOptionError(rule_id, "enabled", f"expected bool, got {value!r}")
    return value


def _parse_severity(rule_id: str, value: object) -> Severity:
    if isinstance(value, Severity):
        return value
    if not isinstance(value, str):
        raise InvalidRuleOptionError(rule_id, "severity", f"expected string, got {value!r}")
    try:
        return Severity.parse(value)
    except ValueError as exc:
        raise InvalidRuleOptionError(rule_id, "severity", str(exc)) from exc


def _parse_threshold(rule_id: str, option: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRuleOptionError(rule_id, option, f"expected integer, got {value!r}")
    if value < 0:
        raise InvalidRuleOptionError(rule_id, option, f"must be >= 0, got {value}")
    return value


def _parse_profile(definition: RuleDefinition, value: object) -> str:
    if not isinstance(value, str) or value not in definition.profiles:
        known = ", ".join(sorted(definition.profiles))
        raise InvalidRuleOptionError(
            definition.rule_id, PROFILE_OPTION, f"unknown profile {value!r} (known: {known})"
        )
    return value


def resolve_options(
    definition: RuleDefinition,
    current: RuleConfig,
    options: Mapping[str, object],
    *,
    strict: bool = False,
) -> tuple[RuleConfig, tuple[ConfigDiagnostic, ...]]:
    """Apply raw options on top of the current configuration.

    Explicit thresholds win over thresholds implied by a profile given in
    the same options.

    Args:
        definition: Rule being configured
        current: Its configuration before this call
        options: Option key -> raw value
        strict: Raise on unknown option keys

    Returns:
        (new configuration, diagnostics for ignored options)

    Raises:
        InvalidRuleOptionError: If a value is rejected
        UnknownRuleOptionError: If strict and a key is not recognized
    """
    rule_id = definition.rule_id
    enabled: bool | None = None
    severity: Severity | None = None
    profile: str | None = None
    thresholds: dict[str, int] = {}
    diagnostics: list[ConfigDiagnostic] = []

    for option, value in options.items():
        match option:
            case "enabled":
                enabled = _parse_enabled(rule_id, value)
            case "severity":
                severity = _parse_severity(rule_id, value)
            case _ if option == PROFILE_OPTION and definition.profiles:
                profile = _parse_profile(definition, value)
            case _ if option in definition.defaults.thresholds:
                thresholds[option] = _parse_threshold(rule_id, option, value)
            case _:
                if strict:
                    raise UnknownRuleOptionError(rule_id, option)
                diagnostic = ConfigDiagnostic(
                    rule_id=rule_id,
                    option=option,
                    message=f"unknown option ignored (known: {', '.join(sorted(definition.options))})",
                )
                logger.info("%s", diagnostic)
                diagnostics.append(diagnostic)

    if profile is not None:
        thresholds = {**definition.profiles[profile], **thresholds}

    updated = current.with_changes(
        enabled=enabled,
        severity=severity,
        thresholds=thresholds,
        profile=profile,
    )
    return updated, tuple(diagnostics)


def split_options(options: Mapping[str, object]) -> dict[str, dict[str, object]]:
    """Group options by rule id.

    Accepts flat keys (``"max-call-chain.threshold": 3``) and nested
    mappings (``{"max-call-chain": {"threshold": 3}}``), mixed freely.

    Raises:
        ValueError: If a flat key has no option part or a nested value is not a mapping
    """
    grouped: dict[str, dict[str, object]] = {}
    for key, value in options.items():
        if isinstance(value, Mapping):
            grouped.setdefault(key, {}).update(value)
            continue
        rule_id, sep, option = key.partition(".")
        if not sep or not rule_id or not option:
            raise ValueError(f"option key must be '<ruleId>.<option>', got {key!r}")
        grouped.setdefault(rule_id, {})[option] = value
    return grouped
