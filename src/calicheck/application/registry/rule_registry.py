"""Rule registry: ordered, deduplicated rules with per-rule configuration.

Mutations are serialized with a lock. Evaluation never reads the registry
directly: it works on an immutable ActiveRuleSet snapshot that can be shared
across worker threads.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from calicheck.application.registry.options import resolve_options, split_options
from calicheck.domain.exceptions import DuplicateRuleError, UnknownRuleError

if TYPE_CHECKING:
    from calicheck.application.registry.options import ConfigDiagnostic
    from calicheck.domain.model.rule import RuleConfig, RuleDefinition


@dataclass(frozen=True, slots=True)
class ActiveRule:
    """Enabled rule paired with its configuration at snapshot time."""

    definition: RuleDefinition
    config: RuleConfig

    @property
    def rule_id(self) -> str:
        return self.definition.rule_id


@dataclass(frozen=True, slots=True)
class ActiveRuleSet:
    """Immutable, ordered set of enabled rules (registration order)."""

    rules: tuple[ActiveRule, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        ids = [r.rule_id for r in self.rules]
        if len(ids) != len(set(ids)):
            raise ValueError("active rule ids must be unique")
        for rule in self.rules:
            if not rule.config.enabled:
                raise ValueError(f"rule '{rule.rule_id}' is disabled")

    def __iter__(self) -> Iterator[ActiveRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def rule_ids(self) -> tuple[str, ...]:
        return tuple(r.rule_id for r in self.rules)


class RuleRegistry:
    """Mapping rule id -> (definition, configuration), in registration order.

    Example:
        registry = RuleRegistry(builtin_rules())
        registry.configure("max-instance-variables", {"threshold": 3})
        findings = Evaluator().evaluate(unit, registry)
    """

    def __init__(self, definitions: Iterable[RuleDefinition] = ()) -> None:
        """Initialize registry, registering definitions in order.

        Raises:
            DuplicateRuleError: If two definitions share an id
        """
        self._lock = threading.Lock()
        self._definitions: dict[str, RuleDefinition] = {}
        self._configs: dict[str, RuleConfig] = {}
        for definition in definitions:
            self.register(definition.rule_id, definition)

    def register(self, rule_id: str, definition: RuleDefinition) -> None:
        """Register a rule with its default configuration.

        Raises:
            ValueError: If rule_id differs from definition.rule_id
            DuplicateRuleError: If rule_id is already registered (registry unchanged)
        """
        if rule_id != definition.rule_id:
            raise ValueError(
                f"rule_id '{rule_id}' does not match definition id '{definition.rule_id}'"
            )
        with self._lock:
            if rule_id in self._definitions:
                raise DuplicateRuleError(rule_id)
            self._definitions[rule_id] = definition
            self._configs[rule_id] = definition.defaults

    def configure(
        self,
        rule_id: str,
        options: Mapping[str, object],
        *,
        strict: bool = False,
    ) -> tuple[ConfigDiagnostic, ...]:
        """Update enabled flag, severity, thresholds or profile of one rule.

        Args:
            rule_id: Registered rule
            options: Option key -> raw value
            strict: Raise on unknown option keys instead of returning diagnostics

        Returns:
            INFO diagnostics for ignored option keys

        Raises:
            UnknownRuleError: If rule_id is not registered
            InvalidRuleOptionError: If a value is rejected (registry unchanged)
            UnknownRuleOptionError: If strict and a key is unknown (registry unchanged)
        """
        return self.configure_many({rule_id: options}, strict=strict)

    def configure_many(
        self,
        options: Mapping[str, object],
        *,
        strict: bool = False,
    ) -> tuple[ConfigDiagnostic, ...]:
        """Configure several rules at once; all or nothing.

        Accepts flat ``"<ruleId>.<option>"`` keys and nested
        ``{ruleId: {option: value}}`` mappings.

        Raises:
            UnknownRuleError: If any rule id is not registered (registry unchanged)
            InvalidRuleOptionError: If any value is rejected (registry unchanged)
            UnknownRuleOptionError: If strict and any key is unknown (registry unchanged)
        """
        grouped = split_options(options)
        with self._lock:
            updates: dict[str, RuleConfig] = {}
            diagnostics: list[ConfigDiagnostic] = []
            for rule_id, rule_options in grouped.items():
                definition = self._get_definition(rule_id)
                config, rule_diagnostics = resolve_options(
                    definition, self._configs[rule_id], rule_options, strict=strict
                )
                updates[rule_id] = config
                diagnostics.extend(rule_diagnostics)
            self._configs.update(updates)
        return tuple(diagnostics)

    def reset(self, rule_id: str) -> None:
        """Restore a rule's default configuration.

        Raises:
            UnknownRuleError: If rule_id is not registered
        """
        with self._lock:
            self._configs[rule_id] = self._get_definition(rule_id).defaults

    def definition(self, rule_id: str) -> RuleDefinition:
        """Get rule definition.

        Raises:
            UnknownRuleError: If rule_id is not registered
        """
        with self._lock:
            return self._get_definition(rule_id)

    def config_for(self, rule_id: str) -> RuleConfig:
        """Get current rule configuration.

        Raises:
            UnknownRuleError: If rule_id is not registered
        """
        with self._lock:
            self._get_definition(rule_id)
            return self._configs[rule_id]

    def active_rules(self) -> tuple[RuleDefinition, ...]:
        """Enabled rule definitions in registration order."""
        return tuple(rule.definition for rule in self.snapshot())

    def snapshot(self) -> ActiveRuleSet:
        """Freeze enabled rules with their current configuration."""
        with self._lock:
            return ActiveRuleSet(
                tuple(
                    ActiveRule(definition, self._configs[rule_id])
                    for rule_id, definition in self._definitions.items()
                    if self._configs[rule_id].enabled
                )
            )

    @property
    def rule_ids(self) -> tuple[str, ...]:
        """All registered ids (enabled or not) in registration order."""
        with self._lock:
            return tuple(self._definitions)

    def __contains__(self, rule_id: object) -> bool:
        with self._lock:
            return rule_id in self._definitions

    def __len__(self) -> int:
        with self._lock:
            return len(self._definitions)

    def _get_definition(self, rule_id: str) -> RuleDefinition:
        """Lookup without locking; caller holds the lock."""
        try:
            return self._definitions[rule_id]
        except KeyError:
            raise UnknownRuleError(rule_id, tuple(self._definitions)) from None
