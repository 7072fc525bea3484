"""Main facade for conformance checking.

ConformanceChecker is the primary entry point: it owns a configured
RuleRegistry and run settings and turns compilation units into a Report.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Self

from calicheck.application.registry.config_file import load_configuration
from calicheck.application.registry.rule_registry import RuleRegistry
from calicheck.application.rules import builtin_rules
from calicheck.application.services.evaluator import Evaluator
from calicheck.application.services.runner import ConformanceRunner
from calicheck.domain.model.settings import RunSettings

if TYPE_CHECKING:
    import threading
    from pathlib import Path

    from calicheck.application.registry.options import ConfigDiagnostic
    from calicheck.domain.model.compilation_unit import CompilationUnit
    from calicheck.domain.model.finding import Finding
    from calicheck.domain.model.report import Report
    from calicheck.domain.model.rule import RuleDefinition

logger = logging.getLogger(__name__)


class ConformanceChecker:
    """Composition of registry, settings and runner.

    Factory methods:
    - with_defaults(): built-in rules, default configuration
    - from_config(): built-in rules plus option mapping
    - from_file(): built-in rules plus TOML configuration

    Example:
        checker = ConformanceChecker.from_config({"max-instance-variables.threshold": 3})
        report = checker.check(units)
        sys.exit(report.exit_code)
    """

    def __init__(
        self,
        registry: RuleRegistry,
        settings: RunSettings | None = None,
        *,
        diagnostics: Sequence[ConfigDiagnostic] = (),
    ) -> None:
        """Initialize checker.

        Args:
            registry: Configured rule registry
            settings: Run settings
            diagnostics: Configuration diagnostics collected while building the registry
        """
        self._registry = registry
        self._settings = settings or RunSettings()
        self._diagnostics = tuple(diagnostics)

    @classmethod
    def with_defaults(cls, *, settings: RunSettings | None = None) -> Self:
        """Create checker with every built-in rule at its defaults."""
        return cls(RuleRegistry(builtin_rules()), settings)

    @classmethod
    def from_config(
        cls,
        options: Mapping[str, object],
        *,
        settings: RunSettings | None = None,
        extra_rules: Iterable[RuleDefinition] = (),
    ) -> Self:
        """Create checker with configured built-in (and extra) rules.

        Args:
            options: Flat "<ruleId>.<option>" keys and/or nested per-rule mappings
            settings: Run settings (strict_options raises on unknown keys)
            extra_rules: User rules registered after the built-ins

        Raises:
            DuplicateRuleError: If an extra rule reuses an id
            UnknownRuleError: If options name an unregistered rule
            InvalidRuleOptionError: If an option value is rejected
            UnknownRuleOptionError: If strict and an option key is unknown
        """
        settings = settings or RunSettings()
        registry = RuleRegistry(builtin_rules())
        for definition in extra_rules:
            registry.register(definition.rule_id, definition)

        diagnostics = registry.configure_many(options, strict=settings.strict_options)
        return cls(registry, settings, diagnostics=diagnostics)

    @classmethod
    def from_file(cls, path: Path, *, extra_rules: Iterable[RuleDefinition] = ()) -> Self:
        """Create checker from a pyproject.toml or calicheck.toml file."""
        configuration = load_configuration(path)
        logger.debug("Loaded configuration from %s", path)
        return cls.from_config(
            configuration.rules,
            settings=configuration.settings,
            extra_rules=extra_rules,
        )

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    @property
    def settings(self) -> RunSettings:
        return self._settings

    @property
    def diagnostics(self) -> tuple[ConfigDiagnostic, ...]:
        """INFO diagnostics for ignored configuration options."""
        return self._diagnostics

    def evaluate(self, unit: CompilationUnit) -> tuple[Finding, ...]:
        """Evaluate a single unit."""
        return Evaluator(time_budget_s=self._settings.time_budget_s).evaluate(unit, self._registry)

    def check(
        self,
        units: Sequence[CompilationUnit],
        *,
        cancel: threading.Event | None = None,
    ) -> Report:
        """Evaluate all units and summarize into a Report."""
        return ConformanceRunner(self._registry, self._settings).run(units, cancel=cancel)
