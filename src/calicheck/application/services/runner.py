"""Multi-unit runner: parallel evaluation with deterministic merge.

Units are independent: each is evaluated against the same immutable
ActiveRuleSet snapshot, optionally on a thread pool. Per-unit findings are
concatenated in input order, then stably sorted globally.

Cancellation is coarse: the signal is checked before each unit starts.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from calicheck.application.reporters.summary import summarize
from calicheck.application.services.evaluator import Evaluator, sort_findings
from calicheck.domain.model.settings import RunSettings

if TYPE_CHECKING:
    from calicheck.application.registry.rule_registry import ActiveRuleSet, RuleRegistry
    from calicheck.domain.model.compilation_unit import CompilationUnit
    from calicheck.domain.model.finding import Finding
    from calicheck.domain.model.report import Report

logger = logging.getLogger(__name__)


class ConformanceRunner:
    """Evaluates many compilation units into one Report.

    Example:
        runner = ConformanceRunner(default_registry(), RunSettings(max_workers=4))
        report = runner.run(units)
    """

    def __init__(
        self,
        registry: RuleRegistry,
        settings: RunSettings | None = None,
        *,
        evaluator: Evaluator | None = None,
    ) -> None:
        """Initialize runner.

        Args:
            registry: Rule registry (snapshotted at the start of each run)
            settings: Worker count and per-unit time budget
            evaluator: Evaluator override, e.g. with a test clock
        """
        self._registry = registry
        self._settings = settings or RunSettings()
        self._evaluator = evaluator or Evaluator(time_budget_s=self._settings.time_budget_s)

    def run(
        self,
        units: Sequence[CompilationUnit],
        *,
        cancel: threading.Event | None = None,
    ) -> Report:
        """Evaluate units and summarize.

        Args:
            units: Compilation units in input order
            cancel: Signal checked between unit evaluations

        Returns:
            Report over every evaluated unit; skipped units are counted
        """
        rules = self._registry.snapshot()
        if self._settings.is_parallel:
            per_unit = self._run_parallel(units, rules, cancel)
        else:
            per_unit = self._run_serial(units, rules, cancel)

        analyzed = [findings for findings in per_unit if findings is not None]
        skipped = len(units) - len(analyzed)
        merged = sort_findings(f for findings in analyzed for f in findings)

        logger.debug(
            "Evaluated %d unit(s) with %d rule(s): %d finding(s), %d skipped",
            len(analyzed),
            len(rules),
            len(merged),
            skipped,
        )
        return summarize(
            merged,
            units_analyzed=len(analyzed),
            units_skipped=skipped,
            cancelled=skipped > 0,
        )

    def _run_serial(
        self,
        units: Sequence[CompilationUnit],
        rules: ActiveRuleSet,
        cancel: threading.Event | None,
    ) -> list[tuple[Finding, ...] | None]:
        results: list[tuple[Finding, ...] | None] = []
        for index, unit in enumerate(units):
            if cancel is not None and cancel.is_set():
                logger.warning("Run cancelled, %d unit(s) not analyzed", len(units) - index)
                results.extend([None] * (len(units) - index))
                break
            results.append(self._evaluator.evaluate(unit, rules))
        return results

    def _run_parallel(
        self,
        units: Sequence[CompilationUnit],
        rules: ActiveRuleSet,
        cancel: threading.Event | None,
    ) -> list[tuple[Finding, ...] | None]:
        def evaluate_one(unit: CompilationUnit) -> tuple[Finding, ...] | None:
            if cancel is not None and cancel.is_set():
                return None
            return self._evaluator.evaluate(unit, rules)

        with ThreadPoolExecutor(
            max_workers=self._settings.max_workers,
            thread_name_prefix="calicheck",
        ) as executor:
            # map() yields in input order regardless of completion order
            results = list(executor.map(evaluate_one, units))

        if any(r is None for r in results):
            logger.warning(
                "Run cancelled, %d unit(s) not analyzed", sum(1 for r in results if r is None)
            )
        return results
