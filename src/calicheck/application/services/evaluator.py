"""Evaluator: applies active rules to one compilation unit.

Traversal is depth-first:
    CompilationUnit → TypeDeclaration → FieldDeclaration*
                                      → MethodDeclaration → Parameter* → Statement*

Data Completeness:
    - Incomplete element: its checks are skipped, one INFO
      `incomplete-model-data` finding is produced instead
    - Unit without layer tag: the whole unit is skipped the same way
    - Rule check raising: one INFO `rule-fault` finding, other rules and
      elements still run
    - Time budget exceeded: partial findings are dropped, one INFO
      `incomplete-model-data` finding for the unit

The evaluator holds no state across calls and performs no I/O.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from calicheck.application.registry.rule_registry import ActiveRuleSet, RuleRegistry
from calicheck.domain.exceptions import EvaluationTimeout
from calicheck.domain.model.enums import RuleCategory, Severity
from calicheck.domain.model.rule import RuleConfig, RuleContext

if TYPE_CHECKING:
    from calicheck.application.registry.rule_registry import ActiveRule
    from calicheck.domain.model.compilation_unit import CompilationUnit
    from calicheck.domain.model.finding import Finding
    from calicheck.domain.model.method import MethodDeclaration
    from calicheck.domain.model.rule import ModelElement
    from calicheck.domain.model.type_declaration import TypeDeclaration

logger = logging.getLogger(__name__)

INCOMPLETE_MODEL_DATA = "incomplete-model-data"
RULE_FAULT = "rule-fault"

_DIAGNOSTIC_CONFIG = RuleConfig(severity=Severity.INFO)

Clock = Callable[[], float]


def sort_findings(findings: Iterable[Finding]) -> tuple[Finding, ...]:
    """Stable sort by (path, type, member, statement position)."""
    return tuple(sorted(findings, key=lambda f: f.sort_key))


class Evaluator:
    """Evaluates one compilation unit against a rule set.

    Example:
        registry = default_registry()
        findings = Evaluator().evaluate(unit, registry)
    """

    def __init__(
        self,
        *,
        time_budget_s: float | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        """Initialize evaluator.

        Args:
            time_budget_s: Per-unit budget in seconds, None = unbounded
            clock: Monotonic clock returning seconds
        """
        if time_budget_s is not None and time_budget_s <= 0:
            raise ValueError(f"time_budget_s must be > 0, got {time_budget_s}")
        self._time_budget_s = time_budget_s
        self._clock = clock

    def evaluate(
        self,
        unit: CompilationUnit,
        rules: RuleRegistry | ActiveRuleSet,
    ) -> tuple[Finding, ...]:
        """Evaluate every active rule on every element of the unit.

        Args:
            unit: Compilation unit (read-only)
            rules: Registry (snapshotted now) or an existing snapshot

        Returns:
            Findings sorted by (path, type, member, statement position)
        """
        active = rules.snapshot() if isinstance(rules, RuleRegistry) else rules
        if not active:
            return ()

        deadline = None
        if self._time_budget_s is not None:
            deadline = _Deadline(self._clock() + self._time_budget_s, self._time_budget_s)

        walk = _UnitWalk(unit, active, deadline, self._clock)
        try:
            findings = walk.run()
        except EvaluationTimeout as exc:
            logger.warning("%s", exc)
            findings = [
                _diagnostic_context(INCOMPLETE_MODEL_DATA, unit).finding(
                    unit,
                    f"Analysis abandoned: {exc}",
                    reason="time-budget-exceeded",
                    budget_s=exc.budget_s,
                )
            ]
        return sort_findings(findings)


def _diagnostic_context(
    rule_id: str,
    unit: CompilationUnit,
    type_decl: TypeDeclaration | None = None,
    method: MethodDeclaration | None = None,
) -> RuleContext:
    return RuleContext(
        rule_id=rule_id,
        category=RuleCategory.DIAGNOSTIC,
        config=_DIAGNOSTIC_CONFIG,
        unit=unit,
        type_decl=type_decl,
        method=method,
    )


@dataclass(frozen=True, slots=True)
class _Deadline:
    at: float
    budget_s: float


class _UnitWalk:
    """Single traversal of one unit; discarded after run()."""

    def __init__(
        self,
        unit: CompilationUnit,
        rules: ActiveRuleSet,
        deadline: _Deadline | None,
        clock: Clock,
    ) -> None:
        self._unit = unit
        self._rules = rules
        self._deadline = deadline
        self._clock = clock
        self._findings: list[Finding] = []

    def run(self) -> list[Finding]:
        unit = self._unit
        missing = unit.missing_attributes()
        if missing:
            self._findings.append(
                _diagnostic_context(INCOMPLETE_MODEL_DATA, unit).finding(
                    unit,
                    f"Unit skipped, front-end left out: {', '.join(missing)}",
                    missing=missing,
                )
            )
            return self._findings

        self._visit(unit)
        for type_decl in unit.types:
            # exemption is all-or-nothing per type
            if type_decl.is_exempt:
                continue
            self._visit(type_decl, type_decl)
            for field in type_decl.fields:
                self._visit(field, type_decl)
            for method in type_decl.methods:
                self._visit(method, type_decl, method)
                for parameter in method.parameters:
                    self._visit(parameter, type_decl, method)
                for statement in method.statements():
                    self._visit(statement, type_decl, method)
        return self._findings

    def _visit(
        self,
        element: ModelElement,
        type_decl: TypeDeclaration | None = None,
        method: MethodDeclaration | None = None,
    ) -> None:
        self._check_deadline()

        applicable = [rule for rule in self._rules if self._applies(rule, element, type_decl, method)]
        if not applicable:
            return

        missing = element.missing_attributes()
        if missing:
            self._findings.append(
                _diagnostic_context(INCOMPLETE_MODEL_DATA, self._unit, type_decl, method).finding(
                    element,
                    f"Checks skipped ({', '.join(r.rule_id for r in applicable)}), "
                    f"front-end left out: {', '.join(missing)}",
                    missing=missing,
                    skipped_rules=tuple(r.rule_id for r in applicable),
                )
            )
            return

        for rule in applicable:
            self._run_check(rule, element, type_decl, method)

    def _applies(
        self,
        rule: ActiveRule,
        element: ModelElement,
        type_decl: TypeDeclaration | None,
        method: MethodDeclaration | None,
    ) -> bool:
        try:
            return bool(rule.definition.applies_to(element))
        except Exception as exc:  # noqa: BLE001
            self._record_fault(rule, element, type_decl, method, exc)
            return False

    def _run_check(
        self,
        rule: ActiveRule,
        element: ModelElement,
        type_decl: TypeDeclaration | None,
        method: MethodDeclaration | None,
    ) -> None:
        context = RuleContext(
            rule_id=rule.rule_id,
            category=rule.definition.category,
            config=rule.config,
            unit=self._unit,
            type_decl=type_decl,
            method=method,
        )
        try:
            # materialize before extending: a generator may fail halfway
            produced = list(rule.definition.check(element, context))
        except Exception as exc:  # noqa: BLE001
            self._record_fault(rule, element, type_decl, method, exc)
            return
        self._findings.extend(produced)

    def _record_fault(
        self,
        rule: ActiveRule,
        element: ModelElement,
        type_decl: TypeDeclaration | None,
        method: MethodDeclaration | None,
        exc: Exception,
    ) -> None:
        logger.warning(
            "Rule %s failed on %s in %s", rule.rule_id, element.element_kind.name, self._unit.path,
            exc_info=exc,
        )
        self._findings.append(
            _diagnostic_context(RULE_FAULT, self._unit, type_decl, method).finding(
                element,
                f"Rule '{rule.rule_id}' failed: {type(exc).__name__}: {exc}",
                failed_rule=rule.rule_id,
                error=type(exc).__name__,
            )
        )

    def _check_deadline(self) -> None:
        if self._deadline is not None and self._clock() > self._deadline.at:
            raise EvaluationTimeout(self._unit.path, self._deadline.budget_s)
