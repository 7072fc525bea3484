"""Tests for Evaluator.

Tests:
- Empty rule set and exempt types
- Incomplete model data diagnostics
- Rule faults isolated to one finding
- Time budget with an injected clock
- Deterministic ordering and snapshot isolation
"""

from __future__ import annotations

import itertools
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from calicheck.application.registry.rule_registry import RuleRegistry
from calicheck.application.rules import MAX_INSTANCE_VARIABLES, default_registry
from calicheck.application.services.evaluator import (
    INCOMPLETE_MODEL_DATA,
    RULE_FAULT,
    Evaluator,
    sort_findings,
)
from calicheck.domain.model.enums import ElementKind, RuleCategory, Severity, StatementKind
from calicheck.domain.model.field import FieldDeclaration
from calicheck.domain.model.rule import RuleDefinition
from calicheck.domain.predicates import is_element
from tests.factories import (
    make_body,
    make_field,
    make_fields,
    make_finding,
    make_method,
    make_type,
    make_unit,
    nested_ifs,
    primitive,
    registry_with,
    stmt,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from calicheck.domain.model.finding import Finding
    from calicheck.domain.model.rule import RuleContext


def _explode(element: object, context: RuleContext) -> Iterator[Finding]:
    raise RuntimeError("boom")


EXPLODING_RULE = RuleDefinition(
    rule_id="exploding-rule",
    description="Always fails",
    category=RuleCategory.SIZE,
    applies_to=is_element(ElementKind.TYPE),
    check=_explode,
)


class TestEmptyRuleSet:
    """No active rules, no findings."""

    def test_all_rules_disabled(self) -> None:
        unit = make_unit(make_type(fields=make_fields(5)), layer=None)
        assert Evaluator().evaluate(unit, registry_with()) == ()

    def test_empty_registry(self) -> None:
        assert Evaluator().evaluate(make_unit(make_type()), RuleRegistry()) == ()


class TestExemptTypes:
    """Exempt types are skipped entirely."""

    def test_exempt_type_has_no_findings(self) -> None:
        unit = make_unit(make_type(fields=make_fields(5), is_exempt=True))
        assert Evaluator().evaluate(unit, default_registry()) == ()

    def test_other_types_still_checked(self) -> None:
        unit = make_unit(
            make_type("shop.domain.OrderDto", fields=make_fields(5), is_exempt=True),
            make_type("shop.domain.Order", fields=make_fields(3)),
        )
        findings = Evaluator().evaluate(unit, registry_with("max-instance-variables"))
        assert [f.location.type_name for f in findings] == ["shop.domain.Order"]


class TestIncompleteModelData:
    """Missing attributes produce INFO diagnostics instead of checks."""

    def test_unit_without_layer(self) -> None:
        unit = make_unit(make_type(fields=make_fields(5)), layer=None)
        (finding,) = Evaluator().evaluate(unit, registry_with("max-instance-variables"))

        assert finding.rule_id == INCOMPLETE_MODEL_DATA
        assert finding.severity is Severity.INFO
        assert finding.category is RuleCategory.DIAGNOSTIC
        assert finding.payload["missing"] == ("layer",)
        assert finding.location.type_name is None

    def test_field_without_type(self) -> None:
        untyped = FieldDeclaration(name="amount", type_ref=None)
        unit = make_unit(make_type(fields=(untyped, make_field("price", primitive()))))
        findings = Evaluator().evaluate(unit, registry_with("wrap-primitives"))

        assert [f.rule_id for f in findings] == [INCOMPLETE_MODEL_DATA, "wrap-primitives"]
        assert findings[0].payload == {
            "missing": ("type_ref",),
            "skipped_rules": ("wrap-primitives",),
        }

    def test_no_diagnostic_when_no_rule_applies(self) -> None:
        untyped = FieldDeclaration(name="amount", type_ref=None)
        unit = make_unit(make_type(fields=(untyped,)))
        assert Evaluator().evaluate(unit, registry_with("max-call-chain")) == ()


class TestRuleFault:
    """A failing check yields one INFO finding and the run continues."""

    def test_fault_is_reported(self) -> None:
        registry = RuleRegistry([EXPLODING_RULE, MAX_INSTANCE_VARIABLES])
        unit = make_unit(make_type(fields=make_fields(3)))

        findings = Evaluator().evaluate(unit, registry)

        assert sorted(f.rule_id for f in findings) == ["max-instance-variables", RULE_FAULT]
        fault = next(f for f in findings if f.rule_id == RULE_FAULT)
        assert fault.severity is Severity.INFO
        assert fault.payload == {"failed_rule": "exploding-rule", "error": "RuntimeError"}

    def test_fault_per_element(self) -> None:
        registry = RuleRegistry([EXPLODING_RULE])
        unit = make_unit(make_type("shop.domain.Order"), make_type("shop.domain.Invoice"))
        assert len(Evaluator().evaluate(unit, registry)) == 2


class TestTimeBudget:
    """Cooperative per-unit deadline."""

    def test_budget_exceeded(self) -> None:
        """Partial findings are dropped; one unit-level diagnostic remains."""
        ticks = itertools.count()
        evaluator = Evaluator(time_budget_s=0.5, clock=lambda: float(next(ticks)))
        unit = make_unit(make_type(fields=make_fields(5)))

        (finding,) = evaluator.evaluate(unit, default_registry())

        assert finding.rule_id == INCOMPLETE_MODEL_DATA
        assert finding.payload == {"reason": "time-budget-exceeded", "budget_s": 0.5}
        assert finding.location.type_name is None

    def test_budget_not_exceeded(self) -> None:
        evaluator = Evaluator(time_budget_s=60.0, clock=lambda: 0.0)
        unit = make_unit(make_type(fields=make_fields(3)))
        (finding,) = evaluator.evaluate(unit, registry_with("max-instance-variables"))
        assert finding.rule_id == "max-instance-variables"

    def test_budget_exceeded_message_carries_budget(self) -> None:
        ticks = itertools.count(step=2)
        evaluator = Evaluator(time_budget_s=1.5, clock=lambda: float(next(ticks)))
        (finding,) = evaluator.evaluate(make_unit(make_type()), default_registry())
        assert "exceeded 1.5s budget" in finding.message

    def test_non_positive_budget_raises(self) -> None:
        with pytest.raises(ValueError, match="time_budget_s"):
            Evaluator(time_budget_s=0)


class TestDeterminism:
    """Ordering, idempotence and snapshot isolation."""

    def test_idempotent(self) -> None:
        unit = make_unit(
            make_type("shop.domain.Order", fields=make_fields(4)),
            make_type("shop.domain.Cart", fields=(make_field("id"),), methods=(make_method("cnt"),)),
        )
        registry = default_registry()
        assert Evaluator().evaluate(unit, registry) == Evaluator().evaluate(unit, registry)

    def test_findings_sorted_by_location(self) -> None:
        unit = make_unit(
            make_type("shop.domain.Order", fields=make_fields(3)),
            make_type("shop.domain.Cart", fields=make_fields(3)),
        )
        findings = Evaluator().evaluate(unit, registry_with("max-instance-variables"))
        assert [f.location.type_name for f in findings] == ["shop.domain.Cart", "shop.domain.Order"]

    def test_snapshot_isolated_from_reconfiguration(self) -> None:
        registry = registry_with("max-instance-variables")
        snapshot = registry.snapshot()
        registry.configure("max-instance-variables", {"threshold": 10})
        unit = make_unit(make_type(fields=make_fields(3)))

        assert len(Evaluator().evaluate(unit, snapshot)) == 1
        assert Evaluator().evaluate(unit, registry) == ()

    def test_reconfiguring_one_rule_leaves_others_unchanged(self) -> None:
        body = make_body(
            nested_ifs(2),
            stmt(StatementKind.IF, stmt(StatementKind.RETURN), stmt(StatementKind.ELSE)),
        )
        unit = make_unit(
            make_type(
                "shop.domain.Order",
                fields=(*make_fields(3), make_field("cnt", primitive())),
                methods=(make_method("ship", body=body),),
            )
        )
        registry = default_registry()

        before = Evaluator().evaluate(unit, registry)
        registry.configure("max-instance-variables", {"threshold": 3})
        after = Evaluator().evaluate(unit, registry)

        def others(findings: tuple[Finding, ...]) -> list[Finding]:
            return [f for f in findings if f.rule_id != "max-instance-variables"]

        assert {f.rule_id for f in others(before)} >= {
            "max-indentation-depth",
            "no-else-branch",
            "no-abbreviation",
        }
        assert others(after) == others(before)
        assert [f.payload for f in before if f.rule_id == "max-instance-variables"] == [
            {"measured": 4, "threshold": 2}
        ]
        assert [f.payload for f in after if f.rule_id == "max-instance-variables"] == [
            {"measured": 4, "threshold": 3}
        ]

    def test_sort_findings_is_stable(self) -> None:
        first = make_finding("max-call-chain")
        second = make_finding("no-else-branch", payload={})
        earlier = make_finding(path=Path("a.java"))

        assert sort_findings([first, second, earlier]) == (earlier, first, second)
