"""End-to-end conformance checks over a small order-management model.

Tests:
- Every built-in rule fires on a deliberately non-conforming domain
- Configuration changes the outcome and the reported thresholds
- Text and records output agree with the report
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from calicheck import ConformanceChecker, OutputStyle, format_report
from calicheck.domain.model.enums import Layer, Severity, StatementKind, TypeKind, TypeTag
from calicheck.domain.model.parameter import Parameter
from calicheck.domain.model.settings import RunSettings
from tests.factories import (
    call,
    make_body,
    make_field,
    make_fields,
    make_method,
    make_ref,
    make_type,
    make_unit,
    nested_ifs,
    primitive,
    stmt,
)


@pytest.fixture
def order_unit():
    """Domain unit violating every built-in rule once."""
    body = make_body(
        nested_ifs(2),
        stmt(StatementKind.IF, stmt(StatementKind.RETURN), stmt(StatementKind.ELSE)),
        call(3),
        call(5, make_ref("OrderBuilder", tags=frozenset({TypeTag.BUILDER}))),
        *[stmt(StatementKind.EXPRESSION)] * 12,
    )
    order = make_type(
        "shop.domain.Order",
        fields=(
            *make_fields(2),
            make_field("lines", make_ref("List<OrderLine>", collection=True)),
            make_field("cnt", primitive("int")),
        ),
        methods=(
            make_method("ship", body=body),
            make_method("getAmount", is_accessor=True),
            *[make_method(f"step{i}") for i in range(9)],
        ),
        references=(make_ref("JdbcOrderRepository", layer=Layer.INFRASTRUCTURE),),
        line_span=75,
    )
    port = make_type(
        "shop.domain.OrderPort",
        kind=TypeKind.INTERFACE,
        methods=tuple(make_method(f"find{i}") for i in range(6)),
    )
    return make_unit(order, port, path=Path("src/shop/domain/Order.java"))


@pytest.fixture
def clean_unit():
    return make_unit(
        make_type("shop.domain.Money", fields=(make_field("amount", make_ref("Decimal")),)),
        path=Path("src/shop/domain/Money.java"),
    )


class TestEveryRuleFires:
    """A non-conforming unit trips each built-in rule."""

    def test_rule_ids(self, order_unit, clean_unit) -> None:
        report = ConformanceChecker.with_defaults().check([order_unit, clean_unit])

        assert set(report.rule_counts) == {
            "max-indentation-depth",
            "no-else-branch",
            "wrap-primitives",
            "first-class-collection",
            "max-call-chain",
            "no-abbreviation",
            "max-class-size",
            "max-instance-variables",
            "no-accessor-methods",
            "layered-dependency",
            "max-interface-methods",
            "max-method-size",
        }
        assert report.units_analyzed == 2
        assert report.passed

    def test_clean_unit_has_no_findings(self, clean_unit) -> None:
        report = ConformanceChecker.with_defaults().check([clean_unit])
        assert report.total == 0

    def test_parallel_run_matches(self, order_unit, clean_unit) -> None:
        serial = ConformanceChecker.with_defaults().check([order_unit, clean_unit])
        parallel = ConformanceChecker.with_defaults(settings=RunSettings(max_workers=2)).check(
            [order_unit, clean_unit]
        )
        assert serial.findings == parallel.findings


class TestConfiguration:
    """Options change severity and thresholds."""

    def test_error_severity_fails(self, order_unit) -> None:
        checker = ConformanceChecker.from_config({"layered-dependency.severity": "error"})
        report = checker.check([order_unit])

        assert not report.passed
        assert [f.rule_id for f in report.findings if f.severity is Severity.ERROR] == [
            "layered-dependency"
        ]

    def test_relaxed_profile_drops_line_finding(self, order_unit) -> None:
        strict = ConformanceChecker.with_defaults().check([order_unit])
        relaxed = ConformanceChecker.from_config({"max-class-size": {"profile": "relaxed"}}).check(
            [order_unit]
        )

        assert [f.payload["metric"] for f in strict.for_rule("max-class-size")] == ["methods", "lines"]
        assert [f.payload["metric"] for f in relaxed.for_rule("max-class-size")] == ["methods"]

    def test_threshold_in_output(self, order_unit) -> None:
        checker = ConformanceChecker.from_config({"max-instance-variables.threshold": 3})
        (finding,) = checker.check([order_unit]).for_rule("max-instance-variables")
        assert finding.payload == {"measured": 4, "threshold": 3}


class TestOutput:
    """Formatted output reflects the report."""

    def test_text_lines(self, order_unit) -> None:
        report = ConformanceChecker.with_defaults().check([order_unit])
        lines = format_report(report, OutputStyle.TEXT).splitlines()

        assert len(lines) == report.total + 1
        assert (
            "Warning: max-instance-variables at src/shop/domain/Order.java:shop.domain.Order"
            " — measured=4 threshold=2"
        ) in lines

    def test_records(self, order_unit) -> None:
        report = ConformanceChecker.with_defaults().check([order_unit])
        records = json.loads(format_report(report, OutputStyle.RECORDS))

        assert len(records) == report.total
        assert [r["rule_id"] for r in records] == [f.rule_id for f in report.findings]

    def test_parameter_reference_is_checked(self) -> None:
        method = make_method("ship", parameters=(Parameter("carrier", primitive("String")),))
        report = ConformanceChecker.with_defaults().check([make_unit(make_type(methods=(method,)))])
        assert [f.rule_id for f in report.findings] == ["wrap-primitives"]
