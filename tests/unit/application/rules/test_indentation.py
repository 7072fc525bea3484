"""Tests for max-indentation-depth and no-else-branch."""

import pytest

from calicheck.application.services.evaluator import Evaluator
from calicheck.domain.model.enums import StatementKind
from tests.factories import make_body, make_method, make_type, make_unit, nested_ifs, registry_with, stmt


def _evaluate(method, *rule_ids: str):
    unit = make_unit(make_type(methods=(method,)))
    return Evaluator().evaluate(unit, registry_with(*rule_ids))


class TestMaxIndentationDepth:
    """Nesting depth against the configured threshold."""

    def test_depth_at_threshold_passes(self) -> None:
        """Default threshold is 1: one level of nesting is allowed."""
        method = make_method(body=make_body(nested_ifs(1)))
        assert _evaluate(method, "max-indentation-depth") == ()

    def test_depth_above_threshold_fails_once(self) -> None:
        """One finding per method, not per deep statement."""
        method = make_method(body=make_body(nested_ifs(2), nested_ifs(3)))
        findings = _evaluate(method, "max-indentation-depth")

        assert len(findings) == 1
        assert findings[0].payload == {"measured": 3, "threshold": 1}
        assert findings[0].location.member_name == "calculate"

    @pytest.mark.parametrize("threshold", [0, 2, 4])
    def test_configured_threshold(self, threshold: int) -> None:
        registry = registry_with("max-indentation-depth")
        registry.configure("max-indentation-depth", {"threshold": threshold})
        unit_at = make_unit(make_type(methods=(make_method(body=make_body(nested_ifs(threshold))),)))
        unit_above = make_unit(
            make_type(methods=(make_method(body=make_body(nested_ifs(threshold + 1))),))
        )

        assert Evaluator().evaluate(unit_at, registry) == ()
        assert len(Evaluator().evaluate(unit_above, registry)) == 1

    def test_if_without_else_still_nests(self) -> None:
        method = make_method(
            body=make_body(stmt(StatementKind.IF, stmt(StatementKind.LOOP, stmt(StatementKind.RETURN))))
        )
        findings = _evaluate(method, "max-indentation-depth")
        assert [f.measured for f in findings] == [2]

    def test_if_else_counts_as_one_level(self) -> None:
        method = make_method(
            body=make_body(
                stmt(
                    StatementKind.IF,
                    stmt(StatementKind.RETURN),
                    stmt(StatementKind.ELSE, stmt(StatementKind.RETURN)),
                )
            )
        )
        assert method.max_nesting_depth == 1
        assert _evaluate(method, "max-indentation-depth") == ()

    def test_if_nested_in_else_branch(self) -> None:
        method = make_method(
            body=make_body(
                stmt(
                    StatementKind.IF,
                    stmt(StatementKind.RETURN),
                    stmt(StatementKind.ELSE, nested_ifs(1)),
                )
            )
        )
        findings = _evaluate(method, "max-indentation-depth")
        assert [f.measured for f in findings] == [2]

    def test_empty_body(self) -> None:
        assert _evaluate(make_method(), "max-indentation-depth") == ()


class TestNoElseBranch:
    """One finding per If with an attached Else."""

    def test_counts_ifs_with_else(self) -> None:
        """Three Ifs, two of them with Else: two findings."""
        method = make_method(
            body=make_body(
                stmt(StatementKind.IF, stmt(StatementKind.RETURN), stmt(StatementKind.ELSE)),
                stmt(StatementKind.IF, stmt(StatementKind.RETURN)),
                stmt(StatementKind.IF, stmt(StatementKind.ELSE, stmt(StatementKind.RETURN))),
            )
        )
        findings = _evaluate(method, "no-else-branch")

        assert len(findings) == 2
        assert [f.location.statement_position for f in findings] == [0, 5]

    def test_else_position_in_payload(self) -> None:
        method = make_method(
            body=make_body(stmt(StatementKind.IF, stmt(StatementKind.RETURN), stmt(StatementKind.ELSE)))
        )
        (finding,) = _evaluate(method, "no-else-branch")
        assert finding.payload == {"else_position": 2}
        assert finding.measured is None

    def test_nested_if_with_else(self) -> None:
        method = make_method(
            body=make_body(
                stmt(StatementKind.LOOP, stmt(StatementKind.IF, stmt(StatementKind.ELSE)))
            )
        )
        (finding,) = _evaluate(method, "no-else-branch")
        assert finding.location.statement_position == 1
