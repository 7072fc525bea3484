"""Tests for domain/exceptions."""

from pathlib import Path

import pytest

from calicheck.domain.exceptions import (
    CalicheckError,
    DuplicateRuleError,
    EvaluationTimeout,
    InvalidRuleOptionError,
    RuleConfigurationError,
    UnknownRuleError,
    UnknownRuleOptionError,
)


class TestHierarchy:
    """All errors share the package root."""

    @pytest.mark.parametrize(
        "error",
        [
            DuplicateRuleError("max-call-chain"),
            UnknownRuleError("max-call-chain"),
            UnknownRuleOptionError("max-call-chain", "depth"),
            InvalidRuleOptionError("max-call-chain", "threshold", "must be >= 0"),
        ],
    )
    def test_configuration_errors(self, error: RuleConfigurationError) -> None:
        assert isinstance(error, RuleConfigurationError)
        assert isinstance(error, CalicheckError)
        assert error.rule_id == "max-call-chain"

    def test_timeout_is_calicheck_error(self) -> None:
        assert isinstance(EvaluationTimeout(Path("a.java"), 1.0), CalicheckError)


class TestValidation:
    """FAIL-FIRST constructor validation."""

    def test_empty_rule_id_raises(self) -> None:
        with pytest.raises(ValueError, match="rule_id"):
            DuplicateRuleError("")

    def test_empty_option_raises(self) -> None:
        with pytest.raises(ValueError, match="option"):
            UnknownRuleOptionError("max-call-chain", "")

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason"):
            InvalidRuleOptionError("max-call-chain", "threshold", "")

    def test_non_positive_budget_raises(self) -> None:
        with pytest.raises(ValueError, match="budget_s"):
            EvaluationTimeout(Path("a.java"), 0)


class TestMessages:
    """Error messages name the offending rule and option."""

    def test_unknown_rule_lists_known(self) -> None:
        error = UnknownRuleError("max-depth", ("max-call-chain", "no-else-branch"))
        assert "max-depth" in str(error)
        assert "max-call-chain, no-else-branch" in str(error)
        assert error.known == ("max-call-chain", "no-else-branch")

    def test_invalid_option(self) -> None:
        error = InvalidRuleOptionError("max-call-chain", "threshold", "must be >= 0, got -1")
        assert str(error) == "Invalid value for 'max-call-chain.threshold': must be >= 0, got -1"
        assert error.option == "threshold"
