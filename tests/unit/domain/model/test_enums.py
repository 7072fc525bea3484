"""Tests for domain/model/enums.py."""

import pytest

from calicheck.domain.model.enums import Layer, Severity, StatementKind


class TestSeverity:
    """Tests for Severity enum."""

    def test_values_are_display_names(self) -> None:
        assert [s.value for s in Severity] == ["Error", "Warning", "Info"]

    @pytest.mark.parametrize("text", ["warning", "Warning", "WARNING", " warning "])
    def test_parse(self, text: str) -> None:
        assert Severity.parse(text) is Severity.WARNING

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(ValueError, match="unknown severity"):
            Severity.parse("fatal")


class TestLayer:
    """Tests for Layer enum."""

    def test_values(self) -> None:
        assert Layer.DOMAIN.value == "Domain"
        assert Layer.INFRASTRUCTURE.value == "Infrastructure"


class TestStatementKind:
    """Tests for StatementKind enum."""

    def test_else_is_distinct_kind(self) -> None:
        assert StatementKind.ELSE is not StatementKind.IF
        assert len({k.value for k in StatementKind}) == len(StatementKind)
