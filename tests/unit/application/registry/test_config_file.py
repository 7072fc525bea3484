"""Tests for application/registry/config_file.py."""

from pathlib import Path

import pytest

from calicheck.application.registry.config_file import load_configuration, parse_configuration


class TestParseConfiguration:
    """Tests for decoding configuration tables."""

    def test_tool_section(self) -> None:
        configuration = parse_configuration(
            {
                "tool": {
                    "calicheck": {
                        "max_workers": 4,
                        "rules": {"max-call-chain": {"threshold": 3}},
                    }
                }
            }
        )
        assert configuration.rules == {"max-call-chain": {"threshold": 3}}
        assert configuration.settings.max_workers == 4

    def test_top_level_layout(self) -> None:
        configuration = parse_configuration(
            {"strict_options": True, "rules": {"max-class-size": {"profile": "relaxed"}}}
        )
        assert configuration.settings.strict_options
        assert configuration.rules["max-class-size"] == {"profile": "relaxed"}

    def test_empty_document(self) -> None:
        configuration = parse_configuration({})
        assert configuration.rules == {}
        assert configuration.settings.max_workers is None

    def test_rule_must_be_table(self) -> None:
        with pytest.raises(ValueError, match="rules.max-call-chain"):
            parse_configuration({"rules": {"max-call-chain": 3}})


    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("max_workers", "4"),
            ("max_workers", True),
            ("max_workers", 2.5),
            ("time_budget_s", "2"),
            ("strict_options", "yes"),
            ("strict_options", 1),
        ],
    )
    def test_setting_of_wrong_type_raises(self, key: str, value: object) -> None:
        with pytest.raises(ValueError, match=f"calicheck.toml: '{key}' must be"):
            parse_configuration({key: value}, source="calicheck.toml")

    def test_integer_time_budget_accepted(self) -> None:
        configuration = parse_configuration({"time_budget_s": 2})
        assert configuration.settings.time_budget_s == 2

    def test_out_of_range_setting_names_source(self) -> None:
        with pytest.raises(ValueError, match="calicheck.toml: max_workers must be >= 1"):
            parse_configuration({"max_workers": 0}, source="calicheck.toml")


class TestLoadConfiguration:
    """Tests for reading TOML files."""

    def test_pyproject(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text(
            "[project]\n"
            'name = "shop"\n'
            "\n"
            "[tool.calicheck]\n"
            "time_budget_s = 2.5\n"
            "\n"
            "[tool.calicheck.rules.max-instance-variables]\n"
            "threshold = 3\n"
            'severity = "error"\n',
            encoding="utf-8",
        )
        configuration = load_configuration(path)

        assert configuration.settings.time_budget_s == 2.5
        assert configuration.rules == {
            "max-instance-variables": {"threshold": 3, "severity": "error"}
        }

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_configuration(tmp_path / "calicheck.toml")
