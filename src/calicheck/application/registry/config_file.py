"""TOML configuration loading.

Two layouts are recognized:

    # pyproject.toml
    [tool.calicheck]
    max_workers = 4
    time_budget_s = 2.0

    [tool.calicheck.rules.max-instance-variables]
    threshold = 3

    # calicheck.toml
    max_workers = 4

    [rules.max-class-size]
    profile = "relaxed"
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from calicheck.domain.model.settings import RunSettings

if TYPE_CHECKING:
    from pathlib import Path

_SETTING_TYPES: dict[str, tuple[type, ...]] = {
    "max_workers": (int,),
    "time_budget_s": (int, float),
    "strict_options": (bool,),
}


@dataclass(frozen=True, slots=True)
class FileConfiguration:
    """Parsed configuration file.

    Attributes:
        rules: Rule id -> option mapping
        settings: Engine settings
    """

    rules: Mapping[str, Mapping[str, object]] = field(default_factory=dict)
    settings: RunSettings = field(default_factory=RunSettings)


def parse_configuration(data: Mapping[str, object], *, source: str = "<config>") -> FileConfiguration:
    """Build FileConfiguration from a decoded TOML document.

    Raises:
        ValueError: If a section has the wrong shape
    """
    tool = data.get("tool")
    section: object = data
    if isinstance(tool, Mapping) and "calicheck" in tool:
        section = tool["calicheck"]
    if not isinstance(section, Mapping):
        raise ValueError(f"{source}: [tool.calicheck] must be a table")

    rules = section.get("rules", {})
    if not isinstance(rules, Mapping):
        raise ValueError(f"{source}: 'rules' must be a table")
    for rule_id, options in rules.items():
        if not isinstance(options, Mapping):
            raise ValueError(f"{source}: rules.{rule_id} must be a table")

    return FileConfiguration(
        rules={rule_id: dict(options) for rule_id, options in rules.items()},
        settings=_parse_settings(section, source),
    )


def _parse_settings(section: Mapping[str, object], source: str) -> RunSettings:
    values: dict[str, object] = {}
    for key, expected in _SETTING_TYPES.items():
        if key not in section:
            continue
        value = section[key]
        # bool is an int subclass
        if isinstance(value, bool) is not (expected == (bool,)) or not isinstance(value, expected):
            names = " or ".join(t.__name__ for t in expected)
            raise ValueError(f"{source}: '{key}' must be {names}, got {value!r}")
        values[key] = value
    try:
        return RunSettings(**values)  # type: ignore[arg-type]
    except ValueError as e:
        raise ValueError(f"{source}: {e}") from e


def load_configuration(path: Path) -> FileConfiguration:
    """Read and parse a TOML configuration file.

    Raises:
        FileNotFoundError: If path does not exist
        tomllib.TOMLDecodeError: If the file is not valid TOML
        ValueError: If a section has the wrong shape
    """
    with path.open("rb") as fh:
        data = tomllib.load(fh)
    return parse_configuration(data, source=str(path))
