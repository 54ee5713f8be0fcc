"""Settings of the applications plugin."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

SECTION = "applications"


@dataclass
class Config:
    """How many entries to show and which terminal runs terminal applications."""

    max_entries: int = 7
    terminal: str = "kitty"


def _check_max_entries(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(
            f"Could not deserialize config: max_entries must be a non-negative integer, got {value!r}"
        )
    return value


def _check_terminal(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(
            f"Could not deserialize config: terminal must be a string, got {value!r}"
        )
    return value


_FIELD_CHECKS = {
    "max_entries": _check_max_entries,
    "terminal": _check_terminal,
}


def get_config(global_config: dict[str, Any]) -> Config:
    """Build the plugin settings from the ``applications`` table, falling back to defaults.

    Raises ValueError when the table or one of its known fields has the wrong type.
    """
    default_config = Config()
    if SECTION not in global_config:
        return default_config
    section = global_config[SECTION]
    if not isinstance(section, dict):
        raise ValueError(
            f"Could not deserialize config: [{SECTION}] must be a table, got {section!r}"
        )
    overrides = {
        name: check(section[name])
        for name, check in _FIELD_CHECKS.items()
        if name in section
    }
    return dataclasses.replace(default_config, **overrides)