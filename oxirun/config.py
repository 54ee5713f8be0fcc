"""Locating and reading the launcher's configuration."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_NAME = "oxirun"
CONFIG_FILE_NAME = "config.toml"


def get_allowed_plugins(config: dict[str, Any]) -> list[str]:
    """Return the plugin file names listed under ``plugins``, ignoring non-strings."""
    plugins = config.get("plugins")
    if not isinstance(plugins, list):
        return []
    return [name for name in plugins if isinstance(name, str)]


def read_config(path: str | os.PathLike[str]) -> dict[str, Any]:
    """Parse the TOML file at ``path``.

    Raises OSError when the file cannot be read and
    tomllib.TOMLDecodeError when it is not valid TOML.
    """
    with open(path, "rb") as handle:
        return tomllib.load(handle)


def _config_home() -> Path:
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg_config_home and os.path.isabs(xdg_config_home):
        return Path(xdg_config_home)
    try:
        home = Path.home()
    except RuntimeError as error:
        raise RuntimeError("Could not get config home") from error
    return home / ".config"


def get_oxirun_dir() -> Path:
    """Return the launcher's configuration directory, creating it if missing."""
    oxirun_dir = _config_home() / CONFIG_DIR_NAME
    if not oxirun_dir.is_dir():
        oxirun_dir.mkdir()
    return oxirun_dir


def get_config() -> dict[str, Any]:
    """Load ``config.toml`` from the configuration directory, or an empty table."""
    config_path = get_oxirun_dir() / CONFIG_FILE_NAME
    if not config_path.is_file():
        return {}
    return read_config(config_path)