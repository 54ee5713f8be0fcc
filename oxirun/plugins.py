"""Plugins that contribute entries to the launcher."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from oxirun.applications import ApplicationsPlugin
from oxirun.config import get_allowed_plugins


class PluginError(Exception):
    """Raised when a plugin cannot be loaded or cannot produce its view."""


@runtime_checkable
class Plugin(Protocol):
    """What the launcher expects of a plugin.

    ``view`` returns ``(score, item)`` pairs; a higher score puts an item
    higher up. It may raise PluginError when nothing can be shown.
    """

    name: str
    errors: list[str]

    def sort(self, filter_text: str) -> Any: ...

    def launch(self, focused_index: int) -> Any: ...

    def view(self) -> list[tuple[int, Any]]: ...

    def count(self) -> int: ...


PluginFactory = Callable[[dict[str, Any]], Any]


def available_plugins() -> dict[str, PluginFactory]:
    """Return the plugins that can be enabled, keyed by the name used in the config."""
    return {"applications": ApplicationsPlugin}


def load_plugins(
    config: dict[str, Any],
    registry: Mapping[str, PluginFactory] | None = None,
) -> list[Plugin]:
    """Create every plugin of ``registry`` that the config's ``plugins`` list allows.

    Each factory receives the whole config. Objects that do not provide the
    plugin interface are skipped; a factory that fails raises PluginError.
    """
    if registry is None:
        registry = available_plugins()
    allowed = set(get_allowed_plugins(config))
    plugins: list[Plugin] = []
    for name, factory in registry.items():
        if name not in allowed:
            continue
        try:
            plugin = factory(config)
        except Exception as error:
            raise PluginError(f"Could not load plugin {name!r}") from error
        if isinstance(plugin, Plugin):
            plugins.append(plugin)
    return plugins