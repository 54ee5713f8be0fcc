"""The launcher: filters plugin entries, moves the focus and launches entries."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import Any, TextIO

from oxirun.config import get_config
from oxirun.plugins import Plugin, PluginError, load_plugins
from oxirun.utils import FocusDirection

QUIT_COMMAND = ":q"
UP_COMMAND = ":up"
DOWN_COMMAND = ":down"


class OxiRun:
    """State of the launcher: the filter text, the focused entry and the plugins."""

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        plugins: Iterable[Plugin] | None = None,
    ) -> None:
        self.config = get_config() if config is None else config
        self.plugins: list[Plugin] = (
            load_plugins(self.config) if plugins is None else list(plugins)
        )
        self.filter_text = ""
        self.current_focus = 0
        self.finished = False

    def set_filter_text(self, text: str) -> None:
        """Store the filter text and let every plugin re-rank its entries."""
        self.filter_text = text
        for plugin in self.plugins:
            plugin.sort(text)

    def count(self) -> int:
        """Return the number of entries shown by all plugins together."""
        return sum(plugin.count() for plugin in self.plugins)

    def move_focus(self, direction: FocusDirection) -> int:
        """Move the focus one entry in ``direction``, wrapping around; return it."""
        self.current_focus = direction.add(self.current_focus, self.count())
        return self.current_focus

    def launch_entry(self, index: int) -> None:
        """Ask every plugin to launch the entry at ``index`` and mark the run finished."""
        for plugin in self.plugins:
            plugin.launch(index)
        self.finished = True

    def launch_focused(self) -> None:
        """Launch the focused entry."""
        self.launch_entry(self.current_focus)

    def entries(self) -> list[Any]:
        """Return the shown items, each plugin's best first, plugins in order."""
        items: list[Any] = []
        for plugin in self.plugins:
            try:
                view = plugin.view()
            except PluginError:
                continue
            ranked = sorted(view, key=lambda pair: pair[0], reverse=True)
            items.extend(item for _, item in ranked)
        return items

    def error_views(self) -> list[tuple[str, list[str]]]:
        """Return ``(plugin name, errors)`` for every plugin that has errors."""
        return [
            (plugin.name, list(plugin.errors))
            for plugin in self.plugins
            if plugin.errors
        ]


def _label(item: Any) -> str:
    return str(getattr(item, "name", item))


def _render(app: OxiRun, out: TextIO) -> None:
    for index, item in enumerate(app.entries()):
        marker = ">" if index == app.current_focus else " "
        print(f"{marker} {_label(item)}", file=out)
    for name, errors in app.error_views():
        for error in errors:
            print(f"{name}: {error}", file=out)


def main(argv: list[str] | None = None) -> int:
    """Run the launcher on the terminal.

    Each input line sets the filter text; ``:up`` and ``:down`` move the
    focus, an empty line launches the focused entry and ``:q`` quits.
    """
    parser = argparse.ArgumentParser(
        prog="oxirun", description="Find and launch applications."
    )
    parser.add_argument("query", nargs="?", default="", help="initial filter text")
    parser.add_argument(
        "--list",
        action="store_true",
        help="print the matching entries and exit without launching",
    )
    args = parser.parse_args(argv)

    app = OxiRun()
    if args.query:
        app.set_filter_text(args.query)
    _render(app, sys.stdout)
    if args.list:
        return 0

    for line in sys.stdin:
        command = line.rstrip("\r\n")
        if command == QUIT_COMMAND:
            return 0
        if command == UP_COMMAND:
            app.move_focus(FocusDirection.UP)
        elif command == DOWN_COMMAND:
            app.move_focus(FocusDirection.DOWN)
        elif not command:
            app.launch_focused()
            return 0
        else:
            app.set_filter_text(command)
        _render(app, sys.stdout)
    return 0