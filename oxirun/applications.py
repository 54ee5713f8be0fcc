"""Plugin that lists desktop applications and launches the chosen one."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from oxirun.applications_config import Config, get_config
from oxirun.fuzzy import FuzzyMatcher

SVG_ENDING = ".svg"
PNG_ENDING = ".png"
DESKTOP_ENDING = ".desktop"
DESKTOP_HEADER = "[Desktop Entry]"
ACTION_HEADER = "[Desktop Action"

# Field codes of the desktop entry Exec key; they are dropped before launching.
FREEDESKTOP_FIELDS = (
    "%f", "%F", "%u", "%U", "%d", "%D", "%n", "%N", "%i", "%c", "%k", "%v", "%m",
)

DATA_DIRS = ("XDG_DATA_DIRS", "XDG_DATA_HOME")
ICON_THEMES = ("hicolor", "Adwaita")

ICON_SIZE = 60.0
SORT_THRESHOLD = 25

EMPTY_ENTRIES_ERROR = "Application entry list is empty"
MISSING_ENTRY_ERROR = "Could not get entry for index"


class IconKind(Enum):
    """The kind of image an icon refers to."""

    SVG = "svg"
    PNG = "png"
    INVALID = "invalid"


@dataclass(frozen=True)
class IconVariant:
    """An application icon; ``path`` is None for invalid icons."""

    kind: IconKind
    path: Path | None = None

    @classmethod
    def svg(cls, path: str | os.PathLike[str]) -> IconVariant:
        return cls(IconKind.SVG, Path(path))

    @classmethod
    def png(cls, path: str | os.PathLike[str]) -> IconVariant:
        return cls(IconKind.PNG, Path(path))

    @classmethod
    def invalid(cls) -> IconVariant:
        return cls(IconKind.INVALID)


@dataclass
class EntryInfo:
    """A launchable application read from a desktop entry."""

    name: str
    icon: IconVariant | None
    categories: list[str]
    exec: str


@dataclass
class ScoredEntryInfo:
    """An application together with how well it matched the filter text."""

    score: int
    entry: EntryInfo


def _trim_end(name: str, ending: str) -> str:
    while name.endswith(ending):
        name = name[: -len(ending)]
    return name


def _icon_from_file(entry: os.DirEntry[str]) -> tuple[str, IconVariant]:
    filename = entry.name
    if filename.endswith(PNG_ENDING):
        return _trim_end(filename, PNG_ENDING), IconVariant.png(entry.path)
    if filename.endswith(SVG_ENDING):
        return _trim_end(filename, SVG_ENDING), IconVariant.svg(entry.path)
    return filename, IconVariant.invalid()


def _scan(path: str) -> list[os.DirEntry[str]]:
    """List a directory by name, or nothing when it cannot be read."""
    try:
        with os.scandir(path) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except OSError:
        return []


def read_icons_per_dir(path: str) -> dict[str, IconVariant]:
    """Map icon names to icons found in the themes and pixmaps below a data dir."""
    icons: dict[str, IconVariant] = {}
    for theme in ICON_THEMES:
        for subdir in _scan(f"{path}/icons/{theme}"):
            icons.update(_icon_from_file(f) for f in _scan(f"{subdir.path}/apps"))
    icons.update(_icon_from_file(f) for f in _scan(f"{path}/pixmaps"))
    return icons


def _decoded_lines(data: bytes) -> Iterator[str | None]:
    """Yield each line of ``data``; None stands for a line that is not UTF-8."""
    if not data:
        return
    chunks = data.split(b"\n")
    if data.endswith(b"\n"):
        chunks.pop()
    for chunk in chunks:
        if chunk.endswith(b"\r"):
            chunk = chunk[:-1]
        try:
            yield chunk.decode("utf-8")
        except UnicodeDecodeError:
            yield None


def _read_keys(lines: Iterable[str | None]) -> dict[str, str]:
    keys: dict[str, str] = {}
    for line in lines:
        if line is None:
            continue
        if line.startswith(ACTION_HEADER):
            break
        key, sep, value = line.partition("=")
        if sep:
            keys.setdefault(key, value)
    return keys


def _resolve_icon(value: str, iconmap: Mapping[str, IconVariant]) -> IconVariant:
    if value in iconmap:
        return iconmap[value]
    if value.endswith(PNG_ENDING):
        return IconVariant.png(value)
    if value.endswith(SVG_ENDING):
        return IconVariant.svg(value)
    return IconVariant.invalid()


def _build_exec(keys: Mapping[str, str], config: Config) -> str | None:
    command = keys.get("Exec")
    if command is None:
        return None
    for code in FREEDESKTOP_FIELDS:
        command = command.replace(code, "")
    if keys.get("Terminal") == "true":
        command = f"{config.terminal} {command}"
    return command


def _categories(keys: Mapping[str, str]) -> list[str]:
    categories = keys.get("Categories")
    keywords = keys.get("Keywords")
    if categories is None or keywords is None:
        return []
    return [
        item
        for pair in zip(categories.split(";"), keywords.split(";"))
        for item in pair
    ]


def parse_desktop_entry(
    path: str | os.PathLike[str],
    config: Config,
    iconmap: Mapping[str, IconVariant],
) -> EntryInfo | None:
    """Read one desktop entry file, or None if it is unreadable, hidden or incomplete."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        return None
    lines = _decoded_lines(data)
    if (next(lines, "") or "") != DESKTOP_HEADER:
        return None
    keys = _read_keys(lines)

    if keys.get("NoDisplay") == "true":
        return None

    command = _build_exec(keys, config)
    name = keys.get("Name")
    if name is None or command is None:
        return None
    icon_value = keys.get("Icon")
    icon = None if icon_value is None else _resolve_icon(icon_value, iconmap)
    return EntryInfo(name=name, icon=icon, categories=_categories(keys), exec=command)


def read_entries_of_dir(
    config: Config, iconmap: Mapping[str, IconVariant], path: str
) -> dict[str, EntryInfo]:
    """Read every ``.desktop`` file in the ``applications`` dir below ``path``, keyed by name."""
    entries: dict[str, EntryInfo] = {}
    for file in _scan(f"{path}/applications"):
        if not file.name.endswith(DESKTOP_ENDING):
            continue
        entry = parse_desktop_entry(file.path, config, iconmap)
        if entry is not None:
            entries[entry.name] = entry
    return entries


def _data_dirs(environ: Mapping[str, str]) -> list[str]:
    return [
        directory
        for variable in DATA_DIRS
        if variable in environ
        for directory in environ[variable].split(":")
    ]


def fetch_entries(
    config: Config, environ: Mapping[str, str] | None = None
) -> tuple[list[EntryInfo], str | None]:
    """Collect applications from all XDG data dirs.

    Returns the entries and an error message when none were found.
    """
    if environ is None:
        environ = os.environ
    directories = _data_dirs(environ)

    iconmap: dict[str, IconVariant] = {}
    for directory in directories:
        iconmap.update(read_icons_per_dir(directory))

    by_name: dict[str, EntryInfo] = {}
    for directory in directories:
        by_name.update(read_entries_of_dir(config, iconmap, directory))

    entries = list(by_name.values())
    return entries, (EMPTY_ENTRIES_ERROR if not entries else None)


def _score(entry: EntryInfo, filter_text: str, matcher: FuzzyMatcher) -> int:
    candidates = [entry.name, *entry.categories]
    return max(
        (matcher.fuzzy_match(choice, filter_text) or 0 for choice in candidates),
        default=0,
    )


def sort_applications(
    applications: Iterable[EntryInfo], filter_text: str, matcher: FuzzyMatcher
) -> list[ScoredEntryInfo]:
    """Score applications against the filter, drop weak matches, best first."""
    scored = [
        ScoredEntryInfo(score, entry)
        for entry in applications
        if (score := _score(entry, filter_text, matcher)) >= SORT_THRESHOLD
    ]
    scored.sort(key=lambda item: item.score, reverse=True)
    return scored


def run_command(command: str) -> subprocess.Popen[bytes]:
    """Start ``command`` through the shell without waiting for it.

    Raises RuntimeError when the process cannot be spawned.
    """
    try:
        return subprocess.Popen(["sh", "-c", command])
    except OSError as error:
        raise RuntimeError(f"Failed to spawn command: {error}") from error


@dataclass(init=False)
class ApplicationsPlugin:
    """Lists installed applications, filters them and launches the chosen one."""

    name = "Applications"

    config: Config
    applications: list[EntryInfo]
    sorted_applications: list[ScoredEntryInfo]
    matcher: FuzzyMatcher
    errors: list[str] = field(default_factory=list)

    def __init__(
        self,
        global_config: dict[str, Any],
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.config = get_config(global_config)
        self.matcher = FuzzyMatcher()
        self.errors = []
        entries, error = fetch_entries(self.config, environ)
        if error is not None:
            self.errors.append(error)
        self.applications = entries
        self.sorted_applications = sort_applications(entries, "", self.matcher)

    def sort(self, filter_text: str) -> list[ScoredEntryInfo]:
        """Re-rank the applications for ``filter_text`` and return the ranking."""
        self.sorted_applications = sort_applications(
            self.applications, filter_text, self.matcher
        )
        return self.sorted_applications

    def launch(self, focused_index: int) -> None:
        """Run the ranked application at ``focused_index``, or record an error."""
        if not 0 <= focused_index < len(self.sorted_applications):
            self.errors.append(MISSING_ENTRY_ERROR)
            return
        run_command(self.sorted_applications[focused_index].entry.exec)

    def view(self) -> list[tuple[int, EntryInfo]]:
        """Return the shown entries with their scores, at most ``max_entries``."""
        return [
            (scored.score, scored.entry)
            for scored in self.sorted_applications[: self.config.max_entries]
        ]

    def count(self) -> int:
        """Return how many entries are shown."""
        return min(len(self.sorted_applications), self.config.max_entries)