# oxirun

A small application runner. It reads the desktop entries installed on your
system, ranks them with a fuzzy match against what you type, and launches the
one you choose.

## Installation

```
pip install .
```

There are no runtime dependencies beyond the standard library. The tests need
pytest (`pip install .[test]`).

## Usage

```
oxirun [query] [--list]
```

- `query` sets the initial filter text.
- `--list` prints the matching entries and exits without launching anything.

Without `--list`, oxirun prints the entries and then reads commands from
standard input, one per line, printing the entries again after each one:

| Input      | Effect                                         |
|------------|------------------------------------------------|
| any text   | becomes the new filter text                    |
| `:down`    | moves the focus one entry down                 |
| `:up`      | moves the focus one entry up                   |
| empty line | launches the focused entry and exits           |
| `:q`       | exits without launching                        |

The focused entry is marked with `>`, and the focus wraps around at both ends.
Errors reported by plugins are printed as `Plugin name: message`.

Entries only appear once some filter text is given: an entry is shown when
its name, one of its categories or one of its keywords matches the filter with
a score of at least 25. Matching ignores case unless the filter contains an
upper-case letter.

## Configuration

The configuration file is `config.toml` in the `oxirun` directory under your
config home: `$XDG_CONFIG_HOME/oxirun/config.toml` if `XDG_CONFIG_HOME` is an
absolute path, otherwise `~/.config/oxirun/config.toml`. The `oxirun`
directory is created if it does not exist. If there is no file, an empty
configuration is used.

Plugins are enabled only when they are listed under `plugins`; with no such
list, nothing is shown. The one plugin available is `applications`.

```toml
plugins = ["applications"]

[applications]
# Largest number of entries shown.
max_entries = 7
# Terminal that runs entries marked Terminal=true.
terminal = "kitty"
```

A `max_entries` that is not a non-negative integer, a `terminal` that is not a
string, or an `[applications]` value that is not a table raises `ValueError`.

## The applications plugin

Applications are read from the `.desktop` files in the `applications`
directory of every path listed (colon-separated) in `XDG_DATA_DIRS` and
`XDG_DATA_HOME`. When two entries share a name, the later one wins.

- A file must start with `[Desktop Entry]`; reading stops at the first
  `[Desktop Action` line, and the first value of each key is kept.
- Entries marked `NoDisplay=true`, and entries without `Name` or `Exec`, are
  left out.
- Field codes such as `%f` and `%U` are removed from `Exec`. Entries marked
  `Terminal=true` are run through the configured terminal.
- Icons are looked up in the `hicolor` and `Adwaita` icon themes and in
  `pixmaps`.
- If no entries are found, the plugin reports
  `Application entry list is empty`.

Launching an entry runs its command through `sh -c` without waiting for it.

## Library use

```python
from oxirun.app import OxiRun
from oxirun.applications import ApplicationsPlugin
from oxirun.utils import FocusDirection

plugin = ApplicationsPlugin({}, {"XDG_DATA_DIRS": "/usr/share"})
runner = OxiRun({}, [plugin])
runner.set_filter_text("fire")
runner.move_focus(FocusDirection.DOWN)
for entry in runner.entries():
    print(entry.name, entry.exec)
runner.launch_focused()
```

Other useful pieces:

- `oxirun.fuzzy.FuzzyMatcher().fuzzy_match(choice, pattern)` returns a score,
  or `None` when the pattern is not a subsequence of the choice.
- `oxirun.applications.parse_desktop_entry`, `read_entries_of_dir`,
  `fetch_entries` and `sort_applications` work on desktop entries directly.
- `oxirun.plugins.load_plugins(config, registry)` builds the plugins a config
  allows from a mapping of names to factories; any object with `name`,
  `errors`, `sort`, `launch`, `view` and `count` can act as a plugin.

## What it does not do

oxirun has no graphical window: it works only through the terminal commands
described above, and icons are read but never displayed. Plugins are not
loaded from files; only the built-in `applications` plugin, or plugins passed
in from Python code, are available.