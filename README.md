# logsieve

A full-screen terminal viewer, and a small parsing library, for log files
whose records are split into fields by the ASCII unit separator (byte `0x1F`).
Each line holds:

```
timestamp<US>level<US>message<US>source_info
```

where `source_info` normally looks like `path/to/file.cpp -> function(): 42`.
Source text that does not have that form is kept whole as the source file,
with function `unknown` and line `0`. Lines with fewer than four fields are
skipped. The level is matched after trimming spaces and tabs against `DEBUG`,
`INFO`, `WARN`, `ERROR`, `FOOTER` and `HEADER`; anything else is treated as
`DEBUG`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the viewer

```
logsieve [FILE]
```

`FILE`, if given, is put in the file field. Otherwise the last opened path is
offered, read from `logreader_config.txt` in the working directory, provided
that file still exists; failing that, `log.txt`. Diagnostic messages are
appended to `logreader_debug.log` in the working directory.

The screen has three panes:

- **Top**: the file path, an **Open** button, a **Copy Filtered** button and
  a status line. **Open** clears the view, parses the file in the background,
  reports progress in the status line, remembers the path in
  `logreader_config.txt` and moves the focus to the search field.
- **Middle**: the entries, with timestamp, level (coloured), message and
  source (`file:line`). Up to 45 rows are shown at a time; scroll with the
  up/down arrow keys or the mouse wheel. A counter shows how many entries pass
  the filters out of the total, plus the scroll position when the list is
  longer than one screen.
- **Bottom**: a search field (matches messages by substring, case-sensitive)
  and DEBUG / INFO / WARN / ERROR checkboxes. With no box ticked every level
  is shown.

**Copy Filtered** puts the entries that pass the current filters on the
clipboard, one per line, as:

```
[timestamp][ LEVEL]: message | source_file:line
```

On Windows the `clip` command is used; elsewhere `xclip` or, failing that,
`xsel` must be installed. The status line says whether the copy worked.

Press `Esc` to quit; a background parse still running is stopped first.

## Using the library

```python
from logsieve.parser import LogParser, parse_line
from logsieve.entry import LogLevel
from logsieve.view import filter_entries, clipboard_text

entries = LogParser().parse("app.log")          # raises OSError if unreadable
errors = filter_entries(entries, {LogLevel.ERROR}, "timeout")
print(clipboard_text(errors))
```

- `logsieve.entry`: `LogLevel`, the frozen `LogEntry` dataclass (with
  `source_info()`), `parse_level`, `level_label` and `level_color`.
- `logsieve.parser`: `parse_source_info`, `parse_line` (returns `None` for a
  line with too few fields), `parse_lines` (a generator) and `LogParser`.
  `LogParser.parse_async(file_path, entries, entries_lock, progress_callback)`
  parses on a background thread in batches of 5000 lines, appending to the
  list you supply under the lock you supply and reporting status text through
  the callback; `LogParser.in_progress()` tells whether it is running and
  `LogParser.stop()` cancels it and waits for the thread.
- `logsieve.view`: `filter_entries`, `format_entry`, `clipboard_text`,
  `visible_window` and `status_line`.
- `logsieve.config`: `get_config_path`, `load_last_file_path` and
  `save_last_file_path`.
- `logsieve.clipboard`: `copy_to_clipboard`, returning whether a clipboard
  tool accepted the text.
- `logsieve.app`: `LogReaderApp` and `main`.