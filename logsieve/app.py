"""Terminal log viewer with file loading, level filters, search and clipboard export."""

from __future__ import annotations

import argparse
import logging
import os
import threading

import urwid

from .clipboard import copy_to_clipboard
from .config import load_last_file_path, save_last_file_path
from .entry import LogEntry, LogLevel, level_color, level_label
from .parser import LogParser
from .view import MAX_VISIBLE_ROWS, clipboard_text, filter_entries, status_line, visible_window

DEBUG_LOG_FILE = "logreader_debug.log"

TIMESTAMP_WIDTH = 15
LEVEL_WIDTH = 10
SOURCE_WIDTH = 50

FILTER_LEVELS = (LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR)

PALETTE = [
    ("header", "yellow,bold", ""),
    ("status", "dark green", ""),
    ("dim", "dark gray", ""),
    *((f"level:{level.value}", level_color(level), "") for level in LogLevel),
]


class _LogPane(urwid.WidgetWrap):
    """The centre pane; owns scrolling by arrow keys and mouse wheel."""

    def __init__(self, app: LogReaderApp) -> None:
        self._app = app
        self._summary = urwid.Text("", align="right")
        self._rows = urwid.Pile([])
        header = urwid.Columns(
            [
                (TIMESTAMP_WIDTH, urwid.AttrMap(urwid.Text("Timestamp", align="center"), "header")),
                (LEVEL_WIDTH, urwid.AttrMap(urwid.Text("Level", align="center"), "header")),
                ("weight", 1, urwid.AttrMap(urwid.Text("Message"), "header")),
                (SOURCE_WIDTH, urwid.AttrMap(urwid.Text("Source"), "header")),
            ],
            dividechars=1,
        )
        body = urwid.Pile(
            [urwid.AttrMap(self._summary, "dim"), urwid.Divider("─"), header, urwid.Divider("─"), self._rows]
        )
        super().__init__(urwid.LineBox(urwid.Filler(body, valign="top")))

    def selectable(self) -> bool:
        return True

    def show(self, summary: str, entries: list[LogEntry]) -> None:
        self._summary.set_text(summary)
        if entries:
            widgets = [_entry_row(entry) for entry in entries]
        else:
            widgets = [urwid.AttrMap(urwid.Text("No log entries to display", align="center"), "dim")]
        self._rows.contents = [(widget, self._rows.options("pack")) for widget in widgets]

    def keypress(self, size, key):
        if key == "up" and self._app.scroll > 0:
            self._app.scroll -= 1
            self._app._refresh()
            return None
        if key == "down":
            self._app.scroll += 1
            self._app._refresh()
            return None
        return key

    def mouse_event(self, size, event, button, col, row, focus):
        if event == "mouse press":
            if button == 4 and self._app.scroll > 0:
                self._app.scroll -= 1
                self._app._refresh()
                return True
            if button == 5:
                self._app.scroll += 1
                self._app._refresh()
                return True
        return False


def _entry_row(entry: LogEntry) -> urwid.Widget:
    return urwid.Columns(
        [
            (TIMESTAMP_WIDTH, urwid.Text(entry.timestamp, wrap="clip")),
            (LEVEL_WIDTH, urwid.AttrMap(urwid.Text(level_label(entry.level)), f"level:{entry.level.value}")),
            ("weight", 1, urwid.Text(entry.message)),
            (SOURCE_WIDTH, urwid.AttrMap(urwid.Text(entry.source_info(), wrap="clip"), "dim")),
        ],
        dividechars=1,
    )


def _fixed_width(label: str) -> int:
    return len(label) + 4


class LogReaderApp:
    """Application state and widgets of the log viewer."""

    def __init__(self, file_path: str | None = None, config_path: str | os.PathLike | None = None) -> None:
        self.config_path = config_path
        self.entries: list[LogEntry] = []
        self.entries_lock = threading.Lock()
        self.parser = LogParser()
        self.status_message = "Ready"
        self.scroll = 0
        self._loop: urwid.MainLoop | None = None
        self._wake_fd: int | None = None

        initial = file_path if file_path is not None else load_last_file_path(config_path)
        self.file_edit = urwid.Edit("File: ", initial)
        self.search_edit = urwid.Edit("Search: ", "")
        self.filter_boxes = {level: urwid.CheckBox(level.value) for level in FILTER_LEVELS}
        self._status_text = urwid.Text(self.status_message)

        urwid.connect_signal(self.search_edit, "postchange", self._on_change)
        for box in self.filter_boxes.values():
            urwid.connect_signal(box, "postchange", self._on_change)

        open_button = urwid.Button("Open", on_press=lambda _button: self.open_file())
        copy_button = urwid.Button("Copy Filtered", on_press=lambda _button: self.copy_filtered())

        file_area = urwid.Pile(
            [
                self.file_edit,
                urwid.Divider(),
                urwid.Columns([("pack", urwid.Text("Status: ")), urwid.AttrMap(self._status_text, "status")]),
            ]
        )
        buttons = urwid.Columns(
            [
                (_fixed_width("Open"), open_button),
                (_fixed_width("Copy Filtered"), copy_button),
            ],
            dividechars=2,
        )
        top = urwid.LineBox(
            urwid.Columns(
                [("weight", 1, file_area), (_fixed_width("Open") + _fixed_width("Copy Filtered") + 2, buttons)],
                dividechars=1,
            )
        )

        self.log_pane = _LogPane(self)

        self._search_pile = urwid.Pile(
            [
                self.search_edit,
                urwid.Divider("─"),
                urwid.Columns(
                    [("pack", urwid.Text("Filters: "))]
                    + [(_fixed_width(level.value), box) for level, box in self.filter_boxes.items()],
                    dividechars=1,
                ),
            ]
        )
        bottom = urwid.LineBox(self._search_pile)

        self._body = urwid.Pile([("pack", top), ("weight", 1, self.log_pane), ("pack", bottom)])
        self._refresh()

    def selected_levels(self) -> set[LogLevel]:
        """The levels whose filter box is ticked."""
        return {level for level, box in self.filter_boxes.items() if box.get_state()}

    def _filtered(self) -> tuple[list[LogEntry], int]:
        with self.entries_lock:
            snapshot = list(self.entries)
        return filter_entries(snapshot, self.selected_levels(), self.search_edit.edit_text), len(snapshot)

    def _refresh(self) -> None:
        filtered, total = self._filtered()
        window = visible_window(len(filtered), self.scroll, MAX_VISIBLE_ROWS)
        self.scroll = window.start
        summary = status_line(len(filtered), total, self.scroll, MAX_VISIBLE_ROWS)
        self.log_pane.show(summary, filtered[window.start:window.stop])
        self._status_text.set_text(self.status_message)

    def _on_change(self, *_args) -> None:
        self._refresh()

    def _on_progress(self, message: str) -> None:
        self.status_message = message
        if self._wake_fd is not None:
            try:
                os.write(self._wake_fd, b"!")
            except OSError:
                pass

    def _on_wake(self, _data: bytes) -> bool:
        self._refresh()
        return True

    def open_file(self) -> None:
        """Clear the view and start loading the file named in the file field."""
        path = self.file_edit.edit_text
        with self.entries_lock:
            self.entries.clear()
        self.scroll = 0
        self.parser.parse_async(path, self.entries, self.entries_lock, self._on_progress)
        save_last_file_path(path, self.config_path)
        self._body.focus_position = 2
        self._search_pile.focus_position = 0
        self._refresh()

    def copy_filtered(self) -> None:
        """Copy the entries that pass the current filters to the clipboard."""
        filtered, _total = self._filtered()
        if copy_to_clipboard(clipboard_text(filtered)):
            self.status_message = f"Copied {len(filtered)} entries to clipboard"
        else:
            self.status_message = "Failed to copy to clipboard"
        self._refresh()

    def _unhandled_input(self, key) -> bool:
        if key == "esc":
            raise urwid.ExitMainLoop()
        return False

    def run(self) -> None:
        """Run the interactive viewer until Escape is pressed."""
        self._loop = urwid.MainLoop(
            self._body, PALETTE, unhandled_input=self._unhandled_input, handle_mouse=True
        )
        self._wake_fd = self._loop.watch_pipe(self._on_wake)
        try:
            self._loop.run()
        finally:
            self.parser.stop()
            wake_fd, self._wake_fd = self._wake_fd, None
            self._loop.remove_watch_pipe(wake_fd)
            self._loop = None


def main(argv: list[str] | None = None) -> int:
    """Start the log viewer."""
    arg_parser = argparse.ArgumentParser(prog="logsieve", description="Browse field-separated log files.")
    arg_parser.add_argument("file", nargs="?", help="log file to show in the file field")
    args = arg_parser.parse_args(argv)
    logging.basicConfig(
        filename=DEBUG_LOG_FILE,
        level=logging.DEBUG,
        format="[%(asctime)s.%(msecs)03d][%(levelname)s]: %(message)s | %(name)s",
        datefmt="%H:%M:%S",
    )
    LogReaderApp(file_path=args.file).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())