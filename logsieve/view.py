"""Filtering and formatting of log entries for display."""

from __future__ import annotations

from collections.abc import Collection, Iterable

from .entry import LogEntry, LogLevel, level_label

MAX_VISIBLE_ROWS = 45


def filter_entries(
    entries: Iterable[LogEntry],
    levels: Collection[LogLevel],
    search_term: str,
) -> list[LogEntry]:
    """Keep entries whose level is selected (all if none are) and whose message contains the term."""
    return [
        entry
        for entry in entries
        if (not levels or entry.level in levels)
        and (not search_term or search_term in entry.message)
    ]


def format_entry(entry: LogEntry) -> str:
    """Render an entry as one line of plain text."""
    return (
        f"[{entry.timestamp}][{level_label(entry.level)}]: "
        f"{entry.message} | {entry.source_info()}"
    )


def clipboard_text(entries: Iterable[LogEntry]) -> str:
    """Render entries as newline-terminated lines."""
    return "".join(format_entry(entry) + "\n" for entry in entries)


def visible_window(total: int, scroll: int, max_rows: int = MAX_VISIBLE_ROWS) -> range:
    """Return the indices to show; its start is the scroll position after clamping."""
    if scroll >= total:
        scroll = max(0, total - max_rows)
    scroll = max(scroll, 0)
    return range(scroll, min(scroll + max_rows, total))


def status_line(shown: int, total: int, scroll: int, max_rows: int = MAX_VISIBLE_ROWS) -> str:
    """Describe how many entries are shown, with a scroll percentage when they overflow."""
    line = f"Showing {shown} of {total} entries"
    if shown > max_rows:
        percentage = scroll * 100 // max(1, shown - max_rows)
        line += f" | Scroll: {percentage}%"
    return line