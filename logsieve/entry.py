"""Log entries and their severity levels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LogLevel(Enum):
    """Severity of a log entry."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FOOTER = "FOOTER"
    HEADER = "HEADER"


_LABELS = {
    LogLevel.DEBUG: " DEBUG",
    LogLevel.INFO: "  INFO",
    LogLevel.WARN: "  WARN",
    LogLevel.ERROR: " ERROR",
    LogLevel.FOOTER: "FOOTER",
    LogLevel.HEADER: "HEADER",
}

_COLORS = {
    LogLevel.DEBUG: "dark cyan",
    LogLevel.INFO: "dark green",
    LogLevel.WARN: "yellow",
    LogLevel.ERROR: "dark red",
    LogLevel.FOOTER: "dark blue",
    LogLevel.HEADER: "dark blue",
}


@dataclass(frozen=True)
class LogEntry:
    """One parsed line of a log file."""

    timestamp: str
    level: LogLevel
    message: str
    source_file: str
    source_function: str
    source_line: int

    def source_info(self) -> str:
        """Return the source location as ``file:line``."""
        return f"{self.source_file}:{self.source_line}"


def parse_level(text: str) -> LogLevel:
    """Map a level name, ignoring surrounding blanks, to a level; unknown names give DEBUG."""
    try:
        return LogLevel(text.strip(" \t"))
    except ValueError:
        return LogLevel.DEBUG


def level_label(level: LogLevel) -> str:
    """Return the six-character, right-aligned label shown for a level."""
    return _LABELS.get(level, " DEBUG")


def level_color(level: LogLevel) -> str:
    """Return the display colour name used for a level."""
    return _COLORS.get(level, "dark cyan")