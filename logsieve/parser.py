"""Parsing of field-separated log files, synchronously or on a worker thread."""

from __future__ import annotations

import logging
import os
import re
import threading
import time
from collections.abc import Callable, Iterable, Iterator, MutableSequence

from .entry import LogEntry, parse_level

log = logging.getLogger(__name__)

FIELD_SEPARATOR = "\x1f"
BATCH_SIZE = 5000
PROGRESS_EVERY = 1000

_SOURCE_RE = re.compile(r"(.*)\s*->\s*(.*)\(\):\s*(\d+)")

ProgressCallback = Callable[[str], None]


def parse_source_info(text: str) -> tuple[str, str, int]:
    """Split ``file -> function(): line`` into its parts.

    Text that does not have that form gives ``(text, "unknown", 0)``.
    """
    match = _SOURCE_RE.fullmatch(text)
    if match is None:
        return text, "unknown", 0
    return match.group(1), match.group(2), int(match.group(3))


def _split_fields(line: str) -> list[str]:
    fields = line.split(FIELD_SEPARATOR)
    if fields[-1] == "":
        fields.pop()
    return fields


def parse_line(line: str) -> LogEntry | None:
    """Parse ``timestamp<FS>level<FS>message<FS>source`` into an entry, or None if fields are missing."""
    fields = _split_fields(line)
    if len(fields) < 4:
        return None
    source_file, source_function, source_line = parse_source_info(fields[3])
    return LogEntry(
        timestamp=fields[0],
        level=parse_level(fields[1]),
        message=fields[2],
        source_file=source_file,
        source_function=source_function,
        source_line=source_line,
    )


def parse_lines(lines: Iterable[str]) -> Iterator[LogEntry]:
    """Yield the entries of the lines that parse, skipping the rest."""
    for line in lines:
        entry = parse_line(line)
        if entry is not None:
            yield entry


def _read_lines(handle) -> Iterator[tuple[str, int]]:
    """Yield each line without its newline, with the byte offset after it."""
    position = 0
    for raw in handle:
        position += len(raw)
        yield raw.removesuffix(b"\n").decode("utf-8", errors="replace"), position


class LogParser:
    """Parses log files, either directly or on a background thread."""

    def __init__(self) -> None:
        self._active = threading.Event()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def parse(self, file_path: str | os.PathLike) -> list[LogEntry]:
        """Parse a whole file and return its entries; raises OSError if it cannot be read."""
        try:
            handle = open(file_path, "rb")
        except OSError:
            log.error("Error opening file: %s", file_path)
            raise
        entries: list[LogEntry] = []
        line_count = 0
        with handle:
            file_size = os.fstat(handle.fileno()).st_size
            log.info("Starting to parse log file: %s (%d bytes)", file_path, file_size)
            for line, position in _read_lines(handle):
                line_count += 1
                if line_count % PROGRESS_EVERY == 0:
                    progress = position * 100 // max(file_size, 1)
                    log.debug(
                        "Processed %d lines, %d matches (%d%%)",
                        line_count, len(entries), progress,
                    )
                entry = parse_line(line)
                if entry is not None:
                    entries.append(entry)
        log.info("Processed %d total lines, %d matched", line_count, len(entries))
        log.info("Finished parsing log file. Found %d valid entries", len(entries))
        return entries

    def parse_async(
        self,
        file_path: str | os.PathLike,
        entries: MutableSequence[LogEntry],
        entries_lock: threading.Lock,
        progress_callback: ProgressCallback,
    ) -> None:
        """Parse a file on a worker thread, appending to ``entries`` under ``entries_lock``.

        Any parse already running is stopped first. Status text is reported
        through ``progress_callback``.
        """
        self.stop()
        self._stop.clear()
        self._active.set()
        self._thread = threading.Thread(
            target=self._run,
            args=(file_path, entries, entries_lock, progress_callback),
            daemon=True,
        )
        self._thread.start()

    def in_progress(self) -> bool:
        """Whether a background parse is running."""
        return self._active.is_set()

    def stop(self) -> None:
        """Ask a background parse to stop and wait for it."""
        self._stop.set()
        if self._thread is not None and self._thread.is_alive():
            self._thread.join()

    def _run(self, file_path, entries, entries_lock, progress_callback) -> None:
        try:
            try:
                handle = open(file_path, "rb")
            except OSError:
                progress_callback("Error: Could not open file")
                return
            with handle:
                file_size = os.fstat(handle.fileno()).st_size
                progress_callback("Starting parse... 0%")
                batch: list[str] = []
                total_lines = 0
                for line, position in _read_lines(handle):
                    if self._stop.is_set():
                        break
                    batch.append(line)
                    total_lines += 1
                    if len(batch) >= BATCH_SIZE:
                        self._parse_chunk(batch, entries, entries_lock)
                        progress = position * 100 // max(file_size, 1)
                        progress_callback(f"Parsing... {progress}% ({total_lines} lines)")
                        batch = []
                        time.sleep(0.01)
            if batch and not self._stop.is_set():
                self._parse_chunk(batch, entries, entries_lock)
            if self._stop.is_set():
                progress_callback("Parsing cancelled")
            else:
                with entries_lock:
                    total_matched = len(entries)
                progress_callback(f"Complete: {total_matched} entries from {total_lines} lines")
        finally:
            self._active.clear()

    def _parse_chunk(self, lines, entries, entries_lock) -> None:
        chunk: list[LogEntry] = []
        for line in lines:
            if self._stop.is_set():
                break
            entry = parse_line(line)
            if entry is not None:
                chunk.append(entry)
        with entries_lock:
            entries.extend(chunk)