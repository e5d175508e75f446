import threading
import time

import pytest

from logsieve.entry import LogLevel
from logsieve.parser import (
    FIELD_SEPARATOR,
    LogParser,
    parse_line,
    parse_lines,
    parse_source_info,
)

FS = FIELD_SEPARATOR


def make_line(ts="10:00:00", level="INFO", message="hello", source="main.cpp -> run(): 42"):
    return FS.join([ts, level, message, source])


def wait_until_done(parser, timeout=10.0):
    deadline = time.monotonic() + timeout
    while parser.in_progress():
        assert time.monotonic() < deadline, "parse did not finish"
        time.sleep(0.01)


def test_parse_source_info_worked_example():
    assert parse_source_info("main.cpp -> run(): 42") == ("main.cpp ", "run", 42)


def test_parse_source_info_without_spaces():
    assert parse_source_info("a.cpp->go():7") == ("a.cpp", "go", 7)


@pytest.mark.parametrize("text", ["garbage", "main.cpp -> run()", "x -> f(): abc", ""])
def test_parse_source_info_fallback(text):
    assert parse_source_info(text) == (text, "unknown", 0)


def test_parse_line_fields():
    entry = parse_line(make_line(level=" WARN ", message="disk low"))
    assert entry.timestamp == "10:00:00"
    assert entry.level is LogLevel.WARN
    assert entry.message == "disk low"
    assert entry.source_function == "run"
    assert entry.source_line == 42


def test_parse_line_unknown_level_is_debug():
    assert parse_line(make_line(level="TRACE")).level is LogLevel.DEBUG


def test_parse_line_too_few_fields():
    assert parse_line(FS.join(["a", "INFO", "msg"])) is None
    assert parse_line("") is None


def test_trailing_separator_does_not_make_a_field():
    assert parse_line(FS.join(["a", "INFO", "msg", ""])) is None


def test_empty_inner_field_is_kept():
    entry = parse_line(FS.join(["a", "INFO", "", "src -> f(): 1"]))
    assert entry.message == ""


def test_extra_fields_are_ignored():
    entry = parse_line(make_line() + FS + "extra")
    assert entry.message == "hello"
    assert entry.source_line == 42


def test_parse_lines_skips_bad_lines():
    lines = [make_line(message="one"), "junk", make_line(message="two")]
    assert [e.message for e in parse_lines(lines)] == ["one", "two"]


def test_parse_file(tmp_path):
    path = tmp_path / "log.txt"
    path.write_text("\n".join([make_line(message="a"), "noise", make_line(level="ERROR", message="b")]) + "\n")
    entries = LogParser().parse(path)
    assert [e.message for e in entries] == ["a", "b"]
    assert entries[1].level is LogLevel.ERROR


def test_parse_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        LogParser().parse(tmp_path / "missing.txt")


def test_parse_async_completes(tmp_path):
    path = tmp_path / "log.txt"
    path.write_text("\n".join([make_line(message="a"), "noise", make_line(message="b")]) + "\n")
    parser = LogParser()
    entries, messages = [], []
    parser.parse_async(path, entries, threading.Lock(), messages.append)
    wait_until_done(parser)
    assert [e.message for e in entries] == ["a", "b"]
    assert messages[0] == "Starting parse... 0%"
    assert messages[-1] == "Complete: 2 entries from 3 lines"
    assert parser.in_progress() is False


def test_parse_async_missing_file(tmp_path):
    parser = LogParser()
    entries, messages = [], []
    parser.parse_async(tmp_path / "missing.txt", entries, threading.Lock(), messages.append)
    wait_until_done(parser)
    assert messages == ["Error: Could not open file"]
    assert entries == []


def test_parse_async_reports_batches(tmp_path):
    path = tmp_path / "big.txt"
    count = 12000
    path.write_text("\n".join(make_line(message=str(i)) for i in range(count)) + "\n")
    parser = LogParser()
    entries, messages = [], []
    parser.parse_async(path, entries, threading.Lock(), messages.append)
    wait_until_done(parser)
    assert len(entries) == count
    assert [e.message for e in entries] == [str(i) for i in range(count)]
    assert sum(m.startswith("Parsing... ") for m in messages) == 2
    assert messages[-1] == f"Complete: {count} entries from {count} lines"


def test_parse_async_results_match_sync_parse(tmp_path):
    path = tmp_path / "log.txt"
    path.write_text("\n".join(make_line(message=f"m{i}", level="DEBUG") for i in range(50)))
    parser = LogParser()
    entries = []
    parser.parse_async(path, entries, threading.Lock(), lambda _msg: None)
    wait_until_done(parser)
    assert entries == LogParser().parse(path)