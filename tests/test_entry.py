import pytest

from logsieve.entry import LogEntry, LogLevel, level_color, level_label, parse_level


@pytest.mark.parametrize("level", list(LogLevel))
def test_parse_level_round_trips_names(level):
    assert parse_level(level.value) is level


@pytest.mark.parametrize("text", [" INFO", "INFO\t", "\t INFO \t"])
def test_parse_level_trims_blanks(text):
    assert parse_level(text) is LogLevel.INFO


@pytest.mark.parametrize("text", ["", "info", "TRACE", "WARNING"])
def test_parse_level_falls_back_to_debug(text):
    assert parse_level(text) is LogLevel.DEBUG


@pytest.mark.parametrize("level", list(LogLevel))
def test_labels_are_six_wide_and_end_with_name(level):
    label = level_label(level)
    assert len(label) == 6
    assert label.strip() == level.value


def test_known_labels():
    assert level_label(LogLevel.DEBUG) == " DEBUG"
    assert level_label(LogLevel.INFO) == "  INFO"
    assert level_label(LogLevel.HEADER) == "HEADER"


def test_footer_and_header_share_colour():
    assert level_color(LogLevel.FOOTER) == level_color(LogLevel.HEADER)


def test_log_levels_have_distinct_colours():
    colours = {level_color(level) for level in (LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR)}
    assert len(colours) == 4


def test_source_info_joins_file_and_line():
    entry = LogEntry("12:00:00", LogLevel.INFO, "hello", "main.cpp", "run", 42)
    assert entry.source_info() == "main.cpp:42"