"""Tests for the logging setup."""

import logging
import re

import pytest

from wsmon import logging_setup
from wsmon.constants import VERBOSE_LOG_FORMAT, VERBOSE_TIME_FORMAT
from wsmon.logging_setup import LogObjects, ScreenLogFormatter, get_logger, init_logger, is_debug, is_verbose


def make_record(level, msg="hello"):
    record = logging.LogRecord("wsmon", level, __file__, 1, msg, None, None)
    record.created = 1700000000.123456
    return record


@pytest.fixture
def log_state(monkeypatch):
    "Restore the log settings after the test"
    monkeypatch.setattr(logging_setup._LogState, "debug", False)
    monkeypatch.setattr(logging_setup._LogState, "verbose", False)
    yield logging_setup._LogState
    init_logger("/dev/null", force_debug=True)


def test_plain_format_without_colors(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    formatter = ScreenLogFormatter(r"%(message)s")
    assert formatter.format(make_record(logging.ERROR)) == "hello"


def test_colors_when_forced(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("FORCE_COLOR", "1")
    formatter = ScreenLogFormatter(r"%(message)s")

    assert formatter.format(make_record(logging.INFO)) == "hello"
    assert formatter.format(make_record(logging.ERROR)) == "\x1b[31mhello\x1b[0m"
    assert formatter.format(make_record(logging.CRITICAL)) == "\x1b[31;1mhello\x1b[0m"


def test_verbose_format_has_microseconds(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    formatter = ScreenLogFormatter(VERBOSE_LOG_FORMAT, VERBOSE_TIME_FORMAT)
    assert re.fullmatch(r"\d\d:\d\d:\d\d\.\d{6} hello", formatter.format(make_record(logging.INFO)))


def test_default_level_is_warning(log_state):
    init_logger()
    assert get_logger("test_default").level == logging.WARNING


def test_verbose_level_is_info(log_state):
    init_logger(verbose=True)
    assert is_verbose()
    assert not is_debug()
    assert get_logger("test_verbose").level == logging.INFO


def test_debug_level(log_state):
    init_logger(force_debug=True)
    assert is_debug()
    assert get_logger("test_debug").level == logging.DEBUG


def test_file_handler(log_state, tmp_path):
    logfile = tmp_path / "wsmon.log"
    init_logger(str(logfile), force_debug=True)

    assert len(LogObjects.handlers) == 2
    log = get_logger("test_file")
    log.error("something broke")
    for handler in log.handlers:
        handler.flush()

    assert "[ERROR] test_file :: something broke" in logfile.read_text()


def test_handlers_are_not_duplicated(log_state):
    init_logger()
    init_logger()
    assert len(LogObjects.handlers) == 1
    assert len(get_logger("test_dup").handlers) == 1
