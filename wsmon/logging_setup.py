"""Logging setup and utilities."""

import logging
import os
from datetime import datetime

from .ansi import LogStyles, make_style, should_colorize
from .constants import VERBOSE_LOG_FORMAT, VERBOSE_TIME_FORMAT

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
    "is_debug",
    "is_verbose",
]


class _LogState:
    """Container for the mutable log settings."""

    debug: bool = bool(os.environ.get("DEBUG"))
    verbose: bool = False


def is_debug() -> bool:
    """Return the current debug state."""
    return _LogState.debug


def is_verbose() -> bool:
    """Return the current verbose state."""
    return _LogState.verbose


class LogObjects:
    """Reusable objects for loggers."""

    handlers: list[logging.Handler] = []


class ScreenLogFormatter(logging.Formatter):
    """A formatter adding colors based on log level.

    Respects NO_COLOR, FORCE_COLOR and TTY detection.
    """

    def __init__(self, fmt: str, datefmt: str | None = None) -> None:
        super().__init__()
        if should_colorize():
            warn_pre, warn_suf = make_style(*LogStyles.WARNING)
            err_pre, err_suf = make_style(*LogStyles.ERROR)
            crit_pre, crit_suf = make_style(*LogStyles.CRITICAL)
        else:
            warn_pre = warn_suf = err_pre = err_suf = crit_pre = crit_suf = ""

        self._formatters = {
            logging.DEBUG: _TimeFormatter(fmt, datefmt),
            logging.INFO: _TimeFormatter(fmt, datefmt),
            logging.WARNING: _TimeFormatter(warn_pre + fmt + warn_suf, datefmt),
            logging.ERROR: _TimeFormatter(err_pre + fmt + err_suf, datefmt),
            logging.CRITICAL: _TimeFormatter(crit_pre + fmt + crit_suf, datefmt),
        }

    def format(self, record: logging.LogRecord) -> str:
        return self._formatters[record.levelno].format(record)


class _TimeFormatter(logging.Formatter):
    """Formatter accepting `%f` (microseconds) in the date format."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        if datefmt:
            return datetime.fromtimestamp(record.created).strftime(datefmt)
        return super().formatTime(record)


def _screen_format() -> tuple[str, str | None]:
    if is_debug():
        return r"%(name)s - %(message)s // %(filename)s:%(lineno)d", None
    if is_verbose():
        return VERBOSE_LOG_FORMAT, VERBOSE_TIME_FORMAT
    return r"%(message)s", None


def init_logger(filename: str | None = None, verbose: bool = False, force_debug: bool = False) -> None:
    """Initialize the logging system.

    Args:
        filename: Optional filename to log to
        verbose: If True, log progress messages with a timestamp
        force_debug: If True, force debug level
    """
    if force_debug:
        _LogState.debug = True
    _LogState.verbose = verbose

    for handler in LogObjects.handlers:
        handler.close()
    LogObjects.handlers.clear()

    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ScreenLogFormatter(*_screen_format()))
    LogObjects.handlers.append(stream_handler)


def get_logger(name: str = "wsmon", level: int | None = None) -> logging.Logger:
    """Return a named logger.

    Args:
        name: logger's name
        level: logger's level (auto if not set)
    """
    logger = logging.getLogger(name)
    if level is None:
        if is_debug():
            level = logging.DEBUG
        elif is_verbose():
            level = logging.INFO
        else:
            level = logging.WARNING
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()
    for handler in LogObjects.handlers:
        logger.addHandler(handler)
    logger.debug('Logger "%s" initialized', name)
    return logger
