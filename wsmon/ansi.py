"""ANSI styles for terminal logging."""

import os
import sys
from typing import TextIO

__all__ = [
    "LogStyles",
    "make_style",
    "should_colorize",
]

_ESC = "\x1b["

RESET = f"{_ESC}0m"

BOLD = "1"
DIM = "2"

RED = "31"
YELLOW = "33"


def should_colorize(stream: TextIO | None = None) -> bool:
    """Tell if `stream` (stderr by default) should receive colors.

    NO_COLOR always wins, then FORCE_COLOR, then TTY detection.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


def make_style(*codes: str) -> tuple[str, str]:
    """Return the (prefix, suffix) pair wrapping text in `codes`."""
    if not codes:
        return ("", RESET)
    return (f"{_ESC}{';'.join(codes)}m", RESET)


class LogStyles:
    """Styles per log level."""

    WARNING = (YELLOW,)
    ERROR = (RED,)
    CRITICAL = (RED, BOLD)
