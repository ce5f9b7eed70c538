"""Workspace range parsing."""

import re

from .models import FormatError, WorkspaceRange

__all__ = ["parse_range"]

_NUMBER_RE = re.compile(r"\+?[0-9]+")


def _parse_bound(text: str, which: str) -> int:
    if not _NUMBER_RE.fullmatch(text):
        msg = f"Invalid {which} range: {text!r} is not an integer"
        raise FormatError(msg)
    return int(text)


def parse_range(text: str) -> WorkspaceRange:
    """Parse a `start-end` string.

    Args:
        text: the range, eg. "1-5"

    Returns:
        The parsed range. `start` may be greater than `end`, such a range is empty.

    Raises:
        FormatError: the text is not two integers separated by a single hyphen
    """
    parts = text.split("-")
    if len(parts) != 2:  # noqa: PLR2004
        msg = "Range must be in format 'n-m'"
        raise FormatError(msg)
    return WorkspaceRange(_parse_bound(parts[0], "start"), _parse_bound(parts[1], "end"))
