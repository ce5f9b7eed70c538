"""Tests for the ansi module."""

import os
from io import StringIO
from unittest.mock import patch

from wsmon.ansi import RESET, LogStyles, make_style, should_colorize


def test_make_style():
    prefix, suffix = make_style(*LogStyles.CRITICAL)
    assert prefix == "\x1b[31;1m"
    assert suffix == RESET


def test_make_style_no_codes():
    assert make_style() == ("", RESET)


def test_should_colorize_respects_no_color():
    with patch.dict(os.environ, {"NO_COLOR": "1", "FORCE_COLOR": "1"}, clear=False):
        assert should_colorize() is False


def test_should_colorize_respects_force_color():
    env = {k: v for k, v in os.environ.items() if k != "NO_COLOR"}
    env["FORCE_COLOR"] = "1"
    with patch.dict(os.environ, env, clear=True):
        assert should_colorize(StringIO()) is True


def test_should_colorize_no_tty():
    env = {k: v for k, v in os.environ.items() if k not in ("NO_COLOR", "FORCE_COLOR")}
    with patch.dict(os.environ, env, clear=True):
        assert should_colorize(StringIO()) is False
