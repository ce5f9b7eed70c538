"generic fixtures"
import logging
from unittest.mock import AsyncMock, Mock

import pytest


def pytest_configure():
    "Runs once before all"
    from wsmon.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def test_log():
    """Provide a silent logger for tests."""
    logger = logging.getLogger("test_wsmon")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


@pytest.fixture
def mock_open_connection(mocker):
    reader = AsyncMock()
    # StreamWriter methods write and close are synchronous, drain and wait_closed are async
    writer = Mock()
    writer.drain = AsyncMock()
    writer.wait_closed = AsyncMock()

    mock_connect = mocker.patch("asyncio.open_unix_connection", return_value=(reader, writer))
    return mock_connect, reader, writer


@pytest.fixture
def hyprland_env(monkeypatch, mocker):
    "Pretend to run inside a Hyprland session"
    monkeypatch.setenv("HYPRLAND_INSTANCE_SIGNATURE", "abc123_1700000000_42")
    mocker.patch("os.getuid", return_value=1000)
    return "/run/user/1000/hypr/abc123_1700000000_42/.socket.sock"
