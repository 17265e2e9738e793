" generic fixtures "
import logging

import pytest

from hyprkit.ipc_paths import SocketPaths

from .testtools import MockReader, MockWriter

SIGNATURE = "0123abcd_1700000000_1234"


def pytest_configure():
    "Runs once before all"
    from hyprkit.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def test_log():
    """Provide a silent logger for tests."""
    logger = logging.getLogger("test_hyprkit")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


@pytest.fixture
def hypr_env(monkeypatch, tmp_path):
    "Hyprland-like environment, runtime dir in a temporary folder"
    monkeypatch.setenv("HYPRLAND_INSTANCE_SIGNATURE", SIGNATURE)
    monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path))
    return tmp_path / "hypr" / SIGNATURE


@pytest.fixture
def socket_paths(tmp_path):
    return SocketPaths.from_folder(tmp_path / "hypr" / SIGNATURE)


@pytest.fixture
def mock_open_connection(mocker):
    "Every unix connection returns the same reader & writer"
    reader = MockReader()
    writer = MockWriter()
    mock_connect = mocker.patch("asyncio.open_unix_connection", return_value=(reader, writer))
    return mock_connect, reader, writer
