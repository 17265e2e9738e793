import logging

import pytest

from hyprkit import logging_setup
from hyprkit.logging_setup import LogObjects, get_logger, init_logger, is_debug, set_debug, should_colorize


@pytest.fixture
def restore_logging():
    handlers = list(LogObjects.handlers)
    debug = is_debug()
    yield
    LogObjects.handlers[:] = handlers
    set_debug(debug)


def test_should_colorize(monkeypatch):
    class Tty:
        def isatty(self):
            return True

    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    assert should_colorize(Tty()) is True
    assert should_colorize(object()) is False

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert should_colorize(object()) is True

    monkeypatch.setenv("NO_COLOR", "1")
    assert should_colorize(Tty()) is False


def test_init_logger_with_file(tmp_path, restore_logging):
    logfile = tmp_path / "hyprkit.log"
    init_logger(str(logfile), force_debug=True)

    assert is_debug()
    assert len(LogObjects.handlers) == 2
    logger = get_logger("test_file_logger")
    logger.debug("hello %s", "file")
    for handler in LogObjects.handlers:
        handler.flush()

    content = logfile.read_text()
    assert "[DEBUG] test_file_logger :: hello file" in content


def test_get_logger_level(restore_logging):
    set_debug(False)
    assert get_logger("test_quiet").level == logging.WARNING
    set_debug(True)
    assert get_logger("test_verbose").level == logging.DEBUG
    assert get_logger("test_forced", logging.ERROR).level == logging.ERROR


def test_handlers_are_not_duplicated(restore_logging):
    init_logger()
    first = get_logger("test_dup")
    count = len(first.handlers)
    assert get_logger("test_dup").handlers == first.handlers
    assert len(first.handlers) == count


def test_screen_formatter_colors():
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
    colored = logging_setup.ScreenLogFormatter(colors=True).format(record)
    plain = logging_setup.ScreenLogFormatter(colors=False).format(record)
    assert colored.startswith("\x1b[31;2m")
    assert "\x1b" not in plain
    assert "boom" in plain
