"""Logging setup: shared handlers, debug switch and colored console output."""

import logging
import os
import sys
from typing import TextIO

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
    "is_debug",
    "set_debug",
    "should_colorize",
]

_RESET = "\x1b[0m"

# level -> SGR codes
_LEVEL_STYLES = {
    logging.WARNING: "33;2",
    logging.ERROR: "31;2",
    logging.CRITICAL: "31;1",
}


class _DebugState:
    """Holds the debug flag, initialized from the DEBUG environment variable."""

    value: bool = bool(os.environ.get("DEBUG"))


def is_debug() -> bool:
    """Return True when debug logging is enabled."""
    return _DebugState.value


def set_debug(value: bool) -> None:
    """Enable or disable debug logging for loggers created afterwards."""
    _DebugState.value = value


def should_colorize(stream: TextIO | None = None) -> bool:
    """Tell whether ANSI colors may be written to `stream` (stderr by default).

    NO_COLOR wins over FORCE_COLOR, which wins over TTY detection.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    stream = stream or sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


class LogObjects:
    """Reusable objects for loggers."""

    handlers: list[logging.Handler] = []


class ScreenLogFormatter(logging.Formatter):
    """Console formatter, coloring warnings and errors when allowed."""

    def __init__(self, colors: bool) -> None:
        super().__init__()
        fmt = r"%(name)15s - %(message)s // %(filename)s:%(lineno)d" if is_debug() else r"%(message)s"
        self._default = logging.Formatter(fmt)
        self._styled = {level: logging.Formatter(f"\x1b[{codes}m{fmt}{_RESET}" if colors else fmt) for level, codes in _LEVEL_STYLES.items()}

    def format(self, record: logging.LogRecord) -> str:
        return self._styled.get(record.levelno, self._default).format(record)


def init_logger(filename: str | None = None, force_debug: bool = False) -> None:
    """Initialize the logging system.

    Args:
        filename: Optional file receiving a timestamped copy of every record
        force_debug: If True, force debug level
    """
    if force_debug:
        set_debug(True)

    LogObjects.handlers.clear()
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ScreenLogFormatter(should_colorize()))
    LogObjects.handlers.append(stream_handler)


def get_logger(name: str = "hyprkit", level: int | None = None) -> logging.Logger:
    """Return a named logger.

    Args:
        name (str): logger's name
        level (int): logger's level (auto if not set)

    Returns:
        The logger instance
    """
    logger = logging.getLogger(name)
    if level is None:
        logger.setLevel(logging.DEBUG if is_debug() else logging.WARNING)
    else:
        logger.setLevel(level)
    if LogObjects.handlers:
        logger.propagate = False
        for handler in LogObjects.handlers:
            if handler not in logger.handlers:
                logger.addHandler(handler)
    logger.debug('Logger "%s" initialized', name)
    return logger
