"""Exceptions raised by hyprkit.

Every error derives from `HyprkitError`. Connection and I/O errors also derive
from the matching builtin so callers catching `OSError` keep working.
"""

from enum import StrEnum

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "DecodeErrorKind",
    "HyprkitError",
    "InvalidBoolean",
    "InvalidFormat",
    "InvalidInteger",
    "InvalidJson",
    "IpcIOError",
    "SocketConnectionError",
    "UnexpectedEof",
    "UnknownTag",
]


class HyprkitError(Exception):
    """Base class for hyprkit errors."""


class ConfigurationError(HyprkitError):
    """A required environment value is missing."""


class SocketConnectionError(HyprkitError, ConnectionError):
    """Opening a compositor socket failed."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        super().__init__(f"cannot connect to {path}" + (f": {reason}" if reason else ""))


class IpcIOError(HyprkitError, OSError):
    """Reading from or writing to an open socket failed."""


class DecodeErrorKind(StrEnum):
    """Sub-kinds of decode failures."""

    INVALID_FORMAT = "invalid_format"
    UNKNOWN_TAG = "unknown_tag"
    INVALID_INTEGER = "invalid_integer"
    INVALID_BOOLEAN = "invalid_boolean"
    UNEXPECTED_EOF = "unexpected_eof"
    INVALID_JSON = "invalid_json"


class DecodeError(HyprkitError, ValueError):
    """Compositor output could not be decoded."""

    kind: DecodeErrorKind


class InvalidFormat(DecodeError):
    """Event line without the `>>` separator."""

    kind = DecodeErrorKind.INVALID_FORMAT


class UnknownTag(DecodeError):
    """Event tag outside the known catalog."""

    kind = DecodeErrorKind.UNKNOWN_TAG

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"unknown event: {tag!r}")


class InvalidInteger(DecodeError):
    """Field is not a valid integer for its type."""

    kind = DecodeErrorKind.INVALID_INTEGER


class InvalidBoolean(DecodeError):
    """Field is neither `true` nor `false`."""

    kind = DecodeErrorKind.INVALID_BOOLEAN


class UnexpectedEof(DecodeError):
    """The event ran out of fields."""

    kind = DecodeErrorKind.UNEXPECTED_EOF


class InvalidJson(DecodeError):
    """A command response is not the expected JSON document."""

    kind = DecodeErrorKind.INVALID_JSON
