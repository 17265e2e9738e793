"""Types from the Hyprland API.

Provides:
- WorkspaceId / WindowAddress: integer identities used across both sockets
- Workspace, Client, ClientWorkspace: records decoded from `j/workspaces` and `j/clients`
- ExitCode: exit codes of the command line tool
"""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, NewType, Self

__all__ = [
    "Client",
    "ClientWorkspace",
    "ExitCode",
    "WindowAddress",
    "Workspace",
    "WorkspaceId",
    "parse_int",
    "parse_json_address",
]

WorkspaceId = NewType("WorkspaceId", int)
"""Signed 32 bit workspace id."""

WindowAddress = NewType("WindowAddress", int)
"""Unsigned 64 bit window handle."""

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

_DIGITS = {
    10: "0-9",
    16: "0-9a-fA-F",
}


def parse_int(text: str, base: int, *, signed: bool, bits: int) -> int:
    """Parse `text` as an integer of the given width.

    Only an optional sign followed by digits of `base` is accepted: no
    whitespace, no underscores and no `0x` prefix.

    Raises:
        ValueError: invalid digits or value out of range
    """
    sign = "[+-]?" if signed else r"\+?"
    if not re.fullmatch(f"{sign}[{_DIGITS[base]}]+", text):
        msg = f"invalid base {base} integer: {text!r}"
        raise ValueError(msg)
    value = int(text, base)
    low, high = (-(2 ** (bits - 1)), 2 ** (bits - 1) - 1) if signed else (0, 2**bits - 1)
    if not low <= value <= high:
        msg = f"integer out of range: {text!r}"
        raise ValueError(msg)
    return value


def parse_json_address(text: str) -> WindowAddress:
    """Parse a window address as found in JSON responses ("0x55d2a1" or "55d2a1")."""
    while text.startswith("0x"):
        text = text[2:]
    return WindowAddress(parse_int(text, 16, signed=False, bits=64))


def _field(data: dict[str, Any], key: str, kind: type) -> Any:  # noqa: ANN401
    value = data[key]
    # bool is an int subclass, JSON booleans are not valid integers
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        msg = f"{key}: expected {kind.__name__}, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _i32(data: dict[str, Any], key: str) -> int:
    value: int = _field(data, key, int)
    if not I32_MIN <= value <= I32_MAX:
        msg = f"{key}: {value} does not fit in 32 bits"
        raise ValueError(msg)
    return value


@dataclass(frozen=True)
class Workspace:
    """A workspace as returned by `j/workspaces`."""

    id: WorkspaceId
    name: str
    monitor: str
    monitor_id: int
    window_count: int
    has_fullscreen: bool
    last_window: WindowAddress
    last_window_title: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Self:
        """Build from a decoded JSON object.

        Raises:
            KeyError: missing field
            TypeError: field of the wrong JSON type
            ValueError: integer out of range or invalid address
        """
        return cls(
            id=WorkspaceId(_i32(data, "id")),
            name=_field(data, "name", str),
            monitor=_field(data, "monitor", str),
            monitor_id=_i32(data, "monitorID"),
            window_count=_i32(data, "windows"),
            has_fullscreen=_field(data, "hasfullscreen", bool),
            last_window=parse_json_address(_field(data, "lastwindow", str)),
            last_window_title=_field(data, "lastwindowtitle", str),
        )


@dataclass(frozen=True)
class ClientWorkspace:
    """Workspace reference embedded in a client record."""

    id: WorkspaceId
    name: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Self:
        """Build from a decoded JSON object."""
        return cls(id=WorkspaceId(_i32(data, "id")), name=_field(data, "name", str))


@dataclass(frozen=True)
class Client:
    """A window as returned by `j/clients`."""

    address: WindowAddress
    title: str
    monitor: int
    workspace: ClientWorkspace

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Self:
        """Build from a decoded JSON object (same errors as `Workspace.from_json`)."""
        return cls(
            address=parse_json_address(_field(data, "address", str)),
            title=_field(data, "title", str),
            monitor=_i32(data, "monitor"),
            workspace=ClientWorkspace.from_json(_field(data, "workspace", dict)),
        )


class ExitCode(IntEnum):
    """Exit codes of the hyprkit command."""

    SUCCESS = 0
    USAGE_ERROR = 1  # unknown command, invalid arguments
    ENV_ERROR = 2  # missing environment variables
    CONNECTION_ERROR = 3  # cannot connect to Hyprland
    COMMAND_ERROR = 4  # command failed or returned garbage
