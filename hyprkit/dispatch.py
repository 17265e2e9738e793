"""Dispatchers and their encoding in the hyprctl command grammar.

`str()` of a dispatcher or workspace spec is its wire form::

    >>> str(ChangeWorkspace(MonitorRelativeId(-1)))
    'workspace m-1'
"""

import re
from dataclasses import dataclass

from .models import I32_MAX, I32_MIN, WorkspaceId

__all__ = [
    "ChangeWorkspace",
    "Dispatcher",
    "Empty",
    "Id",
    "MonitorAbsoluteId",
    "MonitorIncludingEmptyAbsoluteId",
    "MonitorIncludingEmptyRelativeId",
    "MonitorRelativeId",
    "Name",
    "OpenAbsoluteId",
    "OpenRelativeId",
    "Previous",
    "PreviousPerMonitor",
    "RelativeId",
    "Special",
    "WorkspaceSpec",
    "encode",
    "parse_workspace_spec",
]

U32_MAX = 2**32 - 1


def _check_range(value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        msg = f"{value} is out of range [{low}, {high}]"
        raise ValueError(msg)


@dataclass(frozen=True)
class _Signed:
    """Workspace offset, written with an explicit sign."""

    offset: int

    prefix = ""

    def __post_init__(self) -> None:
        _check_range(self.offset, I32_MIN, I32_MAX)

    def __str__(self) -> str:
        return f"{self.prefix}{self.offset:+d}"


@dataclass(frozen=True)
class _Unsigned:
    """Workspace position, counted from 1."""

    position: int

    prefix = ""

    def __post_init__(self) -> None:
        _check_range(self.position, 0, U32_MAX)

    def __str__(self) -> str:
        return f"{self.prefix}{self.position}"


@dataclass(frozen=True)
class Id:
    """Workspace with the given id."""

    id: WorkspaceId

    def __post_init__(self) -> None:
        _check_range(self.id, I32_MIN, I32_MAX)

    def __str__(self) -> str:
        return str(self.id)


@dataclass(frozen=True)
class RelativeId(_Signed):
    """Workspace `offset` ids away from the current one."""


@dataclass(frozen=True)
class MonitorRelativeId(_Signed):
    """Workspace `offset` positions away on the current monitor."""

    prefix = "m"


@dataclass(frozen=True)
class MonitorAbsoluteId(_Unsigned):
    """Nth workspace of the current monitor."""

    prefix = "m~"


@dataclass(frozen=True)
class MonitorIncludingEmptyRelativeId(_Signed):
    """Like `MonitorRelativeId`, counting empty workspaces too."""

    prefix = "r"


@dataclass(frozen=True)
class MonitorIncludingEmptyAbsoluteId(_Unsigned):
    """Like `MonitorAbsoluteId`, counting empty workspaces too."""

    prefix = "r~"


@dataclass(frozen=True)
class OpenRelativeId(_Signed):
    """Workspace `offset` positions away among open workspaces, all monitors included."""

    prefix = "e"


@dataclass(frozen=True)
class OpenAbsoluteId(_Unsigned):
    """Nth open workspace, all monitors included."""

    prefix = "e~"


@dataclass(frozen=True)
class Name:
    """Workspace by name."""

    name: str

    def __str__(self) -> str:
        return f"name:{self.name}"


@dataclass(frozen=True)
class Previous:
    """Previously focused workspace."""

    def __str__(self) -> str:
        return "previous"


@dataclass(frozen=True)
class PreviousPerMonitor:
    """Previously focused workspace on the current monitor."""

    def __str__(self) -> str:
        return "previous_per_monitor"


@dataclass(frozen=True)
class Empty:
    """First empty workspace.

    Args:
        next: pick the next empty workspace after the current one
        monitor: restrict to the current monitor
    """

    next: bool = False
    monitor: bool = False

    def __str__(self) -> str:
        return "empty" + ("m" if self.monitor else "") + ("n" if self.next else "")


@dataclass(frozen=True)
class Special:
    """Special workspace, the default one when `name` is None."""

    name: str | None = None

    def __str__(self) -> str:
        return "special" if self.name is None else f"special:{self.name}"


WorkspaceSpec = (
    Id
    | RelativeId
    | MonitorRelativeId
    | MonitorAbsoluteId
    | MonitorIncludingEmptyRelativeId
    | MonitorIncludingEmptyAbsoluteId
    | OpenRelativeId
    | OpenAbsoluteId
    | Name
    | Previous
    | PreviousPerMonitor
    | Empty
    | Special
)


@dataclass(frozen=True)
class ChangeWorkspace:
    """Switch to a workspace."""

    spec: WorkspaceSpec

    def __str__(self) -> str:
        return f"workspace {self.spec}"


Dispatcher = ChangeWorkspace


def encode(value: Dispatcher | WorkspaceSpec) -> str:
    """Return the command grammar encoding of a dispatcher or workspace spec."""
    return str(value)


_PREFIXED = {
    "m": (MonitorRelativeId, MonitorAbsoluteId),
    "r": (MonitorIncludingEmptyRelativeId, MonitorIncludingEmptyAbsoluteId),
    "e": (OpenRelativeId, OpenAbsoluteId),
}

_PREFIXED_RE = re.compile(r"(?P<prefix>[mre])(?:(?P<offset>[+-][0-9]+)|~(?P<position>[0-9]+))")
_EMPTY_RE = re.compile(r"empty(?P<monitor>m?)(?P<next>n?)")


def parse_workspace_spec(text: str) -> WorkspaceSpec:
    """Parse the textual form of a workspace spec, the reverse of `encode`.

    Signed numbers ("-1", "+2") are relative ids; Hyprland reads them the same way.

    Raises:
        ValueError: `text` matches no spec
    """
    if text == "previous":
        return Previous()
    if text == "previous_per_monitor":
        return PreviousPerMonitor()
    if text == "special":
        return Special()
    if text.startswith("special:"):
        return Special(text.removeprefix("special:"))
    if text.startswith("name:"):
        return Name(text.removeprefix("name:"))
    if match := _EMPTY_RE.fullmatch(text):
        return Empty(next=bool(match["next"]), monitor=bool(match["monitor"]))
    if match := _PREFIXED_RE.fullmatch(text):
        relative, absolute = _PREFIXED[match["prefix"]]
        if match["offset"] is not None:
            return relative(int(match["offset"]))
        return absolute(int(match["position"]))
    if re.fullmatch(r"[+-][0-9]+", text):
        return RelativeId(int(text))
    if re.fullmatch(r"[0-9]+", text):
        return Id(WorkspaceId(int(text)))
    msg = f"invalid workspace: {text!r}"
    raise ValueError(msg)
