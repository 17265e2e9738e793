"""Events pushed by Hyprland on the event socket.

Each event is a frozen dataclass; `Event` is the union of all of them.
`TAG` is the wire name the event is decoded from.
See https://wiki.hyprland.org/IPC/ for the upstream documentation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .models import WindowAddress, WorkspaceId

__all__ = [
    "EVENT_TYPES",
    "ActiveLayout",
    "ActiveSpecial",
    "ActiveWindow",
    "ChangeFloatingMode",
    "CloseLayer",
    "CloseWindow",
    "ConfigReloaded",
    "CreateWorkspace",
    "DestroyWorkspace",
    "Event",
    "FocusedMonitor",
    "Fullscreen",
    "IgnoreGroupLock",
    "LockGroups",
    "MonitorAdded",
    "MonitorRemoved",
    "MoveIntoGroup",
    "MoveOutOfGroup",
    "MoveWindow",
    "MoveWorkspace",
    "OpenLayer",
    "OpenWindow",
    "Pin",
    "RenameWorkspace",
    "Screencast",
    "ScreencastOwner",
    "SubMap",
    "ToggleGroup",
    "Urgent",
    "WindowTitle",
    "WorkspaceChanged",
]


class ScreencastOwner(Enum):
    """What a screencast is capturing."""

    MONITOR = "monitor"
    WINDOW = "window"


@dataclass(frozen=True)
class WorkspaceChanged:
    """The user requested a workspace change.

    Not emitted when the focus moves with the mouse (see `FocusedMonitor`).
    """

    TAG: ClassVar[str] = "workspacev2"
    id: WorkspaceId
    name: str


@dataclass(frozen=True)
class FocusedMonitor:
    """The active monitor changed."""

    TAG: ClassVar[str] = "focusedmon"
    name: str
    workspace: str


@dataclass(frozen=True)
class ActiveWindow:
    """The active window changed, `address` is None when no window is focused."""

    TAG: ClassVar[str] = "activewindowv2"
    address: WindowAddress | None


@dataclass(frozen=True)
class Fullscreen:
    """The fullscreen state of a window changed."""

    TAG: ClassVar[str] = "fullscreen"
    enter: bool


@dataclass(frozen=True)
class MonitorRemoved:
    """A monitor was disconnected."""

    TAG: ClassVar[str] = "monitorremoved"
    name: str


@dataclass(frozen=True)
class MonitorAdded:
    """A monitor was connected."""

    TAG: ClassVar[str] = "monitoraddedv2"
    id: WorkspaceId
    name: str
    description: str


@dataclass(frozen=True)
class CreateWorkspace:
    """A workspace was created."""

    TAG: ClassVar[str] = "createworkspacev2"
    id: WorkspaceId
    name: str


@dataclass(frozen=True)
class DestroyWorkspace:
    """A workspace was destroyed."""

    TAG: ClassVar[str] = "destroyworkspacev2"
    id: WorkspaceId
    name: str


@dataclass(frozen=True)
class MoveWorkspace:
    """A workspace moved to another monitor."""

    TAG: ClassVar[str] = "moveworkspacev2"
    id: WorkspaceId
    name: str
    monitor: str


@dataclass(frozen=True)
class RenameWorkspace:
    """A workspace was renamed."""

    TAG: ClassVar[str] = "renameworkspace"
    id: WorkspaceId
    new_name: str


@dataclass(frozen=True)
class ActiveSpecial:
    """The special workspace shown on a monitor changed.

    Closing it gives an empty `workspace`.
    """

    TAG: ClassVar[str] = "activespecial"
    workspace: str
    monitor: str


@dataclass(frozen=True)
class ActiveLayout:
    """The layout of a keyboard changed."""

    TAG: ClassVar[str] = "activelayout"
    keyboard: str
    layout: str


@dataclass(frozen=True)
class OpenWindow:
    """A window was opened."""

    TAG: ClassVar[str] = "openwindow"
    address: WindowAddress
    workspace: str
    class_: str
    title: str


@dataclass(frozen=True)
class CloseWindow:
    """A window was closed."""

    TAG: ClassVar[str] = "closewindow"
    address: WindowAddress


@dataclass(frozen=True)
class MoveWindow:
    """A window moved to another workspace."""

    TAG: ClassVar[str] = "movewindowv2"
    address: WindowAddress
    workspace_id: WorkspaceId
    workspace: str


@dataclass(frozen=True)
class OpenLayer:
    """A layer surface was mapped."""

    TAG: ClassVar[str] = "openlayer"
    namespace: str


@dataclass(frozen=True)
class CloseLayer:
    """A layer surface was unmapped."""

    TAG: ClassVar[str] = "closelayer"
    namespace: str


@dataclass(frozen=True)
class SubMap:
    """The keybind submap changed, an empty name is the default submap."""

    TAG: ClassVar[str] = "submap"
    name: str


@dataclass(frozen=True)
class ChangeFloatingMode:
    """A window became floating or tiled."""

    TAG: ClassVar[str] = "changefloatingmode"
    address: WindowAddress
    floating: bool


@dataclass(frozen=True)
class Urgent:
    """A window requested the urgent state."""

    TAG: ClassVar[str] = "urgent"
    address: WindowAddress


@dataclass(frozen=True)
class Screencast:
    """A screencopy started or stopped.

    Several screencasts may run at the same time.
    """

    TAG: ClassVar[str] = "screencast"
    state: bool
    owner: ScreencastOwner


@dataclass(frozen=True)
class WindowTitle:
    """A window title changed."""

    TAG: ClassVar[str] = "windowtitlev2"
    address: WindowAddress
    title: str


@dataclass(frozen=True)
class ToggleGroup:
    """A group was created (`created` is True) or destroyed."""

    TAG: ClassVar[str] = "togglegroup"
    created: bool
    handles: tuple[WindowAddress, ...]


@dataclass(frozen=True)
class MoveIntoGroup:
    """A window was merged into a group."""

    TAG: ClassVar[str] = "moveintogroup"
    address: WindowAddress


@dataclass(frozen=True)
class MoveOutOfGroup:
    """A window was removed from a group."""

    TAG: ClassVar[str] = "moveoutofgroup"
    address: WindowAddress


@dataclass(frozen=True)
class IgnoreGroupLock:
    """`ignoregrouplock` was toggled."""

    TAG: ClassVar[str] = "ignoregrouplock"
    state: bool


@dataclass(frozen=True)
class LockGroups:
    """`lockgroups` was toggled."""

    TAG: ClassVar[str] = "lockgroups"
    state: bool


@dataclass(frozen=True)
class ConfigReloaded:
    """The configuration finished reloading."""

    TAG: ClassVar[str] = "configreloaded"


@dataclass(frozen=True)
class Pin:
    """A window was pinned or unpinned."""

    TAG: ClassVar[str] = "pin"
    address: WindowAddress
    pinned: bool


Event = (
    WorkspaceChanged
    | FocusedMonitor
    | ActiveWindow
    | Fullscreen
    | MonitorRemoved
    | MonitorAdded
    | CreateWorkspace
    | DestroyWorkspace
    | MoveWorkspace
    | RenameWorkspace
    | ActiveSpecial
    | ActiveLayout
    | OpenWindow
    | CloseWindow
    | MoveWindow
    | OpenLayer
    | CloseLayer
    | SubMap
    | ChangeFloatingMode
    | Urgent
    | Screencast
    | WindowTitle
    | ToggleGroup
    | MoveIntoGroup
    | MoveOutOfGroup
    | IgnoreGroupLock
    | LockGroups
    | ConfigReloaded
    | Pin
)

EVENT_TYPES: tuple[type[Event], ...] = Event.__args__  # type: ignore[attr-defined]
