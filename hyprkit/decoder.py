"""Decode event socket lines into `Event` values."""

from collections.abc import Callable

from . import events as ev
from .errors import InvalidFormat, UnknownTag
from .tokenizer import FieldTokenizer

__all__ = [
    "KNOWN_TAGS",
    "LEGACY_TAGS",
    "SEPARATOR",
    "decode_event",
    "decode_line",
]

SEPARATOR = ">>"

# superseded by their "v2" counterpart, which carries the same information
LEGACY_TAGS = frozenset(
    {
        "workspace",
        "activewindow",
        "monitoradded",
        "createworkspace",
        "destroyworkspace",
        "moveworkspace",
        "movewindow",
        "windowtitle",
    }
)


def _screencast(data: FieldTokenizer) -> ev.Screencast:
    state = data.next_bool()
    owner = ev.ScreencastOwner.WINDOW if data.next_bool() else ev.ScreencastOwner.MONITOR
    return ev.Screencast(state=state, owner=owner)


# Fields are consumed in declaration order: keyword arguments are evaluated left to right
_DECODERS: dict[str, Callable[[FieldTokenizer], ev.Event]] = {
    ev.WorkspaceChanged.TAG: lambda data: ev.WorkspaceChanged(id=data.next_workspace_id(), name=data.next_string()),
    ev.FocusedMonitor.TAG: lambda data: ev.FocusedMonitor(name=data.next_string(), workspace=data.next_string()),
    ev.ActiveWindow.TAG: lambda data: ev.ActiveWindow(address=data.next_optional_window_address()),
    ev.Fullscreen.TAG: lambda data: ev.Fullscreen(enter=data.next_bool()),
    ev.MonitorRemoved.TAG: lambda data: ev.MonitorRemoved(name=data.next_string()),
    ev.MonitorAdded.TAG: lambda data: ev.MonitorAdded(
        id=data.next_workspace_id(),
        name=data.next_string(),
        description=data.next_string(),
    ),
    ev.CreateWorkspace.TAG: lambda data: ev.CreateWorkspace(id=data.next_workspace_id(), name=data.next_string()),
    ev.DestroyWorkspace.TAG: lambda data: ev.DestroyWorkspace(id=data.next_workspace_id(), name=data.next_string()),
    ev.MoveWorkspace.TAG: lambda data: ev.MoveWorkspace(
        id=data.next_workspace_id(),
        name=data.next_string(),
        monitor=data.next_string(),
    ),
    ev.RenameWorkspace.TAG: lambda data: ev.RenameWorkspace(id=data.next_workspace_id(), new_name=data.next_string()),
    ev.ActiveSpecial.TAG: lambda data: ev.ActiveSpecial(workspace=data.next_string(), monitor=data.next_string()),
    ev.ActiveLayout.TAG: lambda data: ev.ActiveLayout(keyboard=data.next_string(), layout=data.next_string()),
    ev.OpenWindow.TAG: lambda data: ev.OpenWindow(
        address=data.next_window_address(),
        workspace=data.next_string(),
        class_=data.next_string(),
        title=data.next_string(),
    ),
    ev.CloseWindow.TAG: lambda data: ev.CloseWindow(address=data.next_window_address()),
    ev.MoveWindow.TAG: lambda data: ev.MoveWindow(
        address=data.next_window_address(),
        workspace_id=data.next_workspace_id(),
        workspace=data.next_string(),
    ),
    ev.OpenLayer.TAG: lambda data: ev.OpenLayer(namespace=data.next_string()),
    ev.CloseLayer.TAG: lambda data: ev.CloseLayer(namespace=data.next_string()),
    ev.SubMap.TAG: lambda data: ev.SubMap(name=data.next_string()),
    ev.ChangeFloatingMode.TAG: lambda data: ev.ChangeFloatingMode(address=data.next_window_address(), floating=data.next_bool()),
    ev.Urgent.TAG: lambda data: ev.Urgent(address=data.next_window_address()),
    ev.Screencast.TAG: _screencast,
    ev.WindowTitle.TAG: lambda data: ev.WindowTitle(address=data.next_window_address(), title=data.next_string()),
    ev.ToggleGroup.TAG: lambda data: ev.ToggleGroup(created=data.next_bool(), handles=tuple(data.collect_remaining_addresses())),
    ev.MoveIntoGroup.TAG: lambda data: ev.MoveIntoGroup(address=data.next_window_address()),
    ev.MoveOutOfGroup.TAG: lambda data: ev.MoveOutOfGroup(address=data.next_window_address()),
    ev.IgnoreGroupLock.TAG: lambda data: ev.IgnoreGroupLock(state=data.next_bool()),
    ev.LockGroups.TAG: lambda data: ev.LockGroups(state=data.next_bool()),
    ev.ConfigReloaded.TAG: lambda _: ev.ConfigReloaded(),
    ev.Pin.TAG: lambda data: ev.Pin(address=data.next_window_address(), pinned=data.next_bool()),
}

KNOWN_TAGS = frozenset(_DECODERS) | LEGACY_TAGS


def decode_event(tag: str, data: FieldTokenizer) -> ev.Event | None:
    """Build the event for `tag` from the payload fields.

    Returns:
        The event, or None for legacy tags which must be ignored

    Raises:
        UnknownTag: `tag` is not part of the catalog
        DecodeError: a field is missing or malformed
    """
    if tag in LEGACY_TAGS:
        return None
    try:
        decoder = _DECODERS[tag]
    except KeyError:
        raise UnknownTag(tag) from None
    return decoder(data)


def decode_line(line: str) -> ev.Event | None:
    """Decode one raw `TAG>>field,field` line (a trailing newline is ignored).

    Raises:
        InvalidFormat: the line has no `>>` separator
        DecodeError: see `decode_event`
    """
    line = line.removesuffix("\n")
    tag, sep, payload = line.partition(SEPARATOR)
    if not sep:
        msg = f"invalid event format: {line!r}"
        raise InvalidFormat(msg)
    return decode_event(tag, FieldTokenizer(payload))
