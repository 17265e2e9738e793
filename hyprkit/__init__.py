"""hyprkit - asyncio client for the Hyprland IPC sockets.

- `CommandClient` runs commands on the command socket (workspaces, clients, dispatch)
- `EventStream` decodes the event socket into typed `Event` values
- `hyprkit.dispatch` encodes dispatchers such as workspace changes
"""

from .commands import CommandClient
from .dispatch import ChangeWorkspace, Dispatcher, WorkspaceSpec, encode, parse_workspace_spec
from .errors import (
    ConfigurationError,
    DecodeError,
    DecodeErrorKind,
    HyprkitError,
    IpcIOError,
    SocketConnectionError,
)
from .events import Event
from .ipc_paths import SocketPaths, resolve_socket_paths
from .models import Client, ClientWorkspace, WindowAddress, Workspace, WorkspaceId
from .stream import EventStream

__all__ = [
    "ChangeWorkspace",
    "Client",
    "ClientWorkspace",
    "CommandClient",
    "ConfigurationError",
    "DecodeError",
    "DecodeErrorKind",
    "Dispatcher",
    "Event",
    "EventStream",
    "HyprkitError",
    "IpcIOError",
    "SocketConnectionError",
    "SocketPaths",
    "WindowAddress",
    "Workspace",
    "WorkspaceId",
    "WorkspaceSpec",
    "encode",
    "parse_workspace_spec",
    "resolve_socket_paths",
]
