"""Hyprland socket path resolution."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError

__all__ = [
    "COMMAND_SOCKET",
    "EVENT_SOCKET",
    "HYPRLAND_INSTANCE_SIGNATURE_VAR",
    "SocketPaths",
    "resolve_socket_paths",
]

HYPRLAND_INSTANCE_SIGNATURE_VAR = "HYPRLAND_INSTANCE_SIGNATURE"

COMMAND_SOCKET = ".socket.sock"
EVENT_SOCKET = ".socket2.sock"

DEFAULT_RUNTIME_ROOT = "/run/user"


@dataclass(frozen=True)
class SocketPaths:
    """Locations of the two Hyprland sockets."""

    command: Path
    events: Path

    @classmethod
    def from_folder(cls, folder: str | Path) -> "SocketPaths":
        """Build the paths for an instance folder."""
        folder = Path(folder)
        return cls(command=folder / COMMAND_SOCKET, events=folder / EVENT_SOCKET)


def resolve_socket_paths(environ: Mapping[str, str] | None = None, uid: int | None = None) -> SocketPaths:
    """Return the socket paths of the running Hyprland instance.

    The instance folder is `$XDG_RUNTIME_DIR/hypr/<signature>`, where the runtime
    directory defaults to `/run/user/<uid>`.

    Args:
        environ: environment to read (defaults to `os.environ`)
        uid: user id (defaults to the current user)

    Raises:
        ConfigurationError: HYPRLAND_INSTANCE_SIGNATURE is not set
    """
    if environ is None:
        environ = os.environ
    signature = environ.get(HYPRLAND_INSTANCE_SIGNATURE_VAR)
    if not signature:
        msg = f"{HYPRLAND_INSTANCE_SIGNATURE_VAR} not set, is Hyprland running?"
        raise ConfigurationError(msg)

    runtime_dir = environ.get("XDG_RUNTIME_DIR")
    if runtime_dir:
        root = Path(runtime_dir)
    else:
        root = Path(DEFAULT_RUNTIME_ROOT) / str(os.getuid() if uid is None else uid)
    return SocketPaths.from_folder(root / "hypr" / signature)
