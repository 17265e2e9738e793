"""Request/response commands over the Hyprland command socket (`.socket.sock`).

Hyprland answers one command per connection and closes it, so every call
opens its own connection. Nothing is cached and nothing is retried.
"""

__all__ = [
    "CommandClient",
    "hyprctl_connection",
]

import asyncio
import json
from collections.abc import AsyncIterator, Callable, Mapping
from contextlib import asynccontextmanager
from logging import Logger
from pathlib import Path
from typing import Any, TypeVar

from .dispatch import ChangeWorkspace, Dispatcher, Id, WorkspaceSpec
from .errors import InvalidJson, IpcIOError, SocketConnectionError
from .ipc_paths import SocketPaths, resolve_socket_paths
from .logging_setup import get_logger
from .models import Client, Workspace, WorkspaceId

T = TypeVar("T")


@asynccontextmanager
async def hyprctl_connection(path: str | Path, logger: Logger) -> AsyncIterator[tuple[asyncio.StreamReader, asyncio.StreamWriter]]:
    """Open a connection to a Hyprland socket, closing it on exit.

    Raises:
        SocketConnectionError: the socket cannot be opened
    """
    try:
        reader, writer = await asyncio.open_unix_connection(str(path))
    except OSError as e:
        logger.critical("hyprctl socket not found! is it running ?")
        raise SocketConnectionError(str(path), str(e)) from e

    try:
        yield reader, writer
    finally:
        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            logger.debug("error while closing %s", path, exc_info=True)


class CommandClient:
    """Run commands on the Hyprland command socket.

    Args:
        paths: socket locations, resolved from `environ` at call time when omitted
        environ: environment used to resolve the paths (defaults to `os.environ`)
        logger: logger to use (defaults to the "ipc" logger)
    """

    def __init__(self, paths: SocketPaths | None = None, *, environ: Mapping[str, str] | None = None, logger: Logger | None = None) -> None:
        self._paths = paths
        self._environ = environ
        self.log = logger or get_logger("ipc")

    @property
    def socket_path(self) -> Path:
        """Path of the command socket.

        Raises:
            ConfigurationError: HYPRLAND_INSTANCE_SIGNATURE is not set
        """
        paths = self._paths or resolve_socket_paths(self._environ)
        return paths.command

    async def exec(self, command: str) -> bytes:
        """Send `command` verbatim and return the whole response.

        Raises:
            ConfigurationError: socket path cannot be resolved
            SocketConnectionError: connection failed
            IpcIOError: read or write failed
        """
        path = self.socket_path
        self.log.debug(command)
        async with hyprctl_connection(path, self.log) as (reader, writer):
            try:
                writer.write(command.encode())
                await writer.drain()
                return await reader.read()
            except OSError as e:
                self.log.error("%s failed: %s", command, e)
                msg = f"{command}: {e}"
                raise IpcIOError(msg) from e

    async def json_list(self, command: str, factory: Callable[[dict[str, Any]], T]) -> list[T]:
        """Run a JSON command and build one record per element of the returned array.

        Raises:
            InvalidJson: not a JSON array, or an element does not fit `factory`
        """
        response = await self.exec(command)
        try:
            data = json.loads(response)
        except (ValueError, RecursionError) as e:
            msg = f"{command}: invalid JSON response: {e}"
            raise InvalidJson(msg) from e
        if not isinstance(data, list):
            msg = f"{command}: expected a JSON array, got {type(data).__name__}"
            raise InvalidJson(msg)
        try:
            return [factory(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            msg = f"{command}: unexpected record: {e!r}"
            raise InvalidJson(msg) from e

    async def workspaces(self) -> list[Workspace]:
        """Return all workspaces."""
        return await self.json_list("j/workspaces", Workspace.from_json)

    async def clients(self) -> list[Client]:
        """Return all clients (windows)."""
        return await self.json_list("j/clients", Client.from_json)

    async def dispatch(self, dispatcher: Dispatcher | WorkspaceSpec | WorkspaceId) -> None:
        """Run a dispatcher, the response is ignored.

        A workspace spec or id is a shortcut for `ChangeWorkspace`.
        """
        if isinstance(dispatcher, int):
            dispatcher = Id(WorkspaceId(dispatcher))
        if not isinstance(dispatcher, ChangeWorkspace):
            dispatcher = ChangeWorkspace(dispatcher)
        await self.exec(f"j/dispatch {dispatcher}")
