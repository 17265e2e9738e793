"""hyprkit command line tool.

Usage::

    hyprkit [--debug FILE] workspaces
    hyprkit [--debug FILE] clients
    hyprkit [--debug FILE] events
    hyprkit [--debug FILE] workspace SPEC
"""

import asyncio
import sys
from collections.abc import Awaitable, Callable

from .commands import CommandClient
from .dispatch import ChangeWorkspace, parse_workspace_spec
from .errors import ConfigurationError, DecodeError, IpcIOError, SocketConnectionError
from .events import Event
from .logging_setup import get_logger, init_logger
from .models import Client, ExitCode, Workspace
from .stream import EventStream

__all__ = ["main"]

USAGE = """Usage: hyprkit [--debug FILE] COMMAND

Commands:
 workspaces           List workspaces
 clients              List windows
 events               Print Hyprland events until interrupted
 workspace SPEC       Switch workspace (eg: 3, +1, m-1, name:web, special:term, previous)
"""


def use_param(args: list[str], txt: str) -> str:
    """Remove option `txt` and its value from `args`, returning the value ("" when absent)."""
    v = ""
    if txt in args:
        i = args.index(txt)
        v = args[i + 1] if i + 1 < len(args) else ""
        del args[i : i + 2]
    return v


def format_workspace(workspace: Workspace) -> str:
    """One line summary of a workspace."""
    fullscreen = " [fullscreen]" if workspace.has_fullscreen else ""
    return (
        f"{workspace.id:>4} {workspace.name:12s} {workspace.monitor} ({workspace.window_count} windows){fullscreen}"
        f" last: 0x{workspace.last_window:x} {workspace.last_window_title}"
    )


def format_client(client: Client) -> str:
    """One line summary of a client."""
    return f"0x{client.address:x} [{client.workspace.name}] {client.title}"


def format_event(event: Event) -> str:
    """Print friendly representation of an event."""
    return repr(event)


async def list_workspaces(client: CommandClient) -> None:
    """Print the workspaces, ordered by id."""
    for workspace in sorted(await client.workspaces(), key=lambda w: w.id):
        print(format_workspace(workspace))


async def list_clients(client: CommandClient) -> None:
    """Print the clients."""
    for item in await client.clients():
        print(format_client(item))


async def print_events() -> None:
    """Print events as they come."""
    async with EventStream() as stream:
        async for event in stream.events():
            print(format_event(event), flush=True)


async def change_workspace(client: CommandClient, spec: str) -> None:
    """Dispatch a workspace change."""
    await client.dispatch(ChangeWorkspace(parse_workspace_spec(spec)))


def get_command(args: list[str]) -> Callable[[], Awaitable[None]] | None:
    """Return the coroutine function matching the command line, None if invalid."""
    client = CommandClient()
    match args:
        case ["workspaces"]:
            return lambda: list_workspaces(client)
        case ["clients"]:
            return lambda: list_clients(client)
        case ["events"]:
            return print_events
        case ["workspace", spec]:
            return lambda: change_workspace(client, spec)
    return None


def main() -> None:
    """Run the command."""
    args = sys.argv[1:]
    debug_flag = use_param(args, "--debug")
    if debug_flag:
        init_logger(filename=debug_flag, force_debug=True)
    else:
        init_logger()
    log = get_logger("startup")

    if not args or args[0] in {"help", "--help", "-h"}:
        print(USAGE)
        sys.exit(ExitCode.SUCCESS if args else ExitCode.USAGE_ERROR)

    command = get_command(args)
    if command is None:
        print(USAGE, file=sys.stderr)
        sys.exit(ExitCode.USAGE_ERROR)

    try:
        asyncio.run(command())
    except KeyboardInterrupt:
        pass
    except ConfigurationError as e:
        log.critical("%s", e)
        sys.exit(ExitCode.ENV_ERROR)
    except SocketConnectionError as e:
        log.critical("%s", e)
        sys.exit(ExitCode.CONNECTION_ERROR)
    except (IpcIOError, DecodeError, ValueError) as e:
        log.critical("Command failed: %s", e)
        sys.exit(ExitCode.COMMAND_ERROR)
    sys.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    main()
