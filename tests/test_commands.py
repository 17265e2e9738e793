import json
from unittest.mock import Mock

import pytest

from hyprkit.commands import CommandClient, hyprctl_connection
from hyprkit.dispatch import ChangeWorkspace, Id, Name, RelativeId
from hyprkit.errors import ConfigurationError, DecodeError, InvalidJson, IpcIOError, SocketConnectionError
from hyprkit.models import Workspace

from .test_models import CLIENT, WORKSPACE


@pytest.fixture
def client(socket_paths, test_log):
    return CommandClient(socket_paths, logger=test_log)


@pytest.mark.asyncio
async def test_hyprctl_connection_context_manager(mock_open_connection, socket_paths):
    mock_connect, reader, writer = mock_open_connection
    logger = Mock()

    async with hyprctl_connection(socket_paths.command, logger) as (r, w):
        assert r == reader
        assert w == writer

    mock_connect.assert_awaited_once_with(str(socket_paths.command))
    writer.close.assert_called_once()
    writer.wait_closed.assert_awaited_once()


@pytest.mark.asyncio
async def test_hyprctl_connection_error(mocker, socket_paths):
    mocker.patch("asyncio.open_unix_connection", side_effect=FileNotFoundError)
    logger = Mock()

    with pytest.raises(SocketConnectionError) as exc_info:
        async with hyprctl_connection(socket_paths.command, logger):
            pass

    assert exc_info.value.path == str(socket_paths.command)
    assert isinstance(exc_info.value, ConnectionError)
    logger.critical.assert_called_with("hyprctl socket not found! is it running ?")


@pytest.mark.asyncio
async def test_exec(mock_open_connection, client):
    _, reader, writer = mock_open_connection
    reader.feed(b"ok")

    result = await client.exec("j/version")

    assert result == b"ok"
    writer.write.assert_called_once_with(b"j/version")
    writer.drain.assert_awaited_once()
    writer.close.assert_called_once()


@pytest.mark.asyncio
async def test_exec_io_error(mock_open_connection, client):
    _, reader, writer = mock_open_connection
    writer.drain.side_effect = BrokenPipeError

    with pytest.raises(IpcIOError):
        await client.exec("j/version")
    writer.close.assert_called_once()


@pytest.mark.asyncio
async def test_workspaces(mock_open_connection, client):
    _, reader, writer = mock_open_connection
    reader.feed(json.dumps([WORKSPACE, WORKSPACE | {"id": 2, "name": "web", "lastwindow": "ab"}]))

    workspaces = await client.workspaces()

    writer.write.assert_called_once_with(b"j/workspaces")
    assert workspaces[0] == Workspace.from_json(WORKSPACE)
    assert workspaces[0].last_window == 0x55D2A1
    assert workspaces[1].id == 2
    assert workspaces[1].name == "web"
    assert workspaces[1].last_window == 0xAB


@pytest.mark.asyncio
async def test_clients(mock_open_connection, client):
    _, reader, writer = mock_open_connection
    reader.feed(json.dumps([CLIENT]))

    clients = await client.clients()

    writer.write.assert_called_once_with(b"j/clients")
    assert len(clients) == 1
    assert clients[0].address == 0x55D2A1
    assert clients[0].workspace.name == "special:term"


@pytest.mark.asyncio
async def test_empty_list(mock_open_connection, client):
    _, reader, _ = mock_open_connection
    reader.feed(b"[]")
    assert await client.clients() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        b"",
        b"[{",
        b"unknown request",
        b'{"id": 1}',
        b"\xff\xfe",
        json.dumps([{k: v for k, v in WORKSPACE.items() if k != "monitor"}]).encode(),
        json.dumps([WORKSPACE | {"windows": "2"}]).encode(),
        json.dumps([1, 2]).encode(),
        b"[" * 100000 + b"]" * 100000,
    ],
)
async def test_workspaces_invalid_response(mock_open_connection, client, response):
    _, reader, _ = mock_open_connection
    reader.feed(response)

    with pytest.raises(InvalidJson) as exc_info:
        await client.workspaces()
    assert isinstance(exc_info.value, DecodeError)


@pytest.mark.asyncio
async def test_invalid_json_keeps_parse_error(mock_open_connection, client):
    _, reader, _ = mock_open_connection
    reader.feed(b"[{")

    with pytest.raises(InvalidJson) as exc_info:
        await client.workspaces()
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
    assert "invalid JSON" in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("dispatcher", "command"),
    [
        (ChangeWorkspace(Id(3)), b"j/dispatch workspace 3"),
        (RelativeId(-1), b"j/dispatch workspace -1"),
        (Name("web"), b"j/dispatch workspace name:web"),
        (4, b"j/dispatch workspace 4"),
    ],
)
async def test_dispatch(mock_open_connection, client, dispatcher, command):
    _, reader, writer = mock_open_connection
    reader.feed(b"ok")

    assert await client.dispatch(dispatcher) is None
    writer.write.assert_called_once_with(command)


@pytest.mark.asyncio
async def test_dispatch_ignores_response(mock_open_connection, client):
    _, reader, _ = mock_open_connection
    reader.feed(b"Invalid dispatcher")
    await client.dispatch(Id(1))


@pytest.mark.asyncio
@pytest.mark.parametrize("call", ["workspaces", "clients", "dispatch"])
async def test_connection_failure(mocker, client, call):
    mocker.patch("asyncio.open_unix_connection", side_effect=ConnectionRefusedError)
    args = (Id(1),) if call == "dispatch" else ()

    with pytest.raises(SocketConnectionError):
        await getattr(client, call)(*args)


@pytest.mark.asyncio
async def test_no_socket(socket_paths, test_log):
    # nothing listens in the temporary folder
    client = CommandClient(socket_paths, logger=test_log)
    with pytest.raises(SocketConnectionError):
        await client.workspaces()


@pytest.mark.asyncio
async def test_missing_signature_fails_before_connecting(mocker, test_log):
    mock_connect = mocker.patch("asyncio.open_unix_connection")
    client = CommandClient(environ={}, logger=test_log)

    with pytest.raises(ConfigurationError):
        await client.workspaces()
    mock_connect.assert_not_called()


@pytest.mark.asyncio
async def test_paths_resolved_from_environment(mock_open_connection, hypr_env, test_log):
    mock_connect, reader, _ = mock_open_connection
    reader.feed(b"[]")

    await CommandClient(logger=test_log).workspaces()

    mock_connect.assert_awaited_once_with(str(hypr_env / ".socket.sock"))
