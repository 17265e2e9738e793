from pathlib import Path

import pytest

from hyprkit.errors import ConfigurationError
from hyprkit.ipc_paths import SocketPaths, resolve_socket_paths


def test_resolve_with_uid():
    paths = resolve_socket_paths({"HYPRLAND_INSTANCE_SIGNATURE": "abc"}, uid=1000)
    assert paths.command == Path("/run/user/1000/hypr/abc/.socket.sock")
    assert paths.events == Path("/run/user/1000/hypr/abc/.socket2.sock")


def test_resolve_with_runtime_dir():
    env = {"HYPRLAND_INSTANCE_SIGNATURE": "abc", "XDG_RUNTIME_DIR": "/tmp/rt"}
    paths = resolve_socket_paths(env, uid=1000)
    assert paths == SocketPaths(Path("/tmp/rt/hypr/abc/.socket.sock"), Path("/tmp/rt/hypr/abc/.socket2.sock"))


def test_resolve_current_user(monkeypatch):
    monkeypatch.setattr("os.getuid", lambda: 4242)
    paths = resolve_socket_paths({"HYPRLAND_INSTANCE_SIGNATURE": "sig"})
    assert paths.command == Path("/run/user/4242/hypr/sig/.socket.sock")


def test_resolve_from_os_environ(hypr_env):
    paths = resolve_socket_paths()
    assert paths.command == hypr_env / ".socket.sock"
    assert paths.events == hypr_env / ".socket2.sock"


@pytest.mark.parametrize("env", [{}, {"HYPRLAND_INSTANCE_SIGNATURE": ""}, {"XDG_RUNTIME_DIR": "/run/user/1000"}])
def test_missing_signature(env):
    with pytest.raises(ConfigurationError, match="HYPRLAND_INSTANCE_SIGNATURE"):
        resolve_socket_paths(env, uid=1000)


def test_resolve_is_deterministic():
    env = {"HYPRLAND_INSTANCE_SIGNATURE": "abc"}
    assert resolve_socket_paths(env, uid=1) == resolve_socket_paths(env, uid=1)
