"""Shared test fixtures for the logctl test suite."""

import json
import os
from unittest.mock import patch

import pytest

from logctl import levels
from logctl.lib.log_lib import channels as _channels_mod
from logctl.lib.log_lib import manager as _manager_mod
from logctl.registry import GLOBAL_CONTEXT_NAME, TOOL_CONTEXT_NAME
from logctl.store import MemoryRegistry


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: filesystem-heavy tests")


# ---------------------------------------------------------------------------
# Global state isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_output():
    """Restore the OutputManager singleton and channel set after each test."""
    old_manager = _manager_mod._manager
    saved = (
        _channels_mod.KNOWN_CHANNELS,
        _channels_mod.CHANNEL_DESCRIPTIONS,
        _channels_mod.OPT_IN_CHANNELS,
    )
    _manager_mod._manager = None
    yield
    _manager_mod._manager = old_manager
    (_channels_mod.KNOWN_CHANNELS,
     _channels_mod.CHANNEL_DESCRIPTIONS,
     _channels_mod.OPT_IN_CHANNELS) = saved


@pytest.fixture(autouse=True)
def tmp_config_home(tmp_path):
    """Point ~ at a temporary directory so ~/.logctl is never the real one."""
    home = tmp_path / "home"
    home.mkdir()
    env = {"HOME": str(home), "USERPROFILE": str(home)}
    with patch.dict(os.environ, env):
        os.environ.pop("LOGCTL_CONFIG", None)
        with patch("pathlib.Path.home", return_value=home):
            yield home


# ---------------------------------------------------------------------------
# Registry fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def empty_registry():
    """A registry with no contexts at all."""
    return MemoryRegistry()


@pytest.fixture
def registry():
    """A registry with a handful of contexts in non-alphabetical order."""
    return MemoryRegistry({
        GLOBAL_CONTEXT_NAME: levels.INFO,
        "netd": levels.WARNING,
        "Audio": levels.ERR,
        "netd.dhcp": levels.NOTICE,
        "audio.mixer": levels.DEBUG,
        TOOL_CONTEXT_NAME: levels.INFO,
    })


class RecordingRegistry(MemoryRegistry):
    """MemoryRegistry that records set_context_level calls and can fail one."""

    def __init__(self, contexts=None, fail_on=None):
        super().__init__(contexts)
        self.fail_on = fail_on
        self.set_calls = []

    def set_context_level(self, handle, level):
        from logctl.registry import LogErr, LogError

        name = self.context_name(handle)
        self.set_calls.append(name)
        if name == self.fail_on:
            raise LogError(LogErr.UNKNOWN, f"refusing to change {name}")
        super().set_context_level(handle, level)


@pytest.fixture
def recording_registry_cls():
    return RecordingRegistry


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def logctl_paths(tmp_path):
    """Paths for a file-backed registry inside tmp_path."""
    base = tmp_path / "logctl"
    return {
        "state_file": str(base / "contexts.json"),
        "conf_file": str(base / "contexts.conf.json"),
        "log_file": str(base / "messages.log"),
        "kmsg_path": str(base / "kmsg"),
    }


@pytest.fixture
def config_file(tmp_path, logctl_paths):
    """Write a logctl config file pointing every path into tmp_path."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps(logctl_paths), encoding="utf-8")
    return path
