"""Configuration management for logctl.

Layered config resolution (highest priority wins):
  1. Explicit config file: --config PATH, else $LOGCTL_CONFIG
  2. Global config: ~/.logctl/config.json
  3. Built-in defaults

The config only tells logctl where things live (registry state, the
contexts configuration reloaded by ``reconf``, the message log, the
kernel message device) and which facility emitted lines carry.
"""

import json
import os
from pathlib import Path

from logctl.lib.log_lib import get_output


CONFIG_ENV_VAR = "LOGCTL_CONFIG"

CONFIG_KEYS = ["state_file", "conf_file", "log_file", "kmsg_path", "facility"]
PATH_KEYS = {"state_file", "conf_file", "log_file", "kmsg_path"}


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.logctl/)."""
    return Path.home() / ".logctl"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def get_defaults():
    """Built-in defaults, computed against the current home directory."""
    base = get_global_config_dir()
    return {
        "state_file": str(base / "contexts.json"),
        "conf_file": str(base / "contexts.conf.json"),
        "log_file": str(base / "messages.log"),
        "kmsg_path": "/dev/kmsg",
        "facility": "user",
    }


# ---------------------------------------------------------------------------
# JSON helpers
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, IsADirectoryError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def save_json(path, data):
    """Write data as indented JSON, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return target


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def find_explicit_config(cli_path=None):
    """Return the explicit config path (CLI flag, then env var) or None."""
    if cli_path:
        return Path(cli_path).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return None


def resolve_config(cli_path=None, keys=None):
    """Resolve config values using layered precedence.

    Returns a dict with one entry per key; path values have ``~``
    expanded.
    """
    if keys is None:
        keys = CONFIG_KEYS

    out = get_output()
    explicit_path = find_explicit_config(cli_path)
    explicit_cfg = load_json(explicit_path) if explicit_path else {}
    global_cfg = load_json(get_global_config_path())
    defaults = get_defaults()

    if explicit_path:
        out.emit(2, "  [config] Explicit config: {path} ({n} keys)",
                 channel='config', path=explicit_path, n=len(explicit_cfg))
    out.emit(2, "  [config] Global config: {path} ({n} keys)",
             channel='config', path=get_global_config_path(),
             n=len(global_cfg))

    resolved = {}
    for key in keys:
        # JSON may spell keys with dashes or underscores
        alt_key = key.replace("_", "-")
        for layer in (explicit_cfg, global_cfg):
            value = layer.get(key, layer.get(alt_key))
            if value is not None:
                break
        else:
            value = defaults.get(key)

        if key in PATH_KEYS and value is not None:
            value = str(Path(value).expanduser())
        resolved[key] = value
        out.emit(3, "  [config] {key} = {value}",
                 channel='config', key=key, value=value)

    return resolved
