"""Context registry implementations.

MemoryRegistry keeps contexts in process memory and records accepted
messages in a list; it starts empty and is what the tests inject.

FileRegistry persists contexts to a JSON state file so successive
logctl invocations share one registry, appends accepted messages to a
log file, and reloads context levels from a JSON contexts
configuration file when asked to via the ``!loglib loadconf`` control
message on the global context.

State file::

    {"contexts": [{"name": "<global>", "level": 6}, ...]}

Contexts configuration file::

    {"contexts": {"<global>": "info", "mycomp": "err"}}
"""

import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from logctl import levels
from logctl.config import save_json
from logctl.lib.log_lib import get_output
from logctl.registry import (
    GLOBAL_CONTEXT_NAME, MAX_CONTEXT_NAME_LEN, MAX_CONTEXTS,
    TOOL_CONTEXT_NAME, ContextRegistry, LogErr, LogError,
)


DEFAULT_LEVEL = levels.INFO
CONTROL_PREFIX = '!loglib '


@dataclass(eq=False)
class Context:
    name: str
    level: int = DEFAULT_LEVEL


def validate_context_name(name: str) -> None:
    """Raise INVALID_CONTEXT_NAME unless name is a definable context name."""
    if name == GLOBAL_CONTEXT_NAME:
        return
    if not name or len(name) > MAX_CONTEXT_NAME_LEN:
        raise LogError(LogErr.INVALID_CONTEXT_NAME,
                       f"context name must be 1-{MAX_CONTEXT_NAME_LEN} characters")
    if '*' in name or any(ch.isspace() for ch in name):
        raise LogError(LogErr.INVALID_CONTEXT_NAME,
                       f"invalid character in context name '{name}'")


def _read_json(path: Path) -> dict:
    """Load a JSON object from path, raising FILE_ERROR if it is unreadable."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise LogError(LogErr.FILE_ERROR, f"cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise LogError(LogErr.FILE_ERROR, f"{path} does not hold a JSON object")
    return data


class MemoryRegistry(ContextRegistry):
    """In-process registry.

    Args:
        contexts: initial {name: level} mapping, registered in order
        conf: {name: level_name} mapping applied by reload_config();
            None makes a reload fail with FILE_ERROR
    """

    def __init__(self, contexts: Optional[Dict[str, int]] = None,
                 conf: Optional[Dict[str, str]] = None):
        self._contexts: List[Context] = []
        self._conf = conf
        self.messages: List[Tuple[str, int, str]] = []
        for name, level in (contexts or {}).items():
            self._contexts.append(Context(name, level))

    # -- queries -----------------------------------------------------------
    def count_contexts(self) -> int:
        return len(self._contexts)

    def context_at(self, index: int) -> Context:
        if not 0 <= index < len(self._contexts):
            raise LogError(LogErr.INVALID_PARAMETER,
                           f"context index {index} out of range")
        return self._contexts[index]

    def context_name(self, handle: Context) -> str:
        return self._check_handle(handle).name

    def context_level(self, handle: Context) -> int:
        return self._check_handle(handle).level

    def find_context(self, name: str) -> Context:
        for ctx in self._contexts:
            if ctx.name == name:
                return ctx
        raise LogError(LogErr.CONTEXT_NOT_FOUND, f"no context named '{name}'")

    # -- mutations ---------------------------------------------------------
    def get_or_create_context(self, name: str) -> Context:
        try:
            return self.find_context(name)
        except LogError as e:
            if e.code != LogErr.CONTEXT_NOT_FOUND:
                raise
        validate_context_name(name)
        if len(self._contexts) >= MAX_CONTEXTS:
            raise LogError(LogErr.TOO_MANY_CONTEXTS,
                           f"registry already holds {MAX_CONTEXTS} contexts")
        ctx = Context(name)
        self._contexts.append(ctx)
        get_output().emit(1, "  [registry] Registered context '{name}'",
                          channel='registry', name=name)
        self._changed()
        return ctx

    def set_context_level(self, handle: Context, level: int) -> None:
        ctx = self._check_handle(handle)
        if not levels.is_valid_level(level):
            raise LogError(LogErr.INVALID_LEVEL, f"invalid level {level}")
        ctx.level = level
        get_output().emit(1, "  [registry] '{name}' level -> {level_name}",
                          channel='registry', name=ctx.name,
                          level_name=levels.level_to_string(level))
        self._changed()

    def emit(self, handle: Context, level: int, message: str) -> None:
        ctx = self._check_handle(handle)
        if ctx.name == GLOBAL_CONTEXT_NAME and message.startswith(CONTROL_PREFIX):
            self._control(message[len(CONTROL_PREFIX):].strip())
            return
        if not levels.MIN_LEVEL <= level <= levels.MAX_LEVEL:
            raise LogError(LogErr.INVALID_LEVEL, f"invalid message level {level}")
        if level > ctx.level:
            get_output().emit(2, "  [registry] '{name}' filtered {level_name} message",
                              channel='registry', name=ctx.name,
                              level_name=levels.level_to_string(level))
            return
        self._write(ctx, level, message)

    def reload_config(self) -> None:
        """Create and re-level contexts from the contexts configuration."""
        conf = self._load_conf()
        for name, level_name in conf.items():
            level = levels.string_to_level(level_name)
            if level is None:
                raise LogError(LogErr.INVALID_LEVEL,
                               f"invalid level '{level_name}' for '{name}'")
            validate_context_name(name)
            try:
                ctx = self.find_context(name)
            except LogError:
                ctx = Context(name)
                self._contexts.append(ctx)
            ctx.level = level
        get_output().emit(1, "  [registry] Reloaded {n} context levels",
                          channel='registry', n=len(conf))
        self._changed()

    # -- hooks -------------------------------------------------------------
    def _load_conf(self) -> Dict[str, str]:
        if self._conf is None:
            raise LogError(LogErr.FILE_ERROR, "no contexts configuration")
        return self._conf

    def _write(self, ctx: Context, level: int, message: str) -> None:
        self.messages.append((ctx.name, level, message))

    def _changed(self) -> None:
        """Called after every mutation."""

    # -- helpers -----------------------------------------------------------
    def _check_handle(self, handle) -> Context:
        if not any(handle is ctx for ctx in self._contexts):
            raise LogError(LogErr.INVALID_PARAMETER, "stale context handle")
        return handle

    def _control(self, command: str) -> None:
        if command == 'loadconf':
            self.reload_config()
        else:
            raise LogError(LogErr.INVALID_PARAMETER,
                           f"unknown control command '{command}'")


class FileRegistry(MemoryRegistry):
    """Registry shared between invocations through a JSON state file.

    A missing state file starts the registry with the global and the
    logctl contexts at the default level, overlaid with the contexts
    configuration file when one exists. Nothing is written until the
    first mutation. A state or configuration file that cannot be parsed
    is a FILE_ERROR, never treated as empty.
    """

    def __init__(self, state_file, conf_file, log_file, facility='user'):
        super().__init__()
        self.state_file = Path(state_file)
        self.conf_file = Path(conf_file)
        self.log_file = Path(log_file)
        self.facility = levels.string_to_facility(facility)
        if self.facility is None:
            raise LogError(LogErr.INVALID_PARAMETER,
                           f"unknown facility '{facility}'")
        self._loading = True
        try:
            self._load_state()
        finally:
            self._loading = False

    def _load_state(self):
        data = _read_json(self.state_file) if self.state_file.is_file() else None
        if data is not None:
            entries = data.get("contexts")
            if not isinstance(entries, list):
                raise LogError(LogErr.FILE_ERROR,
                               f"'contexts' in {self.state_file} must be a list")
            for entry in entries:
                name = entry.get("name") if isinstance(entry, dict) else None
                level = entry.get("level") if isinstance(entry, dict) else None
                if (not isinstance(name, str) or not isinstance(level, int)
                        or not levels.is_valid_level(level)):
                    get_output().emit(1, "  [registry] Skipping bad state entry: {e}",
                                      channel='registry', e=entry)
                    continue
                self._contexts.append(Context(name, level))
            get_output().emit(2, "  [registry] Loaded {n} contexts from {path}",
                              channel='registry', n=len(self._contexts),
                              path=self.state_file)
            return

        for name in (GLOBAL_CONTEXT_NAME, TOOL_CONTEXT_NAME):
            self._contexts.append(Context(name))
        if self.conf_file.is_file():
            self.reload_config()
        get_output().emit(2, "  [registry] No state at {path}, using defaults",
                          channel='registry', path=self.state_file)

    def _load_conf(self) -> Dict[str, str]:
        if not self.conf_file.is_file():
            raise LogError(LogErr.FILE_ERROR,
                           f"contexts configuration {self.conf_file} not found")
        contexts = _read_json(self.conf_file).get("contexts", {})
        if not isinstance(contexts, dict):
            raise LogError(LogErr.INVALID_PARAMETER,
                           f"'contexts' in {self.conf_file} must be an object")
        return contexts

    def _write(self, ctx: Context, level: int, message: str) -> None:
        timestamp = datetime.now().isoformat(timespec="seconds")
        line = (f"{timestamp} {levels.facility_to_string(self.facility)}."
                f"{levels.level_to_string(level)} {ctx.name}: {message}\n")
        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, "a", encoding="utf-8",
                      errors="surrogateescape") as f:
                f.write(line)
        except OSError as e:
            raise LogError(LogErr.FILE_ERROR, str(e)) from e

    def _changed(self) -> None:
        if self._loading:
            return
        data = {"contexts": [{"name": c.name, "level": c.level}
                             for c in self._contexts]}
        try:
            save_json(self.state_file, data)
        except OSError as e:
            raise LogError(LogErr.FILE_ERROR, str(e)) from e
