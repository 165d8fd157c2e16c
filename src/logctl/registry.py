"""Logging-context registry interface.

The registry owns the contexts; logctl only reads names and levels,
changes levels, defines new contexts and emits messages through it.
Commands receive a ContextRegistry instance so the same code runs
against the file-backed store or an in-memory fake.

Failures raise LogError, which carries a numeric code and a short
debug string for display as ``0x%08X (DebugString)``.
"""

import abc
from enum import IntEnum
from typing import Any


GLOBAL_CONTEXT_NAME = '<global>'
TOOL_CONTEXT_NAME = 'LogCtl'

MAX_CONTEXTS = 4096
MAX_CONTEXT_NAME_LEN = 31


class LogErr(IntEnum):
    NONE = 0
    UNKNOWN = 1
    INVALID_PARAMETER = 2
    INVALID_LEVEL = 3
    INVALID_CONTEXT_NAME = 4
    CONTEXT_NOT_FOUND = 5
    TOO_MANY_CONTEXTS = 6
    FILE_ERROR = 7


_DEBUG_STRINGS = {
    LogErr.NONE: 'None',
    LogErr.UNKNOWN: 'Unknown',
    LogErr.INVALID_PARAMETER: 'InvalidParameter',
    LogErr.INVALID_LEVEL: 'InvalidLevel',
    LogErr.INVALID_CONTEXT_NAME: 'InvalidContextName',
    LogErr.CONTEXT_NOT_FOUND: 'ContextNotFound',
    LogErr.TOO_MANY_CONTEXTS: 'TooManyContexts',
    LogErr.FILE_ERROR: 'FileError',
}


def err_debug_string(code: int) -> str:
    """Return the debug string for an error code ('Unknown' if unmapped)."""
    try:
        return _DEBUG_STRINGS[LogErr(code)]
    except ValueError:
        return 'Unknown'


class LogError(Exception):
    """A registry operation failed."""

    def __init__(self, code: int, detail: str = ''):
        self.code = int(code)
        self.debug_string = err_debug_string(code)
        self.detail = detail
        super().__init__(detail or self.debug_string)

    def describe(self) -> str:
        """Format as ``0x00000005 (ContextNotFound)``."""
        return f"0x{self.code:08X} ({self.debug_string})"


class ContextRegistry(abc.ABC):
    """Query/mutation primitives of a logging-context registry.

    Handles returned by context_at(), find_context() and
    get_or_create_context() are opaque to callers and only valid for
    the registry that produced them.
    """

    @abc.abstractmethod
    def count_contexts(self) -> int:
        """Number of registered contexts."""

    @abc.abstractmethod
    def context_at(self, index: int) -> Any:
        """Handle of the context at index (0 <= index < count)."""

    @abc.abstractmethod
    def context_name(self, handle: Any) -> str:
        """Name of the context."""

    @abc.abstractmethod
    def context_level(self, handle: Any) -> int:
        """Currently enabled level of the context."""

    @abc.abstractmethod
    def find_context(self, name: str) -> Any:
        """Handle of an existing context; CONTEXT_NOT_FOUND otherwise."""

    @abc.abstractmethod
    def get_or_create_context(self, name: str) -> Any:
        """Handle of the named context, registering it if needed."""

    @abc.abstractmethod
    def set_context_level(self, handle: Any, level: int) -> None:
        """Change the enabled level of the context."""

    @abc.abstractmethod
    def emit(self, handle: Any, level: int, message: str) -> None:
        """Log message on the context at the given level."""

    def has_context(self, name: str) -> bool:
        try:
            self.find_context(name)
        except LogError as e:
            if e.code == LogErr.CONTEXT_NOT_FOUND:
                return False
            raise
        return True
