"""Context name resolution and wildcard matching.

Patterns are an exact context name, the alias ``.`` for the global
context, or a prefix followed by ``*``. Only the text before the first
``*`` is compared; anything after it is ignored, so ``foo*bar`` matches
every name starting with ``foo``.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from logctl.lib.log_lib import get_output, trace
from logctl.registry import (
    GLOBAL_CONTEXT_NAME, MAX_CONTEXTS, ContextRegistry, LogErr, LogError,
)


GLOBAL_ALIAS = '.'
WILDCARD = '*'


@dataclass(frozen=True)
class ContextInfo:
    """One entry of an enumeration snapshot."""
    name: str
    handle: Any
    level: int


def resolve_alias(name: str) -> str:
    """Map '.' to the global context name; anything else is unchanged."""
    if name == GLOBAL_ALIAS:
        return GLOBAL_CONTEXT_NAME
    return name


def is_wildcard(name: str) -> bool:
    return WILDCARD in name


def matches(context_name: str, pattern: Optional[str]) -> bool:
    """True if context_name is selected by pattern.

    None selects everything. Without a wildcard the match is exact and
    case-sensitive; with one, the part before the first '*' must be a
    prefix of context_name (an empty prefix selects everything).
    """
    if pattern is None:
        return True
    prefix, wild, _ = pattern.partition(WILDCARD)
    if not wild:
        return context_name == pattern
    return context_name.startswith(prefix)


@trace
def collect_contexts(registry: ContextRegistry, pattern: Optional[str] = None,
                     limit: int = MAX_CONTEXTS) -> List[ContextInfo]:
    """Enumerate the registry and return matching contexts sorted by name.

    Sorting ignores case. An empty registry is an error (distinct from
    nothing matching), as is matching more than ``limit`` contexts.

    Raises:
        LogError: on any registry failure
    """
    count = registry.count_contexts()
    if count <= 0:
        raise LogError(LogErr.UNKNOWN, "no contexts registered")

    matched = []
    for index in range(count):
        handle = registry.context_at(index)
        name = registry.context_name(handle)
        if not matches(name, pattern):
            continue
        matched.append(ContextInfo(name, handle, registry.context_level(handle)))
        if len(matched) > limit:
            raise LogError(LogErr.TOO_MANY_CONTEXTS,
                           f"more than {limit} contexts matched")

    matched.sort(key=lambda info: info.name.lower())
    get_output().emit(2, "  [registry] {matched} of {count} contexts match {pattern}",
                      channel='registry', matched=len(matched), count=count,
                      pattern=repr(pattern) if pattern is not None else 'all')
    return matched
