"""
Hint dataclass and global registry.

Domain modules register hints at import time; OutputManager.hint()
filters them by context, verbosity and per-session dedup.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Set


@dataclass
class Hint:
    """A templatized hint that can be shown in specific contexts.

    Attributes:
        id: Unique dot-namespaced identifier (e.g., 'usage.help')
        message: Template string with {var} placeholders for str.format()
        context: Contexts where this hint applies ('error', 'result', 'verbose')
        min_level: Minimum verbosity level for display
    """
    id: str
    message: str
    context: Set[str] = field(default_factory=lambda: {'verbose'})
    min_level: int = 1


# Global hint registry - populated by modules at import time
_HINTS: Dict[str, Hint] = {}


def register_hint(hint: Hint) -> None:
    """Register a hint; a duplicate ID replaces the earlier one."""
    _HINTS[hint.id] = hint


def register_hints(*hints: Hint) -> None:
    """Register multiple hints at once."""
    for h in hints:
        register_hint(h)


def get_hint(hint_id: str) -> Optional[Hint]:
    """Look up a hint by ID. Returns None if not found."""
    return _HINTS.get(hint_id)
