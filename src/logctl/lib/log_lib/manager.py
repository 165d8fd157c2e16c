"""
OutputManager - the THAC0 verbosity system core.

Central coordinator for verbosity-gated diagnostics with per-channel
overrides. A message shows when message.level <= threshold, where the
threshold is the channel override if set, else the global verbosity.

    -v increments, -Q decrements. They compose: -vv -Q = 1

At threshold -4 (hard wall) nothing is shown at all.
"""

import sys
from typing import Any, Dict, List, Optional, Set, TextIO

from . import channels as _channels
from .hints import get_hint
from . import verbosity as _v


HARD_WALL = _v.NOTHING


class OutputManager:
    """Central coordinator for THAC0 verbosity-gated output.

    Diagnostics are written to ``file`` (default: stderr). Hints are
    shown at most once per manager.

    Usage::

        out = OutputManager(verbosity=1)
        out.emit(1, "Found {n} contexts", channel='registry', n=3)
        out.hint('usage.help', 'error')
        out.error("Context 'foo' not found.")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self._file = file
        self._shown_hints: Set[str] = set()

    @property
    def file(self) -> TextIO:
        # Resolved late so a replaced sys.stderr is honoured
        return self._file if self._file is not None else sys.stderr

    def threshold(self, channel: str) -> int:
        """Effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Emit a message if level <= threshold for that channel.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (uses str.format with kwargs)
            channel: Output channel name
            **kwargs: Values for template placeholders
        """
        threshold = self.threshold(channel)
        if threshold <= HARD_WALL or level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.file)

    def hint(self, hint_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a registered hint if the context fits and it wasn't shown yet."""
        if hint_id in self._shown_hints:
            return
        h = get_hint(hint_id)
        if h is None or context not in h.context:
            return

        threshold = self.threshold('hint')
        if threshold <= HARD_WALL or h.min_level > threshold:
            return

        text = h.message.format(**kwargs) if kwargs else h.message
        print(text, file=self.file)
        self._shown_hints.add(hint_id)

    def error(self, message: str) -> None:
        """Emit an error message (level -3, shown unless at hard wall)."""
        self.emit(_v.ERROR, message, channel='error')

    def channel_active(self, channel: str) -> bool:
        """True if a level-0 message on this channel would be shown."""
        threshold = self.threshold(channel)
        return threshold > HARD_WALL and 0 <= threshold

    @property
    def shown_hints(self) -> Set[str]:
        """Set of hint IDs that have been displayed this session."""
        return self._shown_hints.copy()


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0,
                channels: Optional[List[str]] = None) -> OutputManager:
    """Initialize the module-level OutputManager singleton.

    Call once at program startup after parsing the global flags.

    Args:
        verbosity: THAC0 verbosity (0=default, positive=verbose, negative=quiet)
        channels: Channel spec strings (e.g., ['registry:2', 'trace'])

    Raises:
        ChannelSpecError: if a channel spec is malformed
    """
    global _manager

    # Opt-in channels stay off unless explicitly enabled
    channel_overrides = {ch: -1 for ch in _channels.OPT_IN_CHANNELS}

    for spec in channels or []:
        cfg = _channels.parse_channel_spec(spec)
        channel_overrides[cfg.name] = cfg.level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
    )
    return _manager


def get_output() -> OutputManager:
    """Get the module-level OutputManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
