"""logctl flush - force buffered log output out.

Emits one emergency-level message on logctl's own context; the logging
library flushes its buffers when it sees a message at that severity.
"""

from logctl import levels
from logctl.errors import Result, RunError
from logctl.lib.help_lib import HelpContent
from logctl.registry import TOOL_CONTEXT_NAME, LogError


NAMES = ("flush",)

HELP = HelpContent(
    id="cmd.flush",
    command="flush",
    description="flush all ring buffers",
    priority=30,
)

FLUSH_MESSAGE = "Manually Flushing Buffers"


def register(table):
    """Register the 'flush' subcommand."""
    for name in NAMES:
        table[name] = run


def run(argv, session):
    """Execute the flush command. Extra arguments are ignored."""
    registry = session.registry
    try:
        handle = registry.find_context(TOOL_CONTEXT_NAME)
    except LogError as e:
        raise RunError.from_log_error(
            f"Error getting context {TOOL_CONTEXT_NAME}", e) from e

    try:
        registry.emit(handle, levels.EMERG, FLUSH_MESSAGE)
    except LogError as e:
        raise RunError.from_log_error("Error logging", e) from e

    return Result.OK
