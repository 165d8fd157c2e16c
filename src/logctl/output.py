"""Output helpers for logctl.

Command results are plain lines on stdout; errors go through the
OutputManager error channel (stderr). Both respect the quiet axis at
its extremes (-QQ and beyond for results, -QQQQ for errors).

Also re-exports the log_lib public API for convenience imports.
"""

# Re-export log_lib public API - one-stop import for commands
from logctl.lib.log_lib import (                     # noqa: F401
    OutputManager, init_output, get_output,
    Hint, register_hint, register_hints, get_hint,
    trace,
)
from logctl.lib.log_lib.verbosity import WARNING


def _should_print():
    """Results are level -2 messages: hidden at -3 (errors only) and below."""
    return WARNING <= get_output().verbosity


def print_line(msg):
    """Print one line of command output to stdout."""
    if _should_print():
        print(msg)


def print_error(msg):
    """Print an error line via OutputManager.error() (stderr, level -3)."""
    get_output().error(msg)


def suggest_help():
    """Show the 'use -help' hint after a parameter error."""
    import logctl.hints  # noqa: F401 - register logctl hints
    get_output().hint('usage.help', 'error')
