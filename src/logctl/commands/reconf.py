"""logctl reconf - ask the logging library to reload its configuration."""

from logctl import levels
from logctl.errors import ParamError, Result, RunError
from logctl.lib.help_lib import HelpContent
from logctl.lib.log_lib import get_output
from logctl.registry import GLOBAL_CONTEXT_NAME, LogError


NAMES = ("reconf",)

HELP = HelpContent(
    id="cmd.reconf",
    command="reconf",
    description="re-load lib options from conf",
    priority=60,
)

RELOAD_MESSAGE = "!loglib loadconf"


def register(table):
    """Register the 'reconf' subcommand."""
    for name in NAMES:
        table[name] = run


def parse(argv):
    if argv:
        raise ParamError(f"Invalid parameter '{argv[0]}'.")


def run(argv, session):
    """Execute the reconf command."""
    parse(argv)
    registry = session.registry

    try:
        handle = registry.find_context(GLOBAL_CONTEXT_NAME)
        registry.emit(handle, levels.EMERG, RELOAD_MESSAGE)
    except LogError as e:
        raise RunError.from_log_error("Error logging", e) from e

    get_output().hint('config.reconf_source', 'verbose',
                      path=session.settings.get("conf_file"))
    return Result.OK
