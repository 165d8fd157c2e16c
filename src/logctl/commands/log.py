"""logctl log - emit a test message through a context.

    log <msg>                        global context, notice level
    log <context> <level> <msg>      exact context name, no wildcards
"""

from dataclasses import dataclass

from logctl import levels
from logctl.errors import ParamError, Result, RunError
from logctl.lib.help_lib import HelpContent
from logctl.registry import GLOBAL_CONTEXT_NAME, LogError
from logctl.resolver import resolve_alias


NAMES = ("log",)

HELP = HelpContent(
    id="cmd.log",
    command="log <context> <level> <msg>",
    description="log a message",
    priority=40,
)

DEFAULT_LEVEL = levels.NOTICE


@dataclass
class LogArgs:
    context: str
    level: int
    message: str


def register(table):
    """Register the 'log' subcommand."""
    for name in NAMES:
        table[name] = run


def parse(argv):
    context = None
    level = None
    message = None

    # A lone argument is the message
    if len(argv) == 1:
        context = GLOBAL_CONTEXT_NAME
        level = DEFAULT_LEVEL

    for arg in argv:
        if context is None:
            context = resolve_alias(arg)
        elif level is None:
            level = levels.string_to_level(arg)
            if level is None or level == levels.NONE:
                raise ParamError(f"Invalid level '{arg}'.")
        elif message is None:
            message = arg
        else:
            raise ParamError(f"Invalid parameter '{arg}'.")

    if context is None:
        raise ParamError("Context not specified.")
    if level is None:
        raise ParamError("Level not specified.")
    if message is None:
        raise ParamError("Message not specified.")
    return LogArgs(context=context, level=level, message=message)


def run(argv, session):
    """Execute the log command."""
    args = parse(argv)
    registry = session.registry

    try:
        handle = registry.find_context(args.context)
    except LogError as e:
        raise ParamError(f"Invalid context '{args.context}'.") from e

    try:
        registry.emit(handle, args.level, args.message)
    except LogError as e:
        raise RunError.from_log_error("Error logging", e) from e

    return Result.OK
