"""logctl def - define a new logging context, optionally with a level."""

from dataclasses import dataclass
from typing import Optional

from logctl import levels
from logctl.errors import ParamError, Result, RunError
from logctl.lib.help_lib import HelpContent
from logctl.output import print_line
from logctl.registry import LogError
from logctl.resolver import resolve_alias


NAMES = ("def",)

HELP = HelpContent(
    id="cmd.def",
    command="def <context> [<level>]",
    description="define logging context",
    priority=20,
)


@dataclass
class DefArgs:
    context: str
    level: Optional[int] = None


def register(table):
    """Register the 'def' subcommand."""
    for name in NAMES:
        table[name] = run


def parse(argv):
    context = None
    level = None
    for arg in argv:
        if context is None:
            context = resolve_alias(arg)
        elif level is None:
            level = levels.string_to_level(arg)
            if level is None:
                raise ParamError(f"Invalid level '{arg}'.")
        else:
            raise ParamError(f"Invalid parameter '{arg}'.")

    if context is None:
        raise ParamError("Context not specified.")
    return DefArgs(context=context, level=level)


def run(argv, session):
    """Execute the def command."""
    args = parse(argv)
    registry = session.registry

    try:
        exists = registry.has_context(args.context)
    except LogError as e:
        raise RunError.from_log_error("Error defining context", e) from e
    if exists:
        raise ParamError(f"Context '{args.context}' is already defined.")

    try:
        handle = registry.get_or_create_context(args.context)
    except LogError as e:
        raise RunError.from_log_error("Error defining context", e) from e

    if args.level is not None:
        try:
            registry.set_context_level(handle, args.level)
        except LogError as e:
            raise RunError.from_log_error(
                "Error setting context log level", e) from e

    print_line(f"Defined context '{args.context}'.")
    return Result.OK
