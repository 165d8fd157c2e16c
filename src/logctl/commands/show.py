"""logctl show - list contexts and their enabled levels.

    show              every registered context
    show <context>    one context ('.' for the global context)
    show <prefix>*    every context whose name starts with <prefix>
"""

from dataclasses import dataclass
from typing import Optional

from logctl import levels
from logctl.commands import no_match_message
from logctl.errors import ParamError, Result, RunError
from logctl.lib.help_lib import HelpContent
from logctl.output import print_line
from logctl.registry import LogError
from logctl.resolver import collect_contexts, resolve_alias


NAMES = ("show",)

HELP = HelpContent(
    id="cmd.show",
    command="show [<context>]",
    description="show logging context(s)",
    priority=80,
)


@dataclass
class ShowArgs:
    pattern: Optional[str] = None


def register(table):
    """Register the 'show' subcommand."""
    for name in NAMES:
        table[name] = run


def parse(argv):
    if len(argv) > 1:
        raise ParamError(f"Invalid parameter '{argv[1]}'.")
    if argv:
        return ShowArgs(pattern=resolve_alias(argv[0]))
    return ShowArgs()


def format_context(name, level):
    level_str = levels.level_to_string(level) or "Unknown"
    return f"Context '{name}' = {level_str}"


def run(argv, session):
    """Execute the show command."""
    args = parse(argv)

    try:
        infos = collect_contexts(session.registry, args.pattern)
    except LogError as e:
        raise RunError.from_log_error("Error getting contexts info", e) from e

    for info in infos:
        print_line(format_context(info.name, info.level))

    if args.pattern is not None and not infos:
        raise RunError(no_match_message(args.pattern))

    return Result.OK
