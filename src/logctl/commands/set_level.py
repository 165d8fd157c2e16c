"""logctl set - change the enabled level of one or more contexts.

An exact name must already exist. A wildcard pattern is applied to
every matching context in name order; the first failure stops the
command and earlier changes stay applied.
"""

from dataclasses import dataclass

from logctl import levels
from logctl.errors import ParamError, Result, RunError
from logctl.lib.help_lib import HelpContent
from logctl.lib.log_lib import get_output
from logctl.output import print_line
from logctl.registry import GLOBAL_CONTEXT_NAME, LogError
from logctl.resolver import collect_contexts, is_wildcard, resolve_alias


NAMES = ("set",)

HELP = HelpContent(
    id="cmd.set",
    command="set <context> <level>",
    description="set logging context level",
    priority=70,
)


@dataclass
class SetArgs:
    pattern: str
    level: int


def register(table):
    """Register the 'set' subcommand."""
    for name in NAMES:
        table[name] = run


def parse(argv):
    pattern = None
    level = None
    for arg in argv:
        if pattern is None:
            pattern = resolve_alias(arg)
        elif level is None:
            level = levels.string_to_level(arg)
            if level is None:
                raise ParamError(f"Invalid level '{arg}'.")
        else:
            raise ParamError(f"Invalid parameter '{arg}'.")

    if pattern is None:
        raise ParamError("Context not specified.")
    if level is None:
        raise ParamError("Level not specified.")
    return SetArgs(pattern=pattern, level=level)


def _resolve_targets(registry, pattern):
    """Return [(name, handle)] for the contexts pattern selects."""
    if not is_wildcard(pattern):
        try:
            return [(pattern, registry.find_context(pattern))]
        except LogError as e:
            raise ParamError(f"Context '{pattern}' not found.") from e

    try:
        infos = collect_contexts(registry, pattern)
    except LogError as e:
        raise RunError.from_log_error("Error getting contexts info", e) from e
    if not infos:
        raise RunError(f"No contexts matched '{pattern}'.")
    return [(info.name, info.handle) for info in infos]


def run(argv, session):
    """Execute the set command."""
    args = parse(argv)
    if argv[0] == GLOBAL_CONTEXT_NAME:
        get_output().hint('usage.global_alias', 'verbose')

    registry = session.registry
    for name, handle in _resolve_targets(registry, args.pattern):
        print_line(f"Setting context level for '{name}'.")
        try:
            registry.set_context_level(handle, args.level)
        except LogError as e:
            raise RunError.from_log_error(
                "Error setting context log level", e) from e

    return Result.OK
