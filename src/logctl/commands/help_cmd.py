"""logctl help - print usage information."""

from logctl.errors import Result
from logctl.lib.help_lib import HelpContent
from logctl.usage import build_usage


NAMES = ("help", "-help", "--help")

HELP = HelpContent(
    id="cmd.help",
    command="help",
    description="show usage info",
    priority=10,
)


def register(table):
    """Register the 'help' subcommand and its dash spellings."""
    for name in NAMES:
        table[name] = run


def run(argv, session):
    """Print the usage text. Never opens the registry."""
    print(build_usage())
    return Result.HELP
