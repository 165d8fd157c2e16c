"""logctl klog - write a line to the kernel message device."""

from dataclasses import dataclass

from logctl import levels
from logctl.errors import ParamError, Result, RunError
from logctl.kmsg import KmsgError, write_kmsg
from logctl.lib.help_lib import HelpContent


NAMES = ("klog",)

HELP = HelpContent(
    id="cmd.klog",
    command="klog [-p <level>] <msg>",
    description="log a kernel message",
    priority=50,
)


@dataclass
class KlogArgs:
    message: str
    level: int = levels.NOTICE


def register(table):
    """Register the 'klog' subcommand."""
    for name in NAMES:
        table[name] = run


def parse(argv):
    level = levels.NOTICE
    message = None

    args = iter(argv)
    for arg in args:
        if arg.startswith("-"):
            if arg != "-p":
                raise ParamError(f"Invalid parameter '{arg}'.")
            value = next(args, None)
            if value is None:
                raise ParamError("Invalid parameter: -p requires value")
            level = levels.string_to_level(value)
            if level is None:
                raise ParamError(f"Invalid level '{value}'.")
        elif message is None:
            message = arg
        else:
            raise ParamError(f"Invalid parameter '{arg}'.")

    if message is None:
        raise ParamError("Message not specified.")
    return KlogArgs(message=message, level=level)


def run(argv, session):
    """Execute the klog command."""
    args = parse(argv)
    try:
        write_kmsg(args.level, args.message, session.settings["kmsg_path"])
    except KmsgError as e:
        raise RunError(str(e)) from e
    return Result.OK
