"""Main CLI entry point for logctl.

Two-pass argument handling:
  1. Global flags (--verbose, --quiet, --show, --config, --version) are
     pulled from the tokens before the command word with argparse.
  2. The command word selects a handler, which parses its own
     positional grammar and returns a Result.

Global flags must precede the command: everything after it belongs to
the command, so messages such as ``log . err -v`` pass through intact.
"""

import argparse
import sys

from logctl._version import BASE_VERSION, VERSION
from logctl.commands import build_dispatch_table
from logctl.errors import LogCtlError, ParamError, Result, exit_code


# ---------------------------------------------------------------------------
# Global flags
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=silent)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
               "help": "Show diagnostic channel (bare --show lists channels)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: ~/.logctl/config.json)"},
    "--version": {"action": "store_true", "default": False,
                  "help": "Show version and exit"},
}

VALUE_FLAGS = {"--config"}
OPTIONAL_VALUE_FLAGS = {"--show"}


def _build_global_parser():
    parser = argparse.ArgumentParser(prog="logctl", add_help=False,
                                     allow_abbrev=False, exit_on_error=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)
    return parser


def _split_leading_flags(argv, command_words):
    """Split argv into (global flag tokens, tokens from the command on)."""
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in command_words or not arg.startswith("-"):
            break
        if arg in VALUE_FLAGS:
            i += 2
            continue
        if arg in OPTIONAL_VALUE_FLAGS and i + 1 < len(argv):
            nxt = argv[i + 1]
            if not nxt.startswith("-") and nxt not in command_words:
                i += 2
                continue
        i += 1
    return argv[:i], argv[i:]


def _extract_global_flags(argv, command_words=()):
    """Parse leading global flags.

    Unrecognized leading options are kept at the front of the remaining
    list, where they are reported as an invalid command.

    Returns (global_namespace, remaining_argv).

    Raises:
        argparse.ArgumentError: e.g. --config without a value
    """
    leading, rest = _split_leading_flags(argv, command_words)
    global_args, unknown = _build_global_parser().parse_known_args(leading)
    return global_args, unknown + rest


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------
def _report(err):
    """Print an error line; parameter errors also get the help hint."""
    from logctl.output import print_error, suggest_help

    print_error(str(err))
    if err.result is Result.PARAM_ERR:
        suggest_help()
    return err.result


def _dispatch(table, remaining, session):
    """Run the selected command and return its Result."""
    from logctl.lib.log_lib import get_output

    try:
        if not remaining:
            raise ParamError("No command specified.")
        cmd, argv = remaining[0], remaining[1:]
        handler = table.get(cmd)
        if handler is None:
            raise ParamError(f"Invalid command '{cmd}'")
        get_output().emit(1, "  [general] {cmd} {argv}",
                          cmd=cmd, argv=argv)
        return handler(argv, session)
    except LogCtlError as e:
        return _report(e)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None, registry=None):
    """Main entry point for logctl.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].
        registry: ContextRegistry to operate on. None opens the
            file-backed registry named by the configuration.

    Returns:
        Exit code (0 = success or help shown).
    """
    if argv is None:
        argv = sys.argv[1:]

    table = build_dispatch_table()

    # Pass 1: global flags before the command word
    try:
        global_args, remaining = _extract_global_flags(argv, table)
    except argparse.ArgumentError as e:
        return exit_code(_report(ParamError(str(e))))

    if global_args.version:
        print(f"logctl {BASE_VERSION} ({VERSION})")
        return 0

    # Bare --show lists channels
    if global_args.show and None in global_args.show:
        from logctl.channels import format_logctl_channel_list
        print(format_logctl_channel_list())
        return 0

    # Initialize THAC0 output system
    from logctl.channels import configure_logctl_channels
    from logctl.lib.log_lib import ChannelSpecError, init_output
    verbosity = (global_args.verbose or 0) - (global_args.quiet or 0)
    channels = [s for s in (global_args.show or []) if s is not None]
    configure_logctl_channels()
    try:
        init_output(verbosity=verbosity, channels=channels)
    except ChannelSpecError as e:
        return exit_code(_report(ParamError(str(e))))
    import logctl.hints  # noqa: F401 - register logctl hints

    from logctl.config import resolve_config
    from logctl.session import Session
    session = Session(resolve_config(global_args.config), registry=registry)

    # Pass 2: the command
    try:
        result = _dispatch(table, remaining, session)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    return exit_code(result)


if __name__ == "__main__":
    sys.exit(main())
