"""logctl subcommands.

Each module exports:
  NAMES                 - command words it answers to
  HELP                  - HelpContent line for the usage text
  register(table)       - add its handler to the dispatch table
  run(argv, session)    - execute; argv excludes the command word

Parsers are pure: they return a typed args object or raise ParamError
before any registry call is made.
"""

from logctl.resolver import is_wildcard


def discover_commands():
    """Import and return all command modules."""
    from logctl.commands import (
        define, flush, help_cmd, klog, log, reconf, set_level, show,
    )
    return [help_cmd, define, flush, log, klog, reconf, set_level, show]


def build_dispatch_table(commands=None):
    """Map every command word to its run() function."""
    table = {}
    for module in commands or discover_commands():
        module.register(table)
    return table


def no_match_message(pattern: str) -> str:
    """Wording for a pattern that selected nothing."""
    if is_wildcard(pattern):
        return f"No contexts matched '{pattern}'."
    return f"Context '{pattern}' not found."
