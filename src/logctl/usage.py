"""Usage text for ``logctl help``."""

from logctl import levels
from logctl.lib.help_lib import HelpContent, HelpSection


PROG = "logctl"


def _command_section():
    from logctl.commands import discover_commands

    section = HelpSection("commands", f"{PROG} COMMAND [PARAM...]")
    section.add_items(*(module.HELP for module in discover_commands()))
    return section


def _options_section():
    section = HelpSection("options", "Global options (before COMMAND)")
    section.add_items(
        HelpContent(id="opt.verbose", command="-v, --verbose",
                    description="more diagnostics (-v, -vv, -vvv)"),
        HelpContent(id="opt.quiet", command="-Q, --quiet",
                    description="fewer diagnostics (-Q ... -QQQQ=silent)"),
        HelpContent(id="opt.show", command="--show [CHANNEL[:LEVEL]]",
                    description="enable a diagnostic channel"),
        HelpContent(id="opt.config", command="--config PATH",
                    description="config file (default: ~/.logctl/config.json)"),
        HelpContent(id="opt.version", command="--version",
                    description="show version"),
    )
    return section


def format_levels():
    """One line per level, 'none' sentinel included, with its rank."""
    lines = ["Levels:"]
    for level in range(levels.NONE, levels.MAX_LEVEL + 1):
        lines.append(f"  {levels.level_to_string(level):<10}  # {level}")
    return "\n".join(lines)


def build_usage():
    """Assemble the full usage text."""
    commands = _command_section()
    blocks = [
        commands.title + "\n" + commands.format_section(PROG, show_title=False),
        _options_section().format_section(PROG),
        "Contexts:\n  The global context can be specified as '.'",
        format_levels(),
    ]
    return "\n\n".join(blocks)
