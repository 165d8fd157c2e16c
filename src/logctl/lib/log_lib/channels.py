"""
Channel configuration and parsing for the THAC0 verbosity system.

Channels are named diagnostic categories. Each channel can carry its own
threshold, overriding the global verbosity.

Channel spec syntax:
    CHANNEL[:LEVEL]

    Examples:
        registry        # level 0
        registry:2      # level 2
"""

from dataclasses import dataclass


# Populated by the application via configure_channels()
KNOWN_CHANNELS = {'general', 'error', 'hint', 'trace'}

CHANNEL_DESCRIPTIONS = {
    'general': 'General output',
    'error':   'Error messages',
    'hint':    'Contextual tips and suggestions',
    'trace':   'Function call tracing',
}

# Channels that are OFF by default; they get a default override of -1
OPT_IN_CHANNELS = {'trace'}


class ChannelSpecError(ValueError):
    """A --show channel spec could not be parsed."""


@dataclass
class ChannelConfig:
    """Configuration for a single output channel."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse ``CHANNEL[:LEVEL]`` into a ChannelConfig.

    Raises:
        ChannelSpecError: empty name, non-integer level or extra fields
    """
    name, sep, level_str = spec.partition(':')
    if not name:
        raise ChannelSpecError(f"Missing channel name in '{spec}'")
    if ':' in level_str:
        raise ChannelSpecError(f"Too many fields in '{spec}'")

    level = 0
    if sep and level_str:
        try:
            level = int(level_str)
        except ValueError:
            raise ChannelSpecError(
                f"Invalid channel level '{level_str}' in '{spec}'") from None

    return ChannelConfig(name=name, level=level)


def configure_channels(known, descriptions, opt_in=()):
    """Replace the channel set with an application-specific one."""
    global KNOWN_CHANNELS, CHANNEL_DESCRIPTIONS, OPT_IN_CHANNELS
    KNOWN_CHANNELS = set(known)
    CHANNEL_DESCRIPTIONS = dict(descriptions)
    OPT_IN_CHANNELS = set(opt_in)


def format_channel_list() -> str:
    """Format the list of known channels for display."""
    lines = ["Available channels:"]
    max_name = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{max_name}}  {desc}{opt_in}")
    return "\n".join(lines)
