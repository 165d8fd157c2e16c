"""logctl channel definitions for the THAC0 verbosity system.

Configures the generic log_lib channel infrastructure with the
diagnostic channels logctl emits on. Keeps log_lib itself
project-agnostic.
"""

from logctl.lib.log_lib import channels as _ch


LOGCTL_CHANNELS = {
    'registry',     # Context enumeration, lookups and level changes
    'config',       # Configuration loading and resolution
    'kmsg',         # Kernel message device writes
    'general',      # Default channel
    'hint',         # Contextual tips and suggestions
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

LOGCTL_CHANNEL_DESCRIPTIONS = {
    'registry': 'Context enumeration, lookups and level changes',
    'config':   'Configuration loading and resolution',
    'kmsg':     'Kernel message device writes',
    'general':  'General output',
    'hint':     'Contextual tips and suggestions',
    'error':    'Error messages',
    'trace':    'Function call tracing',
}

LOGCTL_OPT_IN_CHANNELS = {
    'trace',
}


def configure_logctl_channels():
    """Install the logctl channel set. Call once before init_output()."""
    _ch.configure_channels(LOGCTL_CHANNELS, LOGCTL_CHANNEL_DESCRIPTIONS,
                           LOGCTL_OPT_IN_CHANNELS)


def format_logctl_channel_list() -> str:
    """Format logctl channels for bare --show listing."""
    configure_logctl_channels()
    return _ch.format_channel_list()
