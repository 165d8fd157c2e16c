"""
log_lib - THAC0 verbosity system with named channels.

Public API:
    OutputManager      - central coordinator
    init_output        - singleton initialization
    get_output         - access singleton
    Hint               - hint dataclass
    register_hint      - register a hint
    register_hints     - register multiple hints
    get_hint           - look up hint by ID
    ChannelConfig      - channel configuration
    ChannelSpecError   - malformed channel spec
    parse_channel_spec - parse CLI channel spec
    configure_channels - install an application channel set
    trace              - function tracing decorator
"""

from .manager import OutputManager, init_output, get_output
from .hints import (
    Hint, register_hint, register_hints, get_hint,
)
from .channels import (
    ChannelConfig, ChannelSpecError, parse_channel_spec,
    configure_channels, format_channel_list,
)
from .trace import trace

__all__ = [
    'OutputManager', 'init_output', 'get_output',
    'Hint', 'register_hint', 'register_hints', 'get_hint',
    'ChannelConfig', 'ChannelSpecError', 'parse_channel_spec',
    'configure_channels', 'format_channel_list',
    'trace',
]
