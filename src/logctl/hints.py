"""logctl hints for the THAC0 verbosity system.

Import this module to register all logctl hints with the global registry.
"""

from logctl.lib.log_lib import Hint, register_hints


register_hints(
    Hint(
        id='usage.help',
        message='Use -help for usage information.',
        context={'error'},
        min_level=-2,
    ),
    Hint(
        id='usage.global_alias',
        message="  Tip: '.' is shorthand for the global context.",
        context={'verbose'},
        min_level=1,
    ),
    Hint(
        id='config.reconf_source',
        message='  Note: contexts were reloaded from {path}',
        context={'verbose'},
        min_level=1,
    ),
)
