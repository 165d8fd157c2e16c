"""logctl - logging context administration CLI.

Lists logging contexts, changes their enabled levels, defines new
contexts and injects test messages into a context registry.
"""

from logctl._version import __version__, __app_name__

__all__ = ["__version__", "__app_name__"]
