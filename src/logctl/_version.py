"""
Version information for logctl.

This file is the canonical source for version numbers.
Format: MAJOR.MINOR.PATCH[-PHASE]_BRANCH_BUILD-YYYYMMDD-COMMITHASH
Example: 0.1.0-alpha_main_7-20261019-3f9c2e1a
"""

# Version components - edit these for version bumps
MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "alpha"  # None, "alpha", "beta", "rc1", etc.

# Auto-updated by git hooks - do not edit manually
__version__ = "0.1.0-alpha_main_7-20261019-3f9c2e1"
__app_name__ = "logctl"


def get_version():
    """Return the full version string including branch and build info."""
    return __version__


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    if "_" in __version__:
        return __version__.split("_")[0]
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


VERSION = get_version()
BASE_VERSION = get_base_version()
