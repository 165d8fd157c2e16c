"""
THAC0 verbosity constants for logctl's own diagnostic output.

Not to be confused with the syslog levels in logctl.levels: these rank
how chatty the tool itself is. The emit rule is:

    message.level <= threshold  ->  message is shown

    <-- quieter ---------- default ---------- louder -->
    -4    -3     -2       -1      0      1       2      3
    wall  errors warnings minimal default steps  config debug
"""

DEBUG = 3          # Per-key config values, function tracing
CONFIG = 2         # Config sources, enumeration counts
STEPS = 1          # Registry calls and device writes
DEFAULT = 0        # Normal command output

MINIMAL = -1       # Suppress hints
WARNING = -2       # Suppress normal output
ERROR = -3         # Errors only
NOTHING = -4       # Hard wall, exit code only
