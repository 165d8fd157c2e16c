"""Severity level and facility tables.

Levels follow syslog ranks: lower is more severe. A context accepts a
message when ``message_level <= context_level``, so a context at NONE
accepts nothing.

    none  emerg  alert  crit  err  warning  notice  info  debug
     -1     0      1     2     3      4        5      6     7
"""

from typing import Optional

NONE = -1
EMERG = 0
ALERT = 1
CRIT = 2
ERR = 3
WARNING = 4
NOTICE = 5
INFO = 6
DEBUG = 7

# Ordered, NONE first (shown by help, skipped by MIN_LEVEL..MAX_LEVEL ranges)
LEVELS = (
    ('none', NONE),
    ('emerg', EMERG),
    ('alert', ALERT),
    ('crit', CRIT),
    ('err', ERR),
    ('warning', WARNING),
    ('notice', NOTICE),
    ('info', INFO),
    ('debug', DEBUG),
)

MIN_LEVEL = EMERG
MAX_LEVEL = DEBUG

FACILITIES = (
    ('kern', 0 << 3),
    ('user', 1 << 3),
    ('mail', 2 << 3),
    ('daemon', 3 << 3),
    ('auth', 4 << 3),
    ('syslog', 5 << 3),
    ('lpr', 6 << 3),
    ('news', 7 << 3),
    ('uucp', 8 << 3),
    ('cron', 9 << 3),
    ('authpriv', 10 << 3),
    ('ftp', 11 << 3),
    ('local0', 16 << 3),
    ('local1', 17 << 3),
    ('local2', 18 << 3),
    ('local3', 19 << 3),
    ('local4', 20 << 3),
    ('local5', 21 << 3),
    ('local6', 22 << 3),
    ('local7', 23 << 3),
)

_LEVEL_BY_NAME = dict(LEVELS)
_LEVEL_NAMES = {value: name for name, value in LEVELS}
_FACILITY_BY_NAME = dict(FACILITIES)
_FACILITY_NAMES = {value: name for name, value in FACILITIES}


def string_to_level(name: str) -> Optional[int]:
    """'err' -> 3. None if the token is not an exact level name."""
    return _LEVEL_BY_NAME.get(name)


def level_to_string(level: int) -> Optional[str]:
    """3 -> 'err'. None if the rank is not recognized."""
    return _LEVEL_NAMES.get(level)


def string_to_facility(name: str) -> Optional[int]:
    """'user' -> 8. None if the token is not an exact facility name."""
    return _FACILITY_BY_NAME.get(name)


def facility_to_string(facility: int) -> Optional[str]:
    """8 -> 'user'. None if the facility is not recognized."""
    return _FACILITY_NAMES.get(facility)


def is_valid_level(level: int) -> bool:
    """True for NONE and every rank from EMERG to DEBUG."""
    return level in _LEVEL_NAMES
