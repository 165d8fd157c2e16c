"""Command outcomes and the exceptions commands raise.

Handlers return Result.OK (or Result.HELP) and raise ParamError or
RunError for everything else; the dispatcher turns those into messages
and a process exit code.
"""

from enum import Enum

from logctl.registry import LogError


class Result(Enum):
    OK = 'ok'
    HELP = 'help'
    PARAM_ERR = 'param_err'
    RUN_ERR = 'run_err'


class LogCtlError(Exception):
    """Base for errors reported to the operator as a single line."""

    result = Result.RUN_ERR


class ParamError(LogCtlError):
    """Bad, missing or extra command-line argument."""

    result = Result.PARAM_ERR


class RunError(LogCtlError):
    """An operation failed after the arguments were accepted."""

    result = Result.RUN_ERR

    @classmethod
    def from_log_error(cls, prefix: str, err: LogError) -> 'RunError':
        """Build ``<prefix>: 0x00000005 (ContextNotFound)``."""
        return cls(f"{prefix}: {err.describe()}")


def exit_code(result: Result) -> int:
    """0 for OK and HELP, 1 for any error outcome."""
    return 0 if result in (Result.OK, Result.HELP) else 1
