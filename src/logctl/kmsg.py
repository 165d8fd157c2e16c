"""Kernel message sink.

Lines are written as ``<priority>message`` followed by a newline; a
negative priority (level 'none') omits the prefix.
"""

from logctl.lib.log_lib import get_output, trace


DEFAULT_KMSG_PATH = "/dev/kmsg"


def format_kmsg(priority: int, message: str) -> str:
    prefix = f"<{priority}>" if priority >= 0 else ""
    return f"{prefix}{message}\n"


class KmsgError(Exception):
    """Opening or writing the kernel message device failed."""

    def __init__(self, action: str, path, os_error: OSError):
        self.action = action
        self.path = path
        self.os_error = os_error
        reason = os_error.strerror or str(os_error)
        super().__init__(f"Error {action} {path}: {reason}")


@trace
def write_kmsg(priority: int, message: str, path=DEFAULT_KMSG_PATH) -> None:
    """Write one kernel message line to path.

    Raises:
        KmsgError: with action 'opening' or 'writing'
    """
    line = format_kmsg(priority, message)
    get_output().emit(1, "  [kmsg] {path} <- {line!r}",
                      channel='kmsg', path=path, line=line)
    try:
        f = open(path, "w", encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        raise KmsgError("opening", path, e) from e
    with f:
        try:
            f.write(line)
            f.flush()
        except OSError as e:
            raise KmsgError("writing", path, e) from e
