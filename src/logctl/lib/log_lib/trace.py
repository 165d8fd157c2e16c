"""
Function tracing decorator.

Routes trace output through the OutputManager singleton at level 3 on
the 'trace' channel.
"""

import functools
import inspect

from .verbosity import DEBUG


def _short_repr(value):
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator tracing entry, return value and exceptions of func.

    Active when the 'trace' channel threshold is >= 3 (``--show trace:3``).
    """
    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_output

        out = get_output()
        if out.threshold('trace') < DEBUG:
            return func(*args, **kwargs)

        args_repr = [_short_repr(a) for a in args]
        args_repr += [f"{k}={_short_repr(v)}" for k, v in kwargs.items()]
        out.emit(3, "[TRACE] >> {mod}.{fn}({args})", channel='trace',
                 mod=module_name, fn=func.__name__, args=', '.join(args_repr))
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.emit(3, "[TRACE] !! {mod}.{fn} raised: {exc}: {msg}",
                     channel='trace', mod=module_name, fn=func.__name__,
                     exc=type(e).__name__, msg=str(e))
            raise
        if result is not None:
            out.emit(3, "[TRACE] << {mod}.{fn} returned: {val}",
                     channel='trace', mod=module_name, fn=func.__name__,
                     val=_short_repr(result))
        return result

    return wrapper
