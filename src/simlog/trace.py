"""
Function tracing decorator.

Writes a FUNCTION-level entry line through a LogComponent, naming the
call's arguments, rather than requiring a component.function(...) call
at the top of every traced function.
"""

import functools
import inspect
from pathlib import Path

from .levels import FUNCTION


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def _takes_self(func):
    """True if func's first parameter is self or cls."""
    try:
        params = list(inspect.signature(func).parameters)
    except (TypeError, ValueError):
        return False
    return bool(params) and params[0] in ('self', 'cls')


def trace(component, skip_self=True):
    """Decorator to trace calls to func via component.

    Shows the entry line when FUNCTION is enabled on the component and
    calls straight through otherwise.

    Args:
        component: LogComponent the trace lines belong to
        skip_self: Leave a leading self or cls argument out of the line
    """
    def decorator(func):
        is_method = skip_self and _takes_self(func)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if component.is_enabled(FUNCTION):
                shown = args[1:] if is_method and args else args
                params = [_short_repr(a) for a in shown]
                params.extend(f"{k}={_short_repr(v)}" for k, v in kwargs.items())
                component.function(*params, func_name=func.__name__)
            return func(*args, **kwargs)

        return wrapper

    return decorator
