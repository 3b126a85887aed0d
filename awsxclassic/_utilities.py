import functools
import re
import warnings
from typing import Any, Callable, TypeVar

C = TypeVar("C", bound=Callable[..., Any])


def deprecated(message: str) -> Callable[[C], C]:
    """Mark a getter or builder setter as deprecated.

    The field stays usable; every access emits a ``DeprecationWarning`` that
    points callers at the replacement.
    """

    def decorator(fn: C) -> C:
        if not callable(fn):
            raise TypeError("Expected fn to be callable")

        @functools.wraps(fn)
        def deprecated_fn(*args, **kwargs):
            warnings.warn(message, DeprecationWarning, stacklevel=2)
            return fn(*args, **kwargs)

        return deprecated_fn  # type: ignore[return-value]

    return decorator


def to_snake_case(name: str) -> str:
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()


def copy_value(value: Any) -> Any:
    """Shallow-copy plain containers so staged and built values never alias.

    Outputs, tuples and other objects are returned as-is.
    """
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value
