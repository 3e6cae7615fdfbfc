"""A deep equivalence relation for arbitrary values."""

from __future__ import annotations

import inspect
from typing import Any


def _is_struct(v: Any) -> bool:
    return (
        hasattr(v, "__dict__")
        and not isinstance(v, type)
        and not inspect.isroutine(v)
        and type(v).__module__ != "builtins"
    )


def _equal(x: Any, y: Any, seen: set[tuple[int, int]]) -> bool:
    if x is None or y is None:
        return x is y
    if type(x) is not type(y):
        return False

    if isinstance(x, (list, tuple, dict)) or _is_struct(x):
        if x is y:
            return True
        key = (id(x), id(y))
        if key in seen:
            return True
        seen.add(key)

    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(_equal(a, b, seen) for a, b in zip(x, y))
    if isinstance(x, dict):
        if len(x) != len(y):
            return False
        return all(k in y and _equal(v, y[k], seen) for k, v in x.items())
    if _is_struct(x):
        return _equal(vars(x), vars(y), seen)
    return bool(x == y)


def equal(x: Any, y: Any) -> bool:
    """Report whether x and y are deeply equal.

    Values of different types are never equal. Map keys are compared with
    ==, not deeply. Cyclic structures are handled.
    """
    return _equal(x, y, set())