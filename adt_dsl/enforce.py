from __future__ import annotations
import functools
from collections.abc import Callable, Sequence
from typing import Any, TypeVar
from . import tracing
from .base import type_of
from .errors import ArityError, TypeMismatchError

def check_types(expected: Sequence[str], args: Sequence[Any]):
    """Raise on the first argument whose tag differs from the expected one."""
    for position, (tag, arg) in enumerate(zip(expected, args), start=1):
        actual = type_of(arg)
        if actual != tag:
            raise TypeMismatchError.at_argument(position, tag, actual)
        tracing.event(f"argument {position}: {tag}")

R = TypeVar("R")

def enforce_args(expected: Sequence[str], func: Callable[..., R], name: str | None = None
) -> Callable[..., R]:
    expected = tuple(expected)
    n = len(expected)
    name = name or getattr(func, "__name__", repr(func))

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> R:
        if kwargs:
            raise ArityError(name, n, len(args) + len(kwargs), keywords=list(kwargs))
        if len(args) != n:
            raise ArityError(name, n, len(args))
        check_types(expected, args)
        return func(*args)

    return wrapper
