from __future__ import annotations
from typing import Any
from .base import type_of, Value
from .errors import TypeMismatchError

def eq(a: Any, b: Any) -> bool:
    """Structural equality of two values of the same type."""
    if type_of(a) != type_of(b):
        raise TypeMismatchError(
            f"You're trying to compare a value of type {type_of(a)} with a value of type "
            f'{type_of(b)}. You can use "type_of" to check if two values are of the same type.',
            expected=type_of(a), actual=type_of(b))

    match a, b:
        case Value(), Value():
            return a.ctor == b.ctor and all(eq(x, y) for x, y in zip(a, b))
        case (list() | tuple(), list() | tuple()):
            return len(a) == len(b) and all(eq(x, y) for x, y in zip(a, b))
        case _:
            return a == b

def show_field(value: Any) -> str:
    """`show` for a value nested inside another one, always a string."""
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case _:
            return str(show(value))

def show(value: Any) -> Any:
    """
    Render a value for display. Tagged values become `(Ctor field ...)`,
    plain sequences `[ item, ... ]`; primitives and None are returned as-is.
    Nested inside those, None renders empty and booleans as `true`/`false`.
    """
    match value:
        case None | bool() | int() | float() | str():
            return value
        case Value() if len(value) == 0:
            return value.ctor
        case Value():
            fields = " ".join(show_field(field) for field in value)
            return f"({value.ctor} {fields})"
        case list() | tuple():
            items = ", ".join(show_field(item) for item in value)
            return f"[ {items} ]"
        case _ if callable(value):
            return value
        case _:
            return str(value)
