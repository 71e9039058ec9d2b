from __future__ import annotations
from typing import Any
from ..base import type_of, Value
from ..errors import TypeMismatchError

def expect_family(value: Any, family: str) -> Value:
    """Check that `value` was built by one of the `family` builders, e.g. any `Maybe`."""
    if not isinstance(value, Value) or not value.type.startswith(f"({family} "):
        actual = type_of(value)
        raise TypeMismatchError(
            f'Expecting a value of type "({family} ...)", received a value of type "{actual}".',
            1, f"({family} ...)", actual)
    return value
