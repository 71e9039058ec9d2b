from __future__ import annotations
from collections.abc import Iterable
from typing import Any
from .errors import ImmutabilityError

# Primitive categories reported by `type_of` for untagged values
NUMBER = "number"
STRING = "string"
BOOLEAN = "boolean"
FUNCTION = "function"
NULL = "null"
OBJECT = "object"

PRIMITIVE_TAGS = frozenset({NUMBER, STRING, BOOLEAN, FUNCTION, NULL, OBJECT})

RESERVED_NAMES = ("type", "case")
WILDCARD = "_"

def wrap_type_name(name: str) -> str:
    return f"({name})"

class Value(tuple):
    """
    A constructed variant: a fixed-length tuple of fields tagged with the
    variant name (`ctor`) and the wrapped tag of its type (`type`).
    """
    ctor: str
    type: str

    def __new__(cls, ctor: str, type_: str, fields: Iterable[Any] = ()):
        value = super().__new__(cls, fields)
        object.__setattr__(value, "ctor", ctor)
        object.__setattr__(value, "type", type_)
        return value

    def __setattr__(self, name: str, _: Any):
        raise ImmutabilityError(self.type, f"Values of {self.type} are immutable, cannot set \"{name}\".")

    def __delattr__(self, name: str):
        raise ImmutabilityError(self.type, f"Values of {self.type} are immutable, cannot delete \"{name}\".")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return False
        return self.type == other.type and self.ctor == other.ctor and tuple.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((self.type, self.ctor, tuple(self)))

    def __reduce__(self):
        return (Value, (self.ctor, self.type, tuple(self)))

    def __str__(self) -> str:
        from .ops import show
        return show(self)

    __repr__ = __str__

_PRIMITIVE_CLASSES: dict[type, str] = {
    bool: BOOLEAN,
    int: NUMBER,
    float: NUMBER,
    str: STRING,
    type(None): NULL,
}

def type_of(value: Any) -> str:
    match value:
        case Value():
            return value.type
        # before the numbers: True is an int too
        case bool():
            return BOOLEAN
        case int() | float():
            return NUMBER
        case str():
            return STRING
        case None:
            return NULL
        case _ if callable(value):
            return FUNCTION
        case _:
            return OBJECT

def primitive_tag(cls: type) -> str | None:
    if cls is object:
        return OBJECT
    return _PRIMITIVE_CLASSES.get(cls)
