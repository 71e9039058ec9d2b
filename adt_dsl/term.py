from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias
from . import tracing
from .base import primitive_tag, type_of, wrap_type_name, Value, WILDCARD
from .enforce import enforce_args
from .errors import (
    ImmutabilityError, NamingError, NonExhaustiveMatchError, TypeMismatchError,
    UnknownPropertyError)
from .ops import show

TypeLike: TypeAlias = "str | DataType | type"

@dataclass
class Hint:
    cls: type
    fields: tuple[TypeLike, ...]

class Ctor:
    """
    The constructor of one variant. Arguments are checked against the declared
    field tags before they are collected into a `Value`.
    """
    name: str
    fields: tuple[str, ...]
    datatype: str

    def __init__(self, name: str, fields: Sequence[str], datatype: str):
        self.name = name
        self.fields = tuple(fields)
        self.datatype = datatype
        self._build = enforce_args(self.fields, self._collect, name)

    def __class_getitem__(cls, fields: TypeLike | tuple[TypeLike, ...]) -> Hint:
        if not isinstance(fields, tuple):
            fields = (fields,)
        return Hint(cls, fields)

    @property
    def arity(self) -> int:
        return len(self.fields)

    def _collect(self, *args: Any) -> Value:
        return Value(self.name, self.datatype, args)

    def __call__(self, *args: Any, **kwargs: Any) -> Value:
        with tracing.span(self.datatype, self.name, args) as trace:
            value = self._build(*args, **kwargs)
            if trace is not None:
                trace.result = str(value)
        return value

    def __repr__(self) -> str:
        fields = " ".join(self.fields)
        return f"<constructor {self.name} {fields}>" if fields else f"<constructor {self.name}>"

class DataType:
    """
    The descriptor of one algebraic data type: a closed set of variants, each
    reachable as an attribute. Zero-field variants are stored as their single
    value, the others as their `Ctor`. The descriptor is frozen once built.
    """
    __name__: str
    type: str
    _variants: dict[str, Ctor | Value]

    def __init__(self, name: str, variants: Mapping[str, Ctor | Value]):
        if "type" in self.__dict__:
            raise ImmutabilityError(self.type)
        object.__setattr__(self, "__name__", name)
        object.__setattr__(self, "type", wrap_type_name(name))
        object.__setattr__(self, "_variants", dict(variants))
        for variant, ctor in variants.items():
            object.__setattr__(self, variant, ctor)

    def __getattr__(self, name: str) -> Any:
        # only reached when regular lookup fails
        raise UnknownPropertyError(self.__dict__.get("type", "(?)"), name)

    def __setattr__(self, name: str, value: Any):
        raise ImmutabilityError(self.type)

    def __delattr__(self, name: str):
        raise ImmutabilityError(self.type)

    def __copy__(self) -> DataType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> DataType:
        return self

    def __iter__(self) -> Iterator[str]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __contains__(self, name: object) -> bool:
        return name in self._variants

    def __repr__(self) -> str:
        return f"<ADT {self.type}: {', '.join(self._variants)}>"

    __str__ = __repr__

    def case(self, handlers: Mapping[str, Callable[..., Any]] | None = None, /,
             **kw_handlers: Callable[..., Any]) -> Callable[[Value], Any]:
        """
        Build a matcher from one handler per variant, keyed by variant name.
        A `_` handler takes no arguments and catches the variants left out.

        Coverage is checked here rather than when the matcher runs. Handler
        names that are neither a variant nor `_` raise `UnknownPropertyError`
        instead of being ignored, so a misspelled variant never goes unnoticed.
        """
        cases = {**(handlers or {}), **kw_handlers}

        for key in cases:
            if key != WILDCARD and key not in self._variants:
                raise UnknownPropertyError(self.type, key)

        missing = [variant for variant in self._variants if variant not in cases]
        if missing and WILDCARD not in cases:
            raise NonExhaustiveMatchError(self.type, missing)

        def match(value: Value) -> Any:
            # same tag is not enough, two ADT calls may share a name
            if (not isinstance(value, Value) or value.type != self.type
                    or value.ctor not in self._variants):
                actual = type_of(value)
                raise TypeMismatchError(
                    f'Expecting a value of type "{self.type}" to match on, '
                    f'received a value of type "{actual}".', 1, self.type, actual)

            with tracing.span(self.type, "case", [value]) as trace:
                if trace is not None:
                    trace.matched = value.ctor
                handler = cases.get(value.ctor)
                if handler is not None:
                    result = handler(*value)
                else:
                    tracing.event(f"{value.ctor} falls through to {WILDCARD}")
                    result = cases[WILDCARD]()
                if trace is not None:
                    trace.result = str(show(result))
            return result

        return match

def to_type_string(type_: TypeLike) -> str:
    match type_:
        case str():
            return type_
        case DataType():
            return type_.type
        case type() if (tag := primitive_tag(type_)) is not None:
            return tag
        case _:
            raise NamingError(f"{type_!r} is neither a type tag nor a type object.", type_)
