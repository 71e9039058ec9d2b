from .adt import ADT
from .base import type_of, Value
from .enforce import enforce_args
from .errors import (
    ADTError, ArityError, ImmutabilityError, NamingError, NonExhaustiveMatchError,
    TypeMismatchError, UnknownPropertyError)
from .ops import eq, show
from .std import Either, either, fst, just, Maybe, maybe, snd, Tuple, tuple_
from .sugar import datatype, Self
from .term import Ctor, DataType, to_type_string
from .tracing import disable_tracing, enable_tracing, traced

__all__ = [
    "ADT", "ADTError", "ArityError", "Ctor", "DataType", "datatype", "disable_tracing",
    "Either", "either", "enable_tracing", "enforce_args", "eq", "fst", "ImmutabilityError",
    "just", "Maybe", "maybe", "NamingError", "NonExhaustiveMatchError", "Self", "show",
    "snd", "to_type_string", "traced", "Tuple", "tuple_", "type_of", "TypeMismatchError",
    "UnknownPropertyError", "Value",
]
