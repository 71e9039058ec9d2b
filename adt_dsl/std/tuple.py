from __future__ import annotations
import logging
from functools import cache
from typing import Any
from .common import expect_family
from ..adt import ADT
from ..base import type_of, Value
from ..term import DataType, to_type_string, TypeLike

logger: logging.Logger = logging.getLogger(__name__)

# Pair of two values of fixed types
def Tuple(first: TypeLike, second: TypeLike) -> DataType:
    return _tuple(to_type_string(first), to_type_string(second))

@cache
def _tuple(first: str, second: str) -> DataType:
    logger.debug("building Tuple %s %s", first, second)
    return ADT(f"Tuple {first} {second}", {
        "Tuple": [first, second],
    })

# Builds a pair, inferring both field types from the arguments
def tuple_(a: Any, b: Any) -> Value:
    return Tuple(type_of(a), type_of(b)).Tuple(a, b)

# First projection of a pair
def fst(pair: Value) -> Any:
    return expect_family(pair, "Tuple")[0]

# Second projection of a pair
def snd(pair: Value) -> Any:
    return expect_family(pair, "Tuple")[1]
