from __future__ import annotations
import logging
from collections.abc import Callable
from functools import cache
from typing import Any, TypeVar
from .common import expect_family
from ..adt import ADT
from ..base import type_of, Value
from ..term import DataType, to_type_string, TypeLike

logger: logging.Logger = logging.getLogger(__name__)

# Optional value: Maybe T is either Just a T or Nothing
def Maybe(type_: TypeLike) -> DataType:
    return _maybe(to_type_string(type_))

@cache
def _maybe(tag: str) -> DataType:
    logger.debug("building Maybe %s", tag)
    return ADT(f"Maybe {tag}", {
        "Just": [tag],
        "Nothing": [],
    })

# Wraps a value in Just, inferring the Maybe type from the value itself
def just(value: Any) -> Value:
    return Maybe(type_of(value)).Just(value)

# Eliminator for Maybe: default for Nothing, f(x) for Just x
U = TypeVar("U")

def maybe(default: U, f: Callable[[Any], U], m: Value) -> U:
    expect_family(m, "Maybe")
    return f(m[0]) if m.ctor == "Just" else default
