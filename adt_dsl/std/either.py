from __future__ import annotations
import logging
from collections.abc import Callable
from functools import cache
from typing import Any, TypeVar
from .common import expect_family
from ..adt import ADT
from ..base import Value
from ..term import DataType, to_type_string, TypeLike

logger: logging.Logger = logging.getLogger(__name__)

# Sum type: Either A B is either a Left A or a Right B
def Either(left: TypeLike, right: TypeLike) -> DataType:
    return _either(to_type_string(left), to_type_string(right))

@cache
def _either(left: str, right: str) -> DataType:
    logger.debug("building Either %s %s", left, right)
    return ADT(f"Either {left} {right}", {
        "Left": [left],
        "Right": [right],
    })

# Eliminator for Either: applies f to Left values and g to Right values
T = TypeVar("T")

def either(f: Callable[[Any], T], g: Callable[[Any], T], e: Value) -> T:
    expect_family(e, "Either")
    return f(e[0]) if e.ctor == "Left" else g(e[0])
