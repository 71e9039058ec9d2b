from .either import Either, either
from .maybe import just, Maybe, maybe
from .tuple import fst, snd, Tuple, tuple_

__all__ = ["Either", "either", "fst", "just", "Maybe", "maybe", "snd", "Tuple", "tuple_"]
