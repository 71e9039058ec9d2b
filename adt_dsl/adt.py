from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from .base import RESERVED_NAMES, WILDCARD, wrap_type_name, Value
from .errors import NamingError
from .term import Ctor, DataType, to_type_string, TypeLike

logger: logging.Logger = logging.getLogger(__name__)

def check_variant_name(type_name: str, name: object):
    if not isinstance(name, str) or not name.isidentifier():
        raise NamingError(f"{name!r} is not a valid constructor name for {type_name}.", name)
    if name in RESERVED_NAMES:
        raise NamingError(f'"{name}" can not be used for a type constructor, it is reserved.', name)
    if name.startswith(WILDCARD):
        raise NamingError(
            f'"{name}" can not be used for a type constructor, names starting with '
            f'"{WILDCARD}" are reserved.', name)

def ADT(name: str, constructors: Mapping[str, Sequence[TypeLike]]) -> DataType:
    """
    Build the descriptor of a new algebraic data type.

    `constructors` maps each variant name to the types of its positional
    fields, given as tag strings (`"number"`), builtin classes (`int`) or other
    descriptors. Variants without fields are built once, here, and exposed as
    values; the rest are exposed as checked constructors.
    """
    if not isinstance(name, str):
        raise NamingError("You forgot to give your type a name.", name)

    type_name = wrap_type_name(name)
    variants: dict[str, Ctor | Value] = {}

    for ctor_name, fields in constructors.items():
        check_variant_name(type_name, ctor_name)
        if isinstance(fields, str):
            raise NamingError(
                f'The fields of "{ctor_name}" must be a sequence of types, not the string {fields!r}.',
                ctor_name)

        ctor = Ctor(ctor_name, [to_type_string(field) for field in fields], type_name)
        variants[ctor_name] = ctor() if ctor.arity == 0 else ctor

    datatype = DataType(name, variants)
    logger.debug("defined %s with variants %s", type_name, ", ".join(variants) or "<none>")
    return datatype
