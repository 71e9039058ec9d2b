from __future__ import annotations
import inspect
from typing import Any, Callable, overload
from .adt import ADT
from .base import wrap_type_name
from .term import Hint, TypeLike, DataType

class SelfSingleton:
    """Stands for the type being declared inside its own `Ctor[...]` hints."""

    def __repr__(self) -> str:
        return "Self"

Self = SelfSingleton()

def remove_stub(field: TypeLike | SelfSingleton, type_name: str) -> TypeLike:
    return type_name if isinstance(field, SelfSingleton) else field

def variant_defs(cls: type, name: str) -> dict[str, list[TypeLike]]:
    """Collect the `Ctor[...]` annotations of a class body, in declaration order."""
    type_name = wrap_type_name(name)
    annotations = inspect.get_annotations(cls, eval_str=True)
    return {
        variant: [remove_stub(field, type_name) for field in hint.fields]
        for variant, hint in annotations.items()
        if isinstance(hint, Hint)
    }

@overload
def datatype(cls: type, /) -> DataType: ...

@overload
def datatype(*, name: str | None = None) -> Callable[[type], DataType]: ...

def datatype(cls: type | None = None, /, *, name: str | None = None) -> Any:
    """
    Class-body syntax for `ADT`:

        @datatype
        class IntList:
            Cons: Ctor["number", Self]
            Nil: Ctor[()]

    The decorated name is bound to the resulting descriptor, not to a class.
    """
    def decorator(cls: type) -> DataType:
        type_name = name or cls.__name__
        return ADT(type_name, variant_defs(cls, type_name))

    if cls is None:
        return decorator
    return decorator(cls)
