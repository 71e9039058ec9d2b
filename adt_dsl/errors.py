from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tracing import TraceTree

class ADTError(Exception):
    """Base class of every contract violation raised by this library."""

    def __init__(self, message: str):
        self.message = message
        self.traces: list[TraceTree] = []
        super().__init__(message)

class NamingError(ADTError, ValueError):
    def __init__(self, message: str, name: object = None):
        self.name = name
        super().__init__(message)

class ArityError(ADTError, TypeError):
    def __init__(self, func: str, expected: int, received: int,
                 keywords: Sequence[str] = ()):
        self.func = func
        self.expected = expected
        self.received = received
        self.keywords = tuple(keywords)
        if self.keywords:
            message = (f'"{func}" only accepts positional arguments, you tried to pass in '
                       f'keyword arguments: {", ".join(self.keywords)}.')
        else:
            plural = "" if expected == 1 else "s"
            message = (f'"{func}" only accepts {expected} argument{plural}, '
                       f'you tried to pass in {received}.')
        super().__init__(message)

class TypeMismatchError(ADTError, TypeError):
    def __init__(self, message: str, position: int | None = None,
                 expected: str | None = None, actual: str | None = None):
        self.position = position
        self.expected = expected
        self.actual = actual
        super().__init__(message)

    @classmethod
    def at_argument(cls, position: int, expected: str, actual: str) -> TypeMismatchError:
        message = (f'Expecting type "{expected}" at argument {position}, '
                   f'received an argument of type "{actual}".')
        return cls(message, position, expected, actual)

class NonExhaustiveMatchError(ADTError, ValueError):
    def __init__(self, type_: str, missing: list[str]):
        self.type = type_
        self.missing = missing
        names = ", ".join(f'"{name}"' for name in missing)
        super().__init__(
            f"You have not covered every possible case of {type_} (missing {names}). "
            'Use a "_" property to cover all unlisted cases.')

class ImmutabilityError(ADTError, AttributeError):
    def __init__(self, type_: str, message: str | None = None):
        self.type = type_
        super().__init__(message or (
            f"You cannot modify the {type_} type object directly, "
            "modify the available properties where you create it."))

class UnknownPropertyError(ADTError, AttributeError):
    def __init__(self, type_: str, name: str):
        self.type = type_
        super().__init__(f'{type_} has no "{name}" property.')
        # AttributeError.__init__ resets name, so it is assigned afterwards
        self.name = name
