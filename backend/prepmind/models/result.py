"""
Tagged result type used at every service boundary.

Services never hand back loosely-typed ``{"success": ..., ...}`` dictionaries.
A call either produces ``Ok(value)`` or ``Err(kind, message)``; the HTTP layer
is the only place that turns these back into the wire shape.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    GENERATION = "generation"
    DECODE = "decode"
    EXECUTION = "execution"
    PERSISTENCE = "persistence"
    STATE = "state"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
