"""Core type definitions for fieldkit."""

from enum import Enum, auto
from typing import Literal


class Absent(Enum):
    """Marker for a value an accessor could not produce."""

    ABSENT = auto()

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent.ABSENT
"""Singleton returned by accessors when a field has no value to report."""

type Lookup[T] = T | None | Literal[Absent.ABSENT]
"""Result of a generic value read: a value, an explicit None, or ABSENT."""

type Shallow[T] = T
"""Type alias indicating a value is a shallow clone.

When you see `Shallow[T]` in a return type, the returned object is a new
instance whose fields reference the same values as the source. Mutating a
referenced list or object through the clone affects the source too.
"""
