"""Structured error types for array construction, keys, and folds."""

from __future__ import annotations

from dataclasses import dataclass


class ArrayError(Exception):
    """Base class for structured onearray errors."""


class InvalidArgumentError(ArrayError, TypeError):
    """Source value has a shape that cannot be normalized into an array."""

    @classmethod
    def for_source(cls, value: object, *, where: str = "Array.from_") -> "InvalidArgumentError":
        return cls(f"{where} argument was not a valid iterable value (received {type(value).__name__})")


@dataclass(frozen=True)
class InvalidKeyError(ArrayError, TypeError):
    """Assignment or lookup through a key that is not an integer position."""

    key: object

    def __str__(self) -> str:
        return f"Cannot use non-integer index {self.key!r} ({type(self.key).__name__}) on an array"


@dataclass(frozen=True)
class NotStringConvertibleError(ArrayError, TypeError):
    """``join`` met an element without a textual form."""

    index: int
    type_name: str

    def __str__(self) -> str:
        return f"Invalid value ({self.type_name}) at index {self.index} in array for join"


class EmptyReduceError(ArrayError, ValueError):
    """``reduce`` on an empty array without an initial value."""

    def __init__(self, message: str = "Reduce of empty array with no initial value") -> None:
        super().__init__(message)
