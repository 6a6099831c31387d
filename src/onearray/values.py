"""Value model and validators shared by the array container."""

from __future__ import annotations

import inspect
import numbers
from collections.abc import Iterator, Mapping, Sequence
from enum import Enum
from typing import Final, Protocol, runtime_checkable

from .errors import InvalidKeyError


class _Absent:
    """Singleton marking a missing element; never a storable value."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


@runtime_checkable
class SequenceLike(Protocol):
    """Anything that can be measured and indexed."""

    def __len__(self) -> int: ...

    def __getitem__(self, index, /): ...


class SourceKind(str, Enum):
    ARRAY = "array"
    INDEXABLE = "indexable"
    TABLE = "table"
    TEXT = "text"
    ITERATOR = "iterator"
    PRODUCER = "producer"
    UNSUPPORTED = "unsupported"


def is_text(value: object) -> bool:
    return isinstance(value, str)


def is_vector(value: object) -> bool:
    """1-D array objects (NumPy, JAX) exposing ``ndim`` and ``tolist``."""
    return getattr(value, "ndim", None) == 1 and hasattr(value, "tolist")


def is_dense_table(value: object) -> bool:
    """Mappings keyed exactly by ``1..n``; the empty mapping qualifies."""
    if not isinstance(value, Mapping):
        return False
    count = len(value)
    for key in value:
        position = position_of(key)
        if position is None or position < 1 or position > count:
            return False
    return True


def source_kind(value: object) -> SourceKind:
    from .array import Array

    if isinstance(value, Array):
        return SourceKind.ARRAY
    if is_text(value):
        return SourceKind.TEXT
    if is_vector(value):
        return SourceKind.INDEXABLE
    if isinstance(value, Mapping):
        return SourceKind.TABLE if is_dense_table(value) else SourceKind.UNSUPPORTED
    if isinstance(value, Sequence):
        return SourceKind.INDEXABLE
    if isinstance(value, Iterator):
        return SourceKind.ITERATOR
    if is_producer(value):
        return SourceKind.PRODUCER
    return SourceKind.UNSUPPORTED


def is_producer(value: object) -> bool:
    """Zero-argument callables that return the next value on each call.

    Classes and generator functions are excluded: calling them never yields
    the ``None`` that ends a pull loop.
    """
    if not callable(value) or inspect.isclass(value) or inspect.isgeneratorfunction(value):
        return False
    try:
        inspect.signature(value).bind()
    except (TypeError, ValueError):
        return False
    return True


def table_elements(value: Mapping) -> list[object]:
    """Elements of a dense table in key order."""
    ordered = sorted(value.items(), key=lambda item: position_of(item[0]))
    return [element for _, element in ordered]


def position_of(key: object) -> int | None:
    """Integer position for ``key`` or ``None`` when it is not a valid key."""
    if isinstance(key, bool):
        return None
    if isinstance(key, numbers.Integral):
        return int(key)
    if isinstance(key, numbers.Real):
        as_float = float(key)
        if as_float.is_integer():
            return int(as_float)
    return None


def validate_key(key: object) -> int:
    position = position_of(key)
    if position is None:
        raise InvalidKeyError(key)
    return position


def translate_index(index: int, length: int) -> int:
    """Map a negative index onto its position counted from the end."""
    if index < 0:
        return length + index + 1
    return index


def clamp_range(start: int, finish: int, length: int) -> tuple[int, int]:
    start = max(translate_index(start, length), 1)
    finish = min(translate_index(finish, length), length)
    return start, finish


def text_of(value: object) -> str | None:
    """Textual form used by ``join``; ``None`` when the value has none."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return str(float(value))
    return None
