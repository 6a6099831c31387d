"""1-based ordered array with a JavaScript-style method set."""

from __future__ import annotations

import inspect
import logging
import os
import weakref
from collections.abc import Callable, Iterator
from typing import Final, Generic, TypeVar

from .errors import EmptyReduceError, InvalidArgumentError, NotStringConvertibleError
from .values import (
    ABSENT,
    SourceKind,
    clamp_range,
    is_vector,
    source_kind,
    table_elements,
    text_of,
    translate_index,
    validate_key,
)

T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)

DEFAULT_SEPARATOR: Final[str] = os.environ.get("ONEARRAY_JOIN_SEPARATOR", ",")
_UNBOUNDED: Final[int] = -1
_POSITIONAL_KINDS: Final = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
_ARITY_CACHE: Final[weakref.WeakKeyDictionary] = weakref.WeakKeyDictionary()


def _inspect_arity(fn: Callable[..., object]) -> int | None:
    # constructors such as str/int take optional extra parameters
    if inspect.isclass(fn):
        return None
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return _UNBOUNDED
        if param.kind in _POSITIONAL_KINDS:
            count += 1
    return count


def _callback_arity(fn: Callable[..., object]) -> int | None:
    try:
        return _ARITY_CACHE[fn]
    except KeyError:
        pass
    except TypeError:
        # builtins and other callables without weak references
        return _inspect_arity(fn)
    arity = _inspect_arity(fn)
    _ARITY_CACHE[fn] = arity
    return arity


def _adapt(fn: Callable[..., object], available: int, *, minimum: int = 1) -> Callable[..., object]:
    """Trim callback arguments to the positional parameters ``fn`` accepts."""
    if not callable(fn):
        raise InvalidArgumentError(f"Expected a callable, received {type(fn).__name__}")
    arity = _callback_arity(fn)

    if arity is None:
        _LOGGER.debug("Signature of %r is not inspectable; passing %d argument(s)", fn, minimum)
        arity = minimum
    elif arity == _UNBOUNDED or arity > available:
        arity = available

    if arity == available:
        return fn
    return lambda *args: fn(*args[:arity])


def _check_storable(value: object) -> None:
    if value is ABSENT:
        raise InvalidArgumentError("ABSENT marks a missing element and cannot be stored in an array")


def _drain_producer(producer: Callable[[], object]) -> list[object]:
    elements: list[object] = []
    while True:
        value = producer()
        if value is None or value is ABSENT:
            return elements
        elements.append(value)


def _collect(source: object, *, where: str, producers: bool) -> list[object]:
    """Normalize ``source`` into a list of elements in position order."""
    kind = source_kind(source)
    _LOGGER.debug("%s normalizing %s source (%s)", where, kind.value, type(source).__name__)

    if kind is SourceKind.ARRAY:
        return source.to_list()
    if kind is SourceKind.INDEXABLE:
        return source.tolist() if is_vector(source) else list(source)
    if kind is SourceKind.TABLE:
        return table_elements(source)
    if producers:
        if kind in (SourceKind.TEXT, SourceKind.ITERATOR):
            return list(source)
        if kind is SourceKind.PRODUCER:
            return _drain_producer(source)
    raise InvalidArgumentError.for_source(source, where=where)


class Array(Generic[T]):
    """Dense, 1-indexed sequence of elements.

    Positions run from 1 to ``length``; a negative index ``-n`` refers to
    position ``length - n + 1``. Keys must be integers (or integer-valued
    numbers) and writes may not leave holes. Lookups that find nothing return
    :data:`~onearray.values.ABSENT` rather than raising.

    Callbacks passed to ``map``/``filter``/``find``/``reduce`` and friends are
    called inline, in traversal order. They must not mutate the array they are
    iterating over.

    ``ABSENT`` is never stored, so a ``map`` or ``map_fn`` callback that returns it
    (for example the result of a failed ``find``) raises
    :class:`~onearray.errors.InvalidArgumentError`.
    """

    __slots__ = ("_items",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *elements: T) -> None:
        for element in elements:
            _check_storable(element)
        self._items: list[T] = list(elements)

    @classmethod
    def new(cls, *elements: T) -> "Array[T]":
        return cls(*elements)

    @classmethod
    def of(cls, *elements: T) -> "Array[T]":
        return cls(*elements)

    @classmethod
    def from_(cls, source: object, map_fn: Callable[..., T] | None = None) -> "Array[T]":
        """Create an array from an indexable collection, a string, or a producer.

        Strings split into Unicode code points. Iterators are drained; a
        zero-argument callable is called until it returns ``None`` (or
        ``ABSENT``). ``map_fn(element, index)`` transforms each element.
        A ``map_fn`` result of ``ABSENT`` raises ``InvalidArgumentError``.
        """
        elements = _collect(source, where="Array.from_", producers=True)
        if map_fn is not None:
            mapper = _adapt(map_fn, 2)
            elements = [mapper(element, position) for position, element in enumerate(elements, start=1)]
        return cls(*elements)

    @staticmethod
    def is_array(value: object) -> bool:
        """True for arrays and for host collections that are empty or densely 1-indexed."""
        return source_kind(value) in (SourceKind.ARRAY, SourceKind.INDEXABLE, SourceKind.TABLE)

    @property
    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, value: object) -> bool:
        return self.includes(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Array):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(item) for item in self._items)})"

    def __getitem__(self, key: object) -> T:
        length = len(self._items)
        position = translate_index(validate_key(key), length)
        if position < 1 or position > length:
            raise IndexError(f"array index {key!r} out of range for length {length}")
        return self._items[position - 1]

    def __setitem__(self, key: object, value: T) -> None:
        self.set(key, value)

    def set(self, key: object, value: T) -> "Array[T]":
        """Store ``value`` at ``key``; ``length + 1`` appends."""
        length = len(self._items)
        position = translate_index(validate_key(key), length)
        if position < 1 or position > length + 1:
            raise IndexError(f"array index {key!r} would leave a hole in an array of length {length}")
        _check_storable(value)
        if position == length + 1:
            self._items.append(value)
        else:
            self._items[position - 1] = value
        return self

    def copy(self) -> "Array[T]":
        return type(self)(*self._items)

    def to_list(self) -> list[T]:
        return list(self._items)

    def _positions(self, last: bool) -> range:
        length = len(self._items)
        return range(length, 0, -1) if last else range(1, length + 1)

    # Search

    def at(self, index: int) -> T:
        """Element at ``index`` (negative counts from the end), or ``ABSENT``."""
        length = len(self._items)
        position = translate_index(validate_key(index), length)
        if position < 1 or position > length:
            return ABSENT
        return self._items[position - 1]

    def index_of(self, value: object, last: bool = False) -> int:
        items = self._items
        for position in self._positions(last):
            if items[position - 1] == value:
                return position
        return ABSENT

    def find(self, predicate: Callable[..., object], last: bool = False) -> T:
        test = _adapt(predicate, 3)
        items = self._items
        for position in self._positions(last):
            element = items[position - 1]
            if test(element, position, self):
                return element
        return ABSENT

    def find_index(self, predicate: Callable[..., object], last: bool = False) -> int:
        test = _adapt(predicate, 3)
        items = self._items
        for position in self._positions(last):
            if test(items[position - 1], position, self):
                return position
        return ABSENT

    def includes(self, value: object, from_index: int = 1) -> bool:
        length = len(self._items)
        start = max(translate_index(validate_key(from_index), length), 1)
        items = self._items
        for position in range(start, length + 1):
            if items[position - 1] == value:
                return True
        return False

    def every(self, predicate: Callable[..., object]) -> bool:
        test = _adapt(predicate, 3)
        items = self._items
        for position in range(1, len(items) + 1):
            if not test(items[position - 1], position, self):
                return False
        return True

    def for_each(self, callback: Callable[..., object]) -> None:
        call = _adapt(callback, 3)
        items = self._items
        for position in range(1, len(items) + 1):
            call(items[position - 1], position, self)

    # Derivation

    def map(self, fn: Callable[..., object]) -> "Array":
        """New array of ``fn(element, index, array)`` results, one per element.

        Results must be storable: a callback returning ``ABSENT`` raises
        ``InvalidArgumentError``; return ``None`` to mark a missing result.
        """
        call = _adapt(fn, 3)
        items = self._items
        return type(self)(*[call(items[position - 1], position, self) for position in range(1, len(items) + 1)])

    def filter(self, predicate: Callable[..., object]) -> "Array[T]":
        test = _adapt(predicate, 3)
        items = self._items
        kept = []
        for position in range(1, len(items) + 1):
            element = items[position - 1]
            if test(element, position, self):
                kept.append(element)
        return type(self)(*kept)

    def slice(self, start: int = 1, finish: int | None = None) -> "Array[T]":
        """Copy of the inclusive range ``start..finish`` after clamping both bounds."""
        length = len(self._items)
        finish = length if finish is None else validate_key(finish)
        start, finish = clamp_range(validate_key(start), finish, length)
        if start > finish:
            return type(self)()
        return type(self)(*self._items[start - 1 : finish])

    def merge(self, *others: object) -> "Array[T]":
        elements = list(self._items)
        for other in others:
            elements.extend(_collect(other, where="Array.merge", producers=False))
        return type(self)(*elements)

    def to_reversed(self) -> "Array[T]":
        return type(self)(*reversed(self._items))

    def join(self, separator: str | None = None) -> str:
        if separator is None:
            separator = DEFAULT_SEPARATOR
        parts: list[str] = []
        for position, element in enumerate(self._items, start=1):
            text = text_of(element)
            if text is None:
                raise NotStringConvertibleError(index=position, type_name=type(element).__name__)
            parts.append(text)
        return separator.join(parts)

    def reduce(self, reducer: Callable[..., object], initial_value: object = ABSENT, reverse: bool = False) -> object:
        """Fold the array into a single value.

        With ``initial_value`` every element is folded into it; without one the
        first visited element (position 1, or the last position when
        ``reverse`` is set) seeds the accumulator. ``reducer`` receives
        ``(accumulator, element, index)`` where ``index`` is always the
        element's own position, whatever the traversal direction.
        """
        fold = _adapt(reducer, 3, minimum=2)
        items = self._items
        positions = self._positions(reverse)

        if initial_value is ABSENT:
            if not positions:
                raise EmptyReduceError()
            accumulator = items[positions[0] - 1]
            positions = positions[1:]
        else:
            accumulator = initial_value

        for position in positions:
            accumulator = fold(accumulator, items[position - 1], position)
        return accumulator

    # Mutation

    def push(self, *elements: T) -> int:
        for element in elements:
            _check_storable(element)
        self._items.extend(elements)
        return len(self._items)

    def pop(self) -> T:
        if not self._items:
            return ABSENT
        return self._items.pop()

    def shift(self) -> T:
        if not self._items:
            return ABSENT
        return self._items.pop(0)

    def unshift(self, *elements: T) -> int:
        for element in elements:
            _check_storable(element)
        self._items[0:0] = elements
        return len(self._items)

    def fill(self, value: T, start: int = 1, end_index: int | None = None) -> "Array[T]":
        _check_storable(value)
        length = len(self._items)
        end_index = length if end_index is None else validate_key(end_index)
        start, end_index = clamp_range(validate_key(start), end_index, length)
        for position in range(start, end_index + 1):
            self._items[position - 1] = value
        return self

    def reverse(self) -> "Array[T]":
        items = self._items
        i, j = 0, len(items) - 1
        while i < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
        return self

    indexOf = index_of
    findIndex = find_index
    forEach = for_each
    toReversed = to_reversed
    isArray = is_array


Sequence = Array
