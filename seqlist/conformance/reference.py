from __future__ import annotations
import operator
from typing import Iterable, List as PyList, Optional, TypeVar

from ..datastructures.base import List, ListIterator
from ..errors import IllegalCursorStateError, IndexOutOfBoundsError, NoSuchElementError

T = TypeVar("T")


class ReferenceList(List[T]):
    """Trusted model of the List contract, backed by the built-in `list`.

    Deliberately naive: bounds are checked with explicit comparisons and all
    mutation is delegated to `list.insert`/`list.pop`, so it shares no code
    with the implementations it is compared against.
    """

    __slots__ = ("_data",)

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._data: PyList[T] = list(it) if it is not None else []

    def _check(self, index: int, upper: int) -> int:
        try:
            index = operator.index(index)
        except TypeError:
            raise TypeError(f"list indices must be integers, not {type(index).__name__}") from None
        if not 0 <= index < upper:
            raise IndexOutOfBoundsError(index, len(self._data))
        return index

    def add(self, element: T) -> bool:
        self._data.append(element)
        return True

    def insert(self, index: int, element: T) -> None:
        index = self._check(index, len(self._data) + 1)
        self._data.insert(index, element)

    def get(self, index: int) -> T:
        index = self._check(index, len(self._data))
        return self._data[index]

    def set(self, index: int, element: T) -> T:
        index = self._check(index, len(self._data))
        old, self._data[index] = self._data[index], element
        return old

    def remove(self, index: int) -> T:
        index = self._check(index, len(self._data))
        return self._data.pop(index)

    def size(self) -> int:
        return len(self._data)

    def list_iterator(self, index: int = 0) -> "ReferenceCursor[T]":
        index = self._check(index, len(self._data) + 1)
        return ReferenceCursor(self, index)

    def to_py(self) -> PyList[T]:
        return list(self._data)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ReferenceList({self._data!r})"


class ReferenceCursor(ListIterator[T]):
    """Trusted model of the cursor contract over a :class:`ReferenceList`."""

    __slots__ = ("_ref", "_pos", "_last")

    def __init__(self, ref: ReferenceList[T], index: int) -> None:
        self._ref = ref
        self._pos = index
        self._last: Optional[int] = None

    def has_next(self) -> bool:
        return self._pos < len(self._ref._data)

    def has_previous(self) -> bool:
        return self._pos > 0

    def next(self) -> T:
        if self._pos >= len(self._ref._data):
            raise NoSuchElementError("no next element")
        self._last = self._pos
        self._pos += 1
        return self._ref._data[self._last]

    def previous(self) -> T:
        if self._pos <= 0:
            raise NoSuchElementError("no previous element")
        self._pos -= 1
        self._last = self._pos
        return self._ref._data[self._last]

    def next_index(self) -> int:
        return self._pos

    def previous_index(self) -> int:
        return self._pos - 1

    def add(self, element: T) -> None:
        self._ref._data.insert(self._pos, element)
        self._pos += 1
        self._last = None

    def remove(self) -> None:
        if self._last is None:
            raise IllegalCursorStateError("remove() without a preceding next() or previous()")
        del self._ref._data[self._last]
        if self._last < self._pos:
            self._pos -= 1
        self._last = None

    def set(self, element: T) -> None:
        if self._last is None:
            raise IllegalCursorStateError("set() without a preceding next() or previous()")
        self._ref._data[self._last] = element
        self._last = None
