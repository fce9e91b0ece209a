from __future__ import annotations
from typing import TYPE_CHECKING, TypeVar

from ..errors import IllegalCursorStateError, NoSuchElementError
from .base import ListIterator

if TYPE_CHECKING:
    from .base import List

T = TypeVar("T")

# `_last_returned` value when there is no element for remove()/set() to act on
_NO_ELEMENT = -1


class ArrayListIterator(ListIterator[T]):
    """Mutating bidirectional cursor over a positional list.

    State is two indices:
    • `_cursor`: what `next()` would return next, always in [0, size()].
    • `_last_returned`: what the last `next()`/`previous()` produced, or -1.

    All reads and writes go through the list's public operations. This cursor
    does not detect modifications made to the list by anyone else; if that
    happens its indices silently drift.
    """

    __slots__ = ("_list", "_cursor", "_last_returned")

    def __init__(self, lst: "List[T]", index: int = 0) -> None:
        # The list validates `index` before constructing us.
        self._list = lst
        self._cursor = index
        self._last_returned = _NO_ELEMENT

    def has_next(self) -> bool:
        return self._cursor < self._list.size()

    def has_previous(self) -> bool:
        return self._cursor > 0

    def next(self) -> T:
        """Return the element after the cursor and step past it.

        Raises:
            NoSuchElementError: if the cursor is already at the end.
        """
        if not self.has_next():
            raise NoSuchElementError("no next element")
        value = self._list.get(self._cursor)
        self._last_returned = self._cursor
        self._cursor += 1
        return value

    def previous(self) -> T:
        """Step back over the element before the cursor and return it.

        Raises:
            NoSuchElementError: if the cursor is already at the start.
        """
        if not self.has_previous():
            raise NoSuchElementError("no previous element")
        value = self._list.get(self._cursor - 1)
        self._cursor -= 1
        self._last_returned = self._cursor
        return value

    def next_index(self) -> int:
        return self._cursor

    def previous_index(self) -> int:
        return self._cursor - 1

    def add(self, element: T) -> None:
        """Insert `element` at the cursor; the cursor ends up just after it."""
        self._list.insert(self._cursor, element)
        self._cursor += 1
        self._last_returned = _NO_ELEMENT

    def remove(self) -> None:
        """Remove the element last returned by `next()`/`previous()`.

        Raises:
            IllegalCursorStateError: if there is no such element.
        """
        if self._last_returned == _NO_ELEMENT:
            raise IllegalCursorStateError("remove() without a preceding next() or previous()")
        self._list.remove(self._last_returned)
        # Everything past the removed slot moved left by one.
        if self._cursor > self._last_returned:
            self._cursor -= 1
        self._last_returned = _NO_ELEMENT

    def set(self, element: T) -> None:
        """Replace the element last returned by `next()`/`previous()`.

        Only one `set()` is allowed per read; a second one raises until the
        cursor moves again.

        Raises:
            IllegalCursorStateError: if there is no such element.
        """
        if self._last_returned == _NO_ELEMENT:
            raise IllegalCursorStateError("set() without a preceding next() or previous()")
        self._list.set(self._last_returned, element)
        self._last_returned = _NO_ELEMENT

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ArrayListIterator(next_index={self._cursor}, last_returned={self._last_returned})"
