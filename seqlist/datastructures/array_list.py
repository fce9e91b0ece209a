from __future__ import annotations
import operator
from typing import Iterable, Optional, TypeVar

from ..config import DEFAULT_CAPACITY
from ..errors import IndexOutOfBoundsError
from .base import List
from .cursor import ArrayListIterator
from .storage import Storage

T = TypeVar("T")


class ArrayList(List[T]):
    """A positional sequence implemented via a dynamic array.

    Implementation notes
    --------------------
    • Elements live in a :class:`Storage` (a ctypes `py_object` buffer).
    • Capacity grows geometrically when full and never shrinks.
    • Negative indices are *not* normalized; they are out of bounds.
    • Every index is validated before anything is touched, so a rejected
      call leaves the list exactly as it was.
    • Cursors from `list_iterator()` do not detect changes made around
      them; mutate through the cursor while one is in use.
    """

    __slots__ = ("_storage",)

    def __init__(self, it: Optional[Iterable[T]] = None, capacity: int = DEFAULT_CAPACITY) -> None:
        self._storage: Storage[T] = Storage(capacity)

        # If an iterable is provided, append its items one-by-one
        # (reuses our own add to benefit from growth policy).
        if it is not None:
            for v in it:
                self.add(v)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _check_index(idx: int, upper: int, size: int) -> int:
        """Coerce `idx` with __index__ and validate 0 <= idx < upper."""
        try:
            idx = operator.index(idx)
        except TypeError:
            raise TypeError(f"list indices must be integers, not {type(idx).__name__}") from None
        if idx < 0 or idx >= upper:
            raise IndexOutOfBoundsError(idx, size)
        return idx

    def _check_element_index(self, idx: int) -> int:
        # get/set/remove must name an existing element
        return self._check_index(idx, self._storage.length, self._storage.length)

    def _check_position_index(self, idx: int) -> int:
        # insert/list_iterator may also name the end position
        return self._check_index(idx, self._storage.length + 1, self._storage.length)

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        """Slots currently allocated; always >= size()."""
        return self._storage.capacity

    def add(self, element: T) -> bool:
        """Append `element` to the end. Amortized O(1)."""
        s = self._storage
        s.open_gap(s.length)
        s.write(s.length - 1, element)
        return True

    def insert(self, index: int, element: T) -> None:
        """Insert `element` before `index`; `index == size()` appends.

        Complexity: O(n - index) due to right-shift of trailing elements.

        Raises:
            IndexOutOfBoundsError: unless 0 <= index <= size().
        """
        i = self._check_position_index(index)
        self._storage.open_gap(i)
        self._storage.write(i, element)

    def get(self, index: int) -> T:
        i = self._check_element_index(index)
        return self._storage.read(i)

    def set(self, index: int, element: T) -> T:
        i = self._check_element_index(index)
        old = self._storage.read(i)
        self._storage.write(i, element)
        return old

    def remove(self, index: int) -> T:
        """Remove and return the item at `index`.

        Complexity: O(n - index) due to left-shift of trailing elements.
        The vacated last slot is cleared, so the list drops its reference
        to the removed item immediately.

        Raises:
            IndexOutOfBoundsError: unless 0 <= index < size().
        """
        i = self._check_element_index(index)
        val = self._storage.read(i)
        self._storage.close_gap(i)
        return val

    def size(self) -> int:
        """Number of stored elements. O(1)."""
        return self._storage.length

    def list_iterator(self, index: int = 0) -> ArrayListIterator[T]:
        """Return a cursor positioned before `index` (0 <= index <= size())."""
        return ArrayListIterator(self, self._check_position_index(index))

    def iterator(self) -> ArrayListIterator[T]:
        return ArrayListIterator(self, 0)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ArrayList({self.to_py()!r})"
