from __future__ import annotations
import ctypes
from typing import Generic, TypeVar

from ..config import DEFAULT_CAPACITY

T = TypeVar("T")


class Storage(Generic[T]):
    """Contiguous, growable slot buffer backing :class:`ArrayList`.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • Live elements sit in slots [0, length); slots past `length` hold None
      once they have been used, so no removed element stays referenced.
    • Capacity grows to 2 * capacity + 1 when short (amortized O(1) append)
      and never shrinks.
    • No bounds checking here: the owning container validates indices.
    """

    __slots__ = ("_buf", "_length", "_capacity", "_reallocations")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._buf = self._make_array(capacity)
        self._capacity = len(self._buf)
        self._length = 0
        self._reallocations = 0

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        if capacity <= 0:
            capacity = 1  # never allow a zero-length buffer
        return (capacity * ctypes.py_object)()

    def _resize(self, new_capacity: int) -> None:
        """Move live items into a fresh buffer of `new_capacity` slots."""
        new_buf = self._make_array(new_capacity)
        for i in range(self._length):
            new_buf[i] = self._buf[i]
        self._buf = new_buf
        self._capacity = len(new_buf)
        self._reallocations += 1

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def length(self) -> int:
        return self._length

    @property
    def reallocations(self) -> int:
        """How many times the buffer has been replaced by a bigger one."""
        return self._reallocations

    def ensure_capacity(self, min_capacity: int) -> None:
        """Grow so that at least `min_capacity` slots exist. No-op when they do."""
        if self._capacity < min_capacity:
            self._resize(max(min_capacity, 2 * self._capacity + 1))

    def read(self, i: int) -> T:
        return self._buf[i]  # type: ignore[return-value]

    def write(self, i: int, value: T) -> None:
        self._buf[i] = value

    def open_gap(self, i: int) -> None:
        """Make slot `i` free by shifting [i, length) one slot right.

        The caller writes the new element into slot `i` afterwards.
        """
        self.ensure_capacity(self._length + 1)
        for j in range(self._length, i, -1):
            self._buf[j] = self._buf[j - 1]
        self._buf[i] = None
        self._length += 1

    def close_gap(self, i: int) -> None:
        """Drop slot `i` by shifting (i, length) one slot left."""
        for j in range(i, self._length - 1):
            self._buf[j] = self._buf[j + 1]

        # Clear the now-unused last slot and shrink length.
        self._buf[self._length - 1] = None
        self._length -= 1
