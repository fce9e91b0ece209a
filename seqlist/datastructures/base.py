from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class ListIterator(ABC, Generic[T]):
    """Bidirectional cursor over a :class:`List` that can also mutate it.

    The cursor sits *between* elements: `next_index()` is the index the next
    `next()` would return. `remove()` and `set()` act on whichever element the
    last `next()`/`previous()` produced.
    """

    __slots__ = ()

    @abstractmethod
    def has_next(self) -> bool: ...

    @abstractmethod
    def next(self) -> T: ...

    @abstractmethod
    def has_previous(self) -> bool: ...

    @abstractmethod
    def previous(self) -> T: ...

    @abstractmethod
    def next_index(self) -> int: ...

    @abstractmethod
    def previous_index(self) -> int: ...

    @abstractmethod
    def add(self, element: T) -> None: ...

    @abstractmethod
    def remove(self) -> None: ...

    @abstractmethod
    def set(self, element: T) -> None: ...

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()


class List(ABC, Generic[T]):
    """Positional sequence contract shared by every implementation.

    Indices are never normalized: unlike the built-in list, `get(-1)` is out
    of bounds. The Python protocol methods below are expressed in terms of the
    abstract operations, so implementations only supply those.
    """

    __slots__ = ()

    @abstractmethod
    def add(self, element: T) -> bool:
        """Append `element`; always returns True."""

    @abstractmethod
    def insert(self, index: int, element: T) -> None:
        """Insert `element` before `index` (0 <= index <= size)."""

    @abstractmethod
    def get(self, index: int) -> T: ...

    @abstractmethod
    def set(self, index: int, element: T) -> T:
        """Replace the element at `index` and return the previous one."""

    @abstractmethod
    def remove(self, index: int) -> T:
        """Remove and return the element at `index`."""

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def list_iterator(self, index: int = 0) -> ListIterator[T]: ...

    def iterator(self) -> ListIterator[T]:
        return self.list_iterator()

    # ---------------------------- Python protocol ----------------------------

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def __delitem__(self, index: int) -> None:
        self.remove(index)

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self.size() != 0

    def to_py(self) -> list:
        """Snapshot the contents into a plain Python `list`."""
        return [self.get(i) for i in range(self.size())]
