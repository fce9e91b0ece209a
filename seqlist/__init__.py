from .datastructures import ArrayList, ArrayListIterator, List, ListIterator
from .errors import (
    ConfigurationError,
    ConformanceError,
    IllegalCursorStateError,
    IndexOutOfBoundsError,
    NoSuchElementError,
    SeqListError,
)

__all__ = [
    "ArrayList",
    "ArrayListIterator",
    "List",
    "ListIterator",
    "SeqListError",
    "IndexOutOfBoundsError",
    "NoSuchElementError",
    "IllegalCursorStateError",
    "ConfigurationError",
    "ConformanceError",
]
