from .base import List, ListIterator
from .storage import Storage
from .cursor import ArrayListIterator
from .array_list import ArrayList

__all__ = [
    "List",
    "ListIterator",
    "Storage",
    "ArrayListIterator",
    "ArrayList",
]
