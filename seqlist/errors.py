"""Exceptions raised by the sequence containers, their cursors and the harness.

Each error also derives from the built-in exception a Python caller would
expect (``IndexError`` for bad indices, and so on), so code written against
the built-in ``list`` keeps catching the right thing.
"""

from __future__ import annotations


class SeqListError(Exception):
    """Root of every error raised by this package."""


class IndexOutOfBoundsError(SeqListError, IndexError):
    """An index argument fell outside its valid range."""

    def __init__(self, index: int, size: int, what: str = "list index") -> None:
        super().__init__(f"{what} out of range: {index} (size {size})")
        self.index = index
        self.size = size


class NoSuchElementError(SeqListError, LookupError):
    """A cursor was asked to move past either end of its list."""


class IllegalCursorStateError(SeqListError, RuntimeError):
    """``remove()``/``set()`` called on a cursor with no element to act on.

    That happens before the first ``next()``/``previous()``, and again after
    any ``add()``, ``remove()`` or ``set()`` made through the cursor.
    """


class ConfigurationError(SeqListError, ValueError):
    """The implementation under test could not be selected or constructed."""


class ConformanceError(SeqListError, AssertionError):
    """An implementation diverged from the reference during a trace."""

    def __init__(self, step: int, operation: str, expected: object, actual: object, detail: str = "") -> None:
        msg = f"step {step}: {operation}: expected {expected!r}, got {actual!r}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)
        self.step = step
        self.operation = operation
        self.expected = expected
        self.actual = actual
