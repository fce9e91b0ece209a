"""
Randomized conformance traces.

A trace drives an implementation under test ("subject") and a
:class:`ReferenceList` through the same seeded sequence of operations and
checks, after every step, that both agree on:
- the value each operation returned (elements compared by identity),
- whether it failed, and with which kind of failure,
- `size()` and every element, position by position,
- the cursor's `next_index()` / `previous_index()`.

Indices just outside the valid range are chosen on purpose, so the
success/failure boundary is checked as closely as the happy path.
"""

from __future__ import annotations

import random
from typing import Any, Callable, Dict, Iterable, List as PyList, Optional, Tuple

from ..config import DEFAULT_TRACE_STEPS
from ..datastructures.base import List, ListIterator
from ..errors import ConformanceError, IllegalCursorStateError, NoSuchElementError
from .reference import ReferenceList

ListFactory = Callable[[], List]

# Relative weights of each operation in a trace. Appends/inserts outweigh
# removals so lists grow to a useful size.
OPERATION_WEIGHTS: Dict[str, int] = {
    "add": 6,
    "insert": 5,
    "get": 4,
    "set": 3,
    "remove": 3,
    "size": 1,
    "list_iterator": 2,
    "cursor_next": 5,
    "cursor_previous": 4,
    "cursor_add": 3,
    "cursor_remove": 2,
    "cursor_set": 2,
}

# Probability that an index argument is deliberately out of range.
INVALID_INDEX_RATE = 0.1

# Operations that change the list's length without going through the cursor.
_STRUCTURAL = {"add", "insert", "remove"}


class Token:
    """Opaque element with identity semantics and a readable repr."""

    __slots__ = ("ref",)

    _counter = 0

    def __init__(self) -> None:
        Token._counter += 1
        self.ref = Token._counter

    def __repr__(self) -> str:
        return f"@{self.ref}"


def failure_kind(exc: BaseException) -> str:
    """Classify an exception into the contract's failure taxonomy.

    Plain built-ins are accepted too, so implementations that raise
    ``IndexError`` or ``RuntimeError`` directly still conform.
    """
    if isinstance(exc, IndexError):
        return "out-of-bounds"
    if isinstance(exc, (NoSuchElementError, LookupError, StopIteration)):
        return "exhausted"
    if isinstance(exc, (IllegalCursorStateError, RuntimeError)):
        return "illegal-state"
    return f"unexpected {type(exc).__name__}"


class TraceReport:
    """Outcome of one successful trace."""

    __slots__ = ("seed", "steps", "operations", "failures", "final_size")

    def __init__(self, seed: int, steps: int) -> None:
        self.seed = seed
        self.steps = steps
        self.operations: Dict[str, int] = {}
        self.failures: Dict[str, int] = {}
        self.final_size = 0

    def summary(self) -> str:
        ops = sum(self.operations.values())
        fails = sum(self.failures.values())
        return f"seed={self.seed:#x} steps={self.steps} ops={ops} expected_failures={fails} final_size={self.final_size}"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"TraceReport({self.summary()})"


class TraceRunner:
    """Run one seeded trace of `steps` operations against `factory()`."""

    def __init__(self, factory: ListFactory, seed: int, steps: int = DEFAULT_TRACE_STEPS) -> None:
        self._factory = factory
        self._seed = seed
        self._steps = steps
        self._rng = random.Random(seed)
        self._names = list(OPERATION_WEIGHTS)
        self._weights = [OPERATION_WEIGHTS[n] for n in self._names]

        self._subject: Optional[List] = None
        self._reference: ReferenceList = ReferenceList()
        self._cursors: Optional[Tuple[ListIterator, ListIterator]] = None
        self._report = TraceReport(seed, steps)

    # ------------------------------- internals -------------------------------

    def _pick_index(self, upper: int) -> int:
        """Pick an index in [0, upper), or occasionally one just outside it."""
        if upper == 0 or self._rng.random() < INVALID_INDEX_RATE:
            return self._rng.choice((-1, upper))
        return self._rng.randrange(upper)

    @staticmethod
    def _call(fn: Callable[[], Any]) -> Tuple[bool, Any]:
        try:
            return True, fn()
        except Exception as e:  # classified and compared by the caller
            return False, e

    def _compare(
        self,
        step: int,
        label: str,
        subject_fn: Callable[[], Any],
        reference_fn: Callable[[], Any],
        identity: bool = False,
        check_value: bool = True,
    ) -> Tuple[bool, Any, Any]:
        ok_s, out_s = self._call(subject_fn)
        ok_r, out_r = self._call(reference_fn)

        if ok_r and not ok_s:
            raise ConformanceError(step, label, out_r, out_s, f"unexpected {failure_kind(out_s)} failure") from out_s
        if ok_s and not ok_r:
            raise ConformanceError(step, label, f"<{failure_kind(out_r)}>", out_s, "call should have failed")
        if not ok_s:
            kind_s, kind_r = failure_kind(out_s), failure_kind(out_r)
            if kind_s != kind_r:
                raise ConformanceError(step, label, f"<{kind_r}>", f"<{kind_s}>", "wrong failure kind") from out_s
            self._report.failures[kind_r] = self._report.failures.get(kind_r, 0) + 1
            return False, out_s, out_r

        if not check_value:
            return True, out_s, out_r
        same = out_s is out_r if identity else out_s == out_r
        if not same:
            raise ConformanceError(step, label, out_r, out_s)
        return True, out_s, out_r

    def _ensure_cursors(self) -> Tuple[ListIterator, ListIterator]:
        if self._cursors is None:
            self._cursors = (self._subject.list_iterator(), self._reference.list_iterator())
        return self._cursors

    def _check_state(self, step: int, label: str) -> None:
        subject, reference = self._subject, self._reference
        if subject.size() != reference.size():
            raise ConformanceError(step, f"{label} -> size()", reference.size(), subject.size())
        expected = reference.to_py()
        for i, element in enumerate(expected):
            ok, actual = self._call(lambda: subject.get(i))
            if not ok or actual is not element:
                raise ConformanceError(step, f"{label} -> get({i})", element, actual, f"contents now {expected!r}")
        if self._cursors is not None:
            cs, cr = self._cursors
            if cs.next_index() != cr.next_index():
                raise ConformanceError(step, f"{label} -> next_index()", cr.next_index(), cs.next_index())
            if cs.previous_index() != cr.previous_index():
                raise ConformanceError(step, f"{label} -> previous_index()", cr.previous_index(), cs.previous_index())

    # ------------------------------- operations ------------------------------

    def _step(self, step: int, name: str) -> str:
        s, r = self._subject, self._reference
        size = r.size()

        if name == "add":
            t = Token()
            self._compare(step, f"add({t!r})", lambda: s.add(t), lambda: r.add(t))
            return f"add({t!r})"

        if name == "insert":
            i, t = self._pick_index(size + 1), Token()
            label = f"insert({i}, {t!r})"
            self._compare(step, label, lambda: s.insert(i, t), lambda: r.insert(i, t))
            return label

        if name == "get":
            i = self._pick_index(size)
            self._compare(step, f"get({i})", lambda: s.get(i), lambda: r.get(i), identity=True)
            return f"get({i})"

        if name == "set":
            i, t = self._pick_index(size), Token()
            label = f"set({i}, {t!r})"
            self._compare(step, label, lambda: s.set(i, t), lambda: r.set(i, t), identity=True)
            return label

        if name == "remove":
            i = self._pick_index(size)
            self._compare(step, f"remove({i})", lambda: s.remove(i), lambda: r.remove(i), identity=True)
            return f"remove({i})"

        if name == "size":
            self._compare(step, "size()", s.size, r.size)
            return "size()"

        if name == "list_iterator":
            i = self._pick_index(size + 1)
            ok, cs, cr = self._compare(
                step, f"list_iterator({i})", lambda: s.list_iterator(i), lambda: r.list_iterator(i), check_value=False
            )
            if ok:
                self._cursors = (cs, cr)
            return f"list_iterator({i})"

        cs, cr = self._ensure_cursors()
        if name == "cursor_next":
            self._compare(step, "has_next()", cs.has_next, cr.has_next)
            self._compare(step, "cursor.next()", cs.next, cr.next, identity=True)
            return "cursor.next()"

        if name == "cursor_previous":
            self._compare(step, "has_previous()", cs.has_previous, cr.has_previous)
            self._compare(step, "cursor.previous()", cs.previous, cr.previous, identity=True)
            return "cursor.previous()"

        if name == "cursor_add":
            t = Token()
            self._compare(step, f"cursor.add({t!r})", lambda: cs.add(t), lambda: cr.add(t))
            return f"cursor.add({t!r})"

        if name == "cursor_remove":
            self._compare(step, "cursor.remove()", cs.remove, cr.remove)
            return "cursor.remove()"

        if name == "cursor_set":
            t = Token()
            self._compare(step, f"cursor.set({t!r})", lambda: cs.set(t), lambda: cr.set(t))
            return f"cursor.set({t!r})"

        raise ValueError(f"unknown operation {name!r}")

    # --------------------------------- API -----------------------------------

    def run(self) -> TraceReport:
        """Run the trace; raise ConformanceError on the first divergence."""
        # Each run replays the same trace from scratch.
        self._rng = random.Random(self._seed)
        self._report = report = TraceReport(self._seed, self._steps)
        self._subject = self._factory()
        self._reference = ReferenceList()
        self._cursors = None

        for step in range(1, self._steps + 1):
            name = self._rng.choices(self._names, self._weights)[0]
            label = self._step(step, name)
            report.operations[name] = report.operations.get(name, 0) + 1

            # Cursors don't track changes made around them, so a direct
            # structural change retires the current pair.
            if name in _STRUCTURAL:
                self._cursors = None

            self._check_state(step, label)

        report.final_size = self._subject.size()
        return report


def run_traces(factory: ListFactory, seeds: Iterable[int], steps: int = DEFAULT_TRACE_STEPS) -> PyList[TraceReport]:
    """Run one trace per seed and return their reports, in order."""
    return [TraceRunner(factory, seed, steps).run() for seed in seeds]


def derive_seeds(seed: int, count: int) -> PyList[int]:
    """Expand a single seed into `count` reproducible per-trace seeds."""
    rng = random.Random(seed)
    return [rng.getrandbits(63) for _ in range(count)]
