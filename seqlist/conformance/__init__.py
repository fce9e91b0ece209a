from .reference import ReferenceCursor, ReferenceList
from .resolver import class_under_test, factory_for, resolve_class
from .traces import TraceReport, TraceRunner, derive_seeds, failure_kind, run_traces

__all__ = [
    "ReferenceList",
    "ReferenceCursor",
    "resolve_class",
    "class_under_test",
    "factory_for",
    "TraceRunner",
    "TraceReport",
    "run_traces",
    "derive_seeds",
    "failure_kind",
]
