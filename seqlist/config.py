"""
Tunable settings for the sequence containers and their tooling.

Everything lives as a module-level constant so callers (the CLI, the
conformance harness, the benchmarks) read one place:
- Storage sizing (`DEFAULT_CAPACITY`).
- Which implementation the conformance harness exercises
  (`CLASS_UNDER_TEST_ENV`, `DEFAULT_CLASS`).
- Default trace and benchmark sizes.
"""

# Starting slot count of a fresh ArrayList. Tunable, not a correctness requirement.
DEFAULT_CAPACITY = 10

# Environment variable naming the implementation the harness should exercise,
# as a dotted path: "package.module.ClassName".
CLASS_UNDER_TEST_ENV = "CLASS_UNDER_TEST"
DEFAULT_CLASS = "seqlist.datastructures.array_list.ArrayList"

# Conformance traces
DEFAULT_SEED = 0x2F7A5D92B824DB0A
DEFAULT_TRACE_COUNT = 5
DEFAULT_TRACE_STEPS = 500

# Benchmarks
DEFAULT_BENCH_BASE_INPUT = 100
DEFAULT_BENCH_DOUBLINGS = 8
DEFAULT_BENCH_ITERATIONS = 5

# Written relative to the current working directory.
DEFAULT_BENCH_CSV = "array_list_performance.csv"
