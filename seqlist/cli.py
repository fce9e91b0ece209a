"""
seqlist Command-Line Interface (CLI)

Tooling around the List implementations via subcommands:
- check: run randomized conformance traces against an implementation
- bench: time ArrayList operations and write a CSV report

Usage examples:
    python -m seqlist.cli check
    python -m seqlist.cli check --class mypkg.lists.MyList --seed 42 --traces 10
    CLASS_UNDER_TEST=mypkg.lists.MyList python -m seqlist.cli check
    python -m seqlist.cli bench --path report.csv --base-input 100 --doublings 6
"""

import argparse
import sys

from . import benchmarks
from .config import (
    CLASS_UNDER_TEST_ENV,
    DEFAULT_BENCH_BASE_INPUT,
    DEFAULT_BENCH_CSV,
    DEFAULT_BENCH_DOUBLINGS,
    DEFAULT_BENCH_ITERATIONS,
    DEFAULT_SEED,
    DEFAULT_TRACE_COUNT,
    DEFAULT_TRACE_STEPS,
)
from .conformance import derive_seeds, factory_for, TraceRunner
from .errors import ConfigurationError, ConformanceError


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------

def cmd_check(args):
    """Run conformance traces; return the process exit status."""
    try:
        factory = factory_for(args.class_name)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    seeds = derive_seeds(args.seed, args.traces)
    for n, seed in enumerate(seeds, 1):
        try:
            report = TraceRunner(factory, seed, args.steps).run()
        except ConformanceError as e:
            print(f"trace {n}/{len(seeds)} FAILED (seed={seed:#x}): {e}", file=sys.stderr)
            return 1
        print(f"trace {n}/{len(seeds)} ok: {report.summary()}")

    print(f"All {len(seeds)} traces passed.")
    return 0


def cmd_bench(args):
    """Run the ArrayList benchmark and write its CSV report."""
    benchmarks.run_benchmarks(
        args.path,
        base_input=args.base_input,
        doublings=args.doublings,
        iterations=args.iterations,
        seed=args.seed,
    )
    return 0


# -------------------------------------------------------------------
# Argument types
# -------------------------------------------------------------------

def parse_seed(value):
    """Parse a seed in decimal or with a 0x/0o/0b prefix."""
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seed {value!r}: expected an integer such as 42 or 0x2a") from None


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------

def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m seqlist.cli", description="seqlist tooling")
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- conformance ---
    s = sub.add_parser("check", help="Run randomized conformance traces")
    s.add_argument(
        "--class",
        dest="class_name",
        default=None,
        help=f"dotted class name; defaults to ${CLASS_UNDER_TEST_ENV}, then the built-in ArrayList",
    )
    s.add_argument("--seed", type=parse_seed, default=DEFAULT_SEED)
    s.add_argument("--traces", type=int, default=DEFAULT_TRACE_COUNT)
    s.add_argument("--steps", type=int, default=DEFAULT_TRACE_STEPS)
    s.set_defaults(func=cmd_check)

    # --- benchmarks ---
    s = sub.add_parser("bench", help="Benchmark ArrayList operations to CSV")
    s.add_argument("--path", default=DEFAULT_BENCH_CSV)
    s.add_argument("--base-input", type=int, default=DEFAULT_BENCH_BASE_INPUT)
    s.add_argument("--doublings", type=int, default=DEFAULT_BENCH_DOUBLINGS)
    s.add_argument("--iterations", type=int, default=DEFAULT_BENCH_ITERATIONS)
    s.add_argument("--seed", type=parse_seed, default=None)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m seqlist.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
