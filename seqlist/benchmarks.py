"""
Timing and memory benchmarks for ArrayList.

Each operation is run over exponentially growing inputs (base_input * 2**k);
average and standard deviation of wall time and estimated memory are written
to a CSV file and echoed to stdout.

Usage:
    python -m seqlist.cli bench --path array_list_performance.csv
"""

import csv
import random
import statistics
import sys
import time

from .config import DEFAULT_BENCH_BASE_INPUT, DEFAULT_BENCH_DOUBLINGS, DEFAULT_BENCH_ITERATIONS
from .datastructures.array_list import ArrayList

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Std Dev Time (ms)",
    "Average Space (bytes)",
    "Std Dev Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int, rng=random):
    """Generate a list of random integers of given size."""
    return [rng.randint(0, 1000000) for _ in range(size)]


def measure_true_space(lst: ArrayList) -> int:
    """Estimate total memory usage of an ArrayList including its buffer."""
    storage = lst._storage
    total = sys.getsizeof(lst) + sys.getsizeof(storage) + sys.getsizeof(storage._buf)
    for i in range(lst.size()):
        total += sys.getsizeof(lst.get(i))
    return total


def measure_operation_time(operation, input_size: int, iterations: int = DEFAULT_BENCH_ITERATIONS, rng=random):
    """Run the operation multiple times and return average + std deviation (ms, bytes)."""
    times = []
    space_used = []
    for _ in range(iterations):
        data = generate_random_list(input_size, rng)
        start = time.perf_counter()
        lst = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds
        space_used.append(measure_true_space(lst))

    avg_time = statistics.mean(times)
    std_time = statistics.stdev(times) if len(times) > 1 else 0.0
    avg_space = statistics.mean(space_used)
    std_space = statistics.stdev(space_used) if len(space_used) > 1 else 0.0
    return avg_time, std_time, avg_space, std_space


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_append(data):
    lst = ArrayList()
    for item in data:
        lst.add(item)
    return lst


def bench_insert_front(data):
    lst = ArrayList()
    for item in data:
        lst.insert(0, item)
    return lst


def bench_get(data):
    lst = ArrayList(data)
    for i in range(lst.size()):
        lst.get(i)
    return lst


def bench_set(data):
    lst = ArrayList(data)
    for i, item in enumerate(reversed(data)):
        lst.set(i, item)
    return lst


def bench_remove_front(data):
    lst = ArrayList(data)
    while lst.size() > 0:
        lst.remove(0)
    return lst


def bench_cursor_walk(data):
    lst = ArrayList(data)
    it = lst.list_iterator()
    while it.has_next():
        it.next()
    while it.has_previous():
        it.previous()
    return lst


def bench_cursor_remove(data):
    # Drop every other element in one forward pass.
    lst = ArrayList(data)
    it = lst.list_iterator()
    keep = True
    while it.has_next():
        it.next()
        if not keep:
            it.remove()
        keep = not keep
    return lst


OPERATIONS = {
    "append": bench_append,
    "insert_front": bench_insert_front,
    "get": bench_get,
    "set": bench_set,
    "remove_front": bench_remove_front,
    "cursor_walk": bench_cursor_walk,
    "cursor_remove": bench_cursor_remove,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str,
    base_input: int = DEFAULT_BENCH_BASE_INPUT,
    doublings: int = DEFAULT_BENCH_DOUBLINGS,
    iterations: int = DEFAULT_BENCH_ITERATIONS,
    operations=None,
    seed=None,
):
    """Run exponential performance tests for ArrayList operations.

    Returns the rows written, header excluded.
    """
    operations = operations or OPERATIONS
    rng = random.Random(seed)
    input_sizes = [base_input * (2 ** i) for i in range(doublings)]
    rows = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in operations.items():
            for size in input_sizes:
                avg_time, std_time, avg_space, std_space = measure_operation_time(op_func, size, iterations, rng)
                row = [
                    size,
                    op_name,
                    f"{avg_time:.3f}",
                    f"{std_time:.3f}",
                    f"{avg_space:.0f}",
                    f"{std_space:.0f}",
                ]
                writer.writerow(row)
                rows.append(row)
                print(f"{op_name:<14} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | Std Time: {std_time:.3f} ms | Avg Space: {avg_space:.0f} B | Std Space: {std_space:.0f} B")

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows
