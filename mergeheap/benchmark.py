"""Timing and space benchmarks for :class:`PriorityQueue`.

Input sizes grow exponentially (``base_input * 2**i``) and each operation is
timed over several runs on fresh random data. Results go to a CSV file.
"""

from __future__ import annotations

import csv
import random
import statistics
import sys
import time
from typing import Callable, List, Optional, Tuple

from .datastructures import PriorityQueue
from .datastructures.leftist_tree import Node

DEFAULT_OUTPUT_CSV = "priority_queue_performance.csv"
DEFAULT_BASE_INPUT = 100
DEFAULT_LEVELS = 12
DEFAULT_ITERATIONS = 5
MAX_KEY = 1000000

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]

Operation = Callable[[List[int]], PriorityQueue[int]]

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Random keys in ``[0, MAX_KEY]``; pass *rng* for a reproducible run."""
    rand = rng.randint if rng is not None else random.randint
    return [rand(0, MAX_KEY) for _ in range(size)]


def measure_operation_time(operation: Operation, input_size: int, iterations: int = DEFAULT_ITERATIONS) -> Tuple[float, float]:
    """Time *operation* on fresh data *iterations* times.

    Only the operation itself is timed, not generating its input.
    Returns ``(mean_ms, stdev_ms)``; the deviation is 0.0 for a single run.
    """
    samples_ms = []
    for _ in range(iterations):
        keys = generate_random_list(input_size)
        t0 = time.perf_counter()
        operation(keys)
        samples_ms.append((time.perf_counter() - t0) * 1000)

    spread = statistics.stdev(samples_ms) if len(samples_ms) > 1 else 0.0
    return statistics.mean(samples_ms), spread


def measure_true_space(pq: PriorityQueue[int]) -> int:
    """Estimate memory held by *pq*: the queue object, its nodes and elements."""
    total = sys.getsizeof(pq)
    stack: List[Node[int]] = [pq._root] if pq._root is not None else []
    while stack:
        n = stack.pop()
        total += sys.getsizeof(n) + sys.getsizeof(n.data)
        if n.left is not None:
            stack.append(n.left)
        if n.right is not None:
            stack.append(n.right)
    return total


def measure_space_efficiency(operation: Operation, input_size: int, iterations: int = 3) -> float:
    """Return average memory used by the queue an operation leaves behind (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        sizes.append(measure_true_space(operation(data)))
    return statistics.mean(sizes)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_push(data: List[int]) -> PriorityQueue[int]:
    pq: PriorityQueue[int] = PriorityQueue()
    for item in data:
        pq.push(item)
    return pq


def bench_pop(data: List[int]) -> PriorityQueue[int]:
    pq = bench_push(data)
    while pq:
        pq.pop()
    return pq


def bench_top(data: List[int]) -> PriorityQueue[int]:
    pq = bench_push(data)
    for _ in range(min(3, len(data))):
        _ = pq.top()
    return pq


def bench_merge(data: List[int]) -> PriorityQueue[int]:
    # Two halves built in bulk, then one merge.
    half = len(data) // 2
    left: PriorityQueue[int] = PriorityQueue(data[:half])
    right: PriorityQueue[int] = PriorityQueue(data[half:])
    left.merge(right)
    return left


OPERATIONS = {
    "push": bench_push,
    "pop": bench_pop,
    "top": bench_top,
    "merge": bench_merge,
}

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str = DEFAULT_OUTPUT_CSV,
    base_input: int = DEFAULT_BASE_INPUT,
    levels: int = DEFAULT_LEVELS,
    iterations: int = DEFAULT_ITERATIONS,
) -> List[List[str]]:
    """Run exponential performance tests for PriorityQueue operations.

    Returns the data rows written to *output_file* (header excluded).
    """
    if base_input < 1 or levels < 1 or iterations < 1:
        raise ValueError("base_input, levels and iterations must be positive")

    input_sizes = [base_input * (2 ** i) for i in range(levels)]
    rows: List[List[str]] = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations)
                avg_space = measure_space_efficiency(op_func, size, min(3, iterations))
                row = [str(size), op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                print(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows
