"""
mergeheap Command-Line Interface (CLI)

Small front end over the priority queue, mostly for demos and timing runs.
It ties together:
- Heap sort of integers read from the command line or a file
- Merging two queues and draining the result
- The benchmark harness (CSV output)

Usage examples:
    python -m mergeheap sort 5 3 8 1 9 2
    python -m mergeheap sort --file numbers.txt --ascending
    python -m mergeheap merge --left 4,7,2 --right 5,1,8
    python -m mergeheap bench --output results.csv --base-input 100 --levels 6
"""

import argparse
import logging
import operator
import sys

from . import benchmark
from .datastructures import PriorityQueue

PROG = "python -m mergeheap"

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Utility: parsing and draining
# -------------------------------------------------------------------
def int_list(text):
    """argparse type for a comma-separated list of integers ("" is empty)."""
    try:
        return [int(tok) for tok in text.split(",") if tok.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer list: {text!r}")


def read_ints(path):
    """Read whitespace-separated integers from *path* ("-" is stdin)."""
    if path == "-":
        text = sys.stdin.read()
    else:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    return [int(tok) for tok in text.split()]


def drain(pq):
    """Pop every element of *pq*, returning them in pop order."""
    out = []
    while pq:
        out.append(pq.pop())
    return out


def print_values(values):
    print(" ".join(str(v) for v in values))


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_sort(args):
    """Print integers in non-increasing order (or non-decreasing with --ascending)."""
    values = list(args.values)
    if args.file:
        values.extend(read_ints(args.file))
    less = operator.gt if args.ascending else operator.lt
    pq = PriorityQueue(values, less=less)
    logger.debug("sorting %d values", len(pq))
    print_values(drain(pq))


def cmd_merge(args):
    """Merge the right queue into the left one and print the result."""
    left = PriorityQueue(args.left)
    right = PriorityQueue(args.right)
    logger.debug("merging %d into %d elements", len(right), len(left))
    left.merge(right)
    print_values(drain(left))
    print(f"right size after merge: {right.size()}")


def cmd_bench(args):
    """Run the benchmark harness and write its CSV report."""
    benchmark.run_benchmarks(
        args.output,
        base_input=args.base_input,
        levels=args.levels,
        iterations=args.iterations,
    )


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog=PROG, description="Mergeable priority queue tools")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("sort", help="Heap-sort integers")
    s.add_argument("values", nargs="*", type=int)
    s.add_argument("--file", help="Read whitespace-separated integers from a file ('-' for stdin)")
    s.add_argument("--ascending", action="store_true")
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("merge", help="Merge two queues and print the result")
    s.add_argument("--left", type=int_list, required=True)
    s.add_argument("--right", type=int_list, required=True)
    s.set_defaults(func=cmd_merge)

    s = sub.add_parser("bench", help="Benchmark queue operations to CSV")
    s.add_argument("--output", default=benchmark.DEFAULT_OUTPUT_CSV)
    s.add_argument("--base-input", type=int, default=benchmark.DEFAULT_BASE_INPUT)
    s.add_argument("--levels", type=int, default=benchmark.DEFAULT_LEVELS)
    s.add_argument("--iterations", type=int, default=benchmark.DEFAULT_ITERATIONS)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m mergeheap`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (ValueError, OSError) as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())
