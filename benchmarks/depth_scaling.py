#!/usr/bin/env python3
"""
Parse time versus nesting depth.

Every nesting level re-scans the text of the members inside it, so parse
time grows with length times depth. This script times jsonstack and the
standard library on bracket towers of increasing depth and prints a table.

Run from the project root with
``python -m benchmarks.depth_scaling [max_depth]``.
"""

import json
import sys
import time
from collections.abc import Callable
from typing import Any

import jsonstack
from benchmarks.data_generators import generate_nested_arrays

WIDTH = 4
ITERATIONS = 20


def time_parser(
    parse: Callable[[str], Any], text: str, iterations: int = ITERATIONS
) -> float:
    """Returns the best wall time in seconds over ``iterations`` runs."""
    best = float("inf")
    for _ in range(iterations):
        start = time.perf_counter()
        parse(text)
        best = min(best, time.perf_counter() - start)
    return best


def benchmark_depths(depths: list[int]) -> list[dict[str, Any]]:
    """Times both parsers at each depth and checks they agree."""
    rows = []
    for depth in depths:
        text = generate_nested_arrays(depth, WIDTH)
        if jsonstack.parse(text) != json.loads(text):
            raise AssertionError(f"results differ at depth {depth}")

        ours = time_parser(jsonstack.parse, text)
        stdlib = time_parser(json.loads, text)
        rows.append(
            {
                "depth": depth,
                "chars": len(text),
                "jsonstack_us": ours * 1e6,
                "stdlib_us": stdlib * 1e6,
                "us_per_char_level": ours * 1e6 / (len(text) * depth),
            }
        )
    return rows


def print_table(rows: list[dict[str, Any]]) -> None:
    print(
        f"{'depth':>6} {'chars':>8} {'jsonstack us':>14} "
        f"{'stdlib us':>11} {'us/(char*depth)':>16}"
    )
    print("-" * 60)
    for row in rows:
        print(
            f"{row['depth']:>6} {row['chars']:>8} {row['jsonstack_us']:>14.1f} "
            f"{row['stdlib_us']:>11.1f} {row['us_per_char_level']:>16.5f}"
        )


def main() -> None:
    max_depth = int(sys.argv[1]) if len(sys.argv) > 1 else 128
    depths = []
    depth = 2
    while depth <= max_depth:
        depths.append(depth)
        depth *= 2

    print(f"Nested arrays, {WIDTH} numbers per level, best of {ITERATIONS}")
    print_table(benchmark_depths(depths))


if __name__ == "__main__":
    main()
