"""Summing a large array of unsigned 32-bit values two ways."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Iterable

_U64 = 1 << 64
_ELEMENT_BYTES = 4


def sum_naive(values: Iterable[int]) -> int:
    """Add the values one at a time, wrapping like a 64-bit unsigned counter."""
    total = 0
    for value in values:
        total += value
    return total % _U64


def sum_cache_friendly(values: Iterable[int]) -> int:
    """Add the values with a single built-in pass, wrapping to 64 bits."""
    return sum(values) % _U64


def _time_us(fn: Callable[[list[int]], int], values: list[int]) -> tuple[int, float]:
    start = time.perf_counter()
    result = fn(values)
    return result, (time.perf_counter() - start) * 1e6


def main(argv: list[str] | None = None) -> int:
    """Time both summing strategies and report the best throughput."""
    parser = argparse.ArgumentParser(description="Time summation over a large array.")
    parser.add_argument("--count", type=int, default=8 * 1000 * 1000)
    args = parser.parse_args(argv)

    values = list(range(args.count))
    for name, fn in (("naive", sum_naive), ("cache-friendly", sum_cache_friendly)):
        result, us = _time_us(fn, values)
        print(f"{name}: {us:.0f} us (result {result})")

    _, best_us = _time_us(sum_cache_friendly, values)
    best_us = max(best_us, 1e-9)
    mb_per_sec = args.count * _ELEMENT_BYTES / best_us
    print(f"Benchmark: {args.count} elements, best ~{mb_per_sec:.0f} MB/s ({int(best_us)} us)")
    return 0