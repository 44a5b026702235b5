"""A power-of-two SPSC ring with batch operations, and two buffer-recycling schemes.

The single-ring scheme hands out slots from a bump allocator that wraps
around, so a slot may be reused before the consumer has seen it. The
double-ring scheme cycles a fixed set of buffers through a free ring and a
used ring, so each buffer is reused only after it has been consumed.
"""

from __future__ import annotations

import argparse
import threading
import time
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")

BUFFER_SIZE = 64
ARENA_CAP = 1 << 20
POOL_SIZE = 1 << 14
RING_SIZE = 1024
BATCH_SIZE = 64


class SPSCRing(Generic[T]):
    """Ring for one producer and one consumer; holds ``capacity - 1`` items.

    ``capacity`` must be a power of two, at least 2.
    """

    def __init__(self, capacity: int = RING_SIZE) -> None:
        if capacity < 2 or capacity & (capacity - 1):
            raise ValueError("capacity must be a power of two, at least 2")
        self._mask = capacity - 1
        self._buffer: list[T | None] = [None] * capacity
        self._head = 0
        self._tail = 0

    @property
    def capacity(self) -> int:
        return self._mask + 1

    def push(self, value: T) -> bool:
        """Store ``value``; return ``False`` without storing when full."""
        head = self._head
        nxt = (head + 1) & self._mask
        if nxt == self._tail:
            return False
        self._buffer[head] = value
        self._head = nxt
        return True

    def pop(self) -> T:
        """Remove and return the oldest item; raise ``IndexError`` when empty."""
        tail = self._tail
        if tail == self._head:
            raise IndexError("pop from empty ring")
        value = self._buffer[tail]
        self._buffer[tail] = None
        self._tail = (tail + 1) & self._mask
        return value  # type: ignore[return-value]

    def push_batch(self, values: Iterable[T]) -> int:
        """Push values in order until one does not fit; return how many were pushed."""
        count = 0
        for value in values:
            if not self.push(value):
                break
            count += 1
        return count

    def pop_batch(self, max_items: int) -> list[T]:
        """Pop up to ``max_items`` items, oldest first."""
        if max_items < 0:
            raise ValueError("max_items must not be negative")
        out: list[T] = []
        while len(out) < max_items:
            try:
                out.append(self.pop())
            except IndexError:
                break
        return out


def _check_duration(duration: float) -> None:
    if duration < 0:
        raise ValueError("duration must not be negative")


def _push_all(ring: SPSCRing[T], items: list[T], stop: threading.Event) -> None:
    """Push every item, retrying the remainder until done or told to stop."""
    while items and not stop.is_set():
        pushed = ring.push_batch(items)
        items = items[pushed:]


def _run(workers: list[Callable[[], None]], stop: threading.Event, duration: float) -> None:
    threads = [threading.Thread(target=w, daemon=True) for w in workers]
    for t in threads:
        t.start()
    stop.wait(duration)
    stop.set()
    for t in threads:
        t.join()


def run_single_ring_bump(batch: bool = False, duration: float = 2.0) -> int:
    """Stream arena slot indices through one ring for ``duration`` seconds.

    Returns the number of slots the consumer received.
    """
    _check_duration(duration)
    ring: SPSCRing[int] = SPSCRing(RING_SIZE)
    stop = threading.Event()
    offset = 0
    processed = 0

    def next_slot() -> int:
        nonlocal offset
        idx = offset
        offset = idx + 1 if idx + 1 < ARENA_CAP else 0
        return idx

    def produce() -> None:
        while not stop.is_set():
            count = BATCH_SIZE if batch else 1
            _push_all(ring, [next_slot() for _ in range(count)], stop)

    def consume() -> None:
        nonlocal processed
        while not stop.is_set():
            if batch:
                processed += len(ring.pop_batch(BATCH_SIZE))
            else:
                try:
                    ring.pop()
                except IndexError:
                    continue
                processed += 1

    _run([produce, consume], stop, duration)
    return processed


def run_double_ring_fixed(batch: bool = False, duration: float = 2.0) -> int:
    """Cycle fixed buffers through a free ring and a used ring for ``duration`` seconds.

    Returns the number of buffers the consumer processed.
    """
    _check_duration(duration)
    pool = [bytearray(BUFFER_SIZE) for _ in range(POOL_SIZE)]
    free_ring: SPSCRing[bytearray] = SPSCRing(RING_SIZE)
    used_ring: SPSCRing[bytearray] = SPSCRing(RING_SIZE)
    # The free ring holds RING_SIZE - 1 buffers; the rest of the pool stays idle.
    for buf in pool:
        if not free_ring.push(buf):
            break
    stop = threading.Event()
    processed = 0

    def produce() -> None:
        while not stop.is_set():
            taken = free_ring.pop_batch(BATCH_SIZE if batch else 1)
            if taken:
                _push_all(used_ring, taken, stop)

    def consume() -> None:
        nonlocal processed
        while not stop.is_set():
            done = used_ring.pop_batch(BATCH_SIZE if batch else 1)
            if not done:
                continue
            processed += len(done)
            _push_all(free_ring, done, stop)

    _run([produce, consume], stop, duration)
    return processed


def measure(fn: Callable[[], int], name: str) -> tuple[int, float]:
    """Run ``fn``, print its throughput and return ``(processed, seconds)``."""
    start = time.perf_counter()
    processed = fn()
    seconds = time.perf_counter() - start
    rate = processed / seconds / 1_000_000 if seconds > 0 else float("inf")
    print(f"{name}: processed {processed} objects in {seconds:.3f}s → {rate:.3f} Mops/sec")
    return processed, seconds


def main(argv: list[str] | None = None) -> int:
    """Compare both schemes with single and batch transfers."""
    parser = argparse.ArgumentParser(description="Compare SPSC buffer-recycling schemes.")
    parser.add_argument("--duration", type=float, default=2.0, help="seconds per run")
    args = parser.parse_args(argv)
    d = args.duration

    print("=== Single object push/pop ===")
    measure(lambda: run_single_ring_bump(False, d), "Single Ring + Bump Allocator")
    measure(lambda: run_double_ring_fixed(False, d), "Double Ring + Fixed Array")

    print("\n=== Batch push/pop ===")
    measure(lambda: run_single_ring_bump(True, d), "Single Ring + Bump Allocator (batch)")
    measure(lambda: run_double_ring_fixed(True, d), "Double Ring + Fixed Array (batch)")

    print("\nDemo complete.")
    return 0