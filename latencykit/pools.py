"""Object pools that hand out pre-built objects and take them back for reuse."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

_DEFAULT_BLOCK = 256


class FixedSizePool(Generic[T]):
    """Pool of objects made by ``factory``, grown ``block_size`` at a time.

    Freed objects go back on a free list and are handed out again
    most-recently-freed first.
    """

    def __init__(self, factory: Callable[[], T], block_size: int = _DEFAULT_BLOCK) -> None:
        if block_size < 1:
            raise ValueError("block_size must be at least 1")
        self._factory = factory
        self._block_size = block_size
        self._free: list[T] = []
        self._capacity = 0
        self._grow()

    @property
    def capacity(self) -> int:
        """Total number of objects the pool has created."""
        return self._capacity

    @property
    def available(self) -> int:
        """Number of objects on the free list."""
        return len(self._free)

    def allocate(self) -> T:
        """Hand out a free object, growing the pool when none is left."""
        if not self._free:
            self._grow()
        return self._free.pop()

    def deallocate(self, obj: T | None) -> None:
        """Return ``obj`` to the free list; ``None`` is ignored."""
        if obj is None:
            return
        self._free.append(obj)

    def _grow(self) -> None:
        block = [self._factory() for _ in range(self._block_size)]
        # The first object of a new block is handed out first.
        self._free.extend(reversed(block))
        self._capacity += self._block_size


class PoolAllocator(Generic[T]):
    """Allocator interface over a :class:`FixedSizePool`, one object at a time."""

    def __init__(self, pool: FixedSizePool[T]) -> None:
        self.pool = pool

    def allocate(self, n: int) -> T:
        """Return one object; any count other than 1 raises ``MemoryError``."""
        if n != 1:
            raise MemoryError("pool allocator hands out exactly one object")
        return self.pool.allocate()

    def deallocate(self, obj: T | None, n: int) -> None:
        """Give ``obj`` back to the pool."""
        self.pool.deallocate(obj)


class SlabSlotPool:
    """Pool of fixed-size byte slots, grown 256 slots at a time."""

    def __init__(self, slot_size: int) -> None:
        if slot_size < 1:
            raise ValueError("slot_size must be at least 1")
        self.slot_size = slot_size
        self._pool: FixedSizePool[bytearray] = FixedSizePool(
            lambda: bytearray(slot_size), _DEFAULT_BLOCK
        )

    @property
    def capacity(self) -> int:
        return self._pool.capacity

    @property
    def available(self) -> int:
        return self._pool.available

    def allocate(self) -> bytearray:
        """Hand out a slot of ``slot_size`` bytes."""
        return self._pool.allocate()

    def deallocate(self, slot: bytearray | None) -> None:
        """Return ``slot`` to the pool; ``None`` is ignored."""
        if slot is not None and len(slot) != self.slot_size:
            raise ValueError("slot does not belong to this pool's size class")
        self._pool.deallocate(slot)