from dataclasses import dataclass

import pytest

from latencykit.pools import FixedSizePool, PoolAllocator, SlabSlotPool


@dataclass
class Order:
    id: int = 0
    price: float = 0.0
    qty: int = 0


def test_allocations_are_distinct_objects():
    pool = FixedSizePool(Order, block_size=8)
    orders = [pool.allocate() for _ in range(8)]
    assert len({id(o) for o in orders}) == 8


def test_freed_object_is_reused_first():
    pool = FixedSizePool(Order, block_size=4)
    first = pool.allocate()
    second = pool.allocate()
    pool.deallocate(first)
    assert pool.allocate() is first
    assert pool.allocate() is not second


def test_pool_grows_by_block_size():
    pool = FixedSizePool(Order, block_size=4)
    assert pool.capacity == 4
    items = [pool.allocate() for _ in range(5)]
    assert pool.capacity == 8
    assert pool.available == pool.capacity - len(items)


def test_deallocate_all_restores_availability():
    pool = FixedSizePool(Order, block_size=16)
    items = [pool.allocate() for _ in range(40)]
    for item in items:
        pool.deallocate(item)
    assert pool.available == pool.capacity


def test_deallocate_none_is_ignored():
    pool = FixedSizePool(Order, block_size=2)
    before = pool.available
    pool.deallocate(None)
    assert pool.available == before


def test_invalid_block_size():
    with pytest.raises(ValueError):
        FixedSizePool(Order, block_size=0)


def test_allocator_hands_out_single_objects():
    pool = FixedSizePool(Order, block_size=4)
    alloc = PoolAllocator(pool)
    order = alloc.allocate(1)
    order.id = 7
    alloc.deallocate(order, 1)
    assert alloc.allocate(1) is order


def test_allocator_rejects_other_counts():
    alloc = PoolAllocator(FixedSizePool(Order, block_size=4))
    with pytest.raises(MemoryError):
        alloc.allocate(2)


def test_slab_slots_have_slot_size():
    pool = SlabSlotPool(32)
    slots = [pool.allocate() for _ in range(5)]
    assert all(len(s) == pool.slot_size for s in slots)
    for slot in slots:
        pool.deallocate(slot)
    assert pool.available == pool.capacity


def test_slab_grows_past_one_block():
    pool = SlabSlotPool(16)
    initial = pool.capacity
    slots = [pool.allocate() for _ in range(initial + 1)]
    assert pool.capacity == 2 * initial
    assert len({id(s) for s in slots}) == initial + 1


def test_slab_rejects_foreign_slot():
    pool = SlabSlotPool(32)
    with pytest.raises(ValueError):
        pool.deallocate(bytearray(8))