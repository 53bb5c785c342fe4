import pytest

from archetype_ecs.resources.pool import MemoryPool
from archetype_ecs.resources.resource import (
    ResourceDeallocError,
    ResourceMemoryOverflowError,
    ResourceNotFoundError,
)


def test_memory_pool_allocation():
    pool = MemoryPool(1000)
    assert pool.available == 1000
    pool.allocate("texture", 500)
    assert pool.available == 500
    assert pool.allocation("texture") == 500


def test_memory_pool_overflow():
    pool = MemoryPool(100)
    with pytest.raises(ResourceMemoryOverflowError):
        pool.allocate("big", 150)
    assert pool.used == 0


def test_memory_pool_deallocation():
    pool = MemoryPool(1000)
    pool.allocate("texture", 500)
    pool.deallocate("texture", 500)
    assert pool.used == 0
    assert pool.allocation("texture") == 0


def test_memory_utilization():
    pool = MemoryPool(1000)
    pool.allocate("texture", 250)
    assert pool.utilization == pytest.approx(0.25, abs=0.01)


def test_allocations_accumulate_per_name():
    pool = MemoryPool(1000)
    pool.allocate("a", 100)
    pool.allocate("a", 50)
    pool.deallocate("a", 30)
    assert pool.allocation("a") == 120
    assert pool.used == 120


def test_deallocate_errors():
    pool = MemoryPool(1000)
    with pytest.raises(ResourceNotFoundError):
        pool.deallocate("missing", 1)
    pool.allocate("a", 10)
    with pytest.raises(ResourceDeallocError):
        pool.deallocate("a", 11)
    assert pool.allocation("a") == 10


def test_clear():
    pool = MemoryPool(100)
    pool.allocate("a", 40)
    pool.clear()
    assert pool.available == 100
    assert pool.allocation("a") == 0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        MemoryPool(100).allocate("a", -1)