"""Byte accounting for loaded resources against a fixed budget."""

from __future__ import annotations

import math

from archetype_ecs.resources.resource import (
    ResourceDeallocError,
    ResourceMemoryOverflowError,
    ResourceNotFoundError,
)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")


class MemoryPool:
    """Tracks bytes allocated per resource name within a capacity."""

    def __init__(self, capacity: int) -> None:
        _check_size(capacity)
        self._capacity = capacity
        self._used = 0
        self._allocations: dict[str, int] = {}

    def allocate(self, name: str, size: int) -> None:
        """Reserve size bytes for name; raises ResourceMemoryOverflowError if over budget."""
        _check_size(size)
        if self._used + size > self._capacity:
            raise ResourceMemoryOverflowError(
                f"Memory pool overflow: {self._used} + {size} > {self._capacity}"
            )
        self._used += size
        self._allocations[name] = self._allocations.get(name, 0) + size

    def deallocate(self, name: str, size: int) -> None:
        """Release size bytes held by name."""
        _check_size(size)
        allocated = self._allocations.get(name)
        if allocated is None:
            raise ResourceNotFoundError(f"No allocation found for: {name}")
        if allocated < size:
            raise ResourceDeallocError(f"Deallocating more than allocated for {name}")
        remaining = allocated - size
        self._used -= size
        if remaining:
            self._allocations[name] = remaining
        else:
            del self._allocations[name]

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def available(self) -> int:
        return self._capacity - self._used

    @property
    def used(self) -> int:
        return self._used

    @property
    def utilization(self) -> float:
        """Used bytes as a fraction of capacity."""
        return self._used / self._capacity if self._capacity else math.nan

    def allocation(self, name: str) -> int:
        return self._allocations.get(name, 0)

    def clear(self) -> None:
        self._used = 0
        self._allocations.clear()