"""Central registry of loaded resources with memory accounting."""

from __future__ import annotations

import dataclasses
from typing import TypeVar

from archetype_ecs.resources.handle import GenerationTracker, Handle
from archetype_ecs.resources.pool import MemoryPool
from archetype_ecs.resources.resource import (
    Resource,
    ResourceNotFoundError,
    ResourceStats,
)

R = TypeVar("R", bound=Resource)

_DEFAULT_CAPACITY = 1024 * 1024 * 512
_HANDLE_CAPACITY = 10_000


class ResourceManager:
    """Holds resources by path within a memory budget."""

    def __init__(self, memory_capacity: int = _DEFAULT_CAPACITY) -> None:
        self._resources: dict[str, Resource] = {}
        self._generations = GenerationTracker(_HANDLE_CAPACITY)
        self._pool = MemoryPool(memory_capacity)
        self._stats = ResourceStats()

    def load(self, path: str, resource: R) -> Handle[R]:
        """Store resource under path, charging its size to the memory budget."""
        size = resource.size
        self._pool.allocate(path, size)
        self._resources[path] = resource
        self._stats.total_resources += 1
        self._stats.total_memory_used += size
        id_ = self._generations.allocate()
        return Handle(id_, self._generations.generation(id_))

    def get(self, path: str) -> Resource | None:
        """Resource stored under path, counting a cache hit or miss."""
        resource = self._resources.get(path)
        if resource is None:
            self._stats.cache_misses += 1
        else:
            self._stats.cache_hits += 1
        return resource

    def unload(self, path: str) -> None:
        """Remove and unload the resource under path; raises ResourceNotFoundError."""
        resource = self._resources.pop(path, None)
        if resource is None:
            raise ResourceNotFoundError(f"Resource not found: {path}")
        size = resource.size
        resource.unload()
        self._pool.deallocate(path, size)
        self._stats.total_resources = max(self._stats.total_resources - 1, 0)
        self._stats.total_memory_used = max(self._stats.total_memory_used - size, 0)

    @property
    def stats(self) -> ResourceStats:
        """A snapshot of the statistics."""
        return dataclasses.replace(self._stats)

    def memory_utilization(self) -> float:
        return self._pool.utilization

    def list_resources(self) -> list[str]:
        return list(self._resources)

    def resource_count(self) -> int:
        return len(self._resources)

    def clear(self) -> None:
        """Unload every resource and reset the memory budget."""
        for path in list(self._resources):
            self.unload(path)
        self._pool.clear()