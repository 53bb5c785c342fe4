"""The resource interface, its errors and usage statistics."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class ResourceError(Exception):
    """Base class for resource errors."""


class ResourceNotFoundError(ResourceError):
    """A named resource or allocation does not exist."""


class ResourceMemoryOverflowError(ResourceError):
    """An allocation would exceed the pool's capacity."""


class ResourceDeallocError(ResourceError):
    """More memory was released than had been allocated."""


class ResourceLoadError(ResourceError):
    """A resource could not be read from disk."""


class Resource(ABC):
    """A loadable asset."""

    @property
    @abstractmethod
    def path(self) -> str:
        """File path the resource came from."""

    @property
    @abstractmethod
    def size(self) -> int:
        """Approximate size in bytes."""

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Short name of the kind of resource."""

    @abstractmethod
    def unload(self) -> None:
        """Free the resource's data."""

    @abstractmethod
    def reload(self) -> None:
        """Reload the resource's data."""

    @abstractmethod
    def is_valid(self) -> bool:
        """True while the resource holds data."""


@dataclass
class ResourceStats:
    total_resources: int = 0
    total_memory_used: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    load_time_ms: int = 0
    unload_time_ms: int = 0

    def cache_hit_ratio(self) -> float:
        """Hits over all lookups; 0.0 when there were none."""
        total = self.cache_hits + self.cache_misses
        return self.cache_hits / total if total else 0.0