"""Typed resource handles and id generation tracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Handle(Generic[T]):
    """Reference to a resource by id and generation."""

    id: int
    generation: int

    def is_valid_generation(self, current_generation: int) -> bool:
        return self.generation == current_generation


class GenerationTracker:
    """Hands out reusable ids and counts how often each has been freed."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._generations = [0] * capacity
        self._available = list(reversed(range(capacity)))

    def allocate(self) -> int:
        """Next free id, lowest first; 0 once every id is in use."""
        return self._available.pop() if self._available else 0

    def deallocate(self, id_: int) -> None:
        """Return id_ to the pool and bump its generation; unknown ids are ignored."""
        if 0 <= id_ < len(self._generations):
            self._generations[id_] += 1
            self._available.append(id_)

    def generation(self, id_: int) -> int:
        if 0 <= id_ < len(self._generations):
            return self._generations[id_]
        return 0