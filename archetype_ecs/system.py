"""Systems and the component access they declare."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, order=True)
class SystemId:
    """Position of a system within its schedule."""

    index: int


def _union(first: Iterable[Hashable], second: Iterable[Hashable]) -> list[Hashable]:
    result = list(first)
    for item in second:
        if item not in result:
            result.append(item)
    return result


@dataclass
class SystemAccess:
    """Component types a system reads and writes."""

    reads: list[Hashable] = field(default_factory=list)
    writes: list[Hashable] = field(default_factory=list)

    @classmethod
    def empty(cls) -> SystemAccess:
        """Access that touches no components."""
        return cls()

    def merge(self, other: SystemAccess) -> SystemAccess:
        """Union of both accesses, keeping this access's order first."""
        return SystemAccess(
            reads=_union(self.reads, other.reads),
            writes=_union(self.writes, other.writes),
        )

    def conflicts_with(self, other: SystemAccess) -> bool:
        """True if either side writes a component the other reads or writes."""
        if any(w in other.writes or w in other.reads for w in self.writes):
            return True
        return any(w in self.reads for w in other.writes)

    def can_run_parallel(self, other: SystemAccess) -> bool:
        return not self.conflicts_with(other)


class System(ABC):
    """A unit of logic run against a world."""

    @abstractmethod
    def access(self) -> SystemAccess:
        """Components this system reads and writes."""

    @abstractmethod
    def name(self) -> str:
        """Name used to look the system up in a schedule."""

    @abstractmethod
    def run(self, world: Any) -> None:
        """Run the system; errors are raised."""