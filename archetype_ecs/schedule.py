"""Schedule building: conflict graph, topological order and parallel stages."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterable

from archetype_ecs.system import System, SystemAccess, SystemId


class SystemCycleError(Exception):
    """The system dependency graph contains a cycle."""

    def __init__(self, message: str = "system dependency cycle detected") -> None:
        super().__init__(message)


@dataclass
class SystemNode:
    id: SystemId
    access: SystemAccess


@dataclass
class SystemGraph:
    """Conflict graph; an edge runs from an earlier system to a later one it conflicts with."""

    nodes: list[SystemNode]
    edges: dict[SystemId, list[SystemId]]
    reverse_edges: dict[SystemId, list[SystemId]]

    @classmethod
    def build(cls, systems: Iterable[System]) -> SystemGraph:
        nodes = [SystemNode(SystemId(i), system.access()) for i, system in enumerate(systems)]
        edges: dict[SystemId, list[SystemId]] = {node.id: [] for node in nodes}
        reverse_edges: dict[SystemId, list[SystemId]] = {node.id: [] for node in nodes}
        for a, b in combinations(nodes, 2):
            if a.access.conflicts_with(b.access):
                edges[a.id].append(b.id)
                reverse_edges[b.id].append(a.id)
        return cls(nodes, edges, reverse_edges)

    def topological_sort(self) -> list[SystemId]:
        """Order systems with Kahn's algorithm; raises SystemCycleError on a cycle."""
        in_degree = {node.id: len(self.reverse_edges.get(node.id, ())) for node in self.nodes}
        queue = deque(node.id for node in self.nodes if in_degree[node.id] == 0)
        result: list[SystemId] = []
        while queue:
            current = queue.popleft()
            result.append(current)
            for neighbor in self.edges.get(current, ()):
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    queue.append(neighbor)
        if len(result) != len(self.nodes):
            raise SystemCycleError()
        return result


def _find_node(graph: SystemGraph, system_id: SystemId) -> SystemNode:
    for node in graph.nodes:
        if node.id == system_id:
            return node
    raise KeyError(f"system {system_id.index} is not in the graph")


@dataclass
class Stage:
    """Systems that may run together because none conflict."""

    systems: list[SystemId] = field(default_factory=list)

    def try_add(self, system_id: SystemId, access: SystemAccess, graph: SystemGraph) -> bool:
        """Add the system if it conflicts with none already here."""
        for existing in self.systems:
            if access.conflicts_with(_find_node(graph, existing).access):
                return False
        self.systems.append(system_id)
        return True


@dataclass
class OrderingConstraint:
    system_name: str
    before: list[str] = field(default_factory=list)
    after: list[str] = field(default_factory=list)


class Schedule:
    """Systems grouped into stages of mutually compatible access."""

    def __init__(self) -> None:
        self._systems: list[System] = []
        self._stages: list[Stage] = []
        self._graph: SystemGraph | None = None
        self.ordering_constraints: list[OrderingConstraint] = []

    @classmethod
    def from_systems(cls, systems: Iterable[System]) -> Schedule:
        schedule = cls()
        schedule._systems.extend(systems)
        return schedule.build()

    def with_system(self, system: System) -> Schedule:
        self.add_system(system)
        return self

    def add_system(self, system: System) -> None:
        self._systems.append(system)
        self._invalidate()

    def _constraint_for(self, name: str) -> OrderingConstraint:
        for constraint in self.ordering_constraints:
            if constraint.system_name == name:
                return constraint
        constraint = OrderingConstraint(name)
        self.ordering_constraints.append(constraint)
        return constraint

    def add_system_before(self, system: System, before: str) -> None:
        self._systems.append(system)
        self._constraint_for(system.name()).before.append(before)
        self._invalidate()

    def add_system_after(self, system: System, after: str) -> None:
        self._systems.append(system)
        self._constraint_for(system.name()).after.append(after)
        self._invalidate()

    def _invalidate(self) -> None:
        self._graph = None
        self._stages.clear()

    def get_system(self, name: str) -> System | None:
        return next((s for s in self._systems if s.name() == name), None)

    def build(self) -> Schedule:
        """Sort the systems and group them into stages."""
        self._rebuild()
        return self

    def ensure_built(self) -> None:
        if self._graph is None:
            self._rebuild()

    def _rebuild(self) -> None:
        graph = SystemGraph.build(self._systems)
        order = graph.topological_sort()

        stages: list[Stage] = []
        current = Stage()
        for system_id in order:
            node = _find_node(graph, system_id)
            if not current.try_add(system_id, node.access, graph):
                if current.systems:
                    stages.append(current)
                    current = Stage()
                current.systems.append(system_id)
        if current.systems:
            stages.append(current)

        self._graph = graph
        self._stages = stages

    def stage_count(self) -> int:
        return len(self._stages)

    def stage_system_count(self, stage_idx: int) -> int:
        if 0 <= stage_idx < len(self._stages):
            return len(self._stages[stage_idx].systems)
        return 0

    def system_count(self) -> int:
        return len(self._systems)

    def system_by_id(self, system_id: SystemId) -> System | None:
        if 0 <= system_id.index < len(self._systems):
            return self._systems[system_id.index]
        return None

    def stage_plan(self) -> list[list[SystemId]]:
        return [list(stage.systems) for stage in self._stages]

    def get_accesses(self) -> list[SystemAccess]:
        return [system.access() for system in self._systems]