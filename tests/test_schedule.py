import pytest

from archetype_ecs.schedule import (
    Schedule,
    Stage,
    SystemCycleError,
    SystemGraph,
    SystemNode,
)
from archetype_ecs.system import System, SystemAccess, SystemId


class Log:
    pass


class Other:
    pass


class AccessSystem(System):
    def __init__(self, name, reads=(), writes=()):
        self._name = name
        self._access = SystemAccess(reads=list(reads), writes=list(writes))
        self.calls = 0

    def access(self):
        return SystemAccess(reads=list(self._access.reads), writes=list(self._access.writes))

    def name(self):
        return self._name

    def run(self, world):
        self.calls += 1


def test_stage_creation():
    stage = Stage()
    assert len(stage.systems) == 0


def test_conflicting_systems_get_separate_stages():
    schedule = (
        Schedule()
        .with_system(AccessSystem("first", writes=[Log]))
        .with_system(AccessSystem("second", writes=[Log]))
        .build()
    )
    assert schedule.stage_count() == 2
    assert schedule.stage_plan() == [[SystemId(0)], [SystemId(1)]]


def test_compatible_systems_share_a_stage():
    schedule = Schedule.from_systems(
        [AccessSystem("a", reads=[Log]), AccessSystem("b", reads=[Log])]
    )
    assert schedule.stage_count() == 1
    assert schedule.stage_system_count(0) == 2


def test_greedy_grouping():
    schedule = Schedule.from_systems(
        [
            AccessSystem("a", writes=[Log]),
            AccessSystem("b", writes=[Other]),
            AccessSystem("c", writes=[Log]),
        ]
    )
    assert schedule.stage_plan() == [[SystemId(0), SystemId(1)], [SystemId(2)]]


def test_graph_edges_follow_conflicts():
    graph = SystemGraph.build(
        [AccessSystem("a", writes=[Log]), AccessSystem("b", reads=[Log]), AccessSystem("c")]
    )
    assert graph.edges[SystemId(0)] == [SystemId(1)]
    assert graph.reverse_edges[SystemId(1)] == [SystemId(0)]
    assert graph.edges[SystemId(2)] == []
    assert graph.topological_sort() == [SystemId(0), SystemId(2), SystemId(1)]


def test_cycle_detected():
    a, b = SystemId(0), SystemId(1)
    graph = SystemGraph(
        nodes=[SystemNode(a, SystemAccess.empty()), SystemNode(b, SystemAccess.empty())],
        edges={a: [b], b: [a]},
        reverse_edges={a: [b], b: [a]},
    )
    with pytest.raises(SystemCycleError):
        graph.topological_sort()


def test_stage_try_add_rejects_conflict():
    systems = [AccessSystem("a", writes=[Log]), AccessSystem("b", reads=[Log])]
    graph = SystemGraph.build(systems)
    stage = Stage()
    assert stage.try_add(SystemId(0), graph.nodes[0].access, graph)
    assert not stage.try_add(SystemId(1), graph.nodes[1].access, graph)
    assert stage.systems == [SystemId(0)]


def test_add_system_invalidates_stages():
    schedule = Schedule.from_systems([AccessSystem("a")])
    assert schedule.stage_count() == 1
    schedule.add_system(AccessSystem("b"))
    assert schedule.stage_count() == 0
    schedule.ensure_built()
    assert schedule.stage_count() == 1
    assert schedule.system_count() == 2


def test_ordering_constraints_recorded():
    schedule = Schedule()
    schedule.add_system_before(AccessSystem("input"), "physics")
    schedule.add_system_after(AccessSystem("input"), "startup")
    schedule.add_system_after(AccessSystem("render"), "physics")
    constraints = {c.system_name: c for c in schedule.ordering_constraints}
    assert constraints["input"].before == ["physics"]
    assert constraints["input"].after == ["startup"]
    assert constraints["render"].after == ["physics"]
    assert schedule.system_count() == 3


def test_lookup_helpers():
    first = AccessSystem("first", writes=[Log])
    schedule = Schedule.from_systems([first, AccessSystem("second")])
    assert schedule.get_system("first") is first
    assert schedule.get_system("missing") is None
    assert schedule.system_by_id(SystemId(0)) is first
    assert schedule.system_by_id(SystemId(5)) is None
    assert schedule.stage_system_count(9) == 0
    assert schedule.get_accesses()[0].writes == [Log]