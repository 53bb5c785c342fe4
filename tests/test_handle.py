from archetype_ecs.resources.asset_types import DataResource
from archetype_ecs.resources.handle import GenerationTracker, Handle


def test_handle_creation():
    handle = Handle[DataResource](42, 1)
    assert handle.id == 42
    assert handle.generation == 1


def test_generation_tracker():
    tracker = GenerationTracker(10)
    id_ = tracker.allocate()
    assert tracker.generation(id_) == 0
    tracker.deallocate(id_)
    assert tracker.generation(id_) == 1


def test_handle_validation():
    handle = Handle(5, 2)
    assert handle.is_valid_generation(2)
    assert not handle.is_valid_generation(3)


def test_handles_compare_by_value():
    assert Handle(1, 2) == Handle(1, 2)
    assert len({Handle(1, 2), Handle(1, 2), Handle(1, 3)}) == 2


def test_allocation_order_and_reuse():
    tracker = GenerationTracker(3)
    assert [tracker.allocate() for _ in range(3)] == [0, 1, 2]
    tracker.deallocate(1)
    assert tracker.allocate() == 1


def test_exhausted_tracker_returns_zero():
    tracker = GenerationTracker(1)
    assert tracker.allocate() == 0
    assert tracker.allocate() == 0


def test_unknown_ids():
    tracker = GenerationTracker(2)
    tracker.deallocate(99)
    assert tracker.generation(99) == 0
    assert [tracker.allocate(), tracker.allocate()] == [0, 1]