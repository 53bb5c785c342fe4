import pytest

from archetype_ecs.resources.resource import (
    Resource,
    ResourceDeallocError,
    ResourceError,
    ResourceLoadError,
    ResourceMemoryOverflowError,
    ResourceNotFoundError,
    ResourceStats,
)


def test_resource_stats():
    stats = ResourceStats()
    stats.cache_hits = 90
    stats.cache_misses = 10
    assert stats.cache_hit_ratio() == pytest.approx(0.9, abs=0.01)


def test_cache_hit_ratio_zero():
    assert ResourceStats().cache_hit_ratio() == 0.0


def test_stats_start_at_zero():
    stats = ResourceStats()
    assert (stats.total_resources, stats.total_memory_used, stats.cache_hits) == (0, 0, 0)


@pytest.mark.parametrize(
    "error",
    [ResourceNotFoundError, ResourceMemoryOverflowError, ResourceDeallocError, ResourceLoadError],
)
def test_errors_share_base(error):
    err = error("boom")
    assert isinstance(err, ResourceError)
    assert str(err) == "boom"
    with pytest.raises(ResourceError, match="boom"):
        raise err


def test_resource_is_abstract():
    with pytest.raises(TypeError):
        Resource()


class _Blob(Resource):
    def __init__(self):
        self._data = b"abc"

    @property
    def path(self):
        return "blob"

    @property
    def size(self):
        return len(self._data)

    @property
    def type_name(self):
        return "Blob"

    def unload(self):
        self._data = b""

    def reload(self):
        pass

    def is_valid(self):
        return bool(self._data)


def test_concrete_resource():
    blob = _Blob()
    stats = ResourceStats()
    stats.total_resources += 1
    stats.total_memory_used += blob.size
    assert stats.total_memory_used == 3
    blob.unload()
    assert blob.is_valid() is False
    stats.cache_misses += 1
    assert stats.cache_hit_ratio() == 0.0