import pytest

from archetype_ecs.utils import align_to, next_id


def test_next_id():
    id1 = next_id()
    id2 = next_id()
    assert id1 != id2
    assert id2 > id1


@pytest.mark.parametrize(
    "value, expected",
    [(0, 0), (1, 8), (7, 8), (8, 8), (9, 16)],
)
def test_align_to(value, expected):
    assert align_to(value, 8) == expected