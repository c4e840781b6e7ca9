import pytest

from cachesim.lru_ram import LruRam


@pytest.fixture
def lru():
    return LruRam(2, 4)


def test_initial_ages_follow_way_order(lru):
    assert lru.ages(0) == (0, 1, 2, 3)
    assert lru.ages(1) == (0, 1, 2, 3)


def test_initial_lru_is_last_way(lru):
    assert lru.lru_way(0) == 3


def test_touched_way_becomes_mru(lru):
    lru.touch(0, 2)
    assert lru.ages(0)[2] == 0
    assert lru.lru_way(0) == 3


@pytest.mark.parametrize("sequence", [[3, 1, 0, 2], [0, 0, 3], [2, 2, 1, 3, 0, 1]])
def test_ages_remain_permutation(lru, sequence):
    for way in sequence:
        lru.touch(0, way)
        assert sorted(lru.ages(0)) == [0, 1, 2, 3]


def test_lru_is_first_touched_after_touching_all(lru):
    order = [2, 0, 3, 1]
    for way in order:
        lru.touch(0, way)
    assert lru.lru_way(0) == order[0]
    assert lru.ages(0)[order[-1]] == 0


def test_sets_are_independent(lru):
    lru.touch(0, 3)
    assert lru.ages(1) == (0, 1, 2, 3)


def test_reset_restores_initial_order(lru):
    for way in (3, 2, 1):
        lru.touch(1, way)
    lru.reset(1)
    assert lru.ages(1) == (0, 1, 2, 3)


def test_format_layout():
    lru = LruRam(2, 2)
    assert lru.format() == "Set 0: 0 1 \nSet 1: 0 1 \n"


@pytest.mark.parametrize("set_index, way_index", [(2, 0), (0, 4), (-1, 0), (0, -1)])
def test_touch_out_of_range(lru, set_index, way_index):
    with pytest.raises(IndexError):
        lru.touch(set_index, way_index)


@pytest.mark.parametrize("set_index", [2, -1])
def test_set_queries_out_of_range(lru, set_index):
    with pytest.raises(IndexError):
        lru.lru_way(set_index)
    with pytest.raises(IndexError):
        lru.reset(set_index)
    with pytest.raises(IndexError):
        lru.ages(set_index)