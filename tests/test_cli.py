import pytest

from cachesim.cache import Cache
from cachesim.cli import AccessResult, main, read_addresses, simulate


@pytest.fixture
def cache():
    return Cache(16, 64, 16 * 64 * 4, 4)


def _same_set(cache, count):
    shift = cache.block_offset_bits + cache.set_index_bits
    return [tag << shift for tag in range(1, count + 1)]


def test_read_addresses_skips_blank_lines():
    assert read_addresses(["1f\n", "\n", "0x40\n", "ABC"]) == [0x1F, 0x40, 0xABC]


def test_read_addresses_stops_at_non_hex():
    assert read_addresses(["12zz"]) == [0x12]


def test_read_addresses_negative_wraps():
    assert read_addresses(["-1"]) == [0xFFFFFFFF]


@pytest.mark.parametrize("line", ["zz", "80000000", "  "])
def test_read_addresses_rejects(line):
    with pytest.raises(ValueError):
        read_addresses([line])


def test_repeat_access_hits_same_way(cache):
    results = list(simulate(cache, [0x1000, 0x1000]))
    assert results[0] == AccessResult(0x1000, 3, hit=False)
    assert results[1] == AccessResult(0x1000, 3, hit=True)


def test_full_set_evicts_oldest(cache):
    addrs = _same_set(cache, 5)
    results = list(simulate(cache, addrs))
    assert [r.hit for r in results] == [False] * 5
    assert [r.evicted for r in results] == [False] * 4 + [True]
    assert results[4].way == results[0].way
    assert cache.lookup(addrs[0]) is None
    assert cache.lookup(addrs[4]) == results[0].way


def test_main_runs_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("1000\n\n1000\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Cache Simulation Started...")
    assert "Cache miss for address: 1000" in out
    assert "Cache hit for address: 1000" in out
    assert out.count("Cache State:") == 2


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Error opening input file." in capsys.readouterr().err