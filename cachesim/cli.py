"""Command-line driver: replays hexadecimal addresses through a cache."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from cachesim.cache import Cache

NUM_SETS = 16
ASSOCIATIVITY = 4
BLOCK_SIZE = 64

_HEX_PREFIX = re.compile(r"\s*([+-]?)(0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


@dataclass(frozen=True)
class AccessResult:
    """Outcome of one access: where the block ended up and how."""

    address: int
    way: int
    hit: bool
    evicted: bool = False


def _parse_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a hexadecimal address: {text!r}")
    value = int(match.group(3), 16)
    if match.group(1) == "-":
        value = -value
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"address out of range: {text!r}")
    return value & 0xFFFFFFFF


def read_addresses(lines: Iterable[str]) -> list[int]:
    """Parse one hexadecimal address per non-empty line."""
    return [_parse_hex(line) for line in (raw.rstrip("\n") for raw in lines) if line]


def _access(cache: Cache, addr: int) -> AccessResult:
    way = cache.lookup(addr)
    if way is not None:
        return AccessResult(addr, way, hit=True)
    way = cache.free_way(addr)
    if way is not None:
        cache.insert(addr, way)
        return AccessResult(addr, way, hit=False)
    return AccessResult(addr, cache.evict(addr), hit=False, evicted=True)


def simulate(cache: Cache, addresses: Iterable[int]) -> Iterator[AccessResult]:
    """Run each address through the cache, yielding the result of every access."""
    for addr in addresses:
        yield _access(cache, addr)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cachesim", description="Replay addresses through a cache model.")
    parser.add_argument("input", nargs="?", default="input.txt", help="file of hexadecimal addresses")
    args = parser.parse_args(argv)

    print("Cache Simulation Started...")
    try:
        with open(args.input, encoding="utf-8") as handle:
            addresses = read_addresses(handle)
    except OSError:
        print("Error opening input file.", file=sys.stderr)
        return 1

    for addr in addresses:
        print(f"Address read: {addr:x}")

    cache = Cache(NUM_SETS, BLOCK_SIZE, NUM_SETS * BLOCK_SIZE * ASSOCIATIVITY, ASSOCIATIVITY)
    for addr in addresses:
        print(cache.lru.format(), end="")
        parts = cache.split(addr)
        print(f"OffsetNumb {parts.offset:x}")
        print(f"setNumb {parts.set_index:x}")
        result = _access(cache, addr)
        if result.hit:
            print(f"Cache hit for address: {addr:x} way hit {result.way:x}")
        else:
            print(f"Cache miss for address: {addr:x}")
            if result.evicted:
                print("No free way available, evicting a way...")
                print(f"Evicted way at index: {result.way:x}")
            else:
                print(f"Free way found at index: {result.way:x}")
        print(f"Cache state after processing address {addr:x}: at way index: {result.way:x}")
        print(cache.format_state(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())