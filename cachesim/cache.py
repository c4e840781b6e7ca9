"""A set-associative cache model with LRU replacement over 32-bit addresses."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cachesim.lru_ram import LruRam
from cachesim.tag_ram import TagRam

ADDRESS_BITS = 32
_ADDRESS_MASK = (1 << ADDRESS_BITS) - 1


@dataclass(frozen=True)
class AddressParts:
    """An address split into block offset, set index and tag."""

    offset: int
    set_index: int
    tag: int


class Cache:
    """Set-associative cache holding tags, valid/dirty bits and LRU ages."""

    def __init__(self, num_sets: int, block_size: int, cache_size: int, associativity: int) -> None:
        if min(num_sets, block_size, cache_size, associativity) <= 0:
            raise ValueError("Cache parameters must be positive integers.")
        self.num_sets = num_sets
        self.block_size = block_size
        self.cache_size = cache_size
        self.associativity = associativity
        self.block_offset_bits = int(math.log2(block_size))
        self.set_index_bits = int(math.log2(num_sets))
        self.tag_bits = ADDRESS_BITS - (self.block_offset_bits + self.set_index_bits)
        self.tags = TagRam(num_sets, associativity)
        self.lru = LruRam(num_sets, associativity)

    def split(self, addr: int) -> AddressParts:
        """Break an address into its offset, set index and tag fields."""
        addr &= _ADDRESS_MASK
        offset = addr & ((1 << self.block_offset_bits) - 1)
        set_index = (addr >> self.block_offset_bits) & ((1 << self.set_index_bits) - 1)
        tag = addr >> (self.set_index_bits + self.block_offset_bits)
        return AddressParts(offset, set_index, tag)

    def _fill(self, set_index: int, way: int, tag: int) -> None:
        self.tags.set_tag(set_index, way, tag)
        self.tags.set_valid(set_index, way, True)
        self.tags.set_dirty(set_index, way, False)
        self.lru.touch(set_index, way)

    def insert(self, addr: int, way_index: int) -> None:
        """Place the block holding ``addr`` into the given way of its set."""
        parts = self.split(addr)
        if not (0 <= parts.set_index < self.num_sets and 0 <= way_index < self.associativity):
            raise IndexError(
                f"Invalid set or way index in insert: set {parts.set_index}, way {way_index}"
            )
        self._fill(parts.set_index, way_index, parts.tag)

    def lookup(self, addr: int) -> int | None:
        """Return the way holding ``addr`` and mark it most recent, or None on a miss."""
        parts = self.split(addr)
        for way in range(self.associativity):
            if self.tags.is_valid(parts.set_index, way) and self.tags.tag(parts.set_index, way) == parts.tag:
                self.lru.touch(parts.set_index, way)
                return way
        return None

    def evict(self, addr: int) -> int:
        """Replace the least recently used way of the set with ``addr``'s block."""
        parts = self.split(addr)
        way = self.lru.lru_way(parts.set_index)
        self._fill(parts.set_index, way, parts.tag)
        return way

    def replace(self, addr: int, new_addr: int, set_index: int) -> int | None:
        """Retag the way of ``set_index`` holding ``addr`` with ``new_addr``'s tag.

        Returns the way that was changed, or None when ``addr`` is not cached there.
        """
        old_tag = self.split(addr).tag
        new_tag = self.split(new_addr).tag
        for way in range(self.associativity):
            if self.tags.is_valid(set_index, way) and self.tags.tag(set_index, way) == old_tag:
                self._fill(set_index, way, new_tag)
                return way
        return None

    def free_way(self, addr: int) -> int | None:
        """Return the highest-numbered invalid way in ``addr``'s set, or None if full."""
        set_index = self.split(addr).set_index
        return next(
            (way for way in reversed(range(self.associativity))
             if not self.tags.is_valid(set_index, way)),
            None,
        )

    def format_state(self) -> str:
        """Render every set's ways, one line per set."""
        lines = ["Cache State:\n"]
        for set_index in range(self.num_sets):
            cells = []
            for way in range(self.associativity):
                if self.tags.is_valid(set_index, way):
                    cells.append(
                        f"Way {way:x} - Tag: {self.tags.tag(set_index, way):x}, "
                        f"Dirty: {int(self.tags.is_dirty(set_index, way))}, Valid: 1 | "
                    )
                else:
                    cells.append(f"Way {way:x} - Invalid | ")
            lines.append(f"Set {set_index:x}: " + "".join(cells) + "\n")
        return "".join(lines)