"""Tag storage for a set-associative cache: one entry per (set, way)."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class TagEntry:
    """A single tag slot with its valid and dirty bits."""

    tag: int = 0
    valid: bool = False
    dirty: bool = False


class TagRam:
    """A grid of tag entries indexed by set and way."""

    def __init__(self, num_sets: int, associativity: int) -> None:
        self.num_sets = num_sets
        self.associativity = associativity
        self._sets: list[list[TagEntry]] = [
            [TagEntry() for _ in range(associativity)] for _ in range(num_sets)
        ]

    def _slot(self, set_index: int, way_index: int, action: str) -> TagEntry:
        if not (0 <= set_index < self.num_sets and 0 <= way_index < self.associativity):
            raise IndexError(
                f"Invalid set or way index in {action}: set {set_index}, way {way_index} "
                f"(sets: {self.num_sets}, associativity: {self.associativity})"
            )
        return self._sets[set_index][way_index]

    def entry(self, set_index: int, way_index: int) -> TagEntry:
        """Return a copy of the entry at the given position."""
        return replace(self._slot(set_index, way_index, "entry"))

    def set_tag(self, set_index: int, way_index: int, tag: int) -> None:
        self._slot(set_index, way_index, "set_tag").tag = tag

    def set_valid(self, set_index: int, way_index: int, valid: bool) -> None:
        self._slot(set_index, way_index, "set_valid").valid = bool(valid)

    def set_dirty(self, set_index: int, way_index: int, dirty: bool) -> None:
        self._slot(set_index, way_index, "set_dirty").dirty = bool(dirty)

    def tag(self, set_index: int, way_index: int) -> int:
        return self._slot(set_index, way_index, "tag").tag

    def is_valid(self, set_index: int, way_index: int) -> bool:
        return self._slot(set_index, way_index, "is_valid").valid

    def is_dirty(self, set_index: int, way_index: int) -> bool:
        return self._slot(set_index, way_index, "is_dirty").dirty