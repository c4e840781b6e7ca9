"""Per-set LRU age tracking: age 0 is most recently used."""

from __future__ import annotations


class LruRam:
    """Keeps an age for every way of every set; the oldest way is the LRU."""

    def __init__(self, num_sets: int, associativity: int) -> None:
        self.num_sets = num_sets
        self.associativity = associativity
        self._ages: list[list[int]] = [list(range(associativity)) for _ in range(num_sets)]

    def _check_set(self, set_index: int, action: str) -> list[int]:
        if not 0 <= set_index < self.num_sets:
            raise IndexError(f"Invalid set index in {action}: {set_index}")
        return self._ages[set_index]

    def touch(self, set_index: int, way_index: int) -> None:
        """Mark a way as most recently used, ageing the younger ones."""
        if not (0 <= set_index < self.num_sets and 0 <= way_index < self.associativity):
            raise IndexError(
                f"Invalid set or way index in touch: set {set_index}, way {way_index}"
            )
        ages = self._ages[set_index]
        current = ages[way_index]
        ages[:] = [age + 1 if age < current else age for age in ages]
        ages[way_index] = 0

    def lru_way(self, set_index: int) -> int:
        """Return the way with the highest age, the first such on ties."""
        ages = self._check_set(set_index, "lru_way")
        if not ages:
            return 0
        return max(range(len(ages)), key=ages.__getitem__)

    def reset(self, set_index: int) -> None:
        """Restore the initial ordering of a set."""
        ages = self._check_set(set_index, "reset")
        ages[:] = range(self.associativity)

    def ages(self, set_index: int) -> tuple[int, ...]:
        return tuple(self._check_set(set_index, "ages"))

    def format(self) -> str:
        """Render every set's ages, one line per set."""
        return "".join(
            f"Set {index}: " + "".join(f"{age} " for age in ages) + "\n"
            for index, ages in enumerate(self._ages)
        )