"""Ordered set of ``(x, y, direction)`` candidates.

Used by the generator for pending pipe extensions and barrier sites.
Entries are kept sorted by key so that "delete the i-th entry" means the
same thing for every run with the same history, which is what makes
seeded generation reproducible.
"""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterator, NamedTuple


class Candidate(NamedTuple):
    x: int
    y: int
    direction: int


class CandidateSet:
    """Sorted, duplicate-free collection of :class:`Candidate` entries."""

    def __init__(self) -> None:
        self._items: list[Candidate] = []
        self._keys: set[Candidate] = set()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._keys

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._items)

    def add(self, x: int, y: int, direction: int) -> bool:
        """Insert an entry; returns False if it was already present."""
        key = Candidate(x, y, int(direction))
        if key in self._keys:
            return False
        insort(self._items, key)
        self._keys.add(key)
        return True

    def find(self, x: int, y: int, direction: int) -> Candidate | None:
        key = Candidate(x, y, int(direction))
        return key if key in self._keys else None

    def remove(self, x: int, y: int, direction: int) -> bool:
        """Delete an entry by key; returns False if it was absent."""
        key = Candidate(x, y, int(direction))
        if key not in self._keys:
            return False
        del self._items[bisect_left(self._items, key)]
        self._keys.discard(key)
        return True

    def pop_at(self, index: int) -> Candidate:
        """Delete and return the entry at *index* in key order."""
        key = self._items.pop(index)
        self._keys.discard(key)
        return key

    def clear(self) -> None:
        self._items.clear()
        self._keys.clear()
