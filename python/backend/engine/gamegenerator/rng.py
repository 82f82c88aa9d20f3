"""Seeded random source for grid generation.

Every random decision made while building a grid goes through one
:class:`RandomState`, so the same seed string always yields the same
sequence of draws.
"""

from __future__ import annotations

import random


class RandomState:
    """Reproducible integer source seeded from an arbitrary string."""

    def __init__(self, seed: str | bytes) -> None:
        self._rng: random.Random | None = random.Random(seed)

    def upto(self, limit: int) -> int:
        """Return a uniform integer in ``[0, limit)``."""
        assert self._rng is not None, "random state used after free()"
        assert limit > 0
        return self._rng.randrange(limit)

    def free(self) -> None:
        self._rng = None


def new_seed() -> str:
    """Pick a fresh seed: one random integer written out in decimal."""
    return str(random.randrange(2**31))
