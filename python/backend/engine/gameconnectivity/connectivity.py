"""Reachability from the centre tile — decides whether a grid is solved."""

from __future__ import annotations

from collections import deque

from backend.models.direction import DIRECTIONS, reflect
from backend.models.state import GameState


class Connectivity:
    """Stateless flood fill; all methods are static."""

    @staticmethod
    def compute_active(state: GameState) -> list[bool]:
        """Return a row-major map of the cells connected to the centre.

        A step from one cell to its neighbour counts when both tiles point
        at each other and no barrier sits on the shared edge.
        """
        active = [False] * (state.width * state.height)
        cx, cy = state.centre
        active[state.index(cx, cy)] = True
        todo: deque[tuple[int, int]] = deque([(cx, cy)])

        while todo:
            x1, y1 = todo.popleft()
            tile = state.tile(x1, y1)
            barrier = state.barrier(x1, y1)
            for d1 in DIRECTIONS:
                if not tile & d1 or barrier & d1:
                    continue
                x2, y2 = state.neighbour(x1, y1, d1)
                i2 = state.index(x2, y2)
                if active[i2] or not state.tile(x2, y2) & reflect(d1):
                    continue
                active[i2] = True
                todo.append((x2, y2))

        return active

    @staticmethod
    def active_count(state: GameState) -> int:
        return sum(Connectivity.compute_active(state))

    @staticmethod
    def is_complete(state: GameState) -> bool:
        """True when every cell is reachable from the centre."""
        return all(Connectivity.compute_active(state))
