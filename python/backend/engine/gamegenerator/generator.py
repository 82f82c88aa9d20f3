"""Generates Net puzzles from a parameter set and a seed string."""

from __future__ import annotations

import logging

from backend.engine.gamegenerator.rng import RandomState, new_seed
from backend.models.candidates import CandidateSet
from backend.models.direction import (
    ALL,
    DIRECTIONS,
    Direction,
    popcount,
    reflect,
    rotate_by,
)
from backend.models.params import GameParams
from backend.models.state import GameState

logger = logging.getLogger(__name__)

_NAMES = {
    Direction.RIGHT: "R",
    Direction.UP: "U",
    Direction.LEFT: "L",
    Direction.DOWN: "D",
}


class GameGenerator:
    """Builds a loop-free spanning tree, shuffles it and plants barriers.

    The random draws happen in a fixed order (tree, shuffle, barriers),
    so changing only ``barrier_probability`` keeps the same shuffled grid
    and grows the barrier set monotonically.
    """

    @staticmethod
    def new_seed() -> str:
        return new_seed()

    @staticmethod
    def generate(params: GameParams, seed: str) -> GameState:
        """Return the starting position for *params* and *seed*."""
        assert params.width > 2
        assert params.height > 2
        assert 0.0 <= params.barrier_probability <= 1.0

        state = GameState.blank(params.width, params.height, params.wrapping)
        if not state.wrapping:
            GameGenerator._add_border(state)

        rs = RandomState(seed)
        GameGenerator.build_network(state, rs)
        candidates = GameGenerator.barrier_candidates(state)
        GameGenerator.shuffle(state, rs)
        placed = GameGenerator.place_barriers(
            state, rs, candidates, params.barrier_probability
        )
        candidates.clear()
        rs.free()

        logger.info(
            "generated %dx%d%s grid from seed %r with %d barriers",
            state.width,
            state.height,
            " wrapping" if state.wrapping else "",
            seed,
            placed,
        )
        return state

    # -- generation steps -----------------------------------------------------

    @staticmethod
    def build_network(state: GameState, rs: RandomState) -> None:
        """Grow a spanning tree from the centre over an empty grid.

        After a tile gets its third connection, its fourth possibility is
        dropped so no full-cross tile is ever made.  This cannot strand a
        region: an unreachable region would need a closed ring of outward
        T-pieces round it, and the construction never closes a loop.
        """
        w, h = state.width, state.height
        cx, cy = state.centre
        possibilities = CandidateSet()
        for d in DIRECTIONS:
            possibilities.add(cx, cy, d)

        while len(possibilities) > 0:
            x1, y1, d1 = possibilities.pop_at(rs.upto(len(possibilities)))
            x2, y2 = state.neighbour(x1, y1, d1)
            d2 = reflect(d1)
            logger.debug(
                "picked (%d,%d,%s) <-> (%d,%d,%s)",
                x1, y1, _NAMES[d1], x2, y2, _NAMES[Direction(d2)],
            )

            state.set_tile(x1, y1, state.tile(x1, y1) | d1)
            assert state.tile(x2, y2) == 0, f"cell ({x2},{y2}) already connected"
            state.set_tile(x2, y2, d2)

            if popcount(state.tile(x1, y1)) == 3:
                last = ALL ^ state.tile(x1, y1)
                if possibilities.remove(x1, y1, last):
                    logger.debug(
                        "T-piece; removing (%d,%d,%s)", x1, y1, _NAMES[Direction(last)]
                    )

            # Nothing else may now extend into (x2, y2).
            for d in DIRECTIONS:
                x3, y3 = state.neighbour(x2, y2, d)
                if possibilities.remove(x3, y3, reflect(d)):
                    logger.debug(
                        "loop avoidance; removing (%d,%d,%s)",
                        x3, y3, _NAMES[Direction(reflect(d))],
                    )

            for d in DIRECTIONS:
                if d == d2:
                    continue
                if not state.wrapping:
                    if d == Direction.UP and y2 == 0:
                        continue
                    if d == Direction.DOWN and y2 == h - 1:
                        continue
                    if d == Direction.LEFT and x2 == 0:
                        continue
                    if d == Direction.RIGHT and x2 == w - 1:
                        continue
                x3, y3 = state.neighbour(x2, y2, d)
                if state.tile(x3, y3):
                    continue
                logger.debug("new frontier; adding (%d,%d,%s)", x2, y2, _NAMES[d])
                possibilities.add(x2, y2, d)

        assert len(possibilities) == 0

    @staticmethod
    def barrier_candidates(state: GameState) -> CandidateSet:
        """Collect every interior edge that carries no pipe.

        Only rightward and downward edges are listed so each edge appears
        once.  On a bounded grid the last column has no rightward edge and
        the last row no downward edge.
        """
        bounded = not state.wrapping
        barriers = CandidateSet()
        for y in range(state.height):
            for x in range(state.width):
                tile = state.tile(x, y)
                if not (bounded and x == state.width - 1) and not tile & Direction.RIGHT:
                    barriers.add(x, y, Direction.RIGHT)
                if not (bounded and y == state.height - 1) and not tile & Direction.DOWN:
                    barriers.add(x, y, Direction.DOWN)
        return barriers

    @staticmethod
    def shuffle(state: GameState, rs: RandomState) -> None:
        """Rotate every tile by a random number of quarter turns, in raster order.

        Edge tiles of a bounded grid are shuffled too, so every cell costs
        exactly one draw whatever the topology.
        """
        for y in range(state.height):
            for x in range(state.width):
                state.set_tile(x, y, rotate_by(state.tile(x, y), rs.upto(4)))

    @staticmethod
    def place_barriers(
        state: GameState,
        rs: RandomState,
        barriers: CandidateSet,
        probability: float,
    ) -> int:
        """Wall off ``floor(probability * len(barriers))`` random edges."""
        nbarriers = int(probability * len(barriers))
        assert 0 <= nbarriers <= len(barriers)

        for _ in range(nbarriers):
            x1, y1, d1 = barriers.pop_at(rs.upto(len(barriers)))
            x2, y2 = state.neighbour(x1, y1, d1)
            state.add_barrier(x1, y1, d1)
            state.add_barrier(x2, y2, reflect(d1))
        return nbarriers

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _add_border(state: GameState) -> None:
        for x in range(state.width):
            state.add_barrier(x, 0, Direction.UP)
            state.add_barrier(x, state.height - 1, Direction.DOWN)
        for y in range(state.height):
            state.add_barrier(0, y, Direction.LEFT)
            state.add_barrier(state.width - 1, y, Direction.RIGHT)
