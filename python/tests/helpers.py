"""Hand-built grids shared by the tests."""

from __future__ import annotations

from backend.models.direction import Direction
from backend.models.state import GameState

# A solved 3×3 comb hanging from the top row:
#
#   ┌┬┐
#   │││
#   ╵╵╵
SOLVED_3X3 = [9, 13, 12, 10, 10, 10, 2, 2, 2]


def border(width: int, height: int) -> list[int]:
    """Barrier masks walling the outside of a bounded grid."""
    barriers = [0] * (width * height)
    for x in range(width):
        barriers[x] |= Direction.UP
        barriers[(height - 1) * width + x] |= Direction.DOWN
    for y in range(height):
        barriers[y * width] |= Direction.LEFT
        barriers[y * width + width - 1] |= Direction.RIGHT
    return barriers


def solved_3x3() -> GameState:
    return GameState.from_tiles(3, 3, SOLVED_3X3, border(3, 3))
