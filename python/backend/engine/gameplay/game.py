"""Core gameplay logic — processes clicks and checks the win condition."""

from __future__ import annotations

import logging
from enum import Enum

from backend.engine.gameconnectivity import Connectivity
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import StateHistory
from backend.models.direction import LOCKED, rotate_ccw, rotate_cw
from backend.models.params import GameParams
from backend.models.state import GameState

logger = logging.getLogger(__name__)

TILE_SIZE = 32
TILE_BORDER = 1
WINDOW_OFFSET = 16


class Button(Enum):
    PRIMARY = "primary"  # rotate anticlockwise
    SECONDARY = "secondary"  # rotate clockwise
    AUXILIARY = "auxiliary"  # toggle lock


# -- hit testing ----------------------------------------------------------------


def tile_at(state: GameState, x: int, y: int) -> tuple[int, int] | None:
    """Map a playfield pixel to tile coordinates.

    Returns ``None`` outside the grid and on the border strip at the right
    and bottom of each tile.
    """
    x -= WINDOW_OFFSET
    y -= WINDOW_OFFSET
    if x < 0 or y < 0:
        return None
    tx, ty = x // TILE_SIZE, y // TILE_SIZE
    if tx >= state.width or ty >= state.height:
        return None
    if x % TILE_SIZE >= TILE_SIZE - TILE_BORDER or y % TILE_SIZE >= TILE_SIZE - TILE_BORDER:
        return None
    return tx, ty


def tile_centre(tx: int, ty: int) -> tuple[int, int]:
    """Pixel at the middle of tile (tx, ty); the inverse of :func:`tile_at`."""
    return (
        WINDOW_OFFSET + tx * TILE_SIZE + TILE_SIZE // 2,
        WINDOW_OFFSET + ty * TILE_SIZE + TILE_SIZE // 2,
    )


# -- moves ----------------------------------------------------------------------


def apply_move(state: GameState, x: int, y: int, button: Button) -> GameState | None:
    """Process one click and return the resulting state.

    ``None`` means the click changed nothing: it missed the grid, landed
    on a tile border, or tried to turn a locked tile.  *state* itself is
    never modified.
    """
    hit = tile_at(state, x, y)
    if hit is None:
        logger.debug("click at (%d,%d) is off the grid", x, y)
        return None
    tx, ty = hit

    if button is Button.AUXILIARY:
        ret = state.clone()
        ret.set_tile(tx, ty, ret.tile(tx, ty) ^ LOCKED)
        return ret

    if state.is_locked(tx, ty):
        logger.debug("tile (%d,%d) is locked", tx, ty)
        return None

    ret = state.clone()
    orig = ret.tile(tx, ty)
    if button is Button.PRIMARY:
        ret.set_tile(tx, ty, rotate_ccw(orig))
    else:
        ret.set_tile(tx, ty, rotate_cw(orig))

    if Connectivity.is_complete(ret):
        if not ret.completed:
            logger.info("puzzle completed")
        ret.completed = True
    return ret


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, params: GameParams, seed: str | None = None) -> None:
        self.params = params
        self.seed = seed if seed is not None else GameGenerator.new_seed()
        self.history = StateHistory(GameGenerator.generate(params, self.seed))

    @classmethod
    def from_state(cls, state: GameState) -> "GamePlay":
        """Create a session from an existing position (e.g. built in a test)."""
        obj = object.__new__(cls)
        obj.params = GameParams(state.width, state.height, state.wrapping)
        obj.seed = None
        obj.history = StateHistory(state)
        return obj

    @property
    def state(self) -> GameState:
        return self.history.current

    # -- moves ----------------------------------------------------------------

    def click(self, x: int, y: int, button: Button) -> bool:
        """Apply a click at playfield pixel (x, y).

        Returns True if a new position was produced.
        """
        ret = apply_move(self.state, x, y, button)
        if ret is None:
            return False
        self.history.push(ret)
        if ret.completed:
            self.history.pause()
        return True

    def rotate(self, tx: int, ty: int, clockwise: bool = False) -> bool:
        button = Button.SECONDARY if clockwise else Button.PRIMARY
        return self.click(*tile_centre(tx, ty), button)

    def toggle_lock(self, tx: int, ty: int) -> bool:
        return self.click(*tile_centre(tx, ty), Button.AUXILIARY)

    def undo(self) -> bool:
        if not self.history.undo():
            return False
        self._sync_clock()
        return True

    def redo(self) -> bool:
        if not self.history.redo():
            return False
        self._sync_clock()
        return True

    def restart(self) -> None:
        self.history.restart()
        self.history.resume()

    def _sync_clock(self) -> None:
        """The clock runs only while the current position is unsolved."""
        if self.state.completed:
            self.history.pause()
        else:
            self.history.resume()

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.completed

    def active(self) -> list[bool]:
        return Connectivity.compute_active(self.state)
