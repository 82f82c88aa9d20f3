from backend.engine.gameplay.game import (
    TILE_BORDER,
    TILE_SIZE,
    WINDOW_OFFSET,
    Button,
    GamePlay,
    apply_move,
    tile_at,
    tile_centre,
)

__all__ = [
    "Button",
    "GamePlay",
    "TILE_BORDER",
    "TILE_SIZE",
    "WINDOW_OFFSET",
    "apply_move",
    "tile_at",
    "tile_centre",
]
