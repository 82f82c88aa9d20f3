"""Compass directions and the quarter-turn algebra over connection masks.

A tile's connections are a 4-bit set of :class:`Direction` flags.  Bit
``LOCKED`` sits above them on tiles only and is carried through rotation
untouched.
"""

from __future__ import annotations

from enum import IntFlag


class Direction(IntFlag):
    """One pipe stub per flag, in screen coordinates (y grows downwards)."""

    RIGHT = 0x01
    UP = 0x02
    LEFT = 0x04
    DOWN = 0x08


LOCKED = 0x10
ALL = Direction.RIGHT | Direction.UP | Direction.LEFT | Direction.DOWN
NONE = Direction(0)

# Order used whenever every direction is visited (low bit first).
DIRECTIONS: tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.UP,
    Direction.LEFT,
    Direction.DOWN,
)

_ANTICLOCKWISE: dict[Direction, Direction] = {
    Direction.RIGHT: Direction.UP,
    Direction.UP: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
    Direction.DOWN: Direction.RIGHT,
}
_CLOCKWISE: dict[Direction, Direction] = {v: k for k, v in _ANTICLOCKWISE.items()}
_OPPOSITE: dict[Direction, Direction] = {
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.LEFT: Direction.RIGHT,
    Direction.DOWN: Direction.UP,
}

_DX: dict[Direction, int] = {Direction.RIGHT: 1, Direction.LEFT: -1}
_DY: dict[Direction, int] = {Direction.DOWN: 1, Direction.UP: -1}


def _map(mask: int, table: dict[Direction, Direction]) -> int:
    out = mask & ~int(ALL)
    for d in DIRECTIONS:
        if mask & d:
            out |= table[d]
    return out


def reflect(mask: int) -> int:
    """Turn every direction in *mask* through 180 degrees."""
    return _map(mask, _OPPOSITE)


def rotate_ccw(mask: int) -> int:
    """One quarter turn anticlockwise (RIGHT -> UP)."""
    return _map(mask, _ANTICLOCKWISE)


def rotate_cw(mask: int) -> int:
    """One quarter turn clockwise (UP -> RIGHT)."""
    return _map(mask, _CLOCKWISE)


def rotate_by(mask: int, n: int) -> int:
    """Apply ``n mod 4`` anticlockwise quarter turns."""
    n &= 3
    if n == 3:
        return rotate_cw(mask)
    for _ in range(n):
        mask = rotate_ccw(mask)
    return mask


def dx(d: int) -> int:
    return _DX.get(Direction(d), 0)


def dy(d: int) -> int:
    return _DY.get(Direction(d), 0)


def popcount(mask: int) -> int:
    """Number of connections in *mask*, ignoring the lock flag."""
    return sum(1 for d in DIRECTIONS if mask & d)
