"""Grid model for the Net puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field

from backend.models.direction import ALL, LOCKED, dx, dy


@dataclass
class GameState:
    """One position of a Net puzzle.

    ``tiles`` and ``barriers`` are parallel row-major lists indexed by
    ``y * width + x``.  A tile value is a set of direction bits plus the
    ``LOCKED`` flag; a barrier value is a set of direction bits naming the
    walled edges of that cell.  States are treated as values: every move
    works on a :meth:`clone`.
    """

    width: int
    height: int
    wrapping: bool = False
    completed: bool = False
    tiles: list[int] = field(default_factory=list)
    barriers: list[int] = field(default_factory=list)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def blank(cls, width: int, height: int, wrapping: bool = False) -> GameState:
        return cls(
            width=width,
            height=height,
            wrapping=wrapping,
            tiles=[0] * (width * height),
            barriers=[0] * (width * height),
        )

    @classmethod
    def from_tiles(
        cls,
        width: int,
        height: int,
        tiles: list[int],
        barriers: list[int] | None = None,
        wrapping: bool = False,
    ) -> GameState:
        """Create a state from flat row-major tile (and barrier) lists.

        Example::

            GameState.from_tiles(3, 3, [9, 13, 4, 10, 10, 0, 3, 6, 0])
        """
        if len(tiles) != width * height:
            raise ValueError(
                f"Expected {width * height} tiles for a {width}×{height} "
                f"grid, got {len(tiles)}."
            )
        if barriers is None:
            barriers = [0] * (width * height)
        elif len(barriers) != width * height:
            raise ValueError(
                f"Expected {width * height} barrier cells, got {len(barriers)}."
            )
        return cls(
            width=width,
            height=height,
            wrapping=wrapping,
            tiles=list(tiles),
            barriers=list(barriers),
        )

    # -- queries --------------------------------------------------------------

    @property
    def centre(self) -> tuple[int, int]:
        return self.width // 2, self.height // 2

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def tile(self, x: int, y: int) -> int:
        return self.tiles[y * self.width + x]

    def connections(self, x: int, y: int) -> int:
        """Tile mask without the lock flag."""
        return self.tiles[y * self.width + x] & ALL

    def barrier(self, x: int, y: int) -> int:
        return self.barriers[y * self.width + x]

    def is_locked(self, x: int, y: int) -> bool:
        return bool(self.tiles[y * self.width + x] & LOCKED)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbour(self, x: int, y: int, direction: int) -> tuple[int, int]:
        """Cell one step from (x, y), wrapping round the edges.

        Off-board steps on a bounded grid are always walled, so wrapping
        unconditionally is safe for every caller.
        """
        return (
            (x + self.width + dx(direction)) % self.width,
            (y + self.height + dy(direction)) % self.height,
        )

    # -- mutation helpers (only ever applied to fresh clones) -----------------

    def set_tile(self, x: int, y: int, value: int) -> None:
        self.tiles[y * self.width + x] = value

    def add_barrier(self, x: int, y: int, direction: int) -> None:
        self.barriers[y * self.width + x] |= direction

    # -- lifetime -------------------------------------------------------------

    def clone(self) -> GameState:
        return GameState(
            width=self.width,
            height=self.height,
            wrapping=self.wrapping,
            completed=self.completed,
            tiles=self.tiles[:],
            barriers=self.barriers[:],
        )

    def free(self) -> None:
        """Drop the backing arrays; the state is unusable afterwards."""
        self.tiles = []
        self.barriers = []
