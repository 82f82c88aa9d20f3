"""Generation parameters for a Net puzzle."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameParams:
    """Board size, topology and barrier density.

    ``barrier_probability`` is the fraction of barrier-eligible edges
    (interior edges that carry no pipe) that receive a wall.
    """

    width: int = 5
    height: int = 5
    wrapping: bool = False
    barrier_probability: float = 0.0

    @property
    def label(self) -> str:
        text = f"{self.width}×{self.height}"
        if self.wrapping:
            text += " wrapping"
        if self.barrier_probability:
            text += f" b{self.barrier_probability:g}"
        return text


# Named sizes offered by the interactive menus.
PRESETS: list[tuple[str, GameParams]] = [
    ("Easy 5×5", GameParams(5, 5, False, 0.0)),
    ("Medium 7×7", GameParams(7, 7, False, 0.0)),
    ("Hard 9×9", GameParams(9, 9, False, 0.1)),
    ("Wrap 11×11", GameParams(11, 11, True, 0.0)),
    ("Classic 13×11", GameParams(13, 11, True, 0.1)),
]
