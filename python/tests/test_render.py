"""Terminal rendering of a grid."""

from __future__ import annotations

from backend.engine.gamegenerator import GameGenerator
from backend.models.direction import Direction
from backend.models.params import GameParams
from backend.models.state import GameState
from frontend.cli.rich.app import render_grid
from tests.helpers import solved_3x3


def test_solved_comb_renders_as_box_drawing() -> None:
    text = render_grid(solved_3x3())
    assert [line.rstrip() for line in text.plain.splitlines()] == [
        " ┌───┬───┐",
        " │   │   │",
        " │   │   │",
        " │   │   │",
        " ■   ■   ■",
    ]


def test_barriers_are_drawn_between_tiles() -> None:
    state = solved_3x3()
    state.add_barrier(1, 1, 0x01)
    state.add_barrier(2, 1, 0x04)
    lines = render_grid(state).plain.splitlines()
    assert lines[2].rstrip() == " │   │ ┃ │"


def test_every_generated_grid_renders() -> None:
    state = GameGenerator.generate(GameParams(7, 5, False, 0.3), "render")
    lines = render_grid(state).plain.splitlines()
    assert len(lines) == 2 * 5 - 1


def _wrap_links(wrapping: bool) -> GameState:
    # A pipe across the right edge of row 0 and one across the bottom of column 0.
    tiles = [0] * 9
    tiles[0] = Direction.LEFT | Direction.UP
    tiles[2] = Direction.RIGHT
    tiles[6] = Direction.DOWN
    return GameState.from_tiles(3, 3, tiles, wrapping=wrapping)


def test_wrapping_grid_draws_links_across_the_edges() -> None:
    lines = render_grid(_wrap_links(True)).plain.splitlines()
    assert lines[0].endswith("■──")
    assert len(lines) == 6
    assert lines[5].rstrip() == " │"


def test_bounded_grid_has_no_links_past_the_edges() -> None:
    lines = render_grid(_wrap_links(False)).plain.splitlines()
    assert lines[0].endswith("■─")
    assert len(lines) == 5


def test_wall_on_the_wrap_edge_is_drawn() -> None:
    state = _wrap_links(True)
    state.add_barrier(2, 1, Direction.RIGHT)
    state.add_barrier(0, 1, Direction.LEFT)
    lines = render_grid(state).plain.splitlines()
    assert lines[2].endswith("┃")
