"""Generator properties: spanning tree, symmetry, determinism, barriers.

Every test runs over a spread of seeds and board shapes; each property
holds for any seed, so a failure names the seed that broke it.
"""

from __future__ import annotations

import pytest

from backend.engine.gameconnectivity import Connectivity
from backend.engine.gamegenerator import GameGenerator, RandomState
from backend.models.direction import DIRECTIONS, Direction, popcount, reflect, rotate_by
from backend.models.params import GameParams
from backend.models.state import GameState

SEEDS = ["123", "0", "42", "net", "a much longer seed string", "9999"]
SHAPES = [(3, 3, False), (5, 5, False), (7, 4, False), (3, 3, True), (6, 5, True), (13, 11, True)]


# -- helpers ------------------------------------------------------------------


def _network(params: GameParams, seed: str) -> GameState:
    """The unshuffled tree that ``generate`` builds first for this seed."""
    state = GameState.blank(params.width, params.height, params.wrapping)
    GameGenerator.build_network(state, RandomState(seed))
    return state


def _barrier_edges(state: GameState) -> set[tuple[int, int, int]]:
    """Walled edges as (x, y, RIGHT|DOWN) so each edge appears once."""
    edges = set()
    for y in range(state.height):
        for x in range(state.width):
            for d in (Direction.RIGHT, Direction.DOWN):
                if state.barrier(x, y) & d:
                    edges.add((x, y, int(d)))
    return edges


def _assert_symmetric(state: GameState, values: list[int]) -> None:
    for y in range(state.height):
        for x in range(state.width):
            for d in DIRECTIONS:
                x2, y2 = state.neighbour(x, y, d)
                mine = bool(values[state.index(x, y)] & d)
                theirs = bool(values[state.index(x2, y2)] & reflect(d))
                assert mine == theirs, f"({x},{y}) disagrees with ({x2},{y2}) on {d!r}"


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("w, h, wrap", SHAPES)
def test_network_is_a_spanning_tree_without_crosses(w: int, h: int, wrap: bool, seed: str) -> None:
    net = _network(GameParams(w, h, wrap), seed)

    assert all(Connectivity.compute_active(net)), f"unreached cell (seed {seed!r})"
    assert all(popcount(t) < 4 for t in net.tiles)
    assert all(popcount(t) > 0 for t in net.tiles)
    # A tree over n cells has n - 1 edges.
    assert sum(popcount(t) for t in net.tiles) == 2 * (w * h - 1)
    _assert_symmetric(net, net.tiles)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("w, h", [(3, 3), (5, 5), (8, 3)])
def test_bounded_network_never_points_off_board(w: int, h: int, seed: str) -> None:
    net = _network(GameParams(w, h, False), seed)
    for x in range(w):
        assert not net.tile(x, 0) & Direction.UP
        assert not net.tile(x, h - 1) & Direction.DOWN
    for y in range(h):
        assert not net.tile(0, y) & Direction.LEFT
        assert not net.tile(w - 1, y) & Direction.RIGHT


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("w, h, wrap", SHAPES)
def test_generated_grid_is_a_shuffled_network(w: int, h: int, wrap: bool, seed: str) -> None:
    params = GameParams(w, h, wrap, 0.3)
    state = GameGenerator.generate(params, seed)
    net = _network(params, seed)

    assert not state.completed
    assert all(popcount(t) < 4 for t in state.tiles)
    assert [popcount(t) for t in state.tiles] == [popcount(t) for t in net.tiles]
    _assert_symmetric(state, state.barriers)

    # Barriers never cut a pipe of the solution.
    solved = GameState.from_tiles(w, h, net.tiles, state.barriers, wrapping=wrap)
    assert Connectivity.is_complete(solved)


@pytest.mark.parametrize("seed", SEEDS)
def test_same_seed_gives_identical_grids(seed: str) -> None:
    params = GameParams(9, 7, True, 0.25)
    a = GameGenerator.generate(params, seed)
    b = GameGenerator.generate(params, seed)
    assert a.tiles == b.tiles
    assert a.barriers == b.barriers


def test_different_seeds_give_different_grids() -> None:
    params = GameParams(9, 9, False, 0.0)
    grids = {tuple(GameGenerator.generate(params, s).tiles) for s in SEEDS}
    assert len(grids) > 1


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("wrap", [False, True])
def test_raising_barrier_rate_keeps_shuffle_and_grows_barriers(seed: str, wrap: bool) -> None:
    previous: set[tuple[int, int, int]] = set()
    tiles = None
    for p in (0.0, 0.1, 0.3, 0.6, 1.0):
        state = GameGenerator.generate(GameParams(7, 6, wrap, p), seed)
        if tiles is None:
            tiles = state.tiles
        assert state.tiles == tiles
        edges = _barrier_edges(state)
        assert previous <= edges
        previous = edges


def test_bounded_grid_is_walled_all_round() -> None:
    state = GameGenerator.generate(GameParams(5, 4, False, 0.0), "123")
    for x in range(5):
        assert state.barrier(x, 0) & Direction.UP
        assert state.barrier(x, 3) & Direction.DOWN
    for y in range(4):
        assert state.barrier(0, y) & Direction.LEFT
        assert state.barrier(4, y) & Direction.RIGHT
    # No interior walls at rate zero.
    assert state.barrier(2, 2) == 0


def test_wrapping_grid_has_no_walls_at_rate_zero() -> None:
    state = GameGenerator.generate(GameParams(5, 5, True, 0.0), "123")
    assert not any(state.barriers)


@pytest.mark.parametrize(
    "w, h, wrap, expected",
    [
        # interior edges minus the (w*h - 1) tree edges
        (5, 5, False, 4 * 5 + 5 * 4 - 24),
        (5, 5, True, 2 * 25 - 24),
        (4, 3, False, 3 * 3 + 4 * 2 - 11),
    ],
)
def test_full_barrier_rate_walls_every_free_edge(w: int, h: int, wrap: bool, expected: int) -> None:
    state = GameGenerator.generate(GameParams(w, h, wrap, 1.0), "7")
    edges = _barrier_edges(state)
    if not wrap:
        edges = {(x, y, d) for x, y, d in edges
                 if not (d == Direction.RIGHT and x == w - 1)
                 and not (d == Direction.DOWN and y == h - 1)}
    assert len(edges) == expected


def test_barrier_count_rounds_down() -> None:
    # 3x3 bounded: 12 interior edges, 8 carry pipes, 4 candidates.
    state = GameGenerator.generate(GameParams(3, 3, False, 0.6), "123")
    interior = {(x, y, d) for x, y, d in _barrier_edges(state)
                if not (d == Direction.RIGHT and x == 2) and not (d == Direction.DOWN and y == 2)}
    assert len(interior) == 2


@pytest.mark.parametrize("w, h", [(2, 5), (5, 2), (1, 1)])
def test_too_small_grids_are_rejected(w: int, h: int) -> None:
    with pytest.raises(AssertionError):
        GameGenerator.generate(GameParams(w, h), "123")


def test_new_seed_is_decimal() -> None:
    seed = GameGenerator.new_seed()
    assert seed.isdigit()


@pytest.mark.parametrize("seed", SEEDS)
def test_shuffle_turns_edge_tiles_of_bounded_grids(seed: str) -> None:
    net = _network(GameParams(5, 4, False), seed)
    shuffled = net.clone()
    GameGenerator.shuffle(shuffled, RandomState(seed))

    # One draw per cell in raster order, last row and column included.
    rs = RandomState(seed)
    assert shuffled.tiles == [rotate_by(t, rs.upto(4)) for t in net.tiles]
