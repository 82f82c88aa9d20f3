"""Rich terminal frontend — box-drawing grid, colours, and panels.

Tiles reachable from the centre are drawn green, the rest red.  A cursor
picks the tile to turn or lock; every move goes through the same
pixel-based move entry point the GUI uses.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text

from backend.engine.gameconnectivity import Connectivity
from backend.engine.gameplay import GamePlay
from backend.models.direction import Direction, popcount
from backend.models.params import PRESETS, GameParams
from backend.models.state import GameState
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

# Indexed by connection mask (R=1, U=2, L=4, D=8).
_GLYPHS = " ╶╵└╴─┘┴╷┌│├┐┬┤┼"
_ENDPOINT = "■"

_STYLE_ON = "bold green"
_STYLE_OFF = "red"
_STYLE_BARRIER = "bold bright_red"


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- grid rendering -----------------------------------------------------------


def _cell_style(state: GameState, active: list[bool], x: int, y: int,
                cursor: tuple[int, int] | None) -> str:
    style = _STYLE_ON if active[state.index(x, y)] else _STYLE_OFF
    if (x, y) == state.centre:
        style = "bold yellow" if active[state.index(x, y)] else "bold magenta"
    if state.is_locked(x, y):
        style += " on grey23"
    if cursor == (x, y):
        style += " reverse"
    return style


def render_grid(state: GameState, active: list[bool] | None = None,
                cursor: tuple[int, int] | None = None) -> Text:
    """Return the grid as styled text, three columns per tile.

    On a wrapping grid the links across the right and bottom edges get a
    connector column and row of their own.
    """
    if active is None:
        active = Connectivity.compute_active(state)
    out = Text()
    w, h = state.width, state.height

    for y in range(h):
        for x in range(w):
            mask = state.connections(x, y)
            glyph = _ENDPOINT if popcount(mask) == 1 else _GLYPHS[mask]
            cell = (
                ("─" if mask & Direction.LEFT else " ")
                + glyph
                + ("─" if mask & Direction.RIGHT else " ")
            )
            out.append(cell, style=_cell_style(state, active, x, y, cursor))

            if x < w - 1 or state.wrapping:
                x2, y2 = state.neighbour(x, y, Direction.RIGHT)
                if state.barrier(x, y) & Direction.RIGHT:
                    out.append("┃", style=_STYLE_BARRIER)
                elif mask & Direction.RIGHT and state.tile(x2, y2) & Direction.LEFT:
                    lit = active[state.index(x, y)]
                    out.append("─", style=_STYLE_ON if lit else _STYLE_OFF)
                else:
                    out.append(" ")
        out.append("\n")

        if y == h - 1 and not state.wrapping:
            break
        for x in range(w):
            x2, y2 = state.neighbour(x, y, Direction.DOWN)
            if state.barrier(x, y) & Direction.DOWN:
                out.append(" ━ ", style=_STYLE_BARRIER)
            elif state.tile(x, y) & Direction.DOWN and state.tile(x2, y2) & Direction.UP:
                lit = active[state.index(x, y)]
                out.append(" │ ", style=_STYLE_ON if lit else _STYLE_OFF)
            else:
                out.append("   ")
            if x < w - 1:
                out.append(" ")
        out.append("\n")

    out.rstrip()
    return out


def show(state: GameState, seed: str | None = None) -> None:
    """Print one grid and exit (no interaction)."""
    active = Connectivity.compute_active(state)
    title = f"Net  {state.width}×{state.height}"
    if seed is not None:
        title += f"  seed {seed}"
    footer = Text(f"  {sum(active)}/{len(active)} connected", style="dim")
    console.print(
        Panel(
            Group(Align.center(render_grid(state, active)), Align.center(footer)),
            title=f"[bold]{title}[/bold]",
            border_style="bright_blue",
            padding=(1, 2),
        )
    )


# -- screens ------------------------------------------------------------------


_HELP = (
    "  ←↑→↓ / WASD  move cursor    Z  turn anticlockwise    X  turn clockwise\n"
    "  Space / L  lock    U  undo    Y  redo    R  restart    N  new game    Q  back"
)


def _draw_game(game: GamePlay, cursor: tuple[int, int], status: str = "",
               show_help: bool = False) -> None:
    console.clear()

    state = game.state
    active = Connectivity.compute_active(state)
    grid = render_grid(state, active, cursor)

    stats = Text()
    stats.append("  Connected: ", style="dim")
    stats.append(f"{sum(active)}/{len(active)}", style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(game.history.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.history.elapsed_time), style="bold yellow")

    parts = [Align.center(grid), Text(""), Align.center(stats)]
    if game.is_won:
        parts.append(Align.center(Text("\n  ★ COMPLETED! ★", style="bold green")))

    border = "bold green" if game.is_won else "bright_blue"
    title = f"[bold cyan]Net  {game.params.label}[/bold cyan]"
    if game.seed is not None:
        title += f"  [dim]seed {game.seed}[/dim]"

    console.print()
    console.print(Align.center(Panel(Group(*parts), title=title,
                                     border_style=border, padding=(1, 2))))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    if show_help:
        console.print(Align.center(Text(_HELP, style="dim")))
    else:
        console.print(Align.center(Text("  H  help    Q  back", style="dim")))


def _draw_menu(sel: int) -> None:
    console.clear()

    presets = Text()
    for i, (label, _) in enumerate(PRESETS):
        if i:
            presets.append("  ")
        if i == sel:
            presets.append(f" {label} ", style="bold green on #313244")
        else:
            presets.append(f" {label} ", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("E", style="bold cyan")
    opts.append("  Enter seed    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(presets),
        Align.center(Text("  ← →  choose puzzle", style="dim")),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    console.print()
    console.print(Align.center(Panel(body, title="[bold]N E T[/bold]",
                                     border_style="bright_blue", padding=(1, 4))))


# -- game loops ---------------------------------------------------------------


def _play_game(params: GameParams, seed: str | None = None) -> None:
    game = GamePlay(params, seed)
    cursor = game.state.centre
    status = ""
    show_help = False
    was_won = False

    while True:
        _draw_game(game, cursor, status, show_help)

        # Wait for input with a short timeout so the clock keeps ticking.
        shown = _format_time(game.history.elapsed_time)
        while True:
            key = get_key_timeout(0.5)
            if key is not None:
                break
            if _format_time(game.history.elapsed_time) != shown:
                _draw_game(game, cursor, status, show_help)
                shown = _format_time(game.history.elapsed_time)
        status = ""
        x, y = cursor

        steps = {"up": (0, -1), "down": (0, 1), "left": (-1, 0), "right": (1, 0)}
        if key in steps:
            ddx, ddy = steps[key]
            cursor = ((x + ddx) % params.width, (y + ddy) % params.height)
        elif key in ("rotate_ccw", "rotate_cw"):
            if not game.rotate(x, y, clockwise=key == "rotate_cw"):
                status = "[yellow]That tile is locked.[/yellow]"
        elif key == "lock":
            game.toggle_lock(x, y)
        elif key == "undo":
            if not game.undo():
                status = "[dim]Nothing to undo.[/dim]"
        elif key == "redo":
            if not game.redo():
                status = "[dim]Nothing to redo.[/dim]"
        elif key == "restart":
            game.restart()
            status = "[cyan]Restarted.[/cyan]"
        elif key == "new":
            game = GamePlay(params)
            cursor = game.state.centre
            was_won = False
        elif key == "help":
            show_help = not show_help
        elif key == "quit":
            return

        if game.is_won and not was_won:
            status = (
                f"[bold green]Solved in {game.history.moves} moves, "
                f"{_format_time(game.history.elapsed_time)}![/bold green]"
            )
        was_won = game.is_won


def _menu_loop() -> None:
    sel = 0
    while True:
        _draw_menu(sel)
        key = get_key()
        if key == "left":
            sel = (sel - 1) % len(PRESETS)
        elif key == "right":
            sel = (sel + 1) % len(PRESETS)
        elif key in ("enter", "1"):
            _play_game(PRESETS[sel][1])
        elif key in ("e", "E"):
            console.print()
            seed = Prompt.ask("  Seed", console=console).strip()
            if seed:
                _play_game(PRESETS[sel][1], seed)
        elif key == "quit":
            console.clear()
            return


# -- public entry point -------------------------------------------------------


def run(params: GameParams | None = None, seed: str | None = None) -> None:
    """Play one puzzle with *params*, or open the preset menu if omitted."""
    if params is None:
        _menu_loop()
    else:
        _play_game(params, seed)
