#!/usr/bin/env python3
"""Net — the pipe-rotation puzzle.

Usage::

    python main.py                       # preset menu (Rich terminal)
    python main.py -f rich -W 7 -H 7     # Rich terminal, 7×7
    python main.py -f pygame --wrap -b 0.2
    python main.py --show --seed 123     # print one grid and exit
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for the preset menu.",
    ),
    width: int = typer.Option(5, "-W", "--width", min=3, help="Grid width."),
    height: int = typer.Option(5, "-H", "--height", min=3, help="Grid height."),
    wrap: bool = typer.Option(
        False, "--wrap/--no-wrap", help="Join opposite edges of the grid.",
    ),
    barriers: float = typer.Option(
        0.0, "-b", "--barriers", min=0.0, max=1.0,
        help="Fraction of pipe-free edges that get a wall.",
    ),
    seed: Optional[str] = typer.Option(
        None, "--seed", help="Any string; the same seed gives the same grid.",
    ),
    show: bool = typer.Option(
        False, "--show", help="Print the generated grid and exit.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level", case_sensitive=False,
        help="Logging verbosity.",
    ),
) -> None:
    """Net — rotate the tiles until every pipe joins the centre."""
    logging.basicConfig(
        level=log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from backend.engine.gamegenerator import GameGenerator
    from backend.models.params import GameParams

    params = GameParams(width, height, wrap, barriers)

    if show:
        from frontend.cli.rich.app import show as show_grid

        seed = seed if seed is not None else GameGenerator.new_seed()
        show_grid(GameGenerator.generate(params, seed), seed)
        return

    if frontend is None:
        mod = importlib.import_module(_RUNNERS[Frontend.rich])
        mod.run()
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(params=params, seed=seed)


if __name__ == "__main__":
    app()
