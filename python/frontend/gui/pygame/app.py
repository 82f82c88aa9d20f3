"""Pygame GUI frontend.

Left click turns a tile anticlockwise, right click clockwise, middle click
locks it.  The playfield is drawn with the same tile pitch the move
processor hit-tests against, so mouse positions are only shifted by the
playfield origin before being handed over.
"""

from __future__ import annotations

from typing import Callable

import pygame

from backend.engine.gameconnectivity import Connectivity
from backend.engine.gameplay import (
    TILE_BORDER,
    TILE_SIZE,
    WINDOW_OFFSET,
    Button,
    GamePlay,
)
from backend.models.direction import DIRECTIONS, Direction, dx, dy, popcount
from backend.models.params import GameParams

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
HEADER_H = 48
FOOTER_H = 96
MIN_W = 420
PIPE_W = 5
BARRIER_W = 4

# pygame mouse button number -> move button
_BUTTONS = {1: Button.PRIMARY, 2: Button.AUXILIARY, 3: Button.SECONDARY}


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(surf, self.hover if self._hot else self.bg, self.rect,
                         border_radius=8)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(lbl, (self.rect.centerx - lbl.get_width() // 2,
                        self.rect.centery - lbl.get_height() // 2))

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, params: GameParams, seed: str | None = None) -> None:
        self._params = params
        self._game = GamePlay(params, seed)

        field_w = 2 * WINDOW_OFFSET + params.width * TILE_SIZE
        field_h = 2 * WINDOW_OFFSET + params.height * TILE_SIZE
        self._win_w = max(MIN_W, field_w)
        self._win_h = HEADER_H + field_h + FOOTER_H
        # Top-left corner of the playfield window inside the pygame window.
        self._origin = ((self._win_w - field_w) // 2, HEADER_H)
        self._field_h = field_h

        pygame.init()
        self._surf = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Net")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 20, bold=True)
        self._f_btn = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)
        self._status_msg = ""
        self._build_btns()

    def _build_btns(self) -> None:
        bw, gap = 86, 8
        labels = [("UNDO (U)", self._do_undo), ("REDO (Y)", self._do_redo),
                  ("RESTART (R)", self._do_restart), ("NEW (N)", self._do_new)]
        total = len(labels) * bw + (len(labels) - 1) * gap
        sx = (self._win_w - total) // 2
        y = HEADER_H + self._field_h + 8
        self._btns: list[tuple[_Btn, Callable[[], None]]] = [
            (_Btn((sx + i * (bw + gap), y, bw, 32), text, self._f_btn), action)
            for i, (text, action) in enumerate(labels)
        ]

    # ── drawing ─────────────────────────────────────────────────────────────

    def _tile_rect(self, x: int, y: int) -> pygame.Rect:
        ox, oy = self._origin
        return pygame.Rect(
            ox + WINDOW_OFFSET + x * TILE_SIZE,
            oy + WINDOW_OFFSET + y * TILE_SIZE,
            TILE_SIZE - TILE_BORDER,
            TILE_SIZE - TILE_BORDER,
        )

    def _draw_tile(self, x: int, y: int, lit: bool) -> None:
        state = self._game.state
        rect = self._tile_rect(x, y)
        bg = COL_SURFACE1 if state.is_locked(x, y) else COL_SURFACE0
        pygame.draw.rect(self._surf, bg, rect)

        mask = state.connections(x, y)
        col = COL_BLUE if lit else COL_OVERLAY0
        c = rect.center
        half = TILE_SIZE // 2
        for d in DIRECTIONS:
            if mask & d:
                end = (c[0] + dx(d) * half, c[1] + dy(d) * half)
                pygame.draw.line(self._surf, col, c, end, PIPE_W)

        if (x, y) == state.centre:
            pygame.draw.rect(self._surf, COL_YELLOW, pygame.Rect(0, 0, 14, 14).move(c[0] - 7, c[1] - 7))
        elif popcount(mask) == 1:
            pygame.draw.rect(self._surf, COL_GREEN if lit else COL_RED,
                             pygame.Rect(0, 0, 12, 12).move(c[0] - 6, c[1] - 6))

    def _draw_barriers(self, x: int, y: int) -> None:
        state = self._game.state
        b = state.barrier(x, y)
        if not b:
            return
        r = self._tile_rect(x, y).inflate(TILE_BORDER, TILE_BORDER)
        edges = {
            Direction.RIGHT: (r.topright, r.bottomright),
            Direction.UP: (r.topleft, r.topright),
            Direction.LEFT: (r.topleft, r.bottomleft),
            Direction.DOWN: (r.bottomleft, r.bottomright),
        }
        for d, (a, z) in edges.items():
            if b & d:
                pygame.draw.line(self._surf, COL_RED, a, z, BARRIER_W)

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        state = game.state
        active = Connectivity.compute_active(state)

        title_col = COL_GREEN if game.is_won else COL_TEXT
        title = "C O M P L E T E D" if game.is_won else f"Net  {self._params.label}"
        lbl = self._f_title.render(title, True, title_col)
        self._surf.blit(lbl, ((self._win_w - lbl.get_width()) // 2, 14))

        ox, oy = self._origin
        pygame.draw.rect(
            self._surf, COL_MANTLE,
            pygame.Rect(ox, oy, self._win_w - 2 * ox, self._field_h),
            border_radius=10,
        )
        for y in range(state.height):
            for x in range(state.width):
                self._draw_tile(x, y, active[state.index(x, y)])
        for y in range(state.height):
            for x in range(state.width):
                self._draw_barriers(x, y)

        for btn, _ in self._btns:
            btn.draw(self._surf)

        m, s = divmod(int(game.history.elapsed_time), 60)
        info = (f"Connected {sum(active)}/{len(active)}    "
                f"Moves {game.history.moves}    Time {m:02d}:{s:02d}")
        if self._status_msg:
            info = self._status_msg
        lbl = self._f_small.render(info, True, COL_SUBTEXT)
        footer_y = HEADER_H + self._field_h + 50
        self._surf.blit(lbl, ((self._win_w - lbl.get_width()) // 2, footer_y))
        hint = self._f_small.render(
            "L/R click turn    Middle click lock    Esc quit", True, COL_OVERLAY0)
        self._surf.blit(hint, ((self._win_w - hint.get_width()) // 2, footer_y + 20))

    # ── actions ─────────────────────────────────────────────────────────────

    def _do_undo(self) -> None:
        self._status_msg = "" if self._game.undo() else "Nothing to undo"

    def _do_redo(self) -> None:
        self._status_msg = "" if self._game.redo() else "Nothing to redo"

    def _do_restart(self) -> None:
        self._game.restart()
        self._status_msg = "Restarted"

    def _do_new(self) -> None:
        self._game = GamePlay(self._params)
        self._status_msg = f"New game, seed {self._game.seed}"

    # ── event handling ──────────────────────────────────────────────────────

    def _ev(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for btn, _ in self._btns:
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN:
            if ev.button == 1:
                for btn, action in self._btns:
                    if btn.hit(ev.pos):
                        action()
                        return True
            button = _BUTTONS.get(ev.button)
            if button is not None:
                ox, oy = self._origin
                if self._game.click(ev.pos[0] - ox, ev.pos[1] - oy, button):
                    self._status_msg = ""
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_u:
                self._do_undo()
            elif ev.key == pygame.K_y:
                self._do_redo()
            elif ev.key == pygame.K_r:
                self._do_restart()
            elif ev.key == pygame.K_n:
                self._do_new()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._ev(ev):
                    running = False
                    break
            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(params: GameParams | None = None, seed: str | None = None) -> None:
    """Open the Pygame window on one puzzle."""
    app = PygameApp(params or GameParams(), seed)
    app.run_loop()
