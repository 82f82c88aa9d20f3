"""Single-keypress reader for the terminal frontend.

Arrow keys and WASD move the cursor; the remaining keys map to tile and
history actions.  Works on macOS / Linux (tty+termios) and Windows
(msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "z": "rotate_ccw",
    "x": "rotate_cw",
    " ": "lock",
    "l": "lock",
    "u": "undo",
    "y": "redo",
    "\x12": "redo",  # Ctrl-R
    "r": "restart",
    "n": "new",
    "h": "help",
    "?": "help",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string (case-insensitive)."""
    action = _KEY_MAP.get(ch) or _KEY_MAP.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block for one keypress and return its action string.

    Possible return values:
        "up", "down", "left", "right"  — cursor movement
        "rotate_ccw", "rotate_cw"      — z / x
        "lock"                         — space / l
        "undo", "redo"                 — u / y (or Ctrl-R)
        "restart", "new"               — r / n
        "help", "quit", "enter"
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys arrive as ESC [ A/B/C/D
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"  # bare Escape

    return _resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Like :func:`get_key` but give up after *timeout* seconds.

    Returns ``None`` if nothing was pressed.  Reads with ``os.read`` so
    ``select`` still sees the tail of a multi-byte arrow sequence.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time as _time

        end = _time.monotonic() + timeout
        while _time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            _time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    def _read_ready(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = _read_ready(timeout)
        if ch is None:
            return None
        if ch != "\x1b":
            return _resolve(ch)

        ch2 = _read_ready(0.1)
        if ch2 != "[":
            return "quit"  # bare Escape
        ch3 = _read_ready(0.1)
        return _ARROW_MAP.get(ch3 or "", "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
