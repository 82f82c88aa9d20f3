"""Tracks the sequence of positions of a game in progress."""

from __future__ import annotations

import time

from backend.models.state import GameState


class StateHistory:
    """Holds every position reached, a cursor into them, and elapsed time.

    Positions are immutable values, so undo and redo just move the cursor.
    Making a move from an undone position discards the redo tail.
    """

    def __init__(self, initial: GameState) -> None:
        self._states: list[GameState] = [initial]
        self._pos: int = 0
        self.moves: int = 0
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- positions ------------------------------------------------------------

    @property
    def current(self) -> GameState:
        return self._states[self._pos]

    @property
    def initial(self) -> GameState:
        return self._states[0]

    def __len__(self) -> int:
        return len(self._states)

    def push(self, state: GameState) -> None:
        for dropped in self._states[self._pos + 1 :]:
            dropped.free()
        del self._states[self._pos + 1 :]
        self._states.append(state)
        self._pos += 1
        self.moves += 1

    @property
    def can_undo(self) -> bool:
        return self._pos > 0

    @property
    def can_redo(self) -> bool:
        return self._pos < len(self._states) - 1

    def undo(self) -> bool:
        if not self.can_undo:
            return False
        self._pos -= 1
        return True

    def redo(self) -> bool:
        if not self.can_redo:
            return False
        self._pos += 1
        return True

    def restart(self) -> None:
        """Return to the starting position as a new, undoable step."""
        self.push(self.initial.clone())

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True
