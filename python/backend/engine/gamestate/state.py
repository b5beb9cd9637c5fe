"""Tracks the mutable state of a level in progress."""

from __future__ import annotations

import time

from backend.models.grid import Grid


class GameState:
    """Holds the level text, the live grid, and the session counters.

    The source text is kept so the level can be rebuilt from scratch
    without going back to disk.  The play clock stops when the level is
    cleared and restarts on a rebuild.
    """

    def __init__(self, source: str, name: str = "") -> None:
        self.source = source
        self.name = name
        self.grid: Grid = Grid.parse(source)
        self.moves: int = 0
        self.pushes: int = 0
        self.resets: int = 0
        self._start_time: float = time.monotonic()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- lifecycle ------------------------------------------------------------

    def rebuild(self) -> None:
        """Throw away all progress and re-parse the level text."""
        self.grid = Grid.parse(self.source)
        self.moves = 0
        self.pushes = 0
        self.resets += 1
        self.resume()

    def record_move(self, pushed: bool) -> None:
        self.moves += 1
        if pushed:
            self.pushes += 1
        if self.grid.is_solved():
            self.pause()

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.monotonic() - self._start_time)
        return self._elapsed_banked

    @property
    def is_running(self) -> bool:
        return self._running

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.monotonic() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.monotonic()
            self._running = True

    # -- queries --------------------------------------------------------------

    @property
    def is_solved(self) -> bool:
        return self.grid.is_solved()
