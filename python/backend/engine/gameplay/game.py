"""Core gameplay logic: resolves moves and pushes, checks the win condition."""

from __future__ import annotations

import logging

from backend.engine.gamestate import GameState
from backend.models.command import Command
from backend.models.grid import Direction, Grid
from backend.models.tile import Occupant

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single level session."""

    def __init__(self, source: str, name: str = "") -> None:
        self.state = GameState(source, name)

    # -- commands -------------------------------------------------------------

    def execute(self, command: Command) -> bool:
        """Apply a parsed player command.

        Returns True if the grid changed.
        """
        if command is Command.RESET:
            self.reset()
            return True
        return self.move(command.direction)

    def reset(self) -> None:
        logger.debug("Resetting level %r", self.state.name)
        self.state.rebuild()

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction) -> bool:
        """Step the player one square in *direction*, pushing a block if needed.

        Illegal moves (off the grid, into a wall, or pushing a block into
        anything but a free square) leave the grid untouched.
        Returns True if the move was applied.
        """
        grid = self.state.grid
        if grid.player_pos is None:
            return False

        pushed = self._step(grid, grid.player_pos, direction)
        if pushed is None:
            logger.debug("Rejected move %s from %s", direction.value, grid.player_pos)
            return False

        self.state.record_move(pushed)
        if self.is_won:
            logger.info("Level %r cleared in %d moves", self.state.name, self.state.moves)
        return True

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _step(grid: Grid, origin: tuple[int, int], direction: Direction) -> bool | None:
        """Resolve one move.  Returns None if rejected, else whether a block moved."""
        dx, dy = direction.delta
        r, c = origin
        tr, tc = r + dy, c + dx
        if not grid.in_bounds(tr, tc):
            return None

        target = grid.cell(tr, tc)
        pushed = False
        if target.occupant is Occupant.BLOCK:
            br, bc = tr + dy, tc + dx
            if not grid.in_bounds(br, bc) or not grid.cell(br, bc).is_free:
                return None
            grid.place(br, bc, Occupant.BLOCK)
            pushed = True
        elif not target.is_free:
            return None

        grid.place(tr, tc, Occupant.PLAYER)
        grid.place(r, c, Occupant.EMPTY)
        grid.player_pos = (tr, tc)
        return pushed
