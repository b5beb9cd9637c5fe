"""Single-character player commands."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

from backend.models.errors import InvalidCommandError
from backend.models.grid import Direction


class Command(StrEnum):
    LEFT = "a"
    RIGHT = "s"
    UP = "w"
    DOWN = "z"
    RESET = "r"

    @classmethod
    def from_char(cls, char: str) -> Command:
        """Look up the command for *char*.  Matching is exact and case sensitive."""
        try:
            return cls(char)
        except ValueError:
            raise InvalidCommandError(char) from None

    @property
    def direction(self) -> Direction | None:
        """The move direction, or ``None`` for non-movement commands."""
        return _DIRECTIONS.get(self)


_DIRECTIONS: MappingProxyType[Command, Direction] = MappingProxyType({
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
})

PROMPT = "a: left s: right w: up z: down r: reset. Input command?"
