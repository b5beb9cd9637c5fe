"""Exception types shared by the backend and the frontends."""

from __future__ import annotations


class SokobanError(Exception):
    """Base class for every error raised by the game."""


class LevelError(SokobanError, ValueError):
    """A level could not be loaded or parsed.  Always fatal."""


class InvalidCharacterError(LevelError):
    def __init__(self, char: str, row: int, col: int) -> None:
        self.char = char
        self.row = row
        self.col = col
        super().__init__(
            f"Unrecognised character {char!r} at row {row}, column {col}."
        )


class DimensionMismatchError(LevelError):
    """The source text does not fit in the fixed grid size."""


class LevelLoadError(LevelError):
    """The level source is missing or unreadable."""


class InvalidCommandError(SokobanError, ValueError):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Invalid command {char!r}.")
