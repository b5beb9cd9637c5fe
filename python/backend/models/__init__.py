from backend.models.command import Command
from backend.models.errors import (
    DimensionMismatchError,
    InvalidCharacterError,
    InvalidCommandError,
    LevelError,
    LevelLoadError,
    SokobanError,
)
from backend.models.grid import HEIGHT, WIDTH, Direction, Grid
from backend.models.tile import Cell, Occupant, Tile

__all__ = [
    "HEIGHT",
    "WIDTH",
    "Cell",
    "Command",
    "DimensionMismatchError",
    "Direction",
    "Grid",
    "InvalidCharacterError",
    "InvalidCommandError",
    "LevelError",
    "LevelLoadError",
    "Occupant",
    "SokobanError",
    "Tile",
]
