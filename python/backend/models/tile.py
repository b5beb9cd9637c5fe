"""Tile vocabulary and the cell model behind it.

A level file speaks in seven characters, each naming one :class:`Tile`.
The grid itself stores :class:`Cell` values, which split a tile into what
occupies the square and whether the square is a goal.  Conversion between
the two only happens when parsing and rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class Tile(StrEnum):
    EMPTY = "empty"
    WALL = "wall"
    GOAL = "goal"
    BLOCK = "block"
    BLOCK_ON_GOAL = "block_on_goal"
    PLAYER = "player"
    PLAYER_ON_GOAL = "player_on_goal"
    UNSET = "unset"


class Occupant(StrEnum):
    EMPTY = "empty"
    WALL = "wall"
    BLOCK = "block"
    PLAYER = "player"
    UNSET = "unset"


@dataclass(frozen=True, slots=True)
class Cell:
    """What stands on a square, and whether the square is a goal.

    Only ``EMPTY``, ``BLOCK`` and ``PLAYER`` can be combined with a goal.
    """

    occupant: Occupant
    on_goal: bool = False

    def __post_init__(self) -> None:
        if self.on_goal and self.occupant in (Occupant.WALL, Occupant.UNSET):
            raise ValueError(f"A {self.occupant} cell cannot be a goal.")

    # -- conversions ----------------------------------------------------------

    @classmethod
    def from_tile(cls, tile: Tile) -> Cell:
        return _TILE_TO_CELL[tile]

    def to_tile(self) -> Tile:
        return _CELL_TO_TILE[self]

    # -- derived cells --------------------------------------------------------

    def with_occupant(self, occupant: Occupant) -> Cell:
        """Return this square with *occupant* standing on it, goal kept."""
        return Cell(occupant, self.on_goal)

    @property
    def is_free(self) -> bool:
        """True if the player or a block may enter this square."""
        return self.occupant is Occupant.EMPTY


# -- static tables ------------------------------------------------------------

_TILE_TO_CELL: MappingProxyType[Tile, Cell] = MappingProxyType({
    Tile.EMPTY: Cell(Occupant.EMPTY),
    Tile.WALL: Cell(Occupant.WALL),
    Tile.GOAL: Cell(Occupant.EMPTY, on_goal=True),
    Tile.BLOCK: Cell(Occupant.BLOCK),
    Tile.BLOCK_ON_GOAL: Cell(Occupant.BLOCK, on_goal=True),
    Tile.PLAYER: Cell(Occupant.PLAYER),
    Tile.PLAYER_ON_GOAL: Cell(Occupant.PLAYER, on_goal=True),
    Tile.UNSET: Cell(Occupant.UNSET),
})

_CELL_TO_TILE: MappingProxyType[Cell, Tile] = MappingProxyType(
    {cell: tile for tile, cell in _TILE_TO_CELL.items()}
)

# Level-file characters.  Also used as display glyphs.
CHAR_TO_TILE: MappingProxyType[str, Tile] = MappingProxyType({
    " ": Tile.EMPTY,
    "#": Tile.WALL,
    ".": Tile.GOAL,
    "o": Tile.BLOCK,
    "O": Tile.BLOCK_ON_GOAL,
    "p": Tile.PLAYER,
    "P": Tile.PLAYER_ON_GOAL,
})

GLYPHS: MappingProxyType[Tile, str] = MappingProxyType({
    **{tile: char for char, tile in CHAR_TO_TILE.items()},
    Tile.UNSET: " ",
})
