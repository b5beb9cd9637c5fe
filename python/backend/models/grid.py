"""Grid model for the Sokoban game."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum

from backend.models.errors import DimensionMismatchError, InvalidCharacterError
from backend.models.tile import CHAR_TO_TILE, Cell, Occupant, Tile

WIDTH = 10
HEIGHT = 8


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Return the ``(dx, dy)`` step for this direction."""
        return _DELTAS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass
class Grid:
    """Represents the Sokoban playfield.

    Cells are stored as a flat row-major list, indexed by
    ``row * width + col``.  Squares the level text does not cover are
    ``UNSET``.
    """

    width: int
    height: int
    cells: list[Cell]
    player_pos: tuple[int, int] | None

    # -- construction helpers -------------------------------------------------

    @classmethod
    def parse(cls, source: str, width: int = WIDTH, height: int = HEIGHT) -> Grid:
        """Create a grid from level text.

        Example::

            Grid.parse("#####\\n#p.o#\\n#####")

        Raises ``InvalidCharacterError`` for characters outside the level
        vocabulary and ``DimensionMismatchError`` when the text does not
        fit in *width* × *height*.
        """
        # Only \n and \r\n end a row; a final line break adds no row.
        lines = source.replace("\r\n", "\n").split("\n")
        if lines[-1] == "":
            lines.pop()
        if len(lines) > height:
            raise DimensionMismatchError(
                f"Level has {len(lines)} rows, at most {height} allowed."
            )

        cells = [Cell(Occupant.UNSET)] * (width * height)
        player_pos: tuple[int, int] | None = None
        for r, line in enumerate(lines):
            if len(line) > width:
                raise DimensionMismatchError(
                    f"Row {r} has {len(line)} columns, at most {width} allowed."
                )
            for c, char in enumerate(line):
                tile = CHAR_TO_TILE.get(char)
                if tile is None:
                    raise InvalidCharacterError(char, r, c)
                cell = Cell.from_tile(tile)
                if cell.occupant is Occupant.PLAYER and player_pos is None:
                    player_pos = (r, c)
                cells[r * width + c] = cell
        return cls(width=width, height=height, cells=cells, player_pos=player_pos)

    # -- queries --------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row * self.width + col]

    def get_tile(self, row: int, col: int) -> Tile:
        return self.cell(row, col).to_tile()

    @property
    def tiles(self) -> list[Tile]:
        """The flat row-major tile list."""
        return [cell.to_tile() for cell in self.cells]

    def rows(self) -> list[list[Tile]]:
        tiles = self.tiles
        return [tiles[r * self.width : (r + 1) * self.width] for r in range(self.height)]

    def count(self) -> Counter[Tile]:
        return Counter(self.tiles)

    def is_solved(self) -> bool:
        """Check that no block is left off a goal."""
        return not any(
            cell.occupant is Occupant.BLOCK and not cell.on_goal
            for cell in self.cells
        )

    def copy(self) -> Grid:
        return Grid(
            width=self.width,
            height=self.height,
            cells=self.cells[:],
            player_pos=self.player_pos,
        )

    # -- mutation -------------------------------------------------------------

    def place(self, row: int, col: int, occupant: Occupant) -> None:
        """Put *occupant* on the square at (row, col), keeping its goal mark."""
        idx = row * self.width + col
        self.cells[idx] = self.cells[idx].with_occupant(occupant)
