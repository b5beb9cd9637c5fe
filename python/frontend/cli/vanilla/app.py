"""Vanilla terminal frontend with no third-party dependencies.

Uses only stdlib (print and ANSI codes) for rendering and a line read
from stdin for input.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable

from backend.engine.gameplay import GamePlay
from backend.engine.levelloader import Level
from backend.models.command import PROMPT
from backend.models.errors import InvalidCommandError
from backend.models.grid import Grid
from backend.models.tile import GLYPHS, Tile
from frontend.cli.input_handler import read_command


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset

_TILE_COLOURS: dict[Tile, str] = {
    Tile.WALL: _DIM,
    Tile.GOAL: _C,
    Tile.BLOCK: _Y,
    Tile.BLOCK_ON_GOAL: _G,
    Tile.PLAYER: _Y,
    Tile.PLAYER_ON_GOAL: _G,
}

INPUT_ERROR = "Input error: invalid input."
CLEAR_MESSAGE = "STAGE CLEAR!"


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}" if m else f"{s}s"


# -- grid rendering -----------------------------------------------------------


def render_grid(grid: Grid) -> str:
    """Return the grid as plain text, one line of glyphs per row."""
    return "\n".join(
        "".join(GLYPHS[tile] for tile in row) for row in grid.rows()
    )


def _paint(grid: Grid) -> str:
    """Return an ANSI-coloured version of :func:`render_grid`."""
    lines: list[str] = []
    for row in grid.rows():
        cells: list[str] = []
        for tile in row:
            colour = _TILE_COLOURS.get(tile)
            glyph = GLYPHS[tile]
            cells.append(f"{colour}{glyph}{_R}" if colour else glyph)
        lines.append("".join(cells))
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_game(game: GamePlay, number: int, status: str = "") -> None:
    _clear()
    state = game.state
    print(f"  {_C}=== Level {number}: {state.name} ==={_R}")
    print()
    print(_paint(game.grid))
    print()
    print(
        f"  Moves: {_Y}{state.moves}{_R}  |  "
        f"Pushes: {_Y}{state.pushes}{_R}  |  "
        f"Time: {_Y}{_format_time(state.elapsed_time)}{_R}"
    )
    if status:
        print(status)


def _show_clear(game: GamePlay) -> None:
    print(f"{_G}{CLEAR_MESSAGE}{_R}")
    print(
        f"  Cleared in {_Y}{game.state.moves}{_R} moves, "
        f"{_Y}{_format_time(game.state.elapsed_time)}{_R}."
    )


# -- game loop ----------------------------------------------------------------


def play_level(game: GamePlay, number: int = 1) -> bool:
    """Run one level until it is cleared.

    Returns False if the input closed before the level was cleared.
    """
    status = ""
    while True:
        _show_game(game, number, status)
        status = ""

        if game.is_won:
            _show_clear(game)
            return True

        print(PROMPT)
        try:
            command = read_command()
        except InvalidCommandError:
            status = INPUT_ERROR
            continue
        except EOFError:
            game.state.pause()
            return False

        game.execute(command)


# -- public entry point -------------------------------------------------------


def run(levels: Iterable[Level]) -> None:
    """Play *levels* in order, each to completion."""
    for number, level in enumerate(levels, 1):
        game = GamePlay(level.source, level.name)
        if not play_level(game, number):
            print()
            return
