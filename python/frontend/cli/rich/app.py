"""Rich terminal frontend: styled grid, panels, and colours.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.align import Align
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.levelloader import Level
from backend.models.command import PROMPT
from backend.models.errors import InvalidCommandError
from backend.models.grid import Grid
from backend.models.tile import GLYPHS, Tile
from frontend.cli.input_handler import read_command

console = Console()

_TILE_STYLES: dict[Tile, str] = {
    Tile.EMPTY: "",
    Tile.UNSET: "",
    Tile.WALL: "bold bright_blue",
    Tile.GOAL: "bold cyan",
    Tile.BLOCK: "bold yellow",
    Tile.BLOCK_ON_GOAL: "bold green",
    Tile.PLAYER: "bold magenta",
    Tile.PLAYER_ON_GOAL: "bold green",
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _stats(game: GamePlay) -> Text:
    state = game.state
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(state.moves), style="bold yellow")
    stats.append("    Pushes: ", style="dim")
    stats.append(str(state.pushes), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(state.elapsed_time), style="bold yellow")
    return stats


# -- grid rendering -----------------------------------------------------------


def _render_grid(grid: Grid) -> Text:
    """Return a Rich Text block with one styled glyph per square."""
    text = Text()
    for r, row in enumerate(grid.rows()):
        if r:
            text.append("\n")
        for tile in row:
            text.append(GLYPHS[tile], style=_TILE_STYLES[tile])
    return text


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, number: int, status: str = "") -> None:
    console.clear()

    controls = Text()
    for key, label in (("a", "left"), ("s", "right"), ("w", "up"), ("z", "down"), ("r", "reset")):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f" {label}", style="dim")

    panel = Panel(
        Align.center(_render_grid(game.grid)),
        title=f"[bold cyan]Level {number}  {escape(game.state.name)}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text(status, style="bold red")))
    console.print(Align.center(controls))


def _draw_clear(game: GamePlay, number: int) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("STAGE CLEAR!", style="bold green")
    congrats.append(" ★\n", style="bold yellow")

    group = Group(
        Align.center(_render_grid(game.grid)),
        Align.center(congrats),
        Align.center(_stats(game)),
    )

    panel = Panel(
        group,
        title=f"[bold green]Level {number}  {escape(game.state.name)}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------


def play_level(game: GamePlay, number: int = 1) -> bool:
    """Run one level until it is cleared.

    Returns False if the input closed before the level was cleared.
    """
    status = ""
    while not game.is_won:
        _draw_game(game, number, status)
        status = ""

        console.print(PROMPT, highlight=False)
        try:
            command = read_command()
        except InvalidCommandError:
            status = "Input error: invalid input."
            continue
        except EOFError:
            game.state.pause()
            return False

        game.execute(command)

    _draw_clear(game, number)
    return True


# -- public entry point -------------------------------------------------------


def run(levels: Iterable[Level]) -> None:
    """Play *levels* in order, each to completion."""
    for number, level in enumerate(levels, 1):
        game = GamePlay(level.source, level.name)
        if not play_level(game, number):
            console.print()
            return
