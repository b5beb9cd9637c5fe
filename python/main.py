#!/usr/bin/env python3
"""Sokoban.

Usage::

    python main.py                     # play every level in ../levels
    python main.py -f rich             # Rich terminal frontend
    python main.py -l my_level.txt     # play a single level file
    python main.py --builtin           # play the built-in level
"""

import importlib
import logging
import sys
from collections.abc import Iterable
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent  # sokoban/
LEVELS_DIR = PROJECT_ROOT / "levels"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.levelloader import Level, LevelLoader  # noqa: E402
from backend.models.errors import LevelError  # noqa: E402

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _select_levels(
    levels: list[Path], levels_dir: Path, builtin: bool
) -> Iterable[Level]:
    """Pick the level source: the built-in level, explicit files, or a directory."""
    if builtin:
        return [LevelLoader.builtin()]
    paths = levels or LevelLoader.discover(levels_dir)
    return LevelLoader.iter_levels(paths)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Terminal frontend to use.",
    ),
    levels_dir: Path = typer.Option(
        LEVELS_DIR, "-d", "--levels-dir",
        envvar="SOKOBAN_LEVELS_DIR",
        file_okay=False,
        help="Directory whose level files are played in name order.",
    ),
    level: Optional[list[Path]] = typer.Option(
        None, "-l", "--level",
        dir_okay=False,
        help="Level file to play (repeatable). Overrides --levels-dir.",
    ),
    builtin: bool = typer.Option(
        False, "--builtin",
        help="Play the built-in level without touching the disk.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log debug output to stderr.",
    ),
) -> None:
    """Sokoban: push every block onto a goal."""
    _configure_logging(verbose)

    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        mod.run(_select_levels(level or [], levels_dir, builtin))
    except LevelError as exc:
        logger.debug("Aborting on load error", exc_info=True)
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
