"""Level loading from disk, and the bundled level set."""

from __future__ import annotations

from pathlib import Path

import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.levelloader import BUILTIN_LEVEL, Level, LevelLoader
from backend.models.command import Command
from backend.models.errors import LevelLoadError
from backend.models.grid import Grid
from backend.models.tile import Tile

LEVELS_DIR = Path(__file__).resolve().parent.parent.parent / "levels"

# Known solutions for the bundled levels, keyed by file stem.
SOLUTIONS: dict[str, str] = {
    "01-warehouse": (
        "aaazzzaaw" "s" "w" "zaw" "zss" "wszz" "swsszaa" "wsswaa"
    ),
    "02-corridor": "sssss" "aaaaa" "zzz" "ssss" "w" "a",
    "03-twins": "wzaw",
}


# -- loader -------------------------------------------------------------------


def test_read_level(tmp_path: Path) -> None:
    path = tmp_path / "tiny.txt"
    path.write_text("#po.#\n")

    level = LevelLoader.read(path)

    assert level == Level(name="tiny", source="#po.#\n")


def test_read_missing_level(tmp_path: Path) -> None:
    with pytest.raises(LevelLoadError, match="missing.txt"):
        LevelLoader.read(tmp_path / "missing.txt")


def test_read_directory_is_a_load_error(tmp_path: Path) -> None:
    with pytest.raises(LevelLoadError):
        LevelLoader.read(tmp_path)


def test_discover_sorts_and_skips_hidden(tmp_path: Path) -> None:
    for name in ("b.txt", "a.txt", ".hidden", "c"):
        (tmp_path / name).write_text("p")
    (tmp_path / "sub").mkdir()

    paths = LevelLoader.discover(tmp_path)

    assert [p.name for p in paths] == ["a.txt", "b.txt", "c"]


def test_discover_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(LevelLoadError, match="not found"):
        LevelLoader.discover(tmp_path / "nope")


def test_discover_empty_directory(tmp_path: Path) -> None:
    with pytest.raises(LevelLoadError, match="No level files"):
        LevelLoader.discover(tmp_path)


def test_iter_levels_reads_lazily(tmp_path: Path) -> None:
    good = tmp_path / "good.txt"
    good.write_text("p")
    levels = LevelLoader.iter_levels([good, tmp_path / "gone.txt"])

    assert next(levels).name == "good"
    with pytest.raises(LevelLoadError):
        next(levels)


def test_builtin_level() -> None:
    level = LevelLoader.builtin()
    assert level.source == BUILTIN_LEVEL
    assert Grid.parse(level.source).player_pos == (1, 7)


# -- bundled levels -----------------------------------------------------------


_BUNDLED = LevelLoader.discover(LEVELS_DIR)


@pytest.mark.parametrize("path", _BUNDLED, ids=lambda p: p.stem)
def test_bundled_level_is_well_formed(path: Path) -> None:
    grid = Grid.parse(LevelLoader.read(path).source)
    counts = grid.count()

    assert counts[Tile.PLAYER] + counts[Tile.PLAYER_ON_GOAL] == 1
    blocks = counts[Tile.BLOCK] + counts[Tile.BLOCK_ON_GOAL]
    goals = counts[Tile.GOAL] + counts[Tile.BLOCK_ON_GOAL] + counts[Tile.PLAYER_ON_GOAL]
    assert blocks == goals > 0
    assert not grid.is_solved()


@pytest.mark.parametrize("path", _BUNDLED, ids=lambda p: p.stem)
def test_bundled_level_is_solvable(path: Path) -> None:
    level = LevelLoader.read(path)
    game = GamePlay(level.source, level.name)

    for key in SOLUTIONS[level.name]:
        assert game.execute(Command.from_char(key)), f"move {key!r} rejected"

    assert game.is_won
