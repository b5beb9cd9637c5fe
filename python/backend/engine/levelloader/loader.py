"""Reads level text from disk or from the built-in level."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from collections.abc import Iterator
from pathlib import Path

from backend.models.errors import LevelLoadError

logger = logging.getLogger(__name__)

BUILTIN_LEVEL = (
    "##########\n"
    "# ..   p #\n"
    "# oo . o #\n"
    "#  o     #\n"
    "#    . o #\n"
    "#    .   #\n"
    "#        #\n"
    "##########"
)


@dataclass(frozen=True)
class Level:
    """A named, unparsed level."""

    name: str
    source: str


class LevelLoader:
    """Stateless loader; all methods are static."""

    @staticmethod
    def builtin() -> Level:
        return Level(name="builtin", source=BUILTIN_LEVEL)

    @staticmethod
    def read(path: Path) -> Level:
        """Read a single level file.

        Raises ``LevelLoadError`` if the file is missing or unreadable.
        """
        logger.debug("Reading level %s", path)
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise LevelLoadError(f"Cannot read level {path}: {exc}") from exc
        return Level(name=path.stem, source=source)

    @staticmethod
    def discover(directory: Path) -> list[Path]:
        """Return every level file in *directory*, sorted by file name.

        Hidden files and subdirectories are skipped.
        """
        if not directory.is_dir():
            raise LevelLoadError(f"Levels directory not found: {directory}")
        paths = sorted(
            p for p in directory.iterdir()
            if p.is_file() and not p.name.startswith(".")
        )
        if not paths:
            raise LevelLoadError(f"No level files in {directory}")
        logger.debug("Found %d level(s) in %s", len(paths), directory)
        return paths

    @staticmethod
    def iter_levels(paths: list[Path]) -> Iterator[Level]:
        """Yield levels one at a time, reading each file only when reached."""
        for path in paths:
            yield LevelLoader.read(path)
