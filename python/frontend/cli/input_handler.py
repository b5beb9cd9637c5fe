"""Line-based command reader for CLI frontends.

Each turn reads one line from standard input.  Only the first character
is significant; the rest of the line is ignored.
"""

from __future__ import annotations

import sys
from typing import TextIO

from backend.models.command import Command


def read_char(stream: TextIO | None = None) -> str:
    """Read one line and return its first character ('' for a blank line).

    Blocks until a full line is available.  Raises ``EOFError`` when the
    input is closed.
    """
    stream = stream if stream is not None else sys.stdin
    line = stream.readline()
    if not line:
        raise EOFError("standard input closed")
    return line.rstrip("\r\n")[:1]


def read_command(stream: TextIO | None = None) -> Command:
    """Read one line and interpret it as a :class:`Command`.

    Raises ``InvalidCommandError`` for anything outside the command set
    and ``EOFError`` when the input is closed.
    """
    return Command.from_char(read_char(stream))
