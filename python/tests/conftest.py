"""Shared level fixtures."""

from __future__ import annotations

import pytest

from backend.engine.levelloader import BUILTIN_LEVEL

# Five blocks, five goals.  Player starts at row 1, column 7.
WAREHOUSE = BUILTIN_LEVEL

# Moves that clear WAREHOUSE, as command characters.
WAREHOUSE_SOLUTION = (
    "aaazzzaaw"  # walk round to the left of the loose block
    "s"          # push it right, out of the way
    "w"          # push (2,3) onto the goal at (1,3)
    "zaw"        # push (2,2) onto the goal at (1,2)
    "zss"        # push the loose block to (3,5)
    "wszz"       # push it down onto (4,5), then on to (5,5)
    "swsszaa"    # push (4,7) left onto (4,5)
    "wsswaa"     # push (2,7) left onto (2,5)
)


@pytest.fixture
def warehouse() -> str:
    return WAREHOUSE
