"""Turn raw console lines into structured moves and die values.

Parsers return ``None`` on anything malformed so callers can re-prompt;
they never raise.
"""

from __future__ import annotations

from boardplay.grid import GRID_SIZE, GridPosition
from boardplay.race import DIE_FACES, DieRoll

_COORDS = {str(i): i for i in range(1, GRID_SIZE + 1)}


def parse_grid_position(line: str) -> GridPosition | None:
    """Parse ``"<row> <column>"``, each 1–3, e.g. ``"2 3"``."""
    parts = line.split()
    if len(parts) != 2:
        return None
    row, column = (_COORDS.get(p) for p in parts)
    if row is None or column is None:
        return None
    return GridPosition(row, column)


def parse_die(text: str) -> DieRoll | None:
    text = text.strip()
    if not text.isdecimal():
        return None
    value = int(text)
    if not 1 <= value <= DIE_FACES:
        return None
    return DieRoll(value)
