"""Plain-text rendering for both games."""

from __future__ import annotations

from boardplay.grid import Cell, Grid, Occupied
from boardplay.race import GameState, Landing

ROW_SEPARATOR = "-----"


def render_cell(cell: Cell) -> str:
    if isinstance(cell, Occupied):
        return str(cell.letter)
    return " "


def render_grid(grid: Grid) -> str:
    """Render the grid as three ``a|b|c`` rows split by dashes."""
    rows = ["|".join(render_cell(c) for c in row) for row in grid.cells]
    return f"\n{ROW_SEPARATOR}\n".join(rows)


def render_race(state: GameState) -> str:
    lines = []
    for i, player in enumerate(state.players):
        marker = "*" if i == state.current_index else " "
        lines.append(f"{marker} {player.name}: square {player.position}")
    return "\n".join(lines)


def describe_landing(name: str, landing: Landing) -> str:
    if landing.took_ladder:
        return f"{name} climbs the ladder on {landing.landed} and moves to {landing.end}"
    if landing.took_snake:
        return f"{name} slides down the snake on {landing.landed} and moves to {landing.end}"
    return f"{name} moves to {landing.end}"
