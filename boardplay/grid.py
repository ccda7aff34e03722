"""Tic-tac-toe: grid values, placement and outcome rules.

Every value here is immutable. ``try_move`` hands back a fresh Grid, so
a caller holding an earlier grid never sees later placements.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

from boardplay.errors import RangeError

GRID_SIZE = 3


class Letter(Enum):
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value


def other_player(letter: Letter) -> Letter:
    return Letter.O if letter is Letter.X else Letter.X


# ── Cells and positions ─────────────────────────────────────────────

@dataclass(frozen=True)
class Unoccupied:
    pass


@dataclass(frozen=True)
class Occupied:
    letter: Letter


Cell = Union[Unoccupied, Occupied]

UNOCCUPIED = Unoccupied()


@dataclass(frozen=True)
class GridPosition:
    """1-based (row, column) on the grid."""

    row: int
    column: int

    def __post_init__(self) -> None:
        for what, value in (("Row", self.row), ("Column", self.column)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{what} must be an int, got {value!r}")
            if not 1 <= value <= GRID_SIZE:
                raise RangeError(what, value, 1, GRID_SIZE)

    def __str__(self) -> str:
        return f"({self.row},{self.column})"


ALL_POSITIONS: tuple[GridPosition, ...] = tuple(
    GridPosition(r, c)
    for r in range(1, GRID_SIZE + 1)
    for c in range(1, GRID_SIZE + 1)
)


# Rows, then columns, then the two diagonals. Order decides ties.
WIN_LINES: tuple[tuple[GridPosition, ...], ...] = (
    *(tuple(GridPosition(r, c) for c in (1, 2, 3)) for r in (1, 2, 3)),
    *(tuple(GridPosition(r, c) for r in (1, 2, 3)) for c in (1, 2, 3)),
    (GridPosition(1, 1), GridPosition(2, 2), GridPosition(3, 3)),
    (GridPosition(1, 3), GridPosition(2, 2), GridPosition(3, 1)),
)


# ── Grid ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Grid:
    cells: tuple[tuple[Cell, ...], ...]

    @classmethod
    def empty(cls) -> Grid:
        return cls(tuple((UNOCCUPIED,) * GRID_SIZE for _ in range(GRID_SIZE)))

    def cell_at(self, pos: GridPosition) -> Cell:
        return self.cells[pos.row - 1][pos.column - 1]

    def with_cell(self, pos: GridPosition, cell: Cell) -> Grid:
        rows = [list(row) for row in self.cells]
        rows[pos.row - 1][pos.column - 1] = cell
        return Grid(tuple(tuple(row) for row in rows))

    def is_full(self) -> bool:
        return sum(1 for _ in self.occupied()) == len(ALL_POSITIONS)

    def occupied(self) -> Iterator[tuple[GridPosition, Letter]]:
        for pos in ALL_POSITIONS:
            cell = self.cell_at(pos)
            if isinstance(cell, Occupied):
                yield pos, cell.letter


@dataclass(frozen=True)
class Move:
    at: GridPosition
    letter: Letter


@dataclass(frozen=True)
class GridState:
    grid: Grid
    whose_turn: Letter


def initial_grid_state() -> GridState:
    return GridState(grid=Grid.empty(), whose_turn=Letter.X)


# ── Outcomes ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class NoneYet:
    pass


@dataclass(frozen=True)
class Draw:
    pass


@dataclass(frozen=True)
class Winner:
    letter: Letter


GridOutcome = Union[NoneYet, Draw, Winner]


# ── Rules ───────────────────────────────────────────────────────────

def try_move(grid: Grid, move: Move) -> Grid | None:
    """Place *move.letter* at *move.at*, or return None if the cell is taken."""
    if not isinstance(grid.cell_at(move.at), Unoccupied):
        return None
    return grid.with_cell(move.at, Occupied(move.letter))


def line_winner(grid: Grid, line: tuple[GridPosition, ...]) -> Letter | None:
    first = grid.cell_at(line[0])
    if not isinstance(first, Occupied):
        return None
    if all(grid.cell_at(p) == first for p in line[1:]):
        return first.letter
    return None


def outcome(grid: Grid) -> GridOutcome:
    for line in WIN_LINES:
        letter = line_winner(grid, line)
        if letter is not None:
            return Winner(letter)
    if grid.is_full():
        return Draw()
    return NoneYet()
