"""Board model and square layout for Snakes & Ladders."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

from boardplay.errors import RangeError

BOARD_SIZE = 100

# fmt: off
SNAKES_LADDERS: Mapping[int, int] = MappingProxyType({
    # Ladders (go UP)
     1: 38,   4: 14,   9: 31,  21: 42,  28: 84,
    36: 44,  51: 67,  71: 91,  80: 100,
    # Snakes (go DOWN)
    16:  6,  47: 26,  49: 11,  56: 53,  62: 19,
    64: 60,  87: 24,  93: 73,  95: 75,  98: 78,
})
# fmt: on


@dataclass(frozen=True, order=True)
class Position:
    """A square number on the board, 1..BOARD_SIZE."""

    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError(f"Position index must be an int, got {self.index!r}")
        if not 1 <= self.index <= BOARD_SIZE:
            raise RangeError("Position", self.index, 1, BOARD_SIZE)

    def __int__(self) -> int:
        return self.index

    def __str__(self) -> str:
        return str(self.index)


# ── Squares ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Normal:
    position: Position

    @property
    def destination(self) -> Position:
        return self.position


@dataclass(frozen=True)
class Snake:
    start: Position
    end: Position

    def __post_init__(self) -> None:
        if not self.end < self.start:
            raise ValueError(f"Snake must go down: {self.start} → {self.end}")

    @property
    def destination(self) -> Position:
        return self.end


@dataclass(frozen=True)
class Ladder:
    start: Position
    end: Position

    def __post_init__(self) -> None:
        if not self.end > self.start:
            raise ValueError(f"Ladder must go up: {self.start} → {self.end}")

    @property
    def destination(self) -> Position:
        return self.end


Square = Union[Normal, Snake, Ladder]


def square_kind(square: Square) -> str:
    """Short lowercase name of the square's variant."""
    if isinstance(square, Snake):
        return "snake"
    if isinstance(square, Ladder):
        return "ladder"
    return "normal"


# ── Board ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Board:
    """Read-only mapping from square number to Square."""

    squares: Mapping[int, Square] = field(hash=False)
    final_square: Position

    def square_at(self, position: Position | int) -> Square:
        if not isinstance(position, Position):
            position = Position(position)
        if position > self.final_square:
            raise RangeError("Position", position.index, 1, self.final_square.index)
        return self.squares[position.index]


def build_board(size: int, modifiers: Mapping[int, int]) -> Board:
    """Build a board of *size* squares with the given snakes and ladders.

    *modifiers* maps a start square to its destination; a destination
    below the start is a snake, above it a ladder. Every modifier must
    resolve in one hop, so no destination may itself be a start square.
    """
    if not 2 <= size <= BOARD_SIZE:
        raise RangeError("Board size", size, 2, BOARD_SIZE)

    squares: dict[int, Square] = {i: Normal(Position(i)) for i in range(1, size + 1)}

    for start, end in modifiers.items():
        for sq in (start, end):
            if not 1 <= sq <= size:
                raise RangeError("Modifier square", sq, 1, size)
        if end in modifiers:
            raise ValueError(f"Modifier {start} → {end} lands on another modifier")
        if end < start:
            squares[start] = Snake(Position(start), Position(end))
        elif end > start:
            squares[start] = Ladder(Position(start), Position(end))
        else:
            raise ValueError(f"Modifier on square {start} goes nowhere")

    return Board(squares=MappingProxyType(squares), final_square=Position(size))


def create_standard_board() -> Board:
    return build_board(BOARD_SIZE, SNAKES_LADDERS)

