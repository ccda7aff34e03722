"""Game state, move resolution and outcome checks for the race board."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence, Union

from boardplay.board import (
    Board,
    Ladder,
    Position,
    Snake,
    Square,
    create_standard_board,
)
from boardplay.errors import RangeError

DIE_FACES = 6
START_POSITION = 1


@dataclass(frozen=True)
class DieRoll:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Die value must be an int, got {self.value!r}")
        if not 1 <= self.value <= DIE_FACES:
            raise RangeError("Die value", self.value, 1, DIE_FACES)


@dataclass(frozen=True)
class Player:
    name: str
    position: Position = Position(START_POSITION)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Player name must be non-empty")


@dataclass(frozen=True)
class GameState:
    """Board, players in seat order, and whose turn it is."""

    board: Board
    players: tuple[Player, ...]
    current_index: int = 0

    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]


# ── Outcomes ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Ongoing:
    state: GameState


@dataclass(frozen=True)
class Win:
    player: Player


Outcome = Union[Ongoing, Win]


# ── Move resolution ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Landing:
    """What happened to a token after one roll."""

    start: Position
    roll: int
    landed: Position
    square: Square
    end: Position
    clamped: bool = False

    @property
    def took_snake(self) -> bool:
        return isinstance(self.square, Snake)

    @property
    def took_ladder(self) -> bool:
        return isinstance(self.square, Ladder)


def _as_roll(die: int | DieRoll) -> DieRoll:
    return die if isinstance(die, DieRoll) else DieRoll(die)


def resolve_roll(board: Board, start: Position, die: int | DieRoll) -> Landing:
    """Work out where a token on *start* ends up after rolling *die*.

    Overshooting the final square stops on it; landing on a snake or
    ladder follows it in one hop.
    """
    roll = _as_roll(die)
    final = board.final_square
    raw = start.index + roll.value

    clamped = raw > final.index
    landed = final if clamped else Position(raw)
    square = board.square_at(landed)

    return Landing(
        start=start,
        roll=roll.value,
        landed=landed,
        square=square,
        end=square.destination,
        clamped=clamped,
    )


def apply_move(state: GameState, die: int | DieRoll) -> GameState:
    """Move the current player by *die* and pass the turn on.

    Returns a new GameState; *state* is left untouched.
    """
    landing = resolve_roll(state.board, state.current_player.position, die)
    return advance(state, landing)


def advance(state: GameState, landing: Landing) -> GameState:
    """Commit an already-resolved *landing* for the current player."""
    idx = state.current_index
    mover = state.players[idx]
    if landing.start != mover.position:
        raise ValueError(
            f"Landing starts on {landing.start}, but {mover.name} is on {mover.position}"
        )

    players = list(state.players)
    players[idx] = replace(mover, position=landing.end)

    return GameState(
        board=state.board,
        players=tuple(players),
        current_index=(idx + 1) % len(players),
    )


def check_outcome(state: GameState) -> Outcome:
    for player in state.players:
        if player.position == state.board.final_square:
            return Win(player)
    return Ongoing(state)


def new_game(names: Sequence[str], board: Board | None = None) -> GameState:
    """Seat a player per name on the start square, first name to move."""
    if not names:
        raise ValueError("A game needs at least one player")
    board = board or create_standard_board()
    players = tuple(Player(name=n, position=Position(START_POSITION)) for n in names)
    return GameState(board=board, players=players, current_index=0)
