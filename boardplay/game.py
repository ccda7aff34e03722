"""Game runners that drive a race or grid game from start to finish."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, Union, runtime_checkable

from boardplay import grid as g
from boardplay import race
from boardplay.board import Board, square_kind
from boardplay.grid import GridPosition, Letter
from boardplay.race import DieRoll
from boardplay.render import describe_landing, render_grid, render_race

OCCUPIED_MESSAGE = "Bad move! Position is occupied."
SEPARATOR = "-" * 32


# ── Player interfaces ───────────────────────────────────────────────

@runtime_checkable
class RacePlayer(Protocol):
    """Structural interface: any object with these members works."""

    @property
    def name(self) -> str: ...

    def roll(self, observation: str) -> int | DieRoll: ...


@runtime_checkable
class GridPlayer(Protocol):
    @property
    def name(self) -> str: ...

    def next_move(self, observation: str) -> GridPosition: ...

    def observe(self, message: str) -> None: ...


# ── Structured types ────────────────────────────────────────────────

@dataclass
class RaceLogEntry:
    """Record of one roll in a race game."""

    turn_number: int
    player: str
    roll: int
    start: int
    landed: int
    end: int
    square_kind: str = "normal"
    clamped: bool = False
    is_winning_move: bool = False
    message: str = ""


@dataclass
class GridLogEntry:
    """Record of one placement attempt in a grid game."""

    turn_number: int
    player: str
    letter: Letter
    position: GridPosition
    accepted: bool
    message: str = ""
    grid_after: g.Grid | None = None
    is_winning_move: bool = False


LogEntry = Union[RaceLogEntry, GridLogEntry]


@dataclass
class GameResult:
    winner: str | None  # player name, or None for a draw
    reason: str  # "win" | "draw" | "forfeit" | "max_turns"
    turns: int = 0
    final_state: Any = None


# ── Observers ───────────────────────────────────────────────────────

class GameObserver(Protocol):
    """Receives structured events as a game is played."""

    def on_action(self, entry: LogEntry) -> None: ...


@dataclass
class ListObserver:
    """Default observer, collects entries into a list."""

    entries: list[LogEntry] = field(default_factory=list)

    def on_action(self, entry: LogEntry) -> None:
        self.entries.append(entry)


@dataclass
class PrintObserver:
    """Writes a console transcript line (or block) per entry."""

    write: Callable[[str], None] = print

    def on_action(self, entry: LogEntry) -> None:
        if isinstance(entry, RaceLogEntry):
            self.write(f"Rolled: {entry.roll}")
            self.write(entry.message)
            if entry.is_winning_move:
                self.write(f"{entry.player} wins the game!")
            self.write(SEPARATOR)
        elif entry.accepted and entry.grid_after is not None:
            self.write(f"{entry.letter} plays {entry.position}")
            self.write(render_grid(entry.grid_after))
            self.write("")


# ── Race runner ─────────────────────────────────────────────────────

class RaceRunner:
    """Play one Snakes & Ladders game between any number of players."""

    def __init__(
        self,
        players: list[RacePlayer],
        board: Board | None = None,
        max_turns: int = 1000,
        observer: GameObserver | None = None,
    ):
        if not players:
            raise ValueError("RaceRunner needs at least one player")
        self.players = players
        self.state = race.new_game([p.name for p in players], board=board)
        self.max_turns = max_turns
        self.observer = observer or ListObserver()
        self.turn_number = 0

    def play(self) -> GameResult:
        while self.turn_number < self.max_turns:
            result = self._play_turn()
            if result is not None:
                return result

        return GameResult(
            winner=None, reason="max_turns",
            turns=self.turn_number, final_state=self.state,
        )

    def _play_turn(self) -> GameResult | None:
        """Run one roll. Returns GameResult if the game ends."""
        state = self.state
        idx = state.current_index
        mover = state.players[idx]

        die = self.players[idx].roll(self._make_observation())
        landing = race.resolve_roll(state.board, mover.position, die)
        self.state = race.advance(state, landing)
        self.turn_number += 1

        outcome = race.check_outcome(self.state)
        won = isinstance(outcome, race.Win)

        self.observer.on_action(RaceLogEntry(
            turn_number=self.turn_number,
            player=mover.name,
            roll=landing.roll,
            start=landing.start.index,
            landed=landing.landed.index,
            end=landing.end.index,
            square_kind=square_kind(landing.square),
            clamped=landing.clamped,
            is_winning_move=won,
            message=describe_landing(mover.name, landing),
        ))

        if won:
            return GameResult(
                winner=outcome.player.name, reason="win",
                turns=self.turn_number, final_state=self.state,
            )
        return None

    def _make_observation(self) -> str:
        return render_race(self.state)


# ── Grid runner ─────────────────────────────────────────────────────

MAX_ATTEMPTS_PER_TURN = 20  # safety valve against endless rejected moves


class GridRunner:
    """Play one tic-tac-toe game; the first player is X, the second O."""

    def __init__(
        self,
        players: list[GridPlayer],
        max_attempts_per_turn: int = MAX_ATTEMPTS_PER_TURN,
        observer: GameObserver | None = None,
    ):
        if len(players) != 2:
            raise ValueError("GridRunner needs exactly two players")
        self.seats = {Letter.X: players[0], Letter.O: players[1]}
        self.state = g.initial_grid_state()
        self.max_attempts_per_turn = max_attempts_per_turn
        self.observer = observer or ListObserver()
        self.turn_number = 0

    def play(self) -> GameResult:
        while True:
            result = self._play_turn()
            if result is not None:
                return result

    def _play_turn(self) -> GameResult | None:
        letter = self.state.whose_turn
        player = self.seats[letter]
        self.turn_number += 1
        observation = self._make_observation()

        for _ in range(self.max_attempts_per_turn):
            pos = player.next_move(observation)
            new_grid = g.try_move(self.state.grid, g.Move(at=pos, letter=letter))

            if new_grid is None:
                self.observer.on_action(GridLogEntry(
                    turn_number=self.turn_number,
                    player=player.name,
                    letter=letter,
                    position=pos,
                    accepted=False,
                    message=OCCUPIED_MESSAGE,
                ))
                player.observe(OCCUPIED_MESSAGE)
                continue

            result = g.outcome(new_grid)
            self.observer.on_action(GridLogEntry(
                turn_number=self.turn_number,
                player=player.name,
                letter=letter,
                position=pos,
                accepted=True,
                grid_after=new_grid,
                is_winning_move=isinstance(result, g.Winner),
            ))

            if isinstance(result, g.Winner):
                self.state = g.GridState(new_grid, letter)
                return GameResult(
                    winner=self.seats[result.letter].name, reason="win",
                    turns=self.turn_number, final_state=self.state,
                )
            if isinstance(result, g.Draw):
                self.state = g.GridState(new_grid, letter)
                return GameResult(
                    winner=None, reason="draw",
                    turns=self.turn_number, final_state=self.state,
                )

            self.state = g.GridState(new_grid, g.other_player(letter))
            return None

        opponent = self.seats[g.other_player(letter)]
        return GameResult(
            winner=opponent.name, reason="forfeit",
            turns=self.turn_number, final_state=self.state,
        )

    def _make_observation(self) -> str:
        letter = self.state.whose_turn
        return f"{letter} turn\n{render_grid(self.state.grid)}\n"
