"""Console players and the die they roll."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable

from boardplay.grid import GridPosition
from boardplay.parsing import parse_die, parse_grid_position
from boardplay.race import DIE_FACES, DieRoll

BAD_INPUT_MESSAGE = "Bad move! Please input row and column numbers"
BAD_DIE_MESSAGE = "Bad roll! Please input a number from 1 to 6"


@dataclass
class Die:
    """Six-sided die. Pass a seed for a reproducible sequence of rolls."""

    seed: int | None = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def roll(self) -> DieRoll:
        return DieRoll(self._rng.randint(1, DIE_FACES))


# ── Race players ─────────────────────────────────────────────────────

@dataclass
class AutoRacePlayer:
    """Rolls straight away, without asking anyone."""

    name: str
    die: Die = field(default_factory=Die)

    def roll(self, observation: str) -> DieRoll:
        return self.die.roll()


@dataclass
class ConsoleRacePlayer:
    """Shows the board, waits for Enter, then rolls."""

    name: str
    die: Die = field(default_factory=Die)
    read_line: Callable[[str], str] | None = field(default=None, repr=False)
    write: Callable[[str], None] = field(default=print, repr=False)

    def _read(self, prompt: str) -> str:
        return (self.read_line or input)(prompt)

    def roll(self, observation: str) -> DieRoll:
        self.write(observation)
        self._read(f"{self.name}'s turn. Press Enter to roll the die...")
        return self.die.roll()


@dataclass
class ManualRacePlayer:
    """Types in the value of a die rolled off the screen."""

    name: str
    read_line: Callable[[str], str] | None = field(default=None, repr=False)
    write: Callable[[str], None] = field(default=print, repr=False)

    def _read(self, prompt: str) -> str:
        return (self.read_line or input)(prompt)

    def roll(self, observation: str) -> DieRoll:
        self.write(observation)
        while True:
            roll = parse_die(self._read(f"{self.name}, enter your roll (1-6): "))
            if roll is not None:
                return roll
            self.write(BAD_DIE_MESSAGE)


# ── Grid players ─────────────────────────────────────────────────────

@dataclass
class ConsoleGridPlayer:
    """Reads ``row column`` lines until one parses."""

    name: str
    read_line: Callable[[str], str] | None = field(default=None, repr=False)
    write: Callable[[str], None] = field(default=print, repr=False)

    def _read(self, prompt: str) -> str:
        return (self.read_line or input)(prompt)

    def next_move(self, observation: str) -> GridPosition:
        self.write(observation)
        while True:
            pos = parse_grid_position(self._read("> "))
            if pos is not None:
                return pos
            self.write(BAD_INPUT_MESSAGE)

    def observe(self, message: str) -> None:
        self.write(message)
