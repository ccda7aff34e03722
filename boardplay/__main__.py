"""CLI entry point: python -m boardplay {race,grid}."""

from __future__ import annotations

import argparse
import os

from boardplay.game import GameResult, GridRunner, PrintObserver, RaceRunner
from boardplay.players import (
    AutoRacePlayer,
    ConsoleGridPlayer,
    ConsoleRacePlayer,
    Die,
    ManualRacePlayer,
)

SEED_ENV = "BOARDPLAY_SEED"
DEFAULT_PLAYERS = ["Alice", "Bob"]


def _default_seed() -> int | None:
    raw = os.environ.get(SEED_ENV)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise SystemExit(f"{SEED_ENV} must be an integer, got {raw!r}")


def _report(result: GameResult) -> None:
    if result.reason == "draw":
        print("It's a draw!")
    elif result.reason == "forfeit":
        print(f"{result.winner} wins by forfeit after {result.turns} turns.")
    elif result.reason == "max_turns":
        print(f"No winner after {result.turns} turns.")
    else:
        print(f"{result.winner} wins the game!")


# ── race ─────────────────────────────────────────────────────────────

def cmd_race(args: argparse.Namespace, parser: argparse.ArgumentParser) -> GameResult:
    """Play Snakes & Ladders at the console."""
    die = Die(seed=args.seed)
    try:
        if args.auto:
            players = [AutoRacePlayer(name=n, die=die) for n in args.players]
        elif args.manual:
            players = [ManualRacePlayer(name=n) for n in args.players]
        else:
            players = [ConsoleRacePlayer(name=n, die=die) for n in args.players]
        runner = RaceRunner(players, max_turns=args.max_turns, observer=PrintObserver())
    except ValueError as exc:
        parser.error(str(exc))

    result = runner.play()
    _report(result)
    return result


# ── grid ─────────────────────────────────────────────────────────────

def cmd_grid(args: argparse.Namespace, parser: argparse.ArgumentParser) -> GameResult:
    """Play tic-tac-toe at the console."""
    try:
        runner = GridRunner(
            [ConsoleGridPlayer(name=args.x), ConsoleGridPlayer(name=args.o)],
            observer=PrintObserver(),
        )
    except ValueError as exc:
        parser.error(str(exc))

    result = runner.play()
    _report(result)
    return result


# ── main ─────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boardplay",
        description="Snakes & Ladders and tic-tac-toe at the console",
    )
    sub = parser.add_subparsers(dest="command")

    p_race = sub.add_parser("race", help="Play Snakes & Ladders")
    p_race.add_argument("--players", nargs="+", default=DEFAULT_PLAYERS, help="Player names in seat order")
    p_race.add_argument("--seed", type=int, default=None, help=f"Die seed (default ${SEED_ENV})")
    p_race.add_argument("--max-turns", type=int, default=1000, help="Stop after this many rolls")
    mode = p_race.add_mutually_exclusive_group()
    mode.add_argument("--auto", action="store_true", help="Roll without waiting for Enter")
    mode.add_argument("--manual", action="store_true", help="Type in rolls from a physical die")

    p_grid = sub.add_parser("grid", help="Play tic-tac-toe")
    p_grid.add_argument("--x", default="X", help="Name of the X player")
    p_grid.add_argument("--o", default="O", help="Name of the O player")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "race":
        if args.seed is None:
            args.seed = _default_seed()
        cmd_race(args, parser)
    elif args.command == "grid":
        cmd_grid(args, parser)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
