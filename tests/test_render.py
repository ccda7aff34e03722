"""Tests for boardplay.render."""

from boardplay.board import Position, create_standard_board
from boardplay.grid import UNOCCUPIED, Grid, GridPosition, Letter, Move, Occupied, try_move
from boardplay.race import apply_move, new_game, resolve_roll
from boardplay.render import describe_landing, render_cell, render_grid, render_race


def test_render_cell():
    assert render_cell(UNOCCUPIED) == " "
    assert render_cell(Occupied(Letter.X)) == "X"
    assert render_cell(Occupied(Letter.O)) == "O"


def test_render_empty_grid():
    assert render_grid(Grid.empty()) == " | | \n-----\n | | \n-----\n | | "


def test_render_grid_with_moves():
    grid = try_move(Grid.empty(), Move(GridPosition(1, 1), Letter.X))
    grid = try_move(grid, Move(GridPosition(2, 3), Letter.O))
    assert render_grid(grid) == "X| | \n-----\n | |O\n-----\n | | "


def test_render_race_marks_player_to_move():
    state = apply_move(new_game(["Alice", "Bob"]), 2)
    assert render_race(state) == "  Alice: square 3\n* Bob: square 1"


def test_describe_normal_move():
    landing = resolve_roll(create_standard_board(), Position(10), 2)
    assert describe_landing("Alice", landing) == "Alice moves to 12"


def test_describe_ladder():
    landing = resolve_roll(create_standard_board(), Position(1), 3)
    assert describe_landing("Bob", landing) == "Bob climbs the ladder on 4 and moves to 14"


def test_describe_snake():
    landing = resolve_roll(create_standard_board(), Position(10), 6)
    assert describe_landing("Bob", landing) == "Bob slides down the snake on 16 and moves to 6"
