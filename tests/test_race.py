"""Tests for boardplay.race: move resolution and outcome checks."""

import pytest

from boardplay.board import Normal, Position, build_board, create_standard_board
from boardplay.errors import RangeError
from boardplay.race import (
    DieRoll,
    GameState,
    Ongoing,
    Player,
    Win,
    advance,
    apply_move,
    check_outcome,
    new_game,
    resolve_roll,
)


def _state(*positions: int, current: int = 0) -> GameState:
    names = ["Alice", "Bob", "Carol", "Dave"]
    players = tuple(
        Player(name=names[i], position=Position(p)) for i, p in enumerate(positions)
    )
    return GameState(board=create_standard_board(), players=players, current_index=current)


# ── DieRoll / Player ─────────────────────────────────────────────────

@pytest.mark.parametrize("value", [1, 6])
def test_die_roll_bounds(value):
    assert DieRoll(value).value == value


@pytest.mark.parametrize("bad", [0, 7, -3])
def test_die_roll_out_of_range(bad):
    with pytest.raises(RangeError):
        DieRoll(bad)


def test_player_needs_a_name():
    with pytest.raises(ValueError):
        Player(name="")
    with pytest.raises(ValueError):
        Player(name="   ")


def test_player_starts_on_square_1():
    assert Player(name="Alice").position == Position(1)


# ── new_game ─────────────────────────────────────────────────────────

def test_new_game_seats_everyone_on_start():
    state = new_game(["Alice", "Bob"])
    assert [p.name for p in state.players] == ["Alice", "Bob"]
    assert all(p.position == Position(1) for p in state.players)
    assert state.current_index == 0
    assert state.current_player.name == "Alice"


def test_new_game_needs_players():
    with pytest.raises(ValueError):
        new_game([])


# ── resolve_roll ─────────────────────────────────────────────────────

def test_normal_landing_stays_put():
    board = create_standard_board()
    landing = resolve_roll(board, Position(10), 2)
    assert landing.landed == Position(12)
    assert landing.end == Position(12)
    assert landing.square == Normal(Position(12))
    assert not landing.took_snake
    assert not landing.took_ladder
    assert not landing.clamped


def test_ladder_landing():
    landing = resolve_roll(create_standard_board(), Position(1), 3)
    assert landing.landed == Position(4)
    assert landing.end == Position(14)
    assert landing.took_ladder


def test_snake_landing():
    landing = resolve_roll(create_standard_board(), Position(10), 6)
    assert landing.landed == Position(16)
    assert landing.end == Position(6)
    assert landing.took_snake


def test_overshoot_is_clamped():
    landing = resolve_roll(create_standard_board(), Position(97), 6)
    assert landing.clamped
    assert landing.landed == Position(100)
    assert landing.end == Position(100)


def test_resolve_roll_accepts_die_roll():
    landing = resolve_roll(create_standard_board(), Position(10), DieRoll(2))
    assert landing.roll == 2
    assert landing.end == Position(12)


def test_resolve_roll_rejects_bad_die():
    with pytest.raises(RangeError):
        resolve_roll(create_standard_board(), Position(10), 7)


def test_clamp_onto_snake_on_small_board():
    board = build_board(10, {10: 2})
    landing = resolve_roll(board, Position(8), 5)
    assert landing.landed == Position(10)
    assert landing.end == Position(2)


# ── apply_move ───────────────────────────────────────────────────────

def test_apply_move_normal_square():
    state = _state(10, 1)
    new = apply_move(state, 2)
    assert new.players[0].position == Position(12)
    assert new.players[1].position == Position(1)


def test_apply_move_takes_ladder_from_start():
    """From square 1, rolling a 3 lands on the 4 → 14 ladder."""
    new = apply_move(_state(1, 1), 3)
    assert new.players[0].position == Position(14)


def test_apply_move_takes_snake():
    new = apply_move(_state(94, 1), 4)  # 98 → 78
    assert new.players[0].position == Position(78)


def test_apply_move_ladder_to_final_wins():
    new = apply_move(_state(77, 1), 3)  # 80 → 100
    assert new.players[0].position == Position(100)
    assert isinstance(check_outcome(new), Win)


def test_apply_move_advances_turn():
    state = _state(1, 1, 1)
    s1 = apply_move(state, 2)
    assert s1.current_index == 1
    s2 = apply_move(s1, 2)
    assert s2.current_index == 2
    s3 = apply_move(s2, 2)
    assert s3.current_index == 0


def test_apply_move_moves_only_current_player():
    state = _state(10, 20, current=1)
    new = apply_move(state, 3)
    assert new.players[0].position == Position(10)
    assert new.players[1].position == Position(23)
    assert new.current_index == 0


def test_apply_move_does_not_mutate_input():
    state = _state(10, 20)
    before = (state.players, state.current_index)
    apply_move(state, 5)
    assert (state.players, state.current_index) == before


def test_apply_move_is_deterministic():
    state = _state(30, 40)
    assert apply_move(state, 4) == apply_move(state, 4)


def test_apply_move_keeps_board():
    state = _state(30, 40)
    assert apply_move(state, 4).board is state.board


def test_apply_move_rejects_bad_die():
    with pytest.raises(RangeError):
        apply_move(_state(10, 1), 0)


def test_single_player_keeps_the_turn():
    state = _state(10)
    assert apply_move(state, 1).current_index == 0


# ── check_outcome ────────────────────────────────────────────────────

def test_ongoing_when_nobody_home():
    state = _state(50, 60)
    result = check_outcome(state)
    assert isinstance(result, Ongoing)
    assert result.state is state


def test_clamp_to_final_then_win():
    new = apply_move(_state(97, 1), 6)
    result = check_outcome(new)
    assert isinstance(result, Win)
    assert result.player.name == "Alice"
    assert result.player.position == Position(100)


def test_exact_landing_wins():
    new = apply_move(_state(96, 1), 4)
    assert isinstance(check_outcome(new), Win)


def test_first_seat_wins_ties():
    result = check_outcome(_state(50, 100, 100))
    assert isinstance(result, Win)
    assert result.player.name == "Bob"


def test_check_outcome_is_deterministic():
    state = _state(100, 3)
    assert check_outcome(state) == check_outcome(state)


def test_game_state_is_hashable():
    a, b = new_game(["Alice", "Bob"]), new_game(["Alice", "Bob"])
    assert hash(a) == hash(b)
    assert len({a, b, apply_move(a, 2)}) == 2


# ── advance ──────────────────────────────────────────────────────────

def test_advance_commits_a_resolved_landing():
    state = _state(1, 1)
    landing = resolve_roll(state.board, state.current_player.position, 3)
    assert advance(state, landing) == apply_move(state, 3)


def test_advance_rejects_landing_from_elsewhere():
    state = _state(10, 1)
    landing = resolve_roll(state.board, Position(20), 2)
    with pytest.raises(ValueError):
        advance(state, landing)
