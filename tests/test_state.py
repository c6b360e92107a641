from __future__ import annotations

import random
from dataclasses import FrozenInstanceError, replace

import pytest

from dropfour.core.board import Board
from dropfour.game.actions import apply_move, attempt_move
from dropfour.game.state import GameState, create_initial_state

from conftest import draw_grid, play


def test_initial_state():
    s = create_initial_state()
    assert s.board == Board()
    assert s.current_player == 1
    assert s.status == "playing"
    assert s.winner is None
    assert s.winning_cells == ()
    assert s.move_count == 0
    assert not s.is_over


def test_accepted_move_flips_player_and_counts():
    s0 = create_initial_state()
    s1 = apply_move(s0, 3)
    assert s1 is not s0
    assert s1.board.cell(5, 3) == 1
    assert s1.current_player == 2
    assert s1.move_count == 1
    # previous snapshot is untouched
    assert s0.board.piece_count() == 0
    assert s0.current_player == 1


def test_move_count_matches_occupancy_over_random_games():
    rng = random.Random(7)
    for _ in range(30):
        s = create_initial_state()
        accepted = 0
        while not s.is_over:
            s = apply_move(s, rng.choice(s.board.valid_moves()))
            accepted += 1
            assert s.move_count == accepted == s.board.piece_count()
        if s.status == "won":
            assert s.winner in (1, 2)
            assert len(s.winning_cells) >= 4
        else:
            assert s.winner is None
            assert s.winning_cells == ()


def test_full_column_is_a_no_op():
    s = play([0, 0, 0, 0, 0, 0])
    out = attempt_move(s, 0)
    assert not out.accepted
    assert out.reason == "column_full"
    assert out.state is s
    assert apply_move(s, 0) is s


@pytest.mark.parametrize("col", [-1, 7])
def test_out_of_range_is_a_no_op(col):
    s = play([3])
    out = attempt_move(s, col)
    assert not out.accepted
    assert out.reason == "out_of_range"
    assert out.state is s


def test_terminal_state_is_a_no_op():
    s = play([0, 0, 1, 1, 2, 2, 3])
    assert s.status == "won"
    assert s.current_player == 1  # winner keeps the turn
    for col in range(7):
        out = attempt_move(s, col)
        assert not out.accepted
        assert out.reason == "game_over"
        assert out.state == s
        assert out.state is s


def _state_before_last_move(grid, col):
    grid = [row[:] for row in grid]
    grid[0][col] = None
    board = Board.from_rows(grid)
    return GameState(board=board, current_player=2, move_count=board.piece_count())


def test_draw_on_full_board_without_line():
    s = _state_before_last_move(draw_grid(), 6)
    s = apply_move(s, 6)
    assert s.status == "draw"
    assert s.winner is None
    assert s.winning_cells == ()
    assert s.move_count == 42
    assert s.board.is_full()

    out = attempt_move(s, 6)
    assert out.reason == "game_over"


def test_win_beats_draw_on_last_cell():
    grid = draw_grid()
    # top row becomes 2 2 2 _ 2 2 2; the final drop in column 3 completes it
    grid[0] = [2] * 7
    s = _state_before_last_move(grid, 3)
    assert s.status == "playing"

    s = apply_move(s, 3)
    assert s.board.is_full()
    assert s.status == "won"
    assert s.winner == 2
    assert list(s.winning_cells) == [(0, c) for c in range(7)]


def test_state_is_frozen():
    s = create_initial_state()
    with pytest.raises(FrozenInstanceError):
        s.move_count = 5  # type: ignore[misc]
    assert replace(s, move_count=0) == s
