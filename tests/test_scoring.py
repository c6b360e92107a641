from __future__ import annotations

from dropfour.core.board import Board
from dropfour.core.scoring import evaluate, score_position, score_window

from conftest import play


def _row5(*cells):
    b = Board()
    for c, p in enumerate(cells):
        if p is not None:
            b = b.with_piece(5, c, p)
    return b


def test_empty_board_scores_zero():
    assert evaluate(Board(), 1) == 0
    assert evaluate(Board(), 2) == 0


def test_center_piece():
    b = Board().with_piece(5, 3, 1)
    assert score_position(b, 5, 3, 1) == 9
    assert evaluate(b, 1) == 9
    assert evaluate(b, 2) == -9


def test_edge_piece_has_no_center_bonus():
    b = Board().with_piece(5, 0, 1)
    assert evaluate(b, 1) == 0


def test_two_adjacent_pieces():
    # (5,3): 9 center + 10 for the 2-of-4 window; (5,4): 6 center, its window runs off the board
    b = _row5(None, None, None, 1, 1)
    assert evaluate(b, 1) == 25


def test_window_patterns():
    assert score_window(_row5(1, 1, 1, 1), 5, 0, 0, 1, 1) == 100_000
    assert score_window(_row5(1, 1, 1, None), 5, 0, 0, 1, 1) == 100
    assert score_window(_row5(1, None, 1, None), 5, 0, 0, 1, 1) == 10
    assert score_window(_row5(2, 2, 2, None), 5, 0, 0, 1, 1) == 90
    assert score_window(_row5(2, None, None, 2), 5, 0, 0, 1, 1) == 5
    assert score_window(_row5(1, 2, 1, None), 5, 0, 0, 1, 1) == 0


def test_window_off_board_scores_zero():
    b = _row5(None, None, None, None, 1, 1, 1)
    assert score_window(b, 5, 4, 0, 1, 1) == 0
    assert score_window(b, 5, 4, 1, 0, 1) == 0


def test_evaluation_is_antisymmetric():
    s = play([3, 2, 3, 4, 2, 4, 5, 1])
    assert evaluate(s.board, 1) == -evaluate(s.board, 2)
