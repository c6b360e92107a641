from __future__ import annotations

from typing import Iterable, List

import pytest

from dropfour.core.board import Board
from dropfour.game.actions import apply_move
from dropfour.game.state import GameState, create_initial_state
from dropfour.types import Cell


def play(moves: Iterable[int], state: GameState | None = None) -> GameState:
    s = state or create_initial_state()
    for m in moves:
        nxt = apply_move(s, m)
        assert nxt is not s, f"move {m} was rejected"
        s = nxt
    return s


def draw_grid() -> List[List[Cell]]:
    """
    Full board without any four-in-a-row: every column alternates 1/2 from the
    bottom, and column 3 is inverted so rows and diagonals break at the centre.
    """
    grid: List[List[Cell]] = []
    for r in range(6):
        base = 1 if r % 2 == 1 else 2
        row: List[Cell] = [base] * 7
        row[3] = 3 - base
        grid.append(row)
    return grid


@pytest.fixture
def full_draw_board() -> Board:
    return Board.from_rows(draw_grid())
