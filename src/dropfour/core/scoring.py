from __future__ import annotations

from dropfour.config import (
    CENTER_WEIGHT,
    CONNECT_N,
    WINDOW_BLOCK_THREE,
    WINDOW_BLOCK_TWO,
    WINDOW_FOUR,
    WINDOW_THREE,
    WINDOW_TWO,
)
from dropfour.core.board import Board
from dropfour.core.rules import DIRECTIONS
from dropfour.types import Player, other


def score_window(board: Board, row: int, col: int, dr: int, dc: int, player: Player) -> int:
    """
    Score the CONNECT_N-cell run that starts at (row, col) and extends along (dr, dc).
    A run that leaves the board is worth nothing.
    """
    p_count = 0
    e_count = 0
    o_count = 0

    for i in range(CONNECT_N):
        r = row + dr * i
        c = col + dc * i
        if not board.in_bounds(r, c):
            return 0
        cell = board.grid[r][c]
        if cell == player:
            p_count += 1
        elif cell is None:
            e_count += 1
        else:
            o_count += 1

    score = 0

    # Own lines
    if p_count == 4:
        score += WINDOW_FOUR
    elif p_count == 3 and e_count == 1:
        score += WINDOW_THREE
    elif p_count == 2 and e_count == 2:
        score += WINDOW_TWO

    # Opponent lines this run is in a position to block
    if o_count == 3 and e_count == 1:
        score += WINDOW_BLOCK_THREE
    elif o_count == 2 and e_count == 2:
        score += WINDOW_BLOCK_TWO

    return score


def score_position(board: Board, row: int, col: int, player: Player) -> int:
    # center column preference (strong in Connect 4)
    center = board.cols // 2
    score = (3 - abs(col - center)) * CENTER_WEIGHT

    for dr, dc in DIRECTIONS:
        score += score_window(board, row, col, dr, dc, player)

    return score


def evaluate(board: Board, player: Player) -> int:
    """Static evaluation from `player`'s point of view: own cells minus opponent cells."""
    opp = other(player)
    score = 0
    for r in range(board.rows):
        for c in range(board.cols):
            cell = board.grid[r][c]
            if cell == player:
                score += score_position(board, r, c, player)
            elif cell is not None:
                score -= score_position(board, r, c, opp)
    return score
