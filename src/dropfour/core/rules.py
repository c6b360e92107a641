from __future__ import annotations
from typing import Optional, List, Tuple

from dropfour.config import CONNECT_N
from dropfour.core.board import Board
from dropfour.types import Player, Position

# (delta_row, delta_col): horizontal, vertical, diagonal down-right, diagonal down-left
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def _run_through(board: Board, row: int, col: int, dr: int, dc: int, player: Player) -> List[Position]:
    """
    Contiguous run of `player` pieces along one axis through (row, col),
    ordered from the (-dr, -dc) end to the (+dr, +dc) end.
    """
    back: List[Position] = []
    r, c = row - dr, col - dc
    while board.in_bounds(r, c) and board.grid[r][c] == player:
        back.append(Position(r, c))
        r, c = r - dr, c - dc

    forward: List[Position] = [Position(row, col)]
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and board.grid[r][c] == player:
        forward.append(Position(r, c))
        r, c = r + dr, c + dc

    return back[::-1] + forward


def check_win_from_position(board: Board, row: int, col: int, player: Player) -> Optional[List[Position]]:
    """
    Return the winning line through (row, col) for `player`, or None.

    Both directions of each axis are scanned, so the piece at (row, col) may sit
    anywhere inside the line. The whole contiguous run is returned when it is
    longer than CONNECT_N.
    """
    if not board.in_bounds(row, col) or board.grid[row][col] != player:
        return None

    for dr, dc in DIRECTIONS:
        run = _run_through(board, row, col, dr, dc, player)
        if len(run) >= CONNECT_N:
            return run
    return None


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, List[Position]]]:
    """Full-board scan, used by the arena to audit finished games."""
    for r in range(board.rows):
        for c in range(board.cols):
            p = board.grid[r][c]
            if p is None:
                continue
            line = check_win_from_position(board, r, c, p)
            if line is not None:
                return p, line
    return None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner_with_line(board) is None
