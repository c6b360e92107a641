from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional

from dropfour.core.board import Board
from dropfour.core.rules import check_win_from_position
from dropfour.types import Move, Player


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


def is_winning_move(board: Board, col: int, player: Player) -> bool:
    """Would dropping `player` in `col` complete a line? Works on a copy."""
    row = board.lowest_row(col)
    if row is None:
        return False
    test_board = board.with_piece(row, col, player)
    return check_win_from_position(test_board, row, col, player) is not None


def winning_move(
    board: Board,
    player: Player,
    moves: Optional[Iterable[Move]] = None,
    stats: Optional[SearchStats] = None,
) -> Optional[Move]:
    """First column (in the given order) that wins immediately for `player`.

    Each column tried counts as one node in `stats`.
    """
    for c in (board.valid_moves() if moves is None else moves):
        if stats is not None:
            stats.nodes += 1
        if is_winning_move(board, c, player):
            return c
    return None
