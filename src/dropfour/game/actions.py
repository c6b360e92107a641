from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Literal, Optional

from loguru import logger

from dropfour.core.rules import check_win_from_position
from dropfour.game.state import GameState
from dropfour.types import other

RejectReason = Literal["game_over", "out_of_range", "column_full"]


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    state: GameState
    accepted: bool
    reason: Optional[RejectReason] = None


def attempt_move(state: GameState, col: int) -> MoveOutcome:
    """
    Drop the current player's piece in `col`.

    A rejected move is not an error: the outcome carries the input state
    unchanged, plus the reason it was refused.
    """
    if state.is_over:
        logger.debug("Move {} rejected: game already {}", col, state.status)
        return MoveOutcome(state, False, "game_over")

    board = state.board
    if col < 0 or col >= board.cols:
        logger.debug("Move {} rejected: column out of range", col)
        return MoveOutcome(state, False, "out_of_range")
    if not board.is_valid_move(col):
        logger.debug("Move {} rejected: column full", col)
        return MoveOutcome(state, False, "column_full")

    player = state.current_player
    new_board, row = board.drop(col, player)
    move_count = state.move_count + 1

    # Win takes precedence over draw: the last piece may do both.
    line = check_win_from_position(new_board, row, col, player)
    if line is not None:
        logger.debug("Player {} wins with {}", player, line)
        nxt = replace(
            state,
            board=new_board,
            status="won",
            winner=player,
            winning_cells=tuple(line),
            move_count=move_count,
        )
        return MoveOutcome(nxt, True)

    if new_board.is_full():
        logger.debug("Board full after {} moves: draw", move_count)
        nxt = replace(
            state,
            board=new_board,
            status="draw",
            winner=None,
            winning_cells=(),
            move_count=move_count,
        )
        return MoveOutcome(nxt, True)

    nxt = replace(
        state,
        board=new_board,
        current_player=other(player),
        move_count=move_count,
    )
    return MoveOutcome(nxt, True)


def apply_move(state: GameState, col: int) -> GameState:
    return attempt_move(state, col).state
