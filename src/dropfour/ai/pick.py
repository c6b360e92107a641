from __future__ import annotations

import random
from typing import Optional

from loguru import logger

from dropfour.ai.base import Agent, ChooseFn
from dropfour.ai.minimax_agent import MinimaxAgent
from dropfour.ai.random_agent import RandomAgent
from dropfour.ai.tactical_agent import TacticalAgent
from dropfour.core.board import Board
from dropfour.types import Difficulty, Move, Player

DIFFICULTIES: tuple[Difficulty, ...] = ("easy", "medium", "hard")

_DESCRIPTIONS = {
    "easy": "Random moves - Perfect for beginners",
    "medium": "Blocks wins and tries to win - Good challenge",
    "hard": "Advanced strategy - Very challenging!",
}


def make_agent(difficulty: str, choose: Optional[ChooseFn] = None) -> Agent:
    chooser = choose if choose is not None else random.choice

    if difficulty == "hard":
        return MinimaxAgent()
    if difficulty == "medium":
        return TacticalAgent(choose=chooser)
    if difficulty != "easy":
        logger.warning("Unknown difficulty {!r}, falling back to easy", difficulty)
    return RandomAgent(choose=chooser)


def get_ai_move(board: Board, player: Player, difficulty: Difficulty, choose: Optional[ChooseFn] = None) -> Move:
    """
    Column the AI plays for `player` at `difficulty`.

    Callers should not ask for a move on a full board; if they do, column 0
    comes back instead of an exception.
    """
    if not board.valid_moves():
        logger.warning("AI asked to move on a full board, returning column 0")
        return Move(0)
    return make_agent(difficulty, choose).select_column(board, player)


def difficulty_description(difficulty: str) -> str:
    return _DESCRIPTIONS.get(difficulty, "")
