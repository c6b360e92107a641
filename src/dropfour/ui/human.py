from __future__ import annotations

from dropfour.core.board import Board
from dropfour.game.state import GameState
from dropfour.types import Move, Player


class HumanAgent:
    name = "Human"

    def choose_move(self, state: GameState) -> Move:
        raise RuntimeError("HumanAgent.choose_move should never be called.")

    def select_column(self, board: Board, player: Player) -> Move:
        raise RuntimeError("HumanAgent.select_column should never be called.")
