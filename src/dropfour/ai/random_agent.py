from __future__ import annotations
from dataclasses import dataclass, field
import random

from dropfour.ai.base import ChooseFn
from dropfour.core.board import Board
from dropfour.game.state import GameState
from dropfour.types import Move, Player


@dataclass(slots=True)
class RandomAgent:
    name: str = "Easy AI"
    choose: ChooseFn = field(default=random.choice)
    last_info: dict = field(default_factory=dict)

    def select_column(self, board: Board, player: Player) -> Move:
        moves = board.valid_moves()
        if not moves:
            return Move(0)
        choice = self.choose(moves)
        self.last_info = {"depth": 0, "nodes": 0, "move_col": int(choice) + 1, "time_ms": 1}
        return choice

    def choose_move(self, state: GameState) -> Move:
        return self.select_column(state.board, state.current_player)
