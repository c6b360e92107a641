from __future__ import annotations

import random
import time
from dataclasses import dataclass, field

from dropfour.ai.base import ChooseFn
from dropfour.ai.tactics import SearchStats, winning_move
from dropfour.core.board import Board
from dropfour.game.state import GameState
from dropfour.types import Move, Player, other


@dataclass(slots=True)
class TacticalAgent:
    """
    Cheap tactical agent (medium difficulty):
      1) Play an immediate winning move if available
      2) Block the opponent's immediate winning move
      3) Otherwise a random valid move

    Winning beats blocking: a win ends the game before the opponent moves.
    """
    name: str = "Medium AI"
    choose: ChooseFn = field(default=random.choice)
    last_info: dict = field(default_factory=dict)

    def select_column(self, board: Board, player: Player) -> Move:
        t0 = time.perf_counter()

        moves = board.valid_moves()
        if not moves:
            self.last_info = {"time_ms": 1, "nodes": 0, "depth": 1}
            return Move(0)

        stats = SearchStats()
        # 1) win now
        m = winning_move(board, player, moves, stats)
        # 2) block opponent win
        if m is None:
            m = winning_move(board, other(player), moves, stats)
        # 3) random fallback
        if m is None:
            m = self.choose(moves)

        self.last_info = {
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
            "nodes": stats.nodes,
            "depth": 1,
            "move_col": int(m) + 1,
        }
        return m

    def choose_move(self, state: GameState) -> Move:
        return self.select_column(state.board, state.current_player)
