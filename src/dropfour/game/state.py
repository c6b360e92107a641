from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dropfour.core.board import Board
from dropfour.types import GameStatus, Player, Position


@dataclass(frozen=True, slots=True)
class GameState:
    """
    One snapshot of a game. Moves never edit a GameState; apply_move returns
    the next snapshot and the caller keeps whichever one is current.
    """
    board: Board = field(default_factory=Board)
    current_player: Player = 1
    status: GameStatus = "playing"
    winner: Optional[Player] = None
    winning_cells: Tuple[Position, ...] = ()
    move_count: int = 0

    @classmethod
    def initial(cls) -> "GameState":
        return cls()

    @property
    def is_over(self) -> bool:
        return self.status != "playing"


def create_initial_state() -> GameState:
    return GameState.initial()
