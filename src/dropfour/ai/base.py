from __future__ import annotations
from typing import Callable, Protocol, Sequence

from dropfour.core.board import Board
from dropfour.game.state import GameState
from dropfour.types import Move, Player

# Picks one column out of a non-empty candidate list. Injected so tests can
# replace the ambient RNG with a deterministic stub.
ChooseFn = Callable[[Sequence[Move]], Move]


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Move:
        ...

    def select_column(self, board: Board, player: Player) -> Move:
        ...
