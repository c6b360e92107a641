# src/dropfour/types.py

from __future__ import annotations
from typing import Literal, NamedTuple, Optional, NewType

Player = Literal[1, 2]
Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..6

GameStatus = Literal["playing", "won", "draw"]
Difficulty = Literal["easy", "medium", "hard"]


class Position(NamedTuple):
    row: int
    col: int


def other(player: Player) -> Player:
    return 2 if player == 1 else 1
