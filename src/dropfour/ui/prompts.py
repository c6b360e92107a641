from __future__ import annotations
from typing import Optional

from dropfour.types import Difficulty, Move

_DIFFICULTY_KEYS: dict[str, Difficulty] = {
    "1": "easy", "e": "easy", "easy": "easy",
    "2": "medium", "m": "medium", "medium": "medium",
    "3": "hard", "h": "hard", "hard": "hard",
}


def parse_move(raw: str, cols: int) -> Optional[Move]:
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    if not s.isdecimal():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Move(col)


def parse_difficulty(raw: str, default: Difficulty = "medium") -> Difficulty:
    s = raw.strip().lower()
    if not s:
        return default
    if s not in _DIFFICULTY_KEYS:
        raise ValueError("Difficulty must be easy, medium or hard.")
    return _DIFFICULTY_KEYS[s]
