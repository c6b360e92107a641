# src/dropfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from dropfour.config import ROWS, COLS
from dropfour.types import Cell, Player, Move

Grid = Tuple[Tuple[Cell, ...], ...]


def _empty_grid(rows: int, cols: int) -> Grid:
    return tuple(tuple(None for _ in range(cols)) for _ in range(rows))


@dataclass(frozen=True, slots=True)
class Board:
    """
    Immutable rows x cols grid. Row 0 is the top, row rows-1 the bottom.

    Every "write" returns a new Board, so a search can branch freely
    without ever touching the caller's board.
    """
    grid: Grid = field(default_factory=lambda: _empty_grid(ROWS, COLS))

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @classmethod
    def from_rows(cls, rows: List[List[Cell]]) -> "Board":
        return cls(tuple(tuple(r) for r in rows))

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def lowest_row(self, col: int) -> Optional[int]:
        """Bottommost empty row of `col`, or None if the column is full or out of range."""
        if col < 0 or col >= self.cols:
            return None
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is None:
                return r
        return None

    def is_valid_move(self, col: int) -> bool:
        return 0 <= col < self.cols and self.grid[0][col] is None

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        # Pieces stack from the bottom, so a full top row means a full board.
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def piece_count(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not None)

    def with_piece(self, row: int, col: int, player: Player) -> "Board":
        new_row = self.grid[row][:col] + (player,) + self.grid[row][col + 1:]
        return Board(self.grid[:row] + (new_row,) + self.grid[row + 1:])

    def drop(self, col: Move, player: Player) -> Tuple["Board", int]:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")
        r = self.lowest_row(c)
        if r is None:
            raise ValueError("Column is full.")
        return self.with_piece(r, c, player), r


def create_empty_board() -> Board:
    return Board()
