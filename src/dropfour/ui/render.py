from __future__ import annotations
from typing import Optional, Iterable, Set, Tuple

from dropfour.config import CLEAR_SCREEN, USE_COLOR
from dropfour.core.board import Board
from dropfour.types import Cell, Player

Coord = Tuple[int, int]

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

# player -> (symbol, color)
PIECES: dict[Player, tuple[str, str]] = {
    1: ("X", "\033[31m"),
    2: ("O", "\033[33m"),
}


def paint(s: str, *codes: str) -> str:
    if not USE_COLOR or not codes:
        return s
    return f"{''.join(codes)}{s}{RESET}"


def player_label(player: Player) -> str:
    return f"Player {player} ({PIECES[player][0]})"


def _piece(cell: Cell, highlighted: bool = False) -> str:
    extra = (REVERSE,) if highlighted else ()
    if cell is None:
        return paint("·", FG_GRAY, *extra)
    symbol, color = PIECES[cell]
    return paint(symbol, color, *extra)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    hl: Set[Coord] = {(r, c) for (r, c) in highlight} if highlight else set()

    lines = [paint("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]
    for r in range(board.rows):
        parts = [_piece(board.grid[r][col], (r, col) in hl) for col in range(board.cols)]
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(paint("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(paint("CONNECT 4", BOLD))
    print(paint(status, FG_CYAN) if status else "")

    for line in board_lines(board, highlight):
        print(line)
    print(paint(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))
