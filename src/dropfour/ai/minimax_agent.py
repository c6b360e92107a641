from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import time
from typing import List, Optional, Tuple

from loguru import logger

from dropfour.ai.tactics import SearchStats, winning_move
from dropfour.config import HARD_SEARCH_DEPTH, TERMINAL_SCORE
from dropfour.core.board import Board
from dropfour.core.scoring import evaluate
from dropfour.game.state import GameState
from dropfour.types import Move, Player, other


def _terminal_score(board: Board, player: Player, maximizing: bool) -> Optional[float]:
    """
    Eager tactical cutoff, checked at every node regardless of depth.

    If the side to move can complete a line it wins; otherwise, if the other
    side has a completing drop anywhere, that line is scored as achieved.
    Scores are from `player`'s (the maximizer's) point of view.
    """
    mover = player if maximizing else other(player)
    if winning_move(board, mover) is not None:
        return TERMINAL_SCORE if mover == player else -TERMINAL_SCORE
    waiting = other(mover)
    if winning_move(board, waiting) is not None:
        return TERMINAL_SCORE if waiting == player else -TERMINAL_SCORE
    return None


def _max_value(board: Board, depth: int, alpha: float, beta: float, player: Player, stats: SearchStats, prune: bool) -> float:
    stats.nodes += 1

    term = _terminal_score(board, player, maximizing=True)
    if term is not None:
        return term

    moves = board.valid_moves()
    if depth == 0 or board.is_full() or not moves:
        return float(evaluate(board, player))

    v = -inf
    for m in moves:
        child, _ = board.drop(m, player)
        v = max(v, _min_value(child, depth - 1, alpha, beta, player, stats, prune))
        alpha = max(alpha, v)
        if prune and beta <= alpha:
            stats.cutoffs += 1
            break
    return v


def _min_value(board: Board, depth: int, alpha: float, beta: float, player: Player, stats: SearchStats, prune: bool) -> float:
    stats.nodes += 1

    term = _terminal_score(board, player, maximizing=False)
    if term is not None:
        return term

    moves = board.valid_moves()
    if depth == 0 or board.is_full() or not moves:
        return float(evaluate(board, player))

    opp = other(player)
    v = inf
    for m in moves:
        child, _ = board.drop(m, opp)
        v = min(v, _max_value(child, depth - 1, alpha, beta, player, stats, prune))
        beta = min(beta, v)
        if prune and beta <= alpha:
            stats.cutoffs += 1
            break
    return v


def minimax(
    board: Board,
    depth: int,
    maximizing: bool,
    player: Player,
    alpha: float = -inf,
    beta: float = inf,
    stats: Optional[SearchStats] = None,
    prune: bool = True,
) -> float:
    """
    Depth-limited minimax from `player`'s point of view. With prune=False the
    full tree is walked, which is the reference the pruned search must agree with.
    """
    if stats is None:
        stats = SearchStats()
    if maximizing:
        return _max_value(board, depth, alpha, beta, player, stats, prune)
    return _min_value(board, depth, alpha, beta, player, stats, prune)


def score_columns(
    board: Board,
    player: Player,
    depth: int = HARD_SEARCH_DEPTH,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> List[Tuple[Move, float]]:
    """
    Root scores in natural column order. Each root child is searched with a
    fresh (-inf, inf) window, so its score is exact with or without pruning.
    """
    if stats is None:
        stats = SearchStats()
    scored: List[Tuple[Move, float]] = []
    for m in board.valid_moves():
        child, _ = board.drop(m, player)
        scored.append((m, minimax(child, depth, False, player, -inf, inf, stats, prune)))
    return scored


def best_of(scored: List[Tuple[Move, float]]) -> Tuple[Move, float]:
    # First-seen maximum: ties go to the lowest column index.
    best_move, best_score = scored[0]
    for m, s in scored[1:]:
        if s > best_score:
            best_move, best_score = m, s
    return best_move, best_score


@dataclass(slots=True)
class MinimaxAgent:
    name: str = "Hard AI"
    depth: int = HARD_SEARCH_DEPTH
    prune: bool = True

    # Stats
    last_info: dict = field(default_factory=dict)

    def select_column(self, board: Board, player: Player) -> Move:
        moves = board.valid_moves()
        if not moves:
            return Move(0)

        start = time.perf_counter()

        # 1) win now, 2) block; each column tried is a node
        stats = SearchStats()
        m = winning_move(board, player, moves, stats)
        if m is None:
            m = winning_move(board, other(player), moves, stats)
        if m is not None:
            self.last_info = {
                "depth": 1,
                "nodes": stats.nodes,
                "cutoffs": 0,
                "eval": None,
                "move_col": int(m) + 1,
                "time_ms": max(1, int((time.perf_counter() - start) * 1000)),
            }
            return m

        # 3) search
        scored = score_columns(board, player, self.depth, self.prune, stats)
        best_move, best_score = best_of(scored)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.depth,
            "nodes": stats.nodes,
            "cutoffs": stats.cutoffs,
            "eval": int(best_score) if best_score not in (inf, -inf) else best_score,
            "move_col": int(best_move) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug("Minimax scores {} -> column {}", scored, best_move)
        return best_move

    def choose_move(self, state: GameState) -> Move:
        return self.select_column(state.board, state.current_player)
