from __future__ import annotations

import argparse
import random
import time
from itertools import combinations
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Union

import pandas as pd
from loguru import logger

from dropfour.ai.base import Agent
from dropfour.ai.pick import DIFFICULTIES, make_agent
from dropfour.core.rules import check_winner_with_line, is_draw
from dropfour.game.actions import apply_move
from dropfour.game.state import GameState, create_initial_state
from dropfour.log import configure_logging
from dropfour.types import Player

Outcome = Union[Player, str]  # 1, 2 or "D"

# One row per difficulty per game, kept in memory only.
GAME_COLUMNS = ["name", "opponent", "side", "points", "moves", "time_ms", "nodes"]

RESULT_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "points", "ppg", "ppg_as_x", "ppg_as_o",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes",
]


def audit_final_state(state: GameState) -> None:
    """Cross-check the incremental result against a full-board scan."""
    found = check_winner_with_line(state.board)
    if state.status == "won":
        if found is None or found[0] != state.winner:
            raise RuntimeError(f"Game recorded a win for {state.winner} but the board shows {found}")
    elif state.status == "draw":
        if not is_draw(state.board):
            raise RuntimeError(f"Game recorded a draw but the board shows {found}")
    elif found is not None:
        raise RuntimeError(f"Game still playing but player {found[0]} has a line")


def play_headless(
    agent_1: Agent,
    agent_2: Agent,
    seed: int = 0,
    opening_moves: int = 2,
) -> Tuple[Outcome, GameState, Dict[Player, Dict[str, int]]]:
    """
    Play one game without any UI. A few seeded random opening moves keep
    deterministic agents from replaying the same game every time.
    """
    state = create_initial_state()
    stats: Dict[Player, Dict[str, int]] = {
        1: {"moves": 0, "time_ms": 0, "nodes": 0},
        2: {"moves": 0, "time_ms": 0, "nodes": 0},
    }

    rng = random.Random(seed)
    for _ in range(opening_moves):
        moves = state.board.valid_moves()
        if not moves or state.is_over:
            break
        state = apply_move(state, rng.choice(moves))

    while not state.is_over:
        player = state.current_player
        agent = agent_1 if player == 1 else agent_2
        move = agent.select_column(state.board, player)

        info = getattr(agent, "last_info", None) or {}
        side = stats[player]
        side["moves"] += 1
        side["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side["nodes"] += int(info.get("nodes", 0))

        nxt = apply_move(state, move)
        if nxt is state:
            raise RuntimeError(f"{agent.name} chose an unplayable column {move}")
        state = nxt

    audit_final_state(state)
    outcome: Outcome = state.winner if state.status == "won" and state.winner is not None else "D"
    return outcome, state, stats


def _seeded_agent(difficulty: str, seed: int) -> Agent:
    return make_agent(difficulty, choose=random.Random(seed).choice)


def _points(outcome: Outcome, side: Player) -> float:
    if outcome == "D":
        return 0.5
    return 1.0 if outcome == side else 0.0


def run_arena(
    difficulties: Iterable[str] = DIFFICULTIES,
    games_per_pair: int = 2,
    seed: int = 1234,
    opening_moves: int = 2,
) -> pd.DataFrame:
    """
    Round robin between difficulties; first move alternates inside each pairing.
    Returns one row per difficulty per game (GAME_COLUMNS).
    """
    names = list(difficulties)
    rows: List[dict] = []

    for pair_idx, (a, b) in enumerate(combinations(names, 2)):
        for g in range(games_per_pair):
            game_seed = seed + 1000 * pair_idx + g
            first, second = (a, b) if g % 2 == 0 else (b, a)

            outcome, final, stats = play_headless(
                _seeded_agent(first, game_seed + 101),
                _seeded_agent(second, game_seed + 202),
                seed=game_seed,
                opening_moves=opening_moves,
            )

            for name, opponent, side in ((first, second, 1), (second, first, 2)):
                rows.append({
                    "name": name,
                    "opponent": opponent,
                    "side": side,
                    "points": _points(outcome, side),
                    **stats[side],
                })

            logger.info(
                "{} (X) vs {} (O): {} in {} moves",
                first, second, "draw" if outcome == "D" else f"player {outcome} wins", final.move_count,
            )

    return pd.DataFrame(rows, columns=GAME_COLUMNS)


def wilson_lower_bound(p: pd.Series, n: pd.Series, z: float) -> pd.Series:
    """Wilson score interval lower bound, element-wise; rows with n == 0 get 0."""
    p = p.clip(0.0, 1.0)
    z2 = z * z
    center = p + z2 / (2.0 * n)
    rad = z * ((p * (1.0 - p) + z2 / (4.0 * n)) / n).clip(lower=0.0) ** 0.5
    lcb = ((center - rad) / (1.0 + z2 / n)).clip(lower=0.0)
    return lcb.where(n > 0, 0.0)


def results_frame(games: pd.DataFrame, z: float = 1.28) -> pd.DataFrame:
    """Aggregate per-game rows into one ranked row per difficulty."""
    marked = games.assign(
        wins=games["points"].eq(1.0).astype(int),
        draws=games["points"].eq(0.5).astype(int),
        losses=games["points"].eq(0.0).astype(int),
    )
    out = marked.groupby("name").agg(
        games=("points", "size"),
        wins=("wins", "sum"),
        draws=("draws", "sum"),
        losses=("losses", "sum"),
        points=("points", "sum"),
        moves=("moves", "sum"),
        time_ms=("time_ms", "sum"),
        nodes=("nodes", "sum"),
    )

    by_side = games.pivot_table(index="name", columns="side", values="points", aggfunc="mean")
    out["ppg_as_x"] = by_side.get(1)
    out["ppg_as_o"] = by_side.get(2)

    out["ppg"] = (out["points"] / out["games"]).round(6)
    out["strength_wilson_lcb"] = wilson_lower_bound(out["ppg"], out["games"], z).round(6)
    out["avg_ms_per_move"] = (out["time_ms"] / out["moves"]).where(out["moves"] > 0, 0.0).round(3)

    out = out.reset_index()[RESULT_COLUMNS]
    return out.sort_values(["points", "name"], ascending=[False, True]).reset_index(drop=True)


def export_csv(df: pd.DataFrame, outdir: Path) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = outdir / f"arena_results_{ts}.csv"
    df.to_csv(out_path, index=False)
    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play the AI difficulty levels against each other.")
    ap.add_argument("--difficulties", nargs="+", default=list(DIFFICULTIES), choices=list(DIFFICULTIES))
    ap.add_argument("--games", type=int, default=4, help="Games per pairing (first move alternates)")
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--opening-moves", type=int, default=2, help="Random plies played before the agents take over")
    ap.add_argument("--z", type=float, default=1.28, help="Z for the Wilson lower bound")
    ap.add_argument("--csv-dir", type=str, default=None, help="Write arena_results_<ts>.csv into this directory")
    ap.add_argument("--log-level", type=str, default=None)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    configure_logging(args.log_level)

    if len(args.difficulties) < 2:
        print("Need at least two difficulties to play an arena.")
        return 2

    start = time.perf_counter()
    games = run_arena(args.difficulties, games_per_pair=args.games, seed=args.seed, opening_moves=args.opening_moves)
    df = results_frame(games, z=args.z)

    print("\n=== Arena results ===")
    print(df.to_string(index=False))
    print(f"\nTotal runtime: {time.perf_counter() - start:.2f}s")

    if args.csv_dir:
        out = export_csv(df, Path(args.csv_dir))
        print(f"Wrote CSV: {out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
