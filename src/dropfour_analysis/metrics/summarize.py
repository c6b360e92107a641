from __future__ import annotations

import pandas as pd

# Metrics where a smaller number ranks higher.
LOWER_IS_BETTER = frozenset({"avg_ms_per_move", "nodes", "time_ms", "losses"})

DISPLAY_COLS = [
    "name", "games", "wins", "draws", "losses",
    "points", "ppg", "ppg_as_x", "ppg_as_o",
    "strength_wilson_lcb", "avg_ms_per_move",
]


def sort_ascending(metric: str) -> bool:
    return metric in LOWER_IS_BETTER


def ranked(df: pd.DataFrame, metric: str, top_n: int | None = None, min_games: int = 0) -> pd.DataFrame:
    """Difficulties ordered best-first by `metric`, ties broken by name."""
    if metric not in df.columns:
        raise ValueError(f"Unknown metric {metric!r}; choose from {sorted(df.select_dtypes('number').columns)}")

    out = df[df["games"] >= min_games]
    out = out.sort_values([metric, "name"], ascending=[sort_ascending(metric), True], kind="stable")
    if top_n is not None:
        out = out.head(top_n)

    out = out[[c for c in DISPLAY_COLS if c in out.columns]].reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def first_move_edge(df: pd.DataFrame) -> pd.Series:
    """ppg as X minus ppg as O per difficulty; NaN where a side was never played."""
    if not {"ppg_as_x", "ppg_as_o"} <= set(df.columns):
        return pd.Series(dtype=float, name="first_move_edge")
    by_name = df.set_index("name")
    return (by_name["ppg_as_x"] - by_name["ppg_as_o"]).rename("first_move_edge")
