from __future__ import annotations

from pathlib import Path

import pandas as pd

# Columns every arena export carries; the rest are optional extras.
REQUIRED = ("name", "games", "wins", "draws", "losses", "points")
COUNT_COLS = ("games", "wins", "draws", "losses", "moves", "time_ms", "nodes")
RATE_COLS = ("points", "ppg", "ppg_as_x", "ppg_as_o", "strength_wilson_lcb", "avg_ms_per_move")


def read_arena_csv(path: Path) -> pd.DataFrame:
    """
    Load an arena_results_*.csv. Rows whose W/D/L do not add up to the
    game count are rejected, and ppg is derived when an older export lacks it.
    """
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {path}")

    df = pd.read_csv(path).rename(columns=str.strip)

    missing = [c for c in REQUIRED if c not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is not an arena export, missing {missing}")

    for col in COUNT_COLS + RATE_COLS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    bad = df[df["wins"] + df["draws"] + df["losses"] != df["games"]]
    if not bad.empty:
        raise ValueError(f"Inconsistent W/D/L for: {', '.join(bad['name'].astype(str))}")

    if "ppg" not in df.columns:
        df["ppg"] = (df["points"] / df["games"]).where(df["games"] > 0, 0.0)

    df["name"] = df["name"].astype(str)
    return df.reset_index(drop=True)


def latest_arena_csv(results_dir: Path, pattern: str = "arena_results_*.csv") -> Path:
    files = sorted(results_dir.glob(pattern)) if results_dir.is_dir() else []
    if not files:
        raise FileNotFoundError(f"No {pattern} under {results_dir}")
    # export names carry a %Y%m%d_%H%M%S stamp
    return files[-1]
