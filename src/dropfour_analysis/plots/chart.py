from __future__ import annotations

from pathlib import Path

import matplotlib
import pandas as pd

from ..metrics.summarize import sort_ascending

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402


def bar_order(df: pd.DataFrame, metric: str) -> pd.DataFrame:
    """Rows in the order the bar chart draws them: best first, same rule as the ranked table."""
    return df[["name", metric]].dropna().sort_values(metric, ascending=sort_ascending(metric), kind="stable")


def plot_metric_bar(df: pd.DataFrame, outdir: Path, metric: str) -> Path | None:
    if metric not in df.columns or not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    outdir.mkdir(parents=True, exist_ok=True)
    rows = bar_order(df, metric)

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(rows["name"].astype(str), rows[metric].astype(float))
    ax.set_title(f"{metric} by difficulty ({'lower' if sort_ascending(metric) else 'higher'} is better)")
    ax.set_xlabel("difficulty")
    ax.set_ylabel(metric)

    path = outdir / f"bar_{metric}.png"
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_side_split(df: pd.DataFrame, outdir: Path) -> Path | None:
    """Grouped bars of points per game when moving first vs second."""
    cols = [c for c in ("ppg_as_x", "ppg_as_o") if c in df.columns]
    if len(cols) != 2:
        return None

    outdir.mkdir(parents=True, exist_ok=True)
    split = df.set_index("name")[cols].rename(columns={"ppg_as_x": "as X", "ppg_as_o": "as O"})

    ax = split.plot.bar(rot=0, figsize=(6, 4))
    ax.set_ylabel("points per game")
    ax.set_ylim(0, 1)
    fig = ax.get_figure()

    path = outdir / "side_split.png"
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return path
