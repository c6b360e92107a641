from __future__ import annotations

import argparse
from pathlib import Path

from loguru import logger

from ..io.load_results import latest_arena_csv, read_arena_csv
from ..metrics.summarize import first_move_edge, ranked
from ..plots.chart import plot_metric_bar, plot_side_split


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Summarize a dropfour arena export.")
    ap.add_argument("--csv", type=str, default=None, help="Arena CSV. If omitted, the newest one in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results")
    ap.add_argument("--metric", type=str, default="ppg", help="Ranking metric, e.g. ppg, strength_wilson_lcb, avg_ms_per_move")
    ap.add_argument("--min-games", type=int, default=0)
    ap.add_argument("--figures-dir", type=str, default=None, help="Write PNG charts here")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    try:
        csv_path = Path(args.csv) if args.csv else latest_arena_csv(Path(args.results_dir))
        df = read_arena_csv(csv_path)
        table = ranked(df, args.metric, min_games=args.min_games)
    except (FileNotFoundError, ValueError) as e:
        logger.error("{}", e)
        return 1

    print(f"\nArena export: {csv_path} ({int(df['games'].sum()) // 2} games)")
    print(f"\n=== Ranked by {args.metric} ===")
    print(table.to_string(index=False))

    edge = first_move_edge(df).dropna()
    if not edge.empty:
        print("\n=== First-move edge (ppg as X - ppg as O) ===")
        print(edge.round(3).to_string())

    if args.figures_dir:
        outdir = Path(args.figures_dir)
        plot_metric_bar(df, outdir, args.metric)
        plot_side_split(df, outdir)
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
