from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from dropfour.scripts.arena import RESULT_COLUMNS
from dropfour_analysis.__main__ import main as analysis_main
from dropfour_analysis.cli.analyze_csv import main as analyze_main
from dropfour_analysis.io.load_results import latest_arena_csv, read_arena_csv
from dropfour_analysis.metrics.summarize import first_move_edge, ranked, sort_ascending
from dropfour_analysis.plots.chart import bar_order, plot_metric_bar


def _frame() -> pd.DataFrame:
    rows = [
        ("hard", 8, 7, 1, 0, 7.5, 0.9375, 1.0, 0.875, 0.78, 350.0, 58, 20300, 90000),
        ("medium", 8, 4, 1, 3, 4.5, 0.5625, 0.75, 0.375, 0.35, 1.0, 61, 61, 800),
        ("easy", 8, 1, 0, 7, 1.0, 0.125, 0.25, 0.0, 0.03, 0.5, 60, 30, 0),
    ]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def _write(tmp_path: Path, name: str = "arena_results_20260101_000000.csv", df: pd.DataFrame | None = None) -> Path:
    path = tmp_path / name
    (_frame() if df is None else df).to_csv(path, index=False)
    return path


def test_ranked_best_first():
    t = ranked(_frame(), "ppg")
    assert list(t["name"]) == ["hard", "medium", "easy"]
    assert list(t["rk"]) == [1, 2, 3]


def test_speed_ranks_fastest_first():
    assert sort_ascending("avg_ms_per_move")
    assert not sort_ascending("ppg")
    t = ranked(_frame(), "avg_ms_per_move", top_n=2)
    assert list(t["name"]) == ["easy", "medium"]


def test_bar_chart_uses_table_order():
    for metric in ("ppg", "avg_ms_per_move"):
        assert list(bar_order(_frame(), metric)["name"]) == list(ranked(_frame(), metric)["name"])


def test_min_games_and_unknown_metric():
    assert ranked(_frame(), "ppg", min_games=9).empty
    with pytest.raises(ValueError, match="Unknown metric"):
        ranked(_frame(), "elo")


def test_first_move_edge():
    edge = first_move_edge(_frame())
    assert edge["hard"] == pytest.approx(0.125)
    assert edge["easy"] == pytest.approx(0.25)
    assert first_move_edge(_frame().drop(columns=["ppg_as_o"])).empty


def test_read_arena_csv(tmp_path):
    df = read_arena_csv(_write(tmp_path))
    assert len(df) == 3
    assert pd.api.types.is_numeric_dtype(df["points"])

    legacy = _frame().drop(columns=["ppg"])
    df = read_arena_csv(_write(tmp_path, "old.csv", legacy))
    assert df.loc[df["name"] == "medium", "ppg"].item() == pytest.approx(0.5625)


def test_read_arena_csv_rejects_bad_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_arena_csv(tmp_path / "missing.csv")

    with pytest.raises(ValueError, match="not an arena export"):
        read_arena_csv(_write(tmp_path, "x.csv", pd.DataFrame([{"name": "a", "x": 1}])))

    broken = _frame()
    broken.loc[0, "wins"] = 6
    with pytest.raises(ValueError, match="hard"):
        read_arena_csv(_write(tmp_path, "broken.csv", broken))


def test_latest_file_is_picked(tmp_path):
    _write(tmp_path, "arena_results_20260101_000000.csv")
    newest = _write(tmp_path, "arena_results_20260301_000000.csv")
    assert latest_arena_csv(tmp_path) == newest
    with pytest.raises(FileNotFoundError):
        latest_arena_csv(tmp_path / "nope")


def test_metric_bar_written(tmp_path):
    assert plot_metric_bar(_frame(), tmp_path, "avg_ms_per_move") == tmp_path / "bar_avg_ms_per_move.png"
    assert (tmp_path / "bar_avg_ms_per_move.png").exists()
    assert plot_metric_bar(_frame(), tmp_path, "elo") is None


def test_cli_with_figures(tmp_path, capsys):
    path = _write(tmp_path)
    figs = tmp_path / "figs"
    assert analyze_main(["--csv", str(path), "--figures-dir", str(figs)]) == 0
    assert (figs / "bar_ppg.png").exists()
    assert (figs / "side_split.png").exists()
    out = capsys.readouterr().out
    assert "Ranked by ppg" in out
    assert "First-move edge" in out


def test_cli_reports_errors(tmp_path):
    assert analyze_main(["--csv", str(tmp_path / "missing.csv")]) == 1
    assert analyze_main(["--csv", str(_write(tmp_path)), "--metric", "elo"]) == 1


def test_module_entry_point(tmp_path):
    path = _write(tmp_path)
    assert analysis_main(["analyze", "--csv", str(path)]) == 0
    assert analysis_main(["--csv", str(path)]) == 0
    assert analysis_main(["bogus"]) == 2
