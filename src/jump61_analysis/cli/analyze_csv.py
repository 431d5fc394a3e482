from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd

from ..io.load_results import RESULTS_GLOB, LoadSpec, latest_results, load_results
from ..metrics.summarize import SummaryConfig, filter_rows, nodes_per_ms, numeric_summary, side_split, top_table
from ..plots import plot_histograms, plot_scatter, plot_side_split, plot_top_bar


HISTOGRAM_COLS = ["ppg", "strength_wilson_lcb", "avg_ms_per_move", "nodes"]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="jump61-analysis",
        description="Summarize and chart a Jump61 tournament results CSV.",
    )
    src = ap.add_argument_group("input")
    src.add_argument("--csv", type=Path, default=None, help="Results CSV (default: newest in --results-dir)")
    src.add_argument("--results-dir", type=Path, default=Path("data/results"))
    src.add_argument("--pattern", default=RESULTS_GLOB, help="Glob used to find the newest results file")

    out = ap.add_argument_group("output")
    out.add_argument("--outdir", type=Path, default=Path("figures"), help="Where charts are saved")
    out.add_argument("--show", action="store_true", help="Open charts in a window instead of saving")
    out.add_argument("--no-plots", action="store_true", help="Print tables only")

    ap.add_argument("--top", type=int, default=20, help="Rows in the top table and bar chart")
    ap.add_argument("--metric", default="strength_wilson_lcb", help="Ranking column, e.g. ppg")
    ap.add_argument("--min-games", type=int, default=0, help="Ignore agents with fewer games")
    return ap


def _section(title: str, frame: pd.DataFrame | pd.Series) -> None:
    print(f"\n=== {title} ===")
    print(frame.to_string())


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = args.csv or latest_results(args.results_dir, pattern=args.pattern)
    df = load_results(LoadSpec(csv_path=csv_path))
    print(f"\nLoaded {csv_path}: {len(df)} agents")

    cfg = SummaryConfig(metric=args.metric, top_n=args.top, min_games=args.min_games)  # type: ignore[arg-type]
    print("\n=== Top table ===")
    print(top_table(df, cfg).to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        _section("Numeric summary", desc)

    cols = set(df.columns)
    if {"nodes", "time_ms"} <= cols:
        _section("Search throughput (nodes/ms)", nodes_per_ms(df).dropna().round(2))

    split = None
    if {"red_games", "red_wins", "blue_wins"} <= cols:
        split = side_split(df)
        _section("Win rate by side", split.round(3))

    if args.no_plots:
        return 0

    shown = filter_rows(df, cfg)
    plot_histograms(shown, args.outdir, HISTOGRAM_COLS, show=args.show)
    plot_scatter(shown, args.outdir, x="avg_ms_per_move", y=args.metric, show=args.show)
    plot_top_bar(shown, args.outdir, metric=args.metric, top_n=args.top, show=args.show)
    if split is not None:
        plot_side_split(split.dropna(how="all"), args.outdir, show=args.show)

    if not args.show:
        print(f"\nCharts saved under {args.outdir.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
