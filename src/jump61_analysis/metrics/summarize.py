from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "strength_wilson_lcb",
    "ppg",
    "avg_ms_per_move",
    "wins",
    "points",
    "nodes",
]

# Smaller is better for these
ASCENDING_METRICS = {"avg_ms_per_move"}

TABLE_COLS = [
    "name", "games", "wins", "draws", "losses",
    "ppg", "strength_wilson_lcb", "avg_ms_per_move",
    "red_wins", "blue_wins", "nodes",
]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    top_n: int = 20
    min_games: int = 0


def _missing(df: pd.DataFrame, *cols: str) -> None:
    absent = [c for c in cols if c not in df.columns]
    if absent:
        raise ValueError(f"Results are missing columns {absent}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    if cfg.min_games <= 0:
        return df.copy()
    _missing(df, "games")
    return df[df["games"].fillna(0) >= cfg.min_games].copy()


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """Best agents by the configured metric, with a 1-based rank column."""
    _missing(df, "name", cfg.metric)
    ranked = filter_rows(df, cfg).sort_values(
        cfg.metric, ascending=cfg.metric in ASCENDING_METRICS, kind="stable"
    )
    table = ranked[[c for c in TABLE_COLS if c in ranked.columns]].head(cfg.top_n)
    table = table.reset_index(drop=True)
    table.insert(0, "rk", range(1, len(table) + 1))
    return table


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe().T


def nodes_per_ms(df: pd.DataFrame) -> pd.Series:
    """Search throughput per agent; NaN where no time was recorded."""
    _missing(df, "name", "nodes", "time_ms")
    time_ms = df["time_ms"].where(df["time_ms"] > 0)
    return pd.Series((df["nodes"] / time_ms).to_numpy(), index=df["name"], name="nodes_per_ms")


def side_split(df: pd.DataFrame) -> pd.DataFrame:
    """
    Win rate of each agent when moving first (red) and second (blue). Rates
    are NaN for a side the agent never played.
    """
    _missing(df, "name", "games", "red_games", "red_wins", "blue_wins")
    red_games = df["red_games"].where(df["red_games"] > 0)
    blue_games = (df["games"] - df["red_games"]).where(lambda s: s > 0)
    return pd.DataFrame({
        "red_win_rate": (df["red_wins"] / red_games).to_numpy(),
        "blue_win_rate": (df["blue_wins"] / blue_games).to_numpy(),
    }, index=df["name"])
