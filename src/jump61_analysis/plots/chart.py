from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib.pyplot as plt


def _numeric(df: pd.DataFrame, col: str) -> bool:
    return col in df.columns and pd.api.types.is_numeric_dtype(df[col])


def _finish(fig, out_path: Path, *, show: bool) -> Path | None:
    """Show the figure, or save it and return where it went."""
    if show:
        plt.show()
        return None
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out_path


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> None:
    for col in cols:
        if not _numeric(df, col):
            continue
        fig, ax = plt.subplots()
        ax.hist(df[col].dropna(), bins=20)
        ax.set(title=f"Distribution of {col}", xlabel=col, ylabel="agents")
        _finish(fig, outdir / f"hist_{col}.png", show=show)


def plot_scatter(df: pd.DataFrame, outdir: Path, x: str, y: str, *, show: bool) -> None:
    """Y against X with each point labelled by agent name."""
    if not (_numeric(df, x) and _numeric(df, y)):
        return

    fig, ax = plt.subplots()
    ax.scatter(df[x], df[y], alpha=0.7)
    for name, xv, yv in zip(df["name"], df[x], df[y]):
        ax.annotate(str(name), (xv, yv), fontsize=7)
    ax.set(title=f"{y} vs {x}", xlabel=x, ylabel=y)
    _finish(fig, outdir / f"scatter_{y}_vs_{x}.png", show=show)


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int, *, show: bool) -> None:
    if "name" not in df.columns or not _numeric(df, metric):
        return

    top = df.dropna(subset=[metric]).nlargest(top_n, metric)
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(top["name"].astype(str), top[metric].astype(float))
    ax.set(title=f"Top {len(top)} by {metric}", xlabel="agent", ylabel=metric)
    ax.tick_params(axis="x", labelrotation=45)
    _finish(fig, outdir / f"top_{top_n}_{metric}.png", show=show)


def plot_side_split(split: pd.DataFrame, outdir: Path, *, show: bool) -> None:
    """Grouped bars of red (first mover) and blue win rates per agent."""
    if split.empty:
        return

    fig, ax = plt.subplots(figsize=(10, 5))
    split[["red_win_rate", "blue_win_rate"]].plot.bar(ax=ax, color=["tab:red", "tab:blue"])
    ax.set(title="Win rate by side", xlabel="agent", ylabel="win rate", ylim=(0, 1))
    ax.tick_params(axis="x", labelrotation=45)
    _finish(fig, outdir / "side_split.png", show=show)
