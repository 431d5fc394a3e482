from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from jump61.scripts.standings import CSV_COLUMNS

RESULTS_GLOB = "tournament_results_*.csv"
NUMERIC_COLS = tuple(c for c in CSV_COLUMNS if c != "name")


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    numeric_cols: tuple[str, ...] = NUMERIC_COLS


def load_results(spec: LoadSpec) -> pd.DataFrame:
    """
    Read one tournament CSV. Numeric columns that fail to parse become NaN and
    rows without an agent name are dropped. Older files missing the side
    split columns still load.
    """
    path = Path(spec.csv_path)
    if not path.is_file():
        raise FileNotFoundError(f"No results CSV at {path}")

    df = pd.read_csv(path).rename(columns=str.strip)
    if "name" not in df.columns:
        raise ValueError(f"{path.name} has no 'name' column (found {list(df.columns)})")

    present = [c for c in spec.numeric_cols if c in df.columns]
    if present:
        df[present] = df[present].apply(pd.to_numeric, errors="coerce")

    df["name"] = df["name"].fillna("").astype(str).str.strip()
    return df[df["name"] != ""].reset_index(drop=True)


def latest_results(results_dir: Path, pattern: str = RESULTS_GLOB) -> Path:
    # Timestamped names sort chronologically
    files = sorted(Path(results_dir).glob(pattern))
    if not files:
        raise FileNotFoundError(f"No {pattern} files in {results_dir}")
    return files[-1]
