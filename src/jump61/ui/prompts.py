from __future__ import annotations
from typing import Optional

from jump61.types import Coord


def parse_move(raw: str, size: int) -> Optional[Coord]:
    """
    Parse "row col" or "row,col" (1-based). Returns None when the player
    asks to quit.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    parts = s.replace(",", " ").split()
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError("Invalid input. Enter row and column (e.g. 2 3) or q.")
    r, col = int(parts[0]), int(parts[1])
    if not (1 <= r <= size and 1 <= col <= size):
        raise ValueError(f"Row and column must be between 1 and {size}.")
    return r, col
