from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, List

from jump61.types import Player

CSV_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "red_games", "red_wins", "blue_wins",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes",
]


@dataclass(frozen=True)
class Team:
    """A named agent factory: make(game, side) builds a fresh agent."""
    name: str
    make: Callable[..., object]


@dataclass
class Agg:
    games: int = 0
    points: float = 0.0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    # Red always moves first, so results are split by side
    red_games: int = 0
    red_wins: int = 0
    blue_wins: int = 0

    moves: int = 0
    time_ms: int = 0
    nodes: int = 0

    def record(self, side: Player, outcome: str) -> None:
        self.games += 1
        if side == "red":
            self.red_games += 1

        if outcome == "D":
            self.draws += 1
            self.points += 0.5
        elif outcome == side:
            self.wins += 1
            self.points += 1.0
            if side == "red":
                self.red_wins += 1
            else:
                self.blue_wins += 1
        else:
            self.losses += 1


def ppg(a: Agg) -> float:
    return a.points / a.games if a.games else 0.0


def avg_ms_per_move(a: Agg) -> float:
    return a.time_ms / a.moves if a.moves else 0.0


def wilson_lcb(p: float, n: int, z: float) -> float:
    """Lower end of the Wilson score interval for a rate p observed over n games."""
    if n <= 0:
        return 0.0
    p = min(max(p, 0.0), 1.0)
    z2 = z * z
    spread = z * math.sqrt(p * (1.0 - p) / n + z2 / (4.0 * n * n))
    return max(0.0, (p + z2 / (2.0 * n) - spread) / (1.0 + z2 / n))


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_side: Player) -> None:
    """Outcome is the winning side or "D". Team a played a_side and team b the other."""
    agg_a.record(a_side, outcome)
    agg_b.record("blue" if a_side == "red" else "red", outcome)


def standings_rows(agg: Dict[str, Agg], z: float) -> List[dict]:
    """One row per team, keyed by CSV_COLUMNS, ranked by the Wilson bound on ppg."""
    rows = []
    for name, a in agg.items():
        rate = ppg(a)
        rows.append({
            "name": name,
            "games": a.games, "wins": a.wins, "draws": a.draws, "losses": a.losses,
            "red_games": a.red_games, "red_wins": a.red_wins, "blue_wins": a.blue_wins,
            "points": a.points, "ppg": round(rate, 6),
            "strength_wilson_lcb": round(wilson_lcb(rate, a.games, z), 6),
            "avg_ms_per_move": round(avg_ms_per_move(a), 3),
            "moves": a.moves, "time_ms": a.time_ms, "nodes": a.nodes,
        })
    rows.sort(key=lambda r: (r["strength_wilson_lcb"], r["ppg"]), reverse=True)
    return rows
