from __future__ import annotations

import csv
import itertools
import logging
import random
import time
from functools import partial
from pathlib import Path
from typing import Dict, List, Tuple

from jump61.ai.minimax_agent import MinimaxAgent
from jump61.ai.random_agent import RandomAgent
from jump61.config import MAX_HEADLESS_MOVES
from jump61.game.controller import Game
from jump61.ui.prompts import parse_move

from .standings import CSV_COLUMNS, Agg, Team, add_result, standings_rows

logger = logging.getLogger(__name__)


def build_roster() -> List[Team]:
    teams: List[Team] = []
    for seed in [0, 1]:
        name = f"Random seed{seed}"
        teams.append(Team(name, partial(RandomAgent, seed=seed, name=name)))
    for depth in [1, 2, 3]:
        name = f"Minimax d{depth}"
        teams.append(Team(name, partial(MinimaxAgent, depth=depth, name=name)))
    return teams


def play_headless(team_red: Team, team_blue: Team, size: int, seed: int = 0) -> Tuple[str, Dict[str, Dict[str, int]]]:
    """
    Play one game without rendering. Two random opening moves keep repeated
    pairings from being identical. Returns the winning side ("D" if the move
    cap is hit) and per-side stats.
    """
    game = Game(size)
    agents = {"red": team_red.make(game, "red"), "blue": team_blue.make(game, "blue")}
    stats = {
        "red": {"moves": 0, "time_ms": 0, "nodes": 0},
        "blue": {"moves": 0, "time_ms": 0, "nodes": 0},
    }

    rng = random.Random(seed)
    board = game.board
    for _ in range(2):
        if game.winner() is not None:
            break
        side = board.whose_move()
        n = rng.choice(board.legal_moves(side))
        game.make_move(side, board.row(n), board.col(n))

    for _ in range(MAX_HEADLESS_MOVES):
        w = game.winner()
        if w is not None:
            return w, stats

        side = board.whose_move()
        agent = agents[side]

        start = time.perf_counter()
        move = parse_move(agent.get_move(), size)
        elapsed = time.perf_counter() - start
        if move is None:
            raise ValueError(f"{agent.name} quit a headless game.")

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[side]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(elapsed * 1000))
        side_stats["nodes"] += int(info.get("nodes", 0))

        game.make_move(side, *move)

    w = game.winner()
    if w is not None:
        return w, stats
    logger.warning("%s vs %s hit the %d move cap", team_red.name, team_blue.name, MAX_HEADLESS_MOVES)
    return "D", stats


def run_tournament(teams: List[Team], size: int = 4, games_per_pair: int = 2, seed: int = 1234) -> Dict[str, Agg]:
    """Round robin; sides alternate between games of the same pairing."""
    agg: Dict[str, Agg] = {t.name: Agg() for t in teams}

    for i, (a, b) in enumerate(itertools.combinations(teams, 2)):
        for g in range(games_per_pair):
            a_side = "red" if g % 2 == 0 else "blue"
            red, blue = (a, b) if a_side == "red" else (b, a)
            outcome, stats = play_headless(red, blue, size, seed=seed + 1000 * i + g)
            add_result(agg[a.name], agg[b.name], outcome, a_side)

            for side, team in (("red", red), ("blue", blue)):
                t = agg[team.name]
                t.moves += stats[side]["moves"]
                t.time_ms += stats[side]["time_ms"]
                t.nodes += stats[side]["nodes"]

            logger.info("%s (red) vs %s (blue): %s", red.name, blue.name, outcome)

    return agg


def export_csv(agg: Dict[str, Agg], results_dir: Path, z: float = 1.28) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = results_dir / f"tournament_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        w.writeheader()
        for row in standings_rows(agg, z):
            w.writerow(row)

    return out_path


def print_standings(agg: Dict[str, Agg], z: float = 1.28) -> None:
    print(f"{'rk':>3}  {'agent':<20}  {'strength':>8}  {'ppg':>5}  {'W-D-L':>8}  {'ms/mv':>7}")
    print("─" * 60)
    for i, r in enumerate(standings_rows(agg, z), start=1):
        wdl = f"{r['wins']}-{r['draws']}-{r['losses']}"
        print(
            f"{i:>3}  {r['name']:<20}  {r['strength_wilson_lcb']:>8.4f}  "
            f"{r['ppg']:>5.3f}  {wdl:>8}  {r['avg_ms_per_move']:>7.1f}"
        )


def main() -> None:
    sz = input("Board size (default 4): ").strip()
    size = int(sz) if sz else 4

    gpp = input("Games per pairing (default 2): ").strip()
    games_per_pair = int(gpp) if gpp else 2

    sd = input("Seed (default 1234): ").strip()
    seed = int(sd) if sd else 1234

    rd = input("Results directory (default data/results): ").strip()
    results_dir = Path(rd) if rd else Path("data/results")

    roster = build_roster()
    print(f"Roster size: {len(roster)} teams")

    start = time.perf_counter()
    agg = run_tournament(roster, size=size, games_per_pair=games_per_pair, seed=seed)
    elapsed = time.perf_counter() - start

    print()
    print_standings(agg)
    out_path = export_csv(agg, results_dir)
    print(f"\nWrote CSV: {out_path}")
    print(f"Total runtime: {elapsed:.1f}s")


if __name__ == "__main__":
    main()
