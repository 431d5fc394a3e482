from __future__ import annotations

import logging
import time

from jump61.ai.minimax_agent import MinimaxAgent
from jump61.config import DEFAULT_SIZE, LOG_LEVEL
from jump61.game.controller import Game, run_game
from jump61.ui.human import HumanAgent


def _ask_size() -> int:
    raw = input(f"Board size (default {DEFAULT_SIZE}): ").strip()
    if not raw:
        return DEFAULT_SIZE
    if not raw.isdigit() or int(raw) < 2:
        print(f"Invalid size. Using {DEFAULT_SIZE}.")
        return DEFAULT_SIZE
    return int(raw)


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human (red) vs AI (blue)")
    print("3) AI (red) vs Human (blue)")
    print("4) Run AI tournament")

    choice = input("Choice: ").strip()

    if choice == "4":
        print("\nStarting AI tournament...\n")
        from jump61.scripts.tournament import main as tournament_main

        tournament_main()
        return

    game = Game(_ask_size())

    if choice == "2":
        red, blue = HumanAgent(game, "red"), MinimaxAgent(game, "blue")
    elif choice == "3":
        red, blue = MinimaxAgent(game, "red"), HumanAgent(game, "blue")
    else:
        if choice != "1":
            print("\nInvalid choice. Defaulting to Human vs Human.\n")
        red, blue = HumanAgent(game, "red"), HumanAgent(game, "blue")

    print(f"\nStarting game: {red.name} (red) vs {blue.name} (blue)")
    time.sleep(1)
    run_game(game, red, blue)


if __name__ == "__main__":
    main()
