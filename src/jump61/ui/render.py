from __future__ import annotations
import itertools
import sys
import time

from jump61.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC, CLEAR_SCREEN, USE_COLOR
from jump61.core.board import Board
from jump61.core.square import Square
from jump61.ui.colors import c, side_color, BOLD, DIM, FG_CYAN


def _square(sq: Square) -> str:
    return c(f"{sq.spots}{sq.marker()}", side_color(sq.owner))


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "") -> None:
    """Redraw the board with row and column numbers under a status line."""
    clear_screen()

    print(c("JUMP61", BOLD))
    print(c(status, FG_CYAN) if status else "")

    if USE_COLOR:
        for r in range(1, board.size + 1):
            cells = " ".join(_square(board.get(r, col)) for col in range(1, board.size + 1))
            print(f"{c(f'{r:2d}', DIM)} {cells}")
        print(c("  " + "".join(f"{col:3d}" for col in range(1, board.size + 1)), DIM))
    else:
        print(board.display())

    print(c("   Enter row and column (e.g. 2 3). Enter q to quit.", DIM))


def thinking(label: str) -> None:
    """Pause for AI_THINK_DELAY_SEC, with a spinner if enabled, so AI moves are visible."""
    if AI_THINK_DELAY_SEC <= 0:
        return
    if not AI_THINKING_SPINNER:
        time.sleep(AI_THINK_DELAY_SEC)
        return

    line = f"{label} is thinking..."
    deadline = time.monotonic() + AI_THINK_DELAY_SEC
    for frame in itertools.cycle("|/-\\"):
        if time.monotonic() >= deadline:
            break
        sys.stdout.write(f"\r{line} {frame}")
        sys.stdout.flush()
        time.sleep(0.08)
    sys.stdout.write("\r" + " " * (len(line) + 2) + "\r")
    sys.stdout.flush()
