from __future__ import annotations

from jump61.config import BLUE_WIN, RED_WIN
from jump61.core.board import Board


def evaluate(board: Board) -> int:
    """
    Static value of a position from red's point of view.

    Won positions score RED_WIN / BLUE_WIN. Otherwise the score is the number
    of squares holding exactly as many spots as they have neighbors, i.e. one
    spot away from overflowing, whoever owns them.
    """
    w = board.winner()
    if w == "red":
        return RED_WIN
    if w == "blue":
        return BLUE_WIN

    return sum(1 for n, sq in enumerate(board.squares) if sq.spots == board.neighbors(n))
