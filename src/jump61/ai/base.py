from __future__ import annotations
from typing import Protocol

from jump61.core.board import Board
from jump61.types import Player


class MoveReporter(Protocol):
    """What a player needs from the game it plays in."""

    @property
    def board(self) -> Board:
        ...

    def report_move(self, row: int, col: int) -> None:
        ...


class Agent(Protocol):
    name: str
    side: Player

    def get_move(self) -> str:
        """Next move as "<row> <col>" (1-based)."""
        ...
