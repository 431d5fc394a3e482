from __future__ import annotations
from dataclasses import dataclass

from jump61.ai.base import MoveReporter
from jump61.types import Player


@dataclass(slots=True)
class HumanAgent:
    game: MoveReporter
    side: Player
    name: str = "Human"

    def get_move(self) -> str:
        return input(f"{self.side.capitalize()} move: ")
