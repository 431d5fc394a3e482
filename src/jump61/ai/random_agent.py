from __future__ import annotations

from dataclasses import dataclass, field
import random

from jump61.ai.base import MoveReporter
from jump61.types import Player


@dataclass(slots=True)
class RandomAgent:
    game: MoveReporter
    side: Player
    seed: int | None = None
    name: str = "Random AI"
    rng: random.Random = field(init=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def get_move(self) -> str:
        board = self.game.board
        moves = board.legal_moves(self.side)
        if not moves:
            raise ValueError("No legal moves.")
        n = self.rng.choice(moves)
        self.game.report_move(board.row(n), board.col(n))
        return board.move_string(n)
