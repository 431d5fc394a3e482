from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time

from jump61.ai.base import MoveReporter
from jump61.config import BLUE_WIN, RED_WIN, SEARCH_DEPTH
from jump61.core.board import Board
from jump61.core.scoring import evaluate
from jump61.types import Move, Player

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MinimaxAgent:
    """
    Fixed-depth minimax with alpha-beta pruning.

    Red maximizes and blue minimizes the value returned by evaluate(). The
    search runs on a private copy of the game board: each trial move is
    applied with add_spot and taken back with undo before the next one.
    Moves are tried in ascending square order.

    seed is accepted like the other agents take one, but move choice does
    not depend on it.
    """
    game: MoveReporter
    side: Player
    seed: int | None = None
    depth: int = SEARCH_DEPTH
    name: str = "Minimax AI"

    # Stats
    last_info: dict = field(default_factory=dict)

    _found_move: int = -1
    _nodes: int = 0
    _cutoffs: int = 0

    def get_move(self) -> str:
        board = self.game.board
        move, _ = self.search(board)
        row, col = board.row(move), board.col(move)
        self.game.report_move(row, col)
        return f"{row} {col}"

    def search(self, board: Board) -> tuple[Move, int]:
        """Best move for this agent's side and its minimax value."""
        work = board.copy()
        sense = 1 if self.side == "red" else -1

        self._found_move = -1
        self._nodes = 0
        self._cutoffs = 0

        start = time.perf_counter()
        value = self.minimax(work, self.depth, True, sense, BLUE_WIN, RED_WIN)
        elapsed = time.perf_counter() - start

        if self._found_move < 0:
            raise ValueError("No legal moves.")
        move = Move(self._found_move)

        self.last_info = {
            "depth": self.depth,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": value,
            "move": board.move_string(move),
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug("%s (%s) search: %s", self.name, self.side, self.last_info)
        return move, value

    def minimax(self, board: Board, depth: int, save_move: bool, sense: int, alpha: int, beta: int) -> int:
        """
        Value of the board searched depth plies deep. sense is 1 when the side
        to move maximizes, -1 when it minimizes. With save_move the best move
        is left in _found_move, defaulting to the first legal move when none
        beats the initial worst value. Terminal and depth-0 positions return
        the static value and record nothing.
        """
        self._nodes += 1

        if depth == 0 or board.winner() is not None:
            return evaluate(board)

        player = board.whose_move()
        moves = board.legal_moves(player)
        if save_move:
            self._found_move = moves[0]

        if sense == 1:
            best = BLUE_WIN
            for m in moves:
                board.add_spot(player, m)
                response = self.minimax(board, depth - 1, False, -1, alpha, beta)
                board.undo()

                if response > best:
                    best = response
                    alpha = max(alpha, best)
                    if save_move:
                        self._found_move = m
                    if alpha >= beta:
                        self._cutoffs += 1
                        return best
            return best

        best = RED_WIN
        for m in moves:
            board.add_spot(player, m)
            response = self.minimax(board, depth - 1, False, 1, alpha, beta)
            board.undo()

            if response < best:
                best = response
                beta = min(beta, best)
                if save_move:
                    self._found_move = m
                if alpha >= beta:
                    self._cutoffs += 1
                    return best
        return best
