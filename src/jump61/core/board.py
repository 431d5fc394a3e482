# src/jump61/core/board.py

from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
import logging
from typing import Callable, Deque, List, Optional, Tuple

from jump61.config import DEFAULT_SIZE
from jump61.core.square import INITIAL, Square
from jump61.errors import EmptyHistory, GameOver, InvalidMove, NotYourTurn, OutOfRange
from jump61.types import Move, Owner, Player

logger = logging.getLogger(__name__)

Notifier = Callable[["Board"], None]


def _nop(board: "Board") -> None:
    pass


def other(player: Player) -> Player:
    return "blue" if player == "red" else "red"


@dataclass(slots=True, eq=False)
class Board:
    """
    State of a Jump61 game.

    Squares are addressed either by (row, col) with 1 <= row, col <= size, or
    by linear index in row-major order: index = (row - 1) * size + (col - 1).

    A notifier (any callable taking the board) is called after every change
    visible from outside: set, clear, copy_from, add_spot, undo and
    set_notifier itself.
    """
    size: int = DEFAULT_SIZE
    cells: List[Square] = field(default_factory=list)
    history: List[Tuple[Square, ...]] = field(default_factory=list)
    notifier: Notifier = _nop

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("Board size must be at least 1.")
        if not self.cells:
            self.cells = [INITIAL] * (self.size * self.size)
        elif len(self.cells) != self.size * self.size:
            raise ValueError("Cell list does not match board size.")

    def copy(self) -> "Board":
        """A board with my contents, an empty undo history and no notifier."""
        return Board(self.size, list(self.cells))

    def copy_from(self, source: "Board") -> None:
        """Copy size and squares from another board and start a fresh undo history."""
        self.size = source.size
        self.cells = list(source.squares)
        self.history = []
        self._announce()

    def clear(self, size: int) -> None:
        """Start over on an empty board of the given size, with no undo history."""
        if size < 1:
            raise ValueError("Board size must be at least 1.")
        self.size = size
        self.cells = [INITIAL] * (size * size)
        self.history = []
        self._announce()

    # ---- indexing ----

    def exists(self, r: int, c: int) -> bool:
        return 1 <= r <= self.size and 1 <= c <= self.size

    def exists_index(self, n: int) -> bool:
        return 0 <= n < self.size * self.size

    def row(self, n: int) -> int:
        return n // self.size + 1

    def col(self, n: int) -> int:
        return n % self.size + 1

    def sq_num(self, r: int, c: int) -> int:
        return (r - 1) * self.size + (c - 1)

    def move_string(self, n: int) -> str:
        return f"{self.row(n)} {self.col(n)}"

    def _check_index(self, n: int) -> None:
        if not self.exists_index(n):
            raise OutOfRange(f"Square {n} is not on a {self.size}x{self.size} board.")

    def _check_coord(self, r: int, c: int) -> None:
        if not self.exists(r, c):
            raise OutOfRange(f"Square ({r}, {c}) is not on a {self.size}x{self.size} board.")

    # ---- queries ----

    @property
    def squares(self) -> Tuple[Square, ...]:
        return tuple(self.cells)

    def get(self, r: int, c: int) -> Square:
        self._check_coord(r, c)
        return self.cells[self.sq_num(r, c)]

    def get_index(self, n: int) -> Square:
        self._check_index(n)
        return self.cells[n]

    def num_pieces(self) -> int:
        return sum(sq.spots for sq in self.cells)

    def num_of_side(self, owner: Owner) -> int:
        return sum(1 for sq in self.cells if sq.owner == owner)

    def whose_move(self) -> Player:
        """Side to move. On a won board this is the loser."""
        return "red" if (self.num_pieces() + self.size) % 2 == 0 else "blue"

    def winner(self) -> Optional[Player]:
        owner = self.cells[0].owner
        if owner is None:
            return None
        if all(sq.owner == owner for sq in self.cells):
            return owner
        return None

    def neighbors(self, n: int) -> int:
        """Number of squares orthogonally adjacent to square n."""
        r, c = self.row(n), self.col(n)
        return int(r > 1) + int(c > 1) + int(r < self.size) + int(c < self.size)

    def neighbor_indices(self, n: int) -> List[int]:
        # Order: right, down, up, left. The cascade queue follows it.
        r, c = self.row(n), self.col(n)
        out: List[int] = []
        if c < self.size:
            out.append(n + 1)
        if r < self.size:
            out.append(n + self.size)
        if r > 1:
            out.append(n - self.size)
        if c > 1:
            out.append(n - 1)
        return out

    def overfull(self, n: int) -> bool:
        return self.cells[n].spots > self.neighbors(n)

    def can_move(self, player: Player) -> bool:
        """True if it is this player's turn and the game is not over."""
        return self.winner() is None and self.whose_move() == player

    def is_legal(self, player: Player, n: int) -> bool:
        if not self.exists_index(n) or not self.can_move(player):
            return False
        owner = self.cells[n].owner
        return owner is None or owner == player

    def is_legal_at(self, player: Player, r: int, c: int) -> bool:
        return self.exists(r, c) and self.is_legal(player, self.sq_num(r, c))

    def legal_moves(self, player: Player) -> List[Move]:
        """Legal squares for a player, lowest index first."""
        if not self.can_move(player):
            return []
        return [Move(n) for n, sq in enumerate(self.cells) if sq.owner is None or sq.owner == player]

    # ---- mutation ----

    def add_spot(self, player: Player, n: int) -> None:
        """Add one of the player's spots to square n and resolve any overflow."""
        self._check_index(n)
        if self.winner() is not None:
            raise GameOver("Game is over.")
        if self.whose_move() != player:
            raise NotYourTurn(f"It is not {player}'s turn.")
        owner = self.cells[n].owner
        if owner is not None and owner != player:
            raise InvalidMove(f"Square {self.move_string(n)} belongs to {owner}.")

        self._mark_undo()
        self._simple_add(player, n, 1)
        if self.overfull(n):
            self._jump(n, player)
        self._announce()

    def add_spot_at(self, player: Player, r: int, c: int) -> None:
        self._check_coord(r, c)
        self.add_spot(player, self.sq_num(r, c))

    def set(self, r: int, c: int, num: int, player: Owner) -> None:
        """
        Put num spots on (r, c) for the given owner. A count of 0 leaves the
        square unowned.
        Skips legality checks and overflow; leaves the undo history alone.
        """
        self._check_coord(r, c)
        if num < 0:
            raise ValueError("Spot count must be non-negative.")
        if player not in (None, "red", "blue"):
            raise ValueError(f"Unknown owner {player!r}.")
        self._internal_set(self.sq_num(r, c), num, player)
        self._announce()

    def undo(self) -> None:
        """Take back the last add_spot, including its whole cascade."""
        if not self.history:
            raise EmptyHistory("No move to undo.")
        self.cells = list(self.history.pop())
        self._announce()

    def set_notifier(self, notify: Notifier) -> None:
        self.notifier = notify
        self._announce()

    def _announce(self) -> None:
        self.notifier(self)

    def _mark_undo(self) -> None:
        self.history.append(tuple(self.cells))

    def _internal_set(self, n: int, num: int, player: Owner) -> None:
        self.cells[n] = Square(player, num) if num > 0 else Square(None, num)

    def _simple_add(self, player: Player, n: int, delta: int) -> None:
        self._internal_set(n, self.cells[n].spots + delta, player)

    def _jump(self, start: int, player: Player) -> None:
        """Resolve an overflowing square and every overflow it sets off."""
        queue: Deque[int] = deque()
        overflows = 1
        self._explode(start, player, queue)
        while queue:
            s = queue.popleft()
            self._simple_add(player, s, 1)
            if self.overfull(s):
                overflows += 1
                self._explode(s, player, queue)
        logger.debug("cascade from square %d: %d overflows", start, overflows)

    def _explode(self, n: int, player: Player, queue: Deque[int]) -> None:
        queue.extend(self.neighbor_indices(n))
        self._internal_set(n, 1, player)
        if queue and self.winner() is not None:
            # Spots still pending are dropped once the board is won.
            logger.debug("board won mid-cascade; dropping %d pending spots", len(queue))
            queue.clear()

    # ---- text ----

    def dump(self) -> str:
        out: List[str] = ["==="]
        for i, sq in enumerate(self.cells):
            if i % self.size == 0:
                out.append("\n    ")
            out.append(f"{sq.spots}{sq.marker()} ")
        out.append("\n===")
        return "".join(out)

    def display(self) -> str:
        """Dump with row numbers on the left and column numbers underneath."""
        lines = self.dump().splitlines()
        out: List[str] = []
        for i in range(1, len(lines) - 1):
            out.append(f"{i:2d} {lines[i].strip()}\n")
        out.append("  " + "".join(f"{c:3d}" for c in range(1, self.size + 1)))
        return "".join(out)

    def __str__(self) -> str:
        return self.dump()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size == other.size
            and self.cells == other.cells
            and self.history == other.history
        )
