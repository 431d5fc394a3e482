from __future__ import annotations

from jump61.core.board import Board
from jump61.errors import ReadonlyBoardError

# Everything a player may look at. Each of these returns a fresh or
# immutable value, so nothing handed out aliases the board's own state.
_QUERIES = frozenset({
    "size",
    "get",
    "get_index",
    "squares",
    "num_pieces",
    "num_of_side",
    "whose_move",
    "winner",
    "neighbors",
    "neighbor_indices",
    "overfull",
    "can_move",
    "is_legal",
    "is_legal_at",
    "legal_moves",
    "row",
    "col",
    "sq_num",
    "exists",
    "exists_index",
    "move_string",
    "copy",
    "dump",
    "display",
})


class ReadonlyBoard:
    """
    A live view of a Board that answers queries but refuses everything else.
    Handed to players so they can look at the game without touching it.
    """
    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def __getattr__(self, name: str):
        if name in _QUERIES:
            return getattr(self._board, name)
        if hasattr(self._board, name):
            raise ReadonlyBoardError(f"{name} is not available on a read-only board.")
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __str__(self) -> str:
        return str(self._board)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadonlyBoard):
            other = other._board
        return self._board == other
