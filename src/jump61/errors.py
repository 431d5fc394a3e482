from __future__ import annotations


class GameError(ValueError):
    """Base class for rule violations reported by the board."""


class InvalidMove(GameError):
    """Target square is owned by the opponent."""


class OutOfRange(GameError):
    """Square index or coordinates fall outside the grid."""


class NotYourTurn(GameError):
    pass


class GameOver(GameError):
    pass


class EmptyHistory(GameError):
    """undo() called with no recorded move."""


class ReadonlyBoardError(GameError):
    pass
