"""
Errors raised by the TicTacToe engine.

All of them are recoverable: the caller decides what to show the user
and may simply try again with a corrected move.
"""

from typing import Optional


class GameError(Exception):
    """Base class for every engine error."""


class InvalidConfigurationError(GameError):
    """A game was started with an unusable grid size."""


class MoveError(GameError):
    """
    A move was rejected.

    Attributes:
        row: Row of the rejected move (None when not tied to a cell).
        col: Column of the rejected move (None when not tied to a cell).
    """

    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        super().__init__(message)
        self.row = row
        self.col = col


class OutOfBoundsError(MoveError):
    """Coordinates fall outside the grid."""


class CellOccupiedError(MoveError):
    """The target cell already holds a mark."""


class NotPlayerTurnError(MoveError):
    """The player tried to move while it is not their turn."""


class GameNotInProgressError(NotPlayerTurnError):
    """No game is running: either never started or already finished."""


class NotOpponentTurnError(MoveError):
    """The opponent was asked to move out of turn."""


class NoAvailableMoveError(MoveError):
    """The opponent was asked to move on a full board."""
