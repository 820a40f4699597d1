"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass

from .board import Board, GamePhase
from .errors import (
    CellOccupiedError,
    GameNotInProgressError,
    MoveError,
    NoAvailableMoveError,
    NotOpponentTurnError,
    NotPlayerTurnError,
    OutOfBoundsError,
)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None

    @property
    def error_message(self) -> Optional[str]:
        """Human-readable reason the move was rejected."""
        return str(self.error) if self.error is not None else None

    def raise_if_invalid(self):
        """Raise the carried error if the move was rejected."""
        if self.error is not None:
            raise self.error


VALID = ValidationResult(is_valid=True)


def _reject(error: MoveError) -> ValidationResult:
    return ValidationResult(is_valid=False, error=error)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. A game must be running
    2. Coordinates must be inside the grid
    3. Only the side whose turn it is may move
    4. Can only place on empty cells
    """

    def validate_player_move(
        self,
        board: Optional[Board],
        phase: GamePhase,
        row,
        col
    ) -> ValidationResult:
        """
        Validate a player move.

        Args:
            board: Current board (None before the first game).
            phase: Current engine phase.
            row: Row to place the mark.
            col: Column to place the mark.

        Returns:
            ValidationResult with is_valid and the error to raise.
        """
        if board is None or phase == GamePhase.IDLE:
            return _reject(GameNotInProgressError("No game has been started!", row, col))

        if not board.in_bounds(row, col):
            return _reject(OutOfBoundsError(
                f"Invalid position ({row}, {col}). Must be 0-{board.size - 1}.", row, col
            ))

        if phase == GamePhase.TERMINAL:
            return _reject(GameNotInProgressError("Game is already over!", row, col))

        if phase != GamePhase.PLAYER_TURN:
            return _reject(NotPlayerTurnError("It's not the player's turn!", row, col))

        if not board.is_empty(row, col):
            return _reject(CellOccupiedError(
                f"Cell ({row}, {col}) is already occupied by {board.get(row, col).name}", row, col
            ))

        # All checks passed!
        return VALID

    def validate_opponent_move(self, board: Optional[Board], phase: GamePhase) -> ValidationResult:
        """
        Validate that the opponent may move now.

        Args:
            board: Current board (None before the first game).
            phase: Current engine phase.

        Returns:
            ValidationResult with is_valid and the error to raise.
        """
        if board is None or not phase.in_progress:
            return _reject(GameNotInProgressError("No game is in progress!"))

        if phase != GamePhase.OPPONENT_TURN:
            return _reject(NotOpponentTurnError("It's not the opponent's turn!"))

        if board.is_full():
            return _reject(NoAvailableMoveError("No empty cell left for the opponent!"))

        return VALID

    def get_valid_moves(self, board: Optional[Board], phase: GamePhase) -> List[Tuple[int, int]]:
        """
        Get all cells the side to move could play.

        Args:
            board: Current board.
            phase: Current engine phase.

        Returns:
            List of (row, col) valid move positions.
        """
        if board is None or not phase.in_progress:
            return []

        return board.get_empty_cells()
