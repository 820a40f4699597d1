"""
Win checker for the TicTacToe engine.
Checks if a mark has completed a line or if the game is a tie.
"""

from enum import Enum
from functools import lru_cache
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, Mark

Line = List[Tuple[int, int]]


class GameOutcome(Enum):
    """Result of a game, derived from the board."""
    ONGOING = "ongoing"
    PLAYER_WIN = "player_win"
    OPPONENT_WIN = "opponent_win"
    TIE = "tie"

    @property
    def is_terminal(self) -> bool:
        """True for every outcome except ONGOING."""
        return self != GameOutcome.ONGOING

    @property
    def code(self) -> Optional[int]:
        """
        Winner code handed to hosts: 0 player, 1 opponent, -1 tie.
        None while the game is still going.
        """
        return _OUTCOME_CODES.get(self)


_OUTCOME_CODES = {
    GameOutcome.PLAYER_WIN: 0,
    GameOutcome.OPPONENT_WIN: 1,
    GameOutcome.TIE: -1,
}


@lru_cache(maxsize=None)
def winning_lines(size: int) -> Tuple[Tuple[Tuple[int, int], ...], ...]:
    """
    All lines that win on a board of the given size.

    Args:
        size: Grid size N.

    Returns:
        N rows, then N columns, then the main diagonal and the
        anti-diagonal, each as a tuple of (row, col) cells.
    """
    rows = [tuple((i, j) for j in range(size)) for i in range(size)]
    cols = [tuple((j, i) for j in range(size)) for i in range(size)]
    diagonal = tuple((i, i) for i in range(size))
    anti_diagonal = tuple((i, size - 1 - i) for i in range(size))
    return tuple(rows + cols + [diagonal, anti_diagonal])


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: every cell of a full row, full column, or one of the
    two main diagonals holds the same mark. Only full-length lines count.
    None of the checks modify the board.
    """

    def check_win(self, board: Board, mark: Mark) -> bool:
        """
        Check if a mark has completed any line.

        Args:
            board: The board to inspect.
            mark: The mark to look for.

        Returns:
            True if some line is entirely made of that mark.
        """
        filled = board.grid == mark

        if filled.all(axis=1).any() or filled.all(axis=0).any():
            return True
        if np.diagonal(filled).all() or np.diagonal(np.fliplr(filled)).all():
            return True
        return False

    def check_tie(self, board: Board) -> bool:
        """
        Check if the game is a tie.

        A full board with a winning line on it is a win, not a tie.

        Args:
            board: The board to inspect.

        Returns:
            True if no cell is empty and nobody has a line.
        """
        if not board.is_full():
            return False
        return not (self.check_win(board, Mark.PLAYER) or self.check_win(board, Mark.OPPONENT))

    def evaluate(self, board: Board) -> GameOutcome:
        """
        Work out the outcome of the board as it stands.

        Args:
            board: The board to inspect.

        Returns:
            The GameOutcome for this board.
        """
        if self.check_win(board, Mark.PLAYER):
            return GameOutcome.PLAYER_WIN
        if self.check_win(board, Mark.OPPONENT):
            return GameOutcome.OPPONENT_WIN
        if board.is_full():
            return GameOutcome.TIE
        return GameOutcome.ONGOING

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Args:
            board: The board to inspect.

        Returns:
            The first completed line as a list of (row, col), or None.
        """
        for line in winning_lines(board.size):
            first = board.get(*line[0])
            if first == Mark.EMPTY:
                continue
            if all(board.get(row, col) == first for row, col in line):
                return list(line)
        return None
