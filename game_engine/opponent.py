"""
Opponent for the TicTacToe engine.
Blocks an immediate player win, otherwise takes the first free cell.
"""

from typing import Optional, Tuple

from .board import Board, Mark
from .win_checker import WinChecker


class OpponentPlayer:
    """
    A deliberately simple opponent.

    It looks exactly one move ahead, and only at the player's moves:
    1. Scanning row by row, the first empty cell where the player would
       complete a line gets the opponent's mark (a blocking move).
    2. If nothing needs blocking, the first empty cell in row-major
       order is taken.

    It never searches for its own winning move and uses no randomness,
    so the same board always gets the same answer.
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        """
        Initialize the opponent.

        Args:
            win_checker: Checker used to test hypothetical player moves.
        """
        self.win_checker = win_checker or WinChecker()

    def choose_move(self, board: Board) -> Optional[Tuple[int, int]]:
        """
        Pick the opponent's next cell.

        Args:
            board: Current board. It is not modified.

        Returns:
            (row, col) to play, or None if the board is full.
        """
        move = self.find_blocking_move(board)
        if move is not None:
            return move
        return board.first_empty_cell()

    def find_blocking_move(self, board: Board) -> Optional[Tuple[int, int]]:
        """
        Find the first cell where the player would win next turn.

        Args:
            board: Current board. It is not modified.

        Returns:
            (row, col) of the cell to block, or None.
        """
        probe = board.copy()

        for row, col in board.get_empty_cells():
            probe.place(row, col, Mark.PLAYER)
            wins = self.win_checker.check_win(probe, Mark.PLAYER)
            probe.clear(row, col)
            if wins:
                return (row, col)

        return None
