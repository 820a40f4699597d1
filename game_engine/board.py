"""
Board state for the TicTacToe engine.
Marks, players, move records, and the N x N grid itself.
"""

from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple
from dataclasses import dataclass

import numpy as np

from .config import GameConfig


class Mark(IntEnum):
    """What a single cell holds."""
    EMPTY = 0
    PLAYER = 1
    OPPONENT = 2

    def symbol(self, config: GameConfig = GameConfig) -> str:
        """Get the display symbol for this mark."""
        if self == Mark.PLAYER:
            return config.PLAYER_SYMBOL
        if self == Mark.OPPONENT:
            return config.OPPONENT_SYMBOL
        return config.EMPTY_SYMBOL


class Player(Enum):
    """The two parties taking turns."""
    PLAYER = "player"
    OPPONENT = "opponent"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.OPPONENT if self == Player.PLAYER else Player.PLAYER

    @property
    def mark(self) -> Mark:
        """The mark this player places."""
        return Mark.PLAYER if self == Player.PLAYER else Mark.OPPONENT


class GamePhase(Enum):
    """Where the engine is in its state machine."""
    IDLE = "idle"                      # No game started yet
    PLAYER_TURN = "player_turn"
    OPPONENT_TURN = "opponent_turn"
    TERMINAL = "terminal"              # Won or tied, waiting for a new game

    @property
    def in_progress(self) -> bool:
        """True while one of the two sides is due to move."""
        return self in (GamePhase.PLAYER_TURN, GamePhase.OPPONENT_TURN)


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    row: int                # Row (0 to N-1)
    col: int                # Column (0 to N-1)
    mark: Mark              # Mark that was placed
    move_number: int        # Position in the game's move history (0-based)


def _is_index(value) -> bool:
    # bool is an int subclass but never a valid coordinate
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class Board:
    """
    A square grid of marks, indexed by (row, col).

    The cells live in an N x N numpy array of Mark values. Callers that
    only need to look at the board should use to_array() or copy(),
    which never share storage with the original.
    """

    def __init__(self, size: int = GameConfig.GRID_SIZE):
        """
        Create an empty board.

        Args:
            size: Number of rows (and columns).
        """
        self.size = size
        self.grid = np.full((size, size), int(Mark.EMPTY), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Mark]]) -> "Board":
        """
        Build a board from nested rows of marks.

        Args:
            rows: N rows of N marks each.

        Returns:
            A new Board holding those marks.

        Raises:
            ValueError: If the rows do not form a square.
        """
        size = len(rows)
        for i, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {size}")

        board = cls(size)
        board.grid[:, :] = np.array([[int(m) for m in row] for row in rows], dtype=np.int8)
        return board

    def in_bounds(self, row, col) -> bool:
        """True if (row, col) are integer coordinates inside the grid."""
        if not (_is_index(row) and _is_index(col)):
            return False
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Mark:
        """Get the mark at (row, col)."""
        return Mark(int(self.grid[row, col]))

    def is_empty(self, row: int, col: int) -> bool:
        """True if the cell at (row, col) holds no mark."""
        return self.grid[row, col] == Mark.EMPTY

    def place(self, row: int, col: int, mark: Mark):
        """Put a mark on a cell. No rule checking happens here."""
        self.grid[row, col] = int(mark)

    def clear(self, row: int, col: int):
        """Reset a cell to empty."""
        self.grid[row, col] = int(Mark.EMPTY)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid == Mark.EMPTY)]

    def first_empty_cell(self) -> Optional[Tuple[int, int]]:
        """Get the first empty cell in row-major order, or None if full."""
        empty = self.get_empty_cells()
        return empty[0] if empty else None

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return not np.any(self.grid == Mark.EMPTY)

    def count(self, mark: Mark) -> int:
        """Number of cells holding the given mark."""
        return int(np.count_nonzero(self.grid == mark))

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board(self.size)
        new_board.grid = self.grid.copy()
        return new_board

    def to_array(self) -> np.ndarray:
        """Get a copy of the raw grid."""
        return self.grid.copy()

    def to_rows(self) -> List[List[Mark]]:
        """Get the board as nested lists of Mark values."""
        return [[Mark(int(v)) for v in row] for row in self.grid]

    def render(self, config: GameConfig = GameConfig) -> str:
        """
        Draw the board as text.

        Args:
            config: Supplies the symbols for each mark.

        Returns:
            A multi-line string with column and row numbers.
        """
        n = self.size
        width = len(str(n - 1))
        pad = " " * (width + 1)
        lines = [pad + "  " + "   ".join(f"{c:>{width}}" for c in range(n))]
        lines.append(pad + "┌" + "┬".join(["───"] * n) + "┐")

        for row in range(n):
            cells = "│".join(f" {self.get(row, col).symbol(config)} " for col in range(n))
            lines.append(f"{row:>{width}} │{cells}│")
            if row < n - 1:
                lines.append(pad + "├" + "┼".join(["───"] * n) + "┤")

        lines.append(pad + "└" + "┴".join(["───"] * n) + "┘")
        return "\n".join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __repr__(self) -> str:
        return f"Board(size={self.size}, grid={self.grid.tolist()})"


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    board.place(1, 1, Mark.PLAYER)
    board.place(0, 0, Mark.OPPONENT)
    print(board.render())
    print(f"Empty cells: {board.get_empty_cells()}")

    print("\nBoard test done!")
