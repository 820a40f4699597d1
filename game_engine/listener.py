"""
Listener interface between the engine and whatever presents the game.
"""

from .board import Mark
from .win_checker import GameOutcome


class GameListener:
    """
    Receives notifications from a GameEngine.

    Override only the callbacks you care about; the defaults do nothing.
    Callbacks run on whichever thread made the move.
    """

    def on_game_started(self):
        """A new game began with an empty board and the player to move."""

    def on_mark_placed(self, row: int, col: int, mark: Mark):
        """A mark was placed at (row, col) and should be drawn."""

    def on_game_ended(self, outcome: GameOutcome):
        """The game finished. Fired exactly once per game."""
