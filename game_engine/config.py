"""
Game configuration for the TicTacToe engine.
Default board size, opponent timing, and display symbols.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Subclass and override these values to change the defaults.
    """

    # ==================== BOARD SETTINGS ====================
    # Classic TicTacToe is a 3x3 grid
    GRID_SIZE = 3

    # Smallest grid a game can be started on (1x1 is a one-move win)
    MIN_GRID_SIZE = 1

    # ==================== OPPONENT TIMING ====================
    # Random pause (seconds) before the opponent answers a player move.
    # Only used by DelayedScheduler, the engine itself never waits.
    OPPONENT_DELAY_MIN = 0.5
    OPPONENT_DELAY_MAX = 1.0

    # ==================== DISPLAY SETTINGS ====================
    # Player plays circles, opponent plays crosses
    PLAYER_SYMBOL = "O"
    OPPONENT_SYMBOL = "X"
    EMPTY_SYMBOL = " "
