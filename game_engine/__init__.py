"""
TicTacToe game engine.
Handles board state, rules, and the opponent.
"""

__version__ = "1.0.0"

from .board import Board, GamePhase, Mark, Move, Player
from .config import GameConfig
from .engine import GameEngine, MoveResult
from .errors import (
    CellOccupiedError,
    GameError,
    GameNotInProgressError,
    InvalidConfigurationError,
    MoveError,
    NoAvailableMoveError,
    NotOpponentTurnError,
    NotPlayerTurnError,
    OutOfBoundsError,
)
from .listener import GameListener
from .move_validator import MoveValidator, ValidationResult
from .opponent import OpponentPlayer
from .scheduler import DelayedScheduler, ManualScheduler, immediate_scheduler
from .win_checker import GameOutcome, WinChecker
