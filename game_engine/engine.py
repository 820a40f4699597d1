"""
Game engine for TicTacToe.
Owns the board and the turn, applies moves, and tells listeners what happened.
"""

import threading
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from .board import Board, GamePhase, Mark, Move, Player
from .config import GameConfig
from .errors import InvalidConfigurationError
from .listener import GameListener
from .move_validator import MoveValidator
from .opponent import OpponentPlayer
from .scheduler import immediate_scheduler
from .win_checker import GameOutcome, WinChecker


@dataclass(frozen=True)
class MoveResult:
    """A successfully applied move and the outcome right after it."""
    move: Move
    outcome: GameOutcome

    @property
    def is_terminal(self) -> bool:
        """True if this move ended the game."""
        return self.outcome.is_terminal


class GameEngine:
    """
    Rules engine for one TicTacToe game at a time.

    Game flow:
    1. start_game() clears the board and gives the player the first move
    2. submit_player_move() places the player's mark
    3. Unless that ended the game, the opponent move is handed to the
       scheduler, which calls back into the engine when it sees fit
    4. opponent_move() blocks or takes the first free cell
    5. Repeat until someone completes a line or the board fills up

    All state changes happen under one re-entrant lock, so a scheduler
    may run the opponent on another thread.
    """

    def __init__(
        self,
        listeners: Optional[Iterable[GameListener]] = None,
        scheduler: Optional[Callable[[Callable[[], None]], None]] = None,
        config: GameConfig = GameConfig,
        opponent: Optional[OpponentPlayer] = None,
    ):
        """
        Initialize the engine. No game is running until start_game().

        Args:
            listeners: Objects notified of starts, placements and endings.
            scheduler: Runs the opponent move callback (default: at once).
            config: Game defaults.
            opponent: Picks the opponent's cells.
        """
        self.config = config
        self.listeners: List[GameListener] = list(listeners or [])
        self.scheduler = scheduler or immediate_scheduler
        self.win_checker = WinChecker()
        self.validator = MoveValidator()
        self.opponent = opponent or OpponentPlayer(self.win_checker)

        self._lock = threading.RLock()
        self._board: Optional[Board] = None
        self._phase = GamePhase.IDLE
        self._moves: List[Move] = []

        # Token of the opponent move the scheduler still owes us
        self._next_token = 0
        self._pending_token: Optional[int] = None

    # ==================== LISTENERS ====================

    def add_listener(self, listener: GameListener):
        """Start sending notifications to a listener."""
        self.listeners.append(listener)

    def remove_listener(self, listener: GameListener):
        """Stop sending notifications to a listener."""
        self.listeners.remove(listener)

    def _notify(self, event: str, *args):
        for listener in list(self.listeners):
            getattr(listener, event)(*args)

    # ==================== GAME FLOW ====================

    def start_game(self, grid_size: Optional[int] = None):
        """
        Start a new game, discarding any game in progress.

        Args:
            grid_size: Rows (and columns) of the board. Defaults to
                config.GRID_SIZE.

        Raises:
            InvalidConfigurationError: If grid_size is not an integer of
                at least config.MIN_GRID_SIZE.
        """
        if grid_size is None:
            grid_size = self.config.GRID_SIZE

        if (not isinstance(grid_size, int) or isinstance(grid_size, bool)
                or grid_size < self.config.MIN_GRID_SIZE):
            raise InvalidConfigurationError(
                f"Grid size must be an integer >= {self.config.MIN_GRID_SIZE}, got {grid_size!r}"
            )

        with self._lock:
            self._board = Board(grid_size)
            self._phase = GamePhase.PLAYER_TURN
            self._moves = []
            self._pending_token = None
            self._notify("on_game_started")

    def submit_player_move(self, row: int, col: int) -> MoveResult:
        """
        Place the player's mark.

        Args:
            row: Row index (0 to N-1).
            col: Column index (0 to N-1).

        Returns:
            MoveResult for the player's move.

        Raises:
            GameNotInProgressError: No game started, or it already ended.
            OutOfBoundsError: Coordinates outside the grid.
            NotPlayerTurnError: The opponent is due to move.
            CellOccupiedError: The cell already holds a mark.
        """
        with self._lock:
            self.validator.validate_player_move(self._board, self._phase, row, col).raise_if_invalid()

            result = self._apply(Player.PLAYER, row, col)

            token = None
            if not result.is_terminal:
                token = self._next_token
                self._next_token += 1
                self._pending_token = token

            # The opponent is owed its move even if a listener raises
            try:
                self._announce(result)
            finally:
                if token is not None:
                    self.scheduler(lambda: self._run_scheduled_opponent(token))

            return result

    def opponent_move(self) -> MoveResult:
        """
        Let the opponent place its mark.

        Hosts normally leave this to the scheduler, but may call it
        directly; the scheduled callback then does nothing.

        Returns:
            MoveResult for the opponent's move.

        Raises:
            GameNotInProgressError: No game started, or it already ended.
            NotOpponentTurnError: The player is due to move.
            NoAvailableMoveError: The board is full.
        """
        with self._lock:
            self.validator.validate_opponent_move(self._board, self._phase).raise_if_invalid()

            row, col = self.opponent.choose_move(self._board)

            self._pending_token = None
            result = self._apply(Player.OPPONENT, row, col)
            self._announce(result)
            return result

    def _run_scheduled_opponent(self, token: int) -> Optional[MoveResult]:
        with self._lock:
            # Stale: the game was restarted or the move was already made
            if token != self._pending_token:
                return None
            return self.opponent_move()

    def _apply(self, player: Player, row: int, col: int) -> MoveResult:
        # Board, history and phase are all final before any listener runs
        mark = player.mark
        self._board.place(row, col, mark)

        move = Move(
            player=player,
            row=row,
            col=col,
            mark=mark,
            move_number=len(self._moves)
        )
        self._moves.append(move)

        outcome = self.win_checker.evaluate(self._board)

        if outcome.is_terminal:
            self._phase = GamePhase.TERMINAL
        elif player == Player.PLAYER:
            self._phase = GamePhase.OPPONENT_TURN
        else:
            self._phase = GamePhase.PLAYER_TURN

        return MoveResult(move=move, outcome=outcome)

    def _announce(self, result: MoveResult):
        move = result.move
        self._notify("on_mark_placed", move.row, move.col, move.mark)
        if result.is_terminal:
            self._notify("on_game_ended", result.outcome)

    # ==================== QUERIES ====================

    def check_for_win(self, mark: Mark) -> bool:
        """True if the given mark has completed a line."""
        with self._lock:
            if self._board is None:
                return False
            return self.win_checker.check_win(self._board, mark)

    def check_for_tie(self) -> bool:
        """True if the board is full and nobody has a line."""
        with self._lock:
            if self._board is None:
                return False
            return self.win_checker.check_tie(self._board)

    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """Cells of the completed line, or None."""
        with self._lock:
            if self._board is None:
                return None
            return self.win_checker.get_winning_line(self._board)

    def valid_moves(self) -> List[Tuple[int, int]]:
        """Empty cells the side to move may play."""
        with self._lock:
            return self.validator.get_valid_moves(self._board, self._phase)

    @property
    def outcome(self) -> GameOutcome:
        """Outcome of the current board (ONGOING before the first game)."""
        with self._lock:
            if self._board is None:
                return GameOutcome.ONGOING
            return self.win_checker.evaluate(self._board)

    @property
    def phase(self) -> GamePhase:
        with self._lock:
            return self._phase

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.TERMINAL

    @property
    def current_player(self) -> Optional[Player]:
        """Who moves next, or None when no game is in progress."""
        phase = self.phase
        if phase == GamePhase.PLAYER_TURN:
            return Player.PLAYER
        if phase == GamePhase.OPPONENT_TURN:
            return Player.OPPONENT
        return None

    @property
    def grid_size(self) -> Optional[int]:
        with self._lock:
            return self._board.size if self._board is not None else None

    @property
    def board(self) -> Optional[Board]:
        """A copy of the board, or None before the first game."""
        with self._lock:
            return self._board.copy() if self._board is not None else None

    @property
    def moves(self) -> List[Move]:
        """Moves of the current game, oldest first."""
        with self._lock:
            return list(self._moves)

    def render(self) -> str:
        """Draw the current board as text."""
        with self._lock:
            if self._board is None:
                return "(no game started)"
            return self._board.render(self.config)
