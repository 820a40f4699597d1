"""
Console host for the TicTacToe engine.

This script ties together:
- The game engine (board, rules, opponent)
- A listener that draws the board in the terminal
- A scheduler that decides when the opponent answers

Run this script to play TicTacToe against the computer!
"""

import sys
from typing import Callable, Optional, Tuple

from game_engine import (
    DelayedScheduler,
    GameConfig,
    GameEngine,
    GameError,
    GameListener,
    GameOutcome,
    GamePhase,
    InvalidConfigurationError,
    Mark,
)


class ConsoleListener(GameListener):
    """Prints every engine notification to the terminal."""

    def __init__(self, engine: Optional[GameEngine] = None):
        self.engine = engine

    def on_game_started(self):
        print("\n" + "="*40)
        print("   New game! You play O, computer plays X")
        print("="*40)
        self._print_board()

    def on_mark_placed(self, row: int, col: int, mark: Mark):
        who = "You" if mark == Mark.PLAYER else "Computer"
        print(f"\n>>> {who} placed {mark.symbol()} at ({row}, {col})")
        self._print_board()

    def on_game_ended(self, outcome: GameOutcome):
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        if outcome == GameOutcome.PLAYER_WIN:
            print("\n🎉 Congratulations! You won!")
        elif outcome == GameOutcome.OPPONENT_WIN:
            print("\n🤖 Computer wins! Better luck next time!")
        else:
            print("\n🤝 It's a tie! Good game!")

        if self.engine is not None:
            line = self.engine.winning_line()
            if line:
                print(f"Winning line: {line}")

    def _print_board(self):
        if self.engine is not None:
            print(self.engine.render())


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse a "row col" (or "row,col") string.

    Args:
        text: User input.

    Returns:
        (row, col) integers.

    Raises:
        ValueError: If the text is not exactly two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected 'row col', got {text!r}")
    return int(parts[0]), int(parts[1])


class TicTacToeConsole:
    """
    Terminal game loop.

    Commands:
    - "row col" places your mark
    - "r" restarts
    - "q" quits
    """

    def __init__(
        self,
        grid_size: int = GameConfig.GRID_SIZE,
        delay: bool = False,
        input_func: Callable[[str], str] = input
    ):
        """
        Initialize the console game.

        Args:
            grid_size: Board size for every game.
            delay: If True, the computer pauses before answering.
            input_func: Where commands are read from.
        """
        self.grid_size = grid_size
        self.input_func = input_func
        self.delayed = DelayedScheduler() if delay else None

        self.listener = ConsoleListener()
        self.engine = GameEngine(listeners=[self.listener], scheduler=self.delayed)
        self.listener.engine = self.engine

        self.is_running = False

    def run(self):
        """Play games until the user quits or input runs out."""
        self.engine.start_game(self.grid_size)
        self.is_running = True

        while self.is_running:
            if self.delayed is not None and self.engine.phase == GamePhase.OPPONENT_TURN:
                print("\n>>> Computer is thinking...")
                self.delayed.wait()
                continue

            if self.engine.is_game_over:
                prompt = "\nPress 'r' to play again or 'q' to quit: "
            else:
                prompt = "\nYour move (row col): "

            try:
                command = self.input_func(prompt).strip().lower()
            except EOFError:
                break

            self.handle_command(command)

        print("Goodbye!")

    def handle_command(self, command: str):
        """
        Act on one line of user input.

        Args:
            command: The stripped, lower-cased input line.
        """
        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
            return

        if command == "r":
            print("\nResetting game...")
            self.engine.start_game(self.grid_size)
            return

        if not command:
            return

        try:
            row, col = parse_move(command)
        except ValueError:
            print("Please enter a row and column, e.g. '1 2'.")
            return

        try:
            self.engine.submit_player_move(row, col)
        except GameError as e:
            print(f"Move rejected: {e}")


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--size",
        type=int,
        default=GameConfig.GRID_SIZE,
        help=f"Board size N for an N x N grid (default: {GameConfig.GRID_SIZE})"
    )
    parser.add_argument(
        "--delay",
        action="store_true",
        help="Let the computer pause briefly before each move"
    )

    args = parser.parse_args(argv)

    game = TicTacToeConsole(grid_size=args.size, delay=args.delay)

    try:
        game.run()
    except InvalidConfigurationError as e:
        print(f"ERROR: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
