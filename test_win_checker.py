"""
Tests for win and tie detection.
"""

import itertools
import random

import pytest

from game_engine import Board, GameOutcome, Mark, WinChecker
from game_engine.win_checker import winning_lines

E, P, O = Mark.EMPTY, Mark.PLAYER, Mark.OPPONENT


@pytest.fixture
def checker():
    return WinChecker()


def test_row_win(checker):
    board = Board.from_rows([
        [E, E, E],
        [P, P, P],
        [O, O, E],
    ])
    assert checker.check_win(board, P)
    assert not checker.check_win(board, O)


def test_column_win(checker):
    board = Board.from_rows([
        [P, O, E],
        [P, O, E],
        [E, O, P],
    ])
    assert checker.check_win(board, O)
    assert not checker.check_win(board, P)


def test_diagonal_win(checker):
    board = Board.from_rows([
        [P, O, E],
        [E, P, O],
        [E, E, P],
    ])
    assert checker.check_win(board, P)
    assert checker.evaluate(board) == GameOutcome.PLAYER_WIN
    assert checker.get_winning_line(board) == [(0, 0), (1, 1), (2, 2)]


def test_anti_diagonal_win(checker):
    board = Board.from_rows([
        [O, E, P],
        [O, P, E],
        [P, E, E],
    ])
    assert checker.check_win(board, P)
    assert checker.get_winning_line(board) == [(0, 2), (1, 1), (2, 0)]


def test_only_full_lines_count_on_bigger_boards(checker):
    # Three in a row is not enough on a 4x4 grid
    board = Board(4)
    for col in range(3):
        board.place(0, col, P)
    assert not checker.check_win(board, P)

    board.place(0, 3, P)
    assert checker.check_win(board, P)


def test_four_by_four_anti_diagonal(checker):
    board = Board(4)
    for i in range(4):
        board.place(i, 3 - i, O)
    assert checker.evaluate(board) == GameOutcome.OPPONENT_WIN


def test_single_cell_board(checker):
    board = Board(1)
    assert not checker.check_win(board, P)

    board.place(0, 0, P)
    assert checker.check_win(board, P)
    assert not checker.check_tie(board)


def test_empty_board_has_no_winner(checker):
    board = Board(3)
    assert not checker.check_win(board, P)
    assert not checker.check_win(board, O)
    assert checker.evaluate(board) == GameOutcome.ONGOING
    assert checker.get_winning_line(board) is None


def test_full_board_without_line_is_tie(checker):
    board = Board.from_rows([
        [O, P, P],
        [P, P, O],
        [O, O, P],
    ])
    assert checker.check_tie(board)
    assert checker.evaluate(board) == GameOutcome.TIE


def test_full_board_with_line_is_win_not_tie(checker):
    board = Board.from_rows([
        [P, P, P],
        [O, O, P],
        [P, O, O],
    ])
    assert not checker.check_tie(board)
    assert checker.evaluate(board) == GameOutcome.PLAYER_WIN


def test_checks_do_not_modify_board(checker):
    board = Board.from_rows([
        [P, O, E],
        [E, P, E],
        [O, E, E],
    ])
    before = board.to_array()

    checker.check_win(board, P)
    checker.check_win(board, O)
    checker.check_tie(board)
    checker.evaluate(board)
    checker.get_winning_line(board)

    assert (board.grid == before).all()


def _tie_matches_definition(checker, board):
    expected = (
        board.is_full()
        and not checker.check_win(board, P)
        and not checker.check_win(board, O)
    )
    return checker.check_tie(board) == expected


def test_tie_definition_holds_for_every_2x2_board(checker):
    for cells in itertools.product([E, P, O], repeat=4):
        board = Board.from_rows([cells[:2], cells[2:]])
        assert _tie_matches_definition(checker, board)


def test_tie_definition_holds_for_random_3x3_boards(checker):
    rng = random.Random(1234)
    for _ in range(300):
        cells = [rng.choice([E, P, O]) for _ in range(9)]
        board = Board.from_rows([cells[0:3], cells[3:6], cells[6:9]])
        assert _tie_matches_definition(checker, board)


@pytest.mark.parametrize("size", [1, 2, 3, 5])
def test_winning_lines_count(size):
    lines = winning_lines(size)
    assert len(lines) == 2 * size + 2
    assert all(len(line) == size for line in lines)


def test_outcome_codes():
    assert GameOutcome.PLAYER_WIN.code == 0
    assert GameOutcome.OPPONENT_WIN.code == 1
    assert GameOutcome.TIE.code == -1
    assert GameOutcome.ONGOING.code is None
    assert not GameOutcome.ONGOING.is_terminal
    assert GameOutcome.TIE.is_terminal
