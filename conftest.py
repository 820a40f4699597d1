"""
Shared pytest fixtures for the TicTacToe engine tests.
"""

import pytest

from game_engine import GameEngine, GameListener, ManualScheduler


class RecordingListener(GameListener):
    """Remembers every notification in the order it arrived."""

    def __init__(self):
        self.events = []

    def on_game_started(self):
        self.events.append(("started",))

    def on_mark_placed(self, row, col, mark):
        self.events.append(("placed", row, col, mark))

    def on_game_ended(self, outcome):
        self.events.append(("ended", outcome))

    def of_kind(self, kind):
        return [e for e in self.events if e[0] == kind]


@pytest.fixture
def recorder():
    return RecordingListener()


@pytest.fixture
def engine(recorder):
    """Engine whose opponent answers immediately."""
    return GameEngine(listeners=[recorder])


@pytest.fixture
def manual():
    return ManualScheduler()


@pytest.fixture
def manual_engine(recorder, manual):
    """Engine whose opponent only moves when the test says so."""
    return GameEngine(listeners=[recorder], scheduler=manual)
