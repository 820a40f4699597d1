"""
Tests for opponent scheduling: exactly-once delivery and timed answers.
"""

import random

from game_engine import (
    DelayedScheduler,
    GameConfig,
    GameEngine,
    GamePhase,
    Mark,
    Player,
    immediate_scheduler,
)


class NoDelayConfig(GameConfig):
    OPPONENT_DELAY_MIN = 0.0
    OPPONENT_DELAY_MAX = 0.0


def test_immediate_scheduler_runs_callback():
    calls = []
    immediate_scheduler(lambda: calls.append(1))
    assert calls == [1]


def test_manual_scheduler_defers_opponent(manual_engine, manual, recorder):
    manual_engine.start_game(3)
    manual_engine.submit_player_move(1, 1)

    assert len(manual.pending) == 1
    assert manual_engine.phase == GamePhase.OPPONENT_TURN
    assert manual_engine.board.count(Mark.OPPONENT) == 0

    assert manual.run_pending() == 1
    assert manual_engine.phase == GamePhase.PLAYER_TURN
    assert recorder.events[-1] == ("placed", 0, 0, Mark.OPPONENT)


def test_terminal_player_move_schedules_nothing(manual_engine, manual):
    manual_engine.start_game(1)
    manual_engine.submit_player_move(0, 0)

    assert manual.pending == []


def test_direct_opponent_move_makes_scheduled_one_a_no_op(manual_engine, manual):
    manual_engine.start_game(3)
    manual_engine.submit_player_move(1, 1)

    manual_engine.opponent_move()
    manual.run_pending()

    assert manual_engine.board.count(Mark.OPPONENT) == 1
    assert manual_engine.phase == GamePhase.PLAYER_TURN


def test_callback_from_previous_game_is_ignored(manual_engine, manual, recorder):
    manual_engine.start_game(3)
    manual_engine.submit_player_move(1, 1)

    manual_engine.start_game(3)
    manual.run_pending()

    assert manual_engine.board.count(Mark.EMPTY) == 9
    assert manual_engine.phase == GamePhase.PLAYER_TURN
    assert ("placed", 0, 0, Mark.OPPONENT) not in recorder.events


def test_delay_is_drawn_from_config_range():
    scheduler = DelayedScheduler(rng=random.Random(7))
    for _ in range(50):
        delay = scheduler.next_delay()
        assert GameConfig.OPPONENT_DELAY_MIN <= delay <= GameConfig.OPPONENT_DELAY_MAX


def test_delayed_scheduler_runs_opponent_on_timer(recorder):
    scheduler = DelayedScheduler(config=NoDelayConfig)
    engine = GameEngine(listeners=[recorder], scheduler=scheduler)
    engine.start_game(3)

    engine.submit_player_move(1, 1)
    scheduler.wait(timeout=5)

    assert engine.board.get(0, 0) == Mark.OPPONENT
    assert engine.phase == GamePhase.PLAYER_TURN


def test_cancel_all_stops_pending_timers():
    scheduler = DelayedScheduler()
    calls = []
    scheduler(lambda: calls.append(1))
    scheduler.cancel_all()
    assert scheduler.timers == []
    assert calls == []


def test_engine_state_queries_from_another_thread(recorder):
    scheduler = DelayedScheduler(config=NoDelayConfig)
    engine = GameEngine(listeners=[recorder], scheduler=scheduler)
    engine.start_game(3)

    engine.submit_player_move(1, 1)
    scheduler.wait(timeout=5)

    assert engine.current_player == Player.PLAYER
    assert engine.grid_size == 3
    assert not engine.is_game_over
