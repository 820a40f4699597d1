"""
Schedulers that decide when the opponent answers a player move.

The engine hands a scheduler a zero-argument callback after every valid,
non-final player move. When that callback runs is up to the host.
"""

import random
import threading
from typing import Callable, List, Optional

from .config import GameConfig

Callback = Callable[[], None]


def immediate_scheduler(callback: Callback):
    """Run the opponent move straight away."""
    callback()


class ManualScheduler:
    """
    Queues opponent moves until the host asks for them.

    Handy for tests and for hosts with their own event loop.
    """

    def __init__(self):
        self.pending: List[Callback] = []

    def __call__(self, callback: Callback):
        self.pending.append(callback)

    def run_pending(self) -> int:
        """
        Run every queued callback in order.

        Returns:
            How many callbacks were run.
        """
        ran = 0
        while self.pending:
            callback = self.pending.pop(0)
            callback()
            ran += 1
        return ran


class DelayedScheduler:
    """
    Runs each opponent move on a timer thread after a random pause.

    The pause is drawn uniformly from the config's opponent delay range.
    """

    def __init__(
        self,
        config: GameConfig = GameConfig,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the scheduler.

        Args:
            config: Supplies OPPONENT_DELAY_MIN and OPPONENT_DELAY_MAX.
            rng: Random source for the delay (default: a fresh Random).
        """
        self.min_delay = config.OPPONENT_DELAY_MIN
        self.max_delay = config.OPPONENT_DELAY_MAX
        self.rng = rng or random.Random()
        self.timers: List[threading.Timer] = []

    def next_delay(self) -> float:
        """Draw the pause for the next opponent move, in seconds."""
        return self.rng.uniform(self.min_delay, self.max_delay)

    def __call__(self, callback: Callback):
        timer = threading.Timer(self.next_delay(), callback)
        timer.daemon = True
        self.timers = [t for t in self.timers if t.is_alive()]
        self.timers.append(timer)
        timer.start()

    def wait(self, timeout: Optional[float] = None):
        """Block until every started timer has fired."""
        for timer in list(self.timers):
            timer.join(timeout)

    def cancel_all(self):
        """Stop any timers that have not fired yet."""
        for timer in self.timers:
            timer.cancel()
        self.timers = []
