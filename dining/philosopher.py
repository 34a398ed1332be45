import enum
import logging
import random
import threading
import time

from dining.errors import Interrupted
from dining.policy import fork_order
from dining.utils import random_duration

logger = logging.getLogger(__name__)


class PhilosopherState(enum.Enum):
    THINKING = "thinking"
    WAITING = "waiting"
    EATING = "eating"
    STOPPED = "stopped"


class Philosopher(threading.Thread):
    """A philosopher who alternates between thinking and eating with two forks."""

    def __init__(self, philosopher_id, forks, config, slot, stop_signal, rng=None):
        super().__init__(name=f"Philosopher-{philosopher_id}")
        self.id = philosopher_id
        self.forks = forks
        self.config = config
        self.slot = slot
        self.stop_signal = stop_signal
        self.rng = rng or random.Random()
        self.first_fork, self.second_fork = fork_order(
            config.variant, philosopher_id, config.philosophers
        )
        self.state = PhilosopherState.THINKING
        self.held_forks = []
        self._interrupted = threading.Event()

    def run(self):
        logger.info(f"Seated with forks {self.first_fork} then {self.second_fork}.")
        try:
            while not self.stop_signal.is_set():
                self.think()
                if self.stop_signal.is_set():
                    break
                self.dine()
        except Interrupted as e:
            logger.warning(f"{e}. Leaving the table.")
        finally:
            self.release_forks()
            self._set_state(PhilosopherState.STOPPED)
        logger.info(f"Stopped after {self.slot.meal_count} meals.")

    def think(self):
        self._set_state(PhilosopherState.THINKING)
        self._sleep(random_duration(self.config.think_min_ms, self.config.think_max_ms, self.rng))

    def dine(self):
        """Takes both forks in policy order, eats, then puts them back down."""
        self._set_state(PhilosopherState.WAITING)
        wait_start = time.monotonic()
        try:
            for index in (self.first_fork, self.second_fork):
                self.forks.acquire(index, holder=self.id, cancel=self._interrupted)
                self.held_forks.append(index)

            wait_ms = int((time.monotonic() - wait_start) * 1000)
            self.slot.record_meal(wait_ms)

            self._set_state(PhilosopherState.EATING)
            self._sleep(random_duration(self.config.eat_min_ms, self.config.eat_max_ms, self.rng))
        finally:
            self.release_forks()

    def release_forks(self):
        while self.held_forks:
            self.forks.release(self.held_forks.pop(0))

    def interrupt(self):
        """Wakes the philosopher from any sleep or fork wait and makes it leave the table."""
        self._interrupted.set()

    def _sleep(self, duration_ms):
        if self._interrupted.wait(duration_ms / 1000):
            raise Interrupted(f"Interrupted while {self.state.value}")

    def _set_state(self, state):
        self.state = state
        logger.debug(f"Now {state.value}.")
