import logging
import random
import threading
import time

from dining.errors import ConfigurationError
from dining.forks import ForkSet
from dining.monitor import WaitForMonitor
from dining.philosopher import Philosopher
from dining.stats import StatisticsTable

logger = logging.getLogger(__name__)


class DiningTable:
    """Seats the philosophers, lets them dine for the configured time, then drains the table."""

    def __init__(self, config, forks=None):
        self.config = config
        self.forks = forks
        self.stats = None
        self.stop_signal = threading.Event()
        self.philosophers = []
        self.monitor = None

    def run(self):
        """Runs one simulation and returns the per-philosopher StatisticsTable."""
        config = self.config.validate()
        n = config.philosophers

        if self.forks is None:
            self.forks = ForkSet(n)
        elif len(self.forks) != n:
            raise ConfigurationError(f"Expected {n} forks, got {len(self.forks)}")
        elif not self.forks.all_free():
            raise ConfigurationError("Every fork must be free before the philosophers sit down")

        # A previous run leaves its stop signal set.
        self.stop_signal = threading.Event()
        self.monitor = None
        self.stats = StatisticsTable(n)
        seeds = random.Random(config.seed)
        self.philosophers = [
            Philosopher(
                i,
                self.forks,
                config,
                self.stats[i],
                self.stop_signal,
                rng=random.Random(seeds.random()) if config.seed is not None else None,
            )
            for i in range(n)
        ]
        if config.snapshot_interval is not None:
            self.monitor = WaitForMonitor(self.forks, config.snapshot_interval, self.stop_signal)

        logger.info(f"Starting simulation with {n} philosophers for {config.duration_sec}s...")
        for philosopher in self.philosophers:
            philosopher.start()
        if self.monitor:
            self.monitor.start()

        try:
            time.sleep(config.duration_sec)
        except KeyboardInterrupt:
            logger.warning("Simulation interrupted, asking philosophers to leave.")
            self.interrupt()
            raise
        finally:
            self.stop()

        logger.info(f"Simulation finished: {self.stats.total_meals} meals served.")
        return self.stats

    def stop(self):
        """Raises the stop signal and waits for every thread to leave the table."""
        logger.info("Stop signal raised, waiting for philosophers to finish.")
        self.stop_signal.set()
        for philosopher in self.philosophers:
            philosopher.join()
        if self.monitor:
            self.monitor.join()

    def interrupt(self):
        """Interrupts every philosopher; each releases its forks and stops."""
        for philosopher in self.philosophers:
            philosopher.interrupt()


def run_simulation(config, forks=None):
    return DiningTable(config, forks=forks).run()
