import logging
import threading

from dining.errors import Interrupted

logger = logging.getLogger(__name__)

# How often an interruptible acquire re-checks its cancel event, in seconds.
CANCEL_POLL_INTERVAL = 0.05


class Fork:
    """A fork on the table that at most one philosopher can hold."""

    def __init__(self, fork_id):
        self.id = fork_id
        self.lock = threading.Lock()
        self.held_by = None

    def __str__(self):
        return f"Fork-{self.id}"


class ForkSet:
    """
    The ring of N forks shared by N philosophers.

    Each fork has its own lock, so philosophers eating on disjoint pairs never
    block each other. `state_lock` only guards the bookkeeping used by
    snapshots and is never held while blocking on a fork.
    """

    def __init__(self, count):
        self.forks = [Fork(i) for i in range(count)]
        self.state_lock = threading.Lock()
        self.waiting = {}

    def __len__(self):
        return len(self.forks)

    def __getitem__(self, index):
        return self.forks[index]

    def acquire(self, index, holder=None, cancel=None):
        """
        Blocks until fork `index` is free and marks it held by `holder`.

        When `cancel` (a threading.Event) is given, the wait is abandoned with
        Interrupted as soon as it is set; the fork is then left untouched.
        """
        fork = self.forks[index]
        with self.state_lock:
            self.waiting[holder] = index
        try:
            if cancel is None:
                fork.lock.acquire()
            else:
                while not fork.lock.acquire(timeout=CANCEL_POLL_INTERVAL):
                    if cancel.is_set():
                        raise Interrupted(f"Interrupted while waiting for {fork}")
                if cancel.is_set():
                    fork.lock.release()
                    raise Interrupted(f"Interrupted while waiting for {fork}")
        finally:
            with self.state_lock:
                self.waiting.pop(holder, None)

        with self.state_lock:
            self._mark_held(fork, holder)

    def _mark_held(self, fork, holder):
        if fork.held_by is not None:
            logger.error(f"{fork} acquired by {holder} while still held by {fork.held_by}")
        fork.held_by = holder

    def release(self, index):
        fork = self.forks[index]
        with self.state_lock:
            fork.held_by = None
        fork.lock.release()

    def is_held(self, index):
        return self.forks[index].lock.locked()

    def all_free(self):
        return not any(fork.lock.locked() for fork in self.forks)

    def snapshot(self):
        """Returns a consistent view of which fork each philosopher holds or waits for."""
        with self.state_lock:
            held = {fork.id: fork.held_by for fork in self.forks if fork.held_by is not None}
            waiting = dict(self.waiting)
        return {"held": held, "waiting": waiting}
