import threading


class StatisticsSlot:
    """Meal count and accumulated waiting time of one philosopher."""

    def __init__(self, philosopher_id):
        self.philosopher_id = philosopher_id
        self.meal_count = 0
        self.total_wait_ms = 0
        self._lock = threading.Lock()

    def record_meal(self, wait_ms):
        """Counts one meal and the time spent waiting for its forks, as a single update."""
        if wait_ms < 0:
            raise ValueError(f"wait_ms must be non-negative, got {wait_ms}")
        with self._lock:
            self.meal_count += 1
            self.total_wait_ms += wait_ms

    def read(self):
        """Returns (meal_count, total_wait_ms) as one consistent pair."""
        with self._lock:
            return self.meal_count, self.total_wait_ms

    @property
    def average_wait_ms(self):
        meals, wait = self.read()
        return wait / meals if meals > 0 else 0.0

    def __repr__(self):
        return (
            f"StatisticsSlot(philosopher_id={self.philosopher_id}, "
            f"meal_count={self.meal_count}, total_wait_ms={self.total_wait_ms})"
        )


class StatisticsTable:
    """
    One slot per philosopher, indexed by philosopher id.

    Each slot is written only by its own philosopher; the controller reads the
    table once every philosopher thread has been joined.
    """

    def __init__(self, count):
        self.slots = [StatisticsSlot(i) for i in range(count)]

    def __len__(self):
        return len(self.slots)

    def __getitem__(self, index):
        return self.slots[index]

    def __iter__(self):
        return iter(self.slots)

    @property
    def total_meals(self):
        return sum(slot.meal_count for slot in self.slots)
