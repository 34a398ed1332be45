import logging
import random

import pytest

from dining.utils import ColoredFormatter, random_duration


def test_random_duration_fixed_range_returns_min():
    assert all(random_duration(5, 5) == 5 for _ in range(100))


def test_random_duration_stays_within_bounds():
    samples = [random_duration(1, 1000) for _ in range(10_000)]
    assert min(samples) >= 1
    assert max(samples) <= 1000
    assert all(isinstance(s, int) for s in samples)


def test_random_duration_is_reproducible_with_seeded_rng():
    first = [random_duration(0, 50, random.Random(7)) for _ in range(5)]
    second = [random_duration(0, 50, random.Random(7)) for _ in range(5)]
    assert first == second


def test_random_duration_rejects_inverted_range():
    with pytest.raises(ValueError):
        random_duration(10, 1)


def test_colored_formatter_leaves_record_untouched():
    formatter = ColoredFormatter("%(threadName)s - %(message)s")
    record = logging.LogRecord("dining", logging.WARNING, __file__, 1, "forks down", None, None)
    record.threadName = "Philosopher-0"

    output = formatter.format(record)

    assert "forks down" in output
    assert output.startswith(ColoredFormatter.COLORS["WARNING"])
    assert record.threadName == "Philosopher-0"
