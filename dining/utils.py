import logging
import random

_rng = random.Random()


class ColoredFormatter(logging.Formatter):
    """Colours each record by level and each thread name by a rotating palette."""

    COLORS = {
        "DEBUG": "\033[94m",  # Blue
        "INFO": "\033[92m",  # Green
        "WARNING": "\033[93m",  # Yellow
        "ERROR": "\033[91m",  # Red
        "CRITICAL": "\033[91m",  # Red
        "RESET": "\033[0m",  # Reset
    }
    THREAD_COLORS = [
        "\033[96m",  # Cyan
        "\033[95m",  # Magenta
        "\033[94m",  # Blue
        "\033[93m",  # Yellow
        "\033[92m",  # Green
        "\033[91m",  # Red
    ]

    def __init__(self, fmt, datefmt=None):
        super().__init__(fmt, datefmt)
        self.thread_color_map = {}

    def format(self, record):
        thread_name = record.threadName
        if thread_name not in self.thread_color_map:
            color_index = len(self.thread_color_map) % len(self.THREAD_COLORS)
            self.thread_color_map[thread_name] = self.THREAD_COLORS[color_index]

        thread_color = self.thread_color_map[thread_name]
        # Work on a copy so other handlers see the plain thread name.
        record = logging.makeLogRecord(record.__dict__)
        record.threadName = f"{thread_color}{thread_name}{self.COLORS['RESET']}"

        log_message = super().format(record)
        level_color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        return f"{level_color}{log_message}{self.COLORS['RESET']}"


def setup_logging(level=logging.INFO):
    """Configures the root logger with a single coloured stream handler."""
    handler = logging.StreamHandler()
    handler.setFormatter(
        ColoredFormatter("%(asctime)s - %(threadName)s - %(message)s", datefmt="%H:%M:%S")
    )
    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers = [handler]


def random_duration(min_ms, max_ms, rng=None):
    """Returns an integer number of milliseconds drawn uniformly from [min_ms, max_ms]."""
    if max_ms < min_ms:
        raise ValueError(f"Invalid duration range {min_ms}-{max_ms}")
    if max_ms == min_ms:
        return min_ms
    return (rng or _rng).randint(min_ms, max_ms)
