"""
Configuration for the Dining Philosophers simulation.

The module-level values are the defaults used for any key a configuration
file leaves out. Tune them to change how hard the philosophers contend for
their forks.
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Optional

from dining.errors import ConfigurationError
from dining.policy import SYMMETRY, check_variant

logger = logging.getLogger(__name__)

# --- Simulation Setup ---
PHILOSOPHERS = 5
DURATION_SEC = 10
VARIANT = SYMMETRY

# --- Timing (in milliseconds) ---
# Time spent thinking between meals. Shorter thinking means more contention.
THINK_RANGE_MS = (100, 500)

# Time spent eating while holding both forks.
EAT_RANGE_MS = (100, 300)

# --- Monitoring ---
# Seconds between wait-for graph snapshots. None disables the monitor.
SNAPSHOT_INTERVAL = None

# Older input files use Portuguese keys and values.
KEY_ALIASES = {
    "filosofos": "philosophers",
    "duracao_seg": "duration_sec",
    "variacao": "variant",
}
VARIANT_ALIASES = {"simetria": SYMMETRY}


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable settings for one simulation run."""

    philosophers: int = PHILOSOPHERS
    duration_sec: int = DURATION_SEC
    think_min_ms: int = THINK_RANGE_MS[0]
    think_max_ms: int = THINK_RANGE_MS[1]
    eat_min_ms: int = EAT_RANGE_MS[0]
    eat_max_ms: int = EAT_RANGE_MS[1]
    variant: str = VARIANT
    snapshot_interval: Optional[float] = SNAPSHOT_INTERVAL
    seed: Optional[int] = None

    def validate(self):
        """Raises ConfigurationError describing the first invalid setting."""
        if self.philosophers < 2:
            raise ConfigurationError(f"At least 2 philosophers are required, got {self.philosophers}")
        if self.duration_sec < 0:
            raise ConfigurationError(f"duration_sec must be non-negative, got {self.duration_sec}")
        for name, low, high in (
            ("think_ms", self.think_min_ms, self.think_max_ms),
            ("eat_ms", self.eat_min_ms, self.eat_max_ms),
        ):
            if low < 0 or high < low:
                raise ConfigurationError(f"Invalid {name} range {low}-{high}")
        if self.snapshot_interval is not None and self.snapshot_interval <= 0:
            raise ConfigurationError(
                f"snapshot_interval must be positive, got {self.snapshot_interval}"
            )
        check_variant(self.variant)
        return self


def _parse_int(key, value):
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"Invalid integer for {key!r}: {value!r}") from None


def _parse_range(key, value):
    parts = value.split("-")
    if len(parts) != 2:
        raise ConfigurationError(f"Invalid range for {key!r}: {value!r} (expected min-max)")
    return _parse_int(key, parts[0].strip()), _parse_int(key, parts[1].strip())


def parse_config(lines, base=None):
    """Builds a SimulationConfig from key=value lines, starting from `base` (or the defaults)."""
    values = {}
    known = {f.name for f in fields(SimulationConfig)}
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split("=")
        if len(parts) != 2:
            logger.debug(f"Skipping malformed line: {line}")
            continue

        key = parts[0].strip().lower()
        key = KEY_ALIASES.get(key, key)
        value = parts[1].strip()

        if key == "think_ms":
            values["think_min_ms"], values["think_max_ms"] = _parse_range(key, value)
        elif key == "eat_ms":
            values["eat_min_ms"], values["eat_max_ms"] = _parse_range(key, value)
        elif key == "variant":
            value = value.lower()
            values["variant"] = VARIANT_ALIASES.get(value, value)
        elif key == "snapshot_interval":
            try:
                values[key] = float(value)
            except ValueError:
                raise ConfigurationError(f"Invalid number for {key!r}: {value!r}") from None
        elif key in known:
            values[key] = _parse_int(key, value)
        else:
            logger.debug(f"Ignoring unknown key: {key}")

    return replace(base or SimulationConfig(), **values)


def load_config(path):
    """Reads a key=value configuration file and returns a validated SimulationConfig."""
    with open(path, "r", encoding="utf-8") as f:
        config = parse_config(f)
    return config.validate()
