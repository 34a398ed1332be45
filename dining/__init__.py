from dining.config import SimulationConfig, load_config
from dining.errors import ConfigurationError, Interrupted
from dining.table import DiningTable, run_simulation

__all__ = [
    "ConfigurationError",
    "DiningTable",
    "Interrupted",
    "SimulationConfig",
    "load_config",
    "run_simulation",
]
