class ConfigurationError(ValueError):
    """Raised when a simulation is configured with invalid values or an unsupported variant."""


class Interrupted(Exception):
    """Raised inside a philosopher thread when it is interrupted while sleeping or waiting."""
