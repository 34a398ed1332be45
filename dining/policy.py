"""
Fork acquisition order.

Philosophers 0..N-2 pick up their right fork first; the last philosopher picks
up its left fork first. With at most one philosopher reaching in the reverse
direction, no ring of "each holds one and waits on the next" can form.
"""

from dining.errors import ConfigurationError

SYMMETRY = "symmetry"
SUPPORTED_VARIANTS = (SYMMETRY,)


def left_fork(philosopher_id, n):
    return philosopher_id


def right_fork(philosopher_id, n):
    return (philosopher_id + 1) % n


def check_variant(variant):
    if variant not in SUPPORTED_VARIANTS:
        raise ConfigurationError(
            f"Unsupported variant {variant!r}; only {', '.join(SUPPORTED_VARIANTS)} is implemented"
        )


def fork_order(variant, philosopher_id, n):
    """Returns the (first, second) fork indices a philosopher must acquire, in order."""
    check_variant(variant)
    left = left_fork(philosopher_id, n)
    right = right_fork(philosopher_id, n)
    if philosopher_id == n - 1:
        return left, right
    return right, left
