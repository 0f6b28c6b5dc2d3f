"""Total-Created Counter — checked increment for the lifetime creation count.

Invariants:
    - Counter is u32: never exceeds COUNTER_MAX
    - next_counter never decrements and never wraps
"""

from asset_registry.core.errors import CounterOverflowError


COUNTER_MAX: int = 2**32 - 1


def next_counter(current: int) -> int | CounterOverflowError:
    """Return current + 1, or the overflow error when the u32 range is exhausted."""
    if current >= COUNTER_MAX:
        return CounterOverflowError(COUNTER_MAX)
    return current + 1
