"""tick-expirable - Values with a countdown lifetime, pruned on each tick."""
from __future__ import annotations

from tick_expirable.expirable import (
    FIRST_TICK,
    Expirable,
    build,
    map_value,
    percent_complete,
    remaining,
    tick,
    tick_all,
    total,
    value,
)
from tick_expirable.types import (
    Remaining,
    Seconds,
    Timestamp,
    Total,
    from_timestamp,
    seconds,
    to_int,
    to_timestamp,
)

__all__ = [
    "Expirable",
    "Seconds",
    "Remaining",
    "Total",
    "Timestamp",
    "FIRST_TICK",
    "seconds",
    "to_int",
    "to_timestamp",
    "from_timestamp",
    "build",
    "value",
    "remaining",
    "total",
    "map_value",
    "percent_complete",
    "tick",
    "tick_all",
]
