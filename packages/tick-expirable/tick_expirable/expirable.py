"""Expirable values and the tick that counts them down."""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

from tick_expirable.types import Remaining, Seconds, Timestamp, Total

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

# Subtracted on a value's first tick, whatever the wall clock says.
FIRST_TICK = Seconds(1)


@dataclass(frozen=True, slots=True)
class Expirable(Generic[T]):
    """A payload with a countdown. Replaced on every tick, never mutated."""

    payload: T
    remaining: Remaining
    total: Total
    last_ticked: Timestamp | None = None


def build(initial_remaining: int | Seconds, payload: T) -> Expirable[T]:
    """Wrap payload with a lifetime of initial_remaining seconds.

    Zero and negative lifetimes are accepted; such values expire on
    their first tick.
    """
    if not isinstance(initial_remaining, Seconds):
        initial_remaining = Seconds(initial_remaining)
    return Expirable(
        payload=payload,
        remaining=Remaining(initial_remaining),
        total=Total(initial_remaining),
    )


def value(instance: Expirable[T]) -> T:
    return instance.payload


def remaining(instance: Expirable[T]) -> Seconds:
    return instance.remaining.seconds


def total(instance: Expirable[T]) -> Seconds:
    return instance.total.seconds


def map_value(fn: Callable[[T], U], instance: Expirable[T]) -> Expirable[U]:
    """Transform the payload, keeping the countdown untouched."""
    return Expirable(
        payload=fn(instance.payload),
        remaining=instance.remaining,
        total=instance.total,
        last_ticked=instance.last_ticked,
    )


def percent_complete(instance: Expirable[T]) -> float:
    """Fraction of the lifetime used up. 0.0 until the first tick.

    Not clamped. A hand-built instance with a zero total and a
    different remaining raises ZeroDivisionError.
    """
    left = remaining(instance)
    whole = total(instance)
    if left == whole:
        return 0.0
    return 1.0 - float(left.value) / float(whole.value)


def _elapsed(now: Timestamp, last_ticked: Timestamp | None) -> Seconds:
    if last_ticked is None:
        return FIRST_TICK
    # Built-in round: ties go to the even neighbour.
    return Seconds(round((now.millis - last_ticked.millis) / 1000))


def tick(now: Timestamp, instance: Expirable[T]) -> Expirable[T] | None:
    """Advance one value to now. Returns None once it has expired."""
    left = remaining(instance) - _elapsed(now, instance.last_ticked)
    if left.value <= 0:
        return None
    return dataclasses.replace(
        instance, remaining=Remaining(left), last_ticked=now
    )


def tick_all(
    now: Timestamp,
    items: Iterable[Expirable[T]],
    on_expire: Callable[[Expirable[T]], None] | None = None,
) -> list[Expirable[T]]:
    """Tick every item, returning the survivors in their original order.

    on_expire, if given, receives each expired item as it was before
    the tick that ended it.
    """
    survivors: list[Expirable[T]] = []
    expired = 0
    for item in items:
        ticked = tick(now, item)
        if ticked is None:
            expired += 1
            if on_expire is not None:
                on_expire(item)
        else:
            survivors.append(ticked)
    if expired:
        logger.debug(
            "Expired %d value(s) at %d ms, %d remain",
            expired,
            now.millis,
            len(survivors),
        )
    return survivors
