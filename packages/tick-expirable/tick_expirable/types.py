"""Whole-second durations, role wrappers, and millisecond timestamps."""
from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True, slots=True, order=True)
class Seconds:
    """Signed whole-second duration."""

    value: int

    def __add__(self, other: Seconds) -> Seconds:
        return Seconds(self.value + other.value)

    def __sub__(self, other: Seconds) -> Seconds:
        return Seconds(self.value - other.value)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class Remaining:
    """Seconds left before a value expires."""

    seconds: Seconds


@dataclass(frozen=True, slots=True)
class Total:
    """Seconds a value was given at construction."""

    seconds: Seconds


@dataclass(frozen=True, slots=True, order=True)
class Timestamp:
    """Point in time, milliseconds since the epoch."""

    millis: int

    @classmethod
    def now(cls) -> Timestamp:
        return cls(int(time.time() * 1000))

    @classmethod
    def from_datetime(cls, dt: datetime) -> Timestamp:
        return cls(int(dt.timestamp() * 1000))

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.millis / 1000, tz=timezone.utc)


def seconds(n: int) -> Seconds:
    return Seconds(n)


def to_int(s: Seconds) -> int:
    return s.value


def to_timestamp(s: Seconds) -> Timestamp:
    """Read a duration as an absolute time. Reference conversions only."""
    return Timestamp(s.value * 1000)


def from_timestamp(ts: Timestamp) -> Seconds:
    """Whole seconds since the epoch, sub-second part truncated toward zero."""
    return Seconds(int(ts.millis / 1000))
