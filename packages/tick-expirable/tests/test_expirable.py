"""Tests for building expirable values and reading them back."""
from __future__ import annotations

import dataclasses

import pytest

from tick_expirable import (
    Expirable,
    Remaining,
    Seconds,
    Timestamp,
    Total,
    build,
    map_value,
    percent_complete,
    remaining,
    seconds,
    tick,
    total,
    value,
)


class TestBuild:
    def test_remaining_equals_total(self) -> None:
        e = build(10, "hello")
        assert remaining(e) == seconds(10)
        assert total(e) == seconds(10)

    def test_not_yet_ticked(self) -> None:
        assert build(10, "hello").last_ticked is None

    def test_accepts_seconds(self) -> None:
        e = build(seconds(7), "x")
        assert e.remaining == Remaining(Seconds(7))
        assert e.total == Total(Seconds(7))

    def test_zero_and_negative_accepted(self) -> None:
        """No validation: degenerate lifetimes build fine."""
        assert remaining(build(0, "x")) == seconds(0)
        assert remaining(build(-5, "x")) == seconds(-5)

    def test_frozen(self) -> None:
        e = build(10, "x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            e.payload = "y"  # type: ignore[misc]


class TestValue:
    @pytest.mark.parametrize(
        "payload",
        ["toast", 42, 3.5, None, ("a", 1), {"level": "warn"}, [1, 2, 3]],
    )
    def test_payload_round_trip(self, payload: object) -> None:
        assert value(build(5, payload)) == payload

    def test_payload_identity_kept(self) -> None:
        payload = {"msg": "saved"}
        assert value(build(5, payload)) is payload

    def test_payload_survives_tick(self) -> None:
        ticked = tick(Timestamp(0), build(5, "toast"))
        assert ticked is not None
        assert value(ticked) == "toast"


class TestPercentComplete:
    @pytest.mark.parametrize("duration", [1, 2, 10, 3600])
    def test_untouched_is_zero(self, duration: int) -> None:
        assert percent_complete(build(duration, "x")) == 0.0

    def test_untouched_degenerate_totals_are_zero(self) -> None:
        assert percent_complete(build(0, "x")) == 0.0
        assert percent_complete(build(-3, "x")) == 0.0

    def test_after_first_tick(self) -> None:
        ticked = tick(Timestamp(0), build(4, "x"))
        assert ticked is not None
        assert percent_complete(ticked) == 0.25

    def test_not_clamped(self) -> None:
        e = Expirable("x", Remaining(seconds(-2)), Total(seconds(4)))
        assert percent_complete(e) == 1.5

    def test_zero_total_unguarded(self) -> None:
        e = Expirable("x", Remaining(seconds(1)), Total(seconds(0)))
        with pytest.raises(ZeroDivisionError):
            percent_complete(e)


class TestMapValue:
    def test_transforms_payload(self) -> None:
        e = map_value(str.upper, build(5, "saved"))
        assert value(e) == "SAVED"

    def test_keeps_countdown(self) -> None:
        ticked = tick(Timestamp(1_000), build(5, 2))
        assert ticked is not None
        mapped = map_value(lambda n: n * 10, ticked)
        assert value(mapped) == 20
        assert mapped.remaining == ticked.remaining
        assert mapped.total == ticked.total
        assert mapped.last_ticked == Timestamp(1_000)

    def test_original_untouched(self) -> None:
        e = build(5, "a")
        map_value(lambda s: s + "b", e)
        assert value(e) == "a"
