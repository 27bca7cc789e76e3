# -*- coding: utf-8 -*-
########################
# countdown_model.py
########################
# Purpose:
# - Remaining time for timed sessions.
# - Decremented by the session's countdown tick while running; reports expiry.
#
# Design notes:
# - No Qt usage. Keep this module pure and deterministic.
# - Bookkeeping is in integer milliseconds so thousands of small ticks do not drift.
# - Reported remaining time is clamped to non-negative.
#
########################
# Interfaces:
# Public dataclasses:
# - CountdownSnapshot(duration_seconds: float, remaining_seconds: float, is_expired: bool)
#
# Public classes:
# - class CountdownModel
#   - __init__(duration_seconds: float)
#   - duration_seconds() -> float
#   - remaining_milliseconds() -> int
#   - remaining_seconds() -> float
#   - whole_seconds_left() -> int
#   - is_expired() -> bool
#   - tick(elapsed_milliseconds: int) -> bool
#   - snapshot() -> CountdownSnapshot
#
########################

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CountdownSnapshot:
    duration_seconds: float
    remaining_seconds: float
    is_expired: bool


class CountdownModel:
    def __init__(self, duration_seconds: float) -> None:
        duration_milliseconds = int(round(float(duration_seconds) * 1000.0))
        if duration_milliseconds < 0:
            duration_milliseconds = 0
        self._duration_milliseconds = duration_milliseconds
        self._remaining_milliseconds = duration_milliseconds

    def duration_seconds(self) -> float:
        return self._duration_milliseconds / 1000.0

    def remaining_milliseconds(self) -> int:
        return max(0, int(self._remaining_milliseconds))

    def remaining_seconds(self) -> float:
        return self.remaining_milliseconds() / 1000.0

    def whole_seconds_left(self) -> int:
        return self.remaining_milliseconds() // 1000

    def is_expired(self) -> bool:
        return self._remaining_milliseconds <= 0

    def tick(self, elapsed_milliseconds: int) -> bool:
        """
        Subtract one tick period. Returns True when remaining time is now zero or below.
        """
        elapsed = int(elapsed_milliseconds)
        if elapsed < 0:
            raise ValueError(f"Tick period must be non-negative, got {elapsed}")
        self._remaining_milliseconds -= elapsed
        return self.is_expired()

    def snapshot(self) -> CountdownSnapshot:
        return CountdownSnapshot(
            duration_seconds=self.duration_seconds(),
            remaining_seconds=self.remaining_seconds(),
            is_expired=self.is_expired(),
        )


def _run_unit_tests() -> None:
    model = CountdownModel(1.0)
    assert model.remaining_milliseconds() == 1000
    for _ in range(99):
        assert not model.tick(10)
    assert model.remaining_milliseconds() == 10
    assert model.tick(10)
    assert model.remaining_seconds() == 0.0

    overshoot = CountdownModel(0.005)
    assert overshoot.tick(10)
    assert overshoot.remaining_milliseconds() == 0

    snap = model.snapshot()
    assert snap.is_expired


if __name__ == "__main__":
    _run_unit_tests()
    print("countdown_model.py: ok")
