import pytest

import countdown_model


def test_ticks_decrement_without_drift():
    model = countdown_model.CountdownModel(60.0)
    for _ in range(5999):
        assert not model.tick(10)
    assert model.remaining_milliseconds() == 10
    assert model.whole_seconds_left() == 0
    assert model.tick(10)
    assert model.is_expired()


def test_remaining_time_is_clamped():
    model = countdown_model.CountdownModel(0.015)
    model.tick(10)
    assert model.tick(10)
    assert model.remaining_seconds() == 0.0
    assert model.snapshot() == countdown_model.CountdownSnapshot(
        duration_seconds=0.015,
        remaining_seconds=0.0,
        is_expired=True,
    )


def test_negative_ticks_are_rejected():
    model = countdown_model.CountdownModel(1.0)
    with pytest.raises(ValueError):
        model.tick(-1)
