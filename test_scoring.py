import pytest

import actions
import combo_stack
import gameplay_models
import scoring


def _performed(title, **kwargs):
    return gameplay_models.PerformedAction(action=actions.find_by_title(title), **kwargs)


def test_first_firing_awards_full_value_in_both_modes():
    for diminishing in (False, True):
        engine = scoring.ScoringEngine(diminishing_returns=diminishing)
        award = engine.award(_performed("Four-Finger Quadruple Tap"))
        assert award.points == 16000
        assert award.repeat_count == 1
        assert award.total == 16000


def test_nth_firing_is_floor_divided():
    engine = scoring.ScoringEngine(diminishing_returns=True)
    performed = _performed("Triple Tap")
    for repeat_count in range(1, 8):
        award = engine.award(performed)
        assert award.repeat_count == repeat_count
        assert award.points == 3000 // repeat_count


def test_three_single_taps_with_diminishing_returns():
    engine = scoring.ScoringEngine(diminishing_returns=True)
    for _ in range(3):
        engine.award(_performed("Single Tap"))
    assert engine.total() == 1833


def test_counters_are_keyed_by_description():
    engine = scoring.ScoringEngine(diminishing_returns=True)
    plain = _performed("Swipe Up")
    qualified = _performed("Swipe Up", context=gameplay_models.Orientation.PORTRAIT, qualified=True)
    engine.award(plain)
    award = engine.award(qualified)
    assert award.description == "Swipe Up (Portrait)"
    assert award.points == 1000
    assert engine.counters() == {"Swipe Up": 1, "Swipe Up (Portrait)": 1}


def test_combo_awards_use_their_own_counter():
    engine = scoring.ScoringEngine(diminishing_returns=True)
    combo = combo_stack.ComboDefinition(title="Up Down", point_value=5000)
    first = engine.award_combo(combo)
    second = engine.award_combo(combo)
    assert first.is_combo
    assert (first.points, second.points) == (5000, 2500)
    assert engine.counter_for("Up Down") == 2


def test_reset_clears_counters_and_total():
    engine = scoring.ScoringEngine()
    engine.award(_performed("Single Tap"))
    engine.reset()
    assert engine.total() == 0
    assert engine.counters() == {}
    assert engine.actions_performed() == 0


def test_zero_counter_is_an_invariant_violation():
    with pytest.raises(scoring.ScoringInvariantError):
        scoring.points_for(1000, 0, diminishing_returns=True)
    assert scoring.points_for(1000, 0, diminishing_returns=False) == 1000
