import pytest

import actions
import combo_stack
import gameplay_models


def _performed(title):
    return gameplay_models.PerformedAction(action=actions.find_by_title(title))


def test_append_clears_pending_flag():
    stack = combo_stack.ComboStack()
    stack.on_reset_tick()
    assert stack.pending_clear
    stack.append(_performed("Single Tap"))
    assert not stack.pending_clear


def test_stack_survives_while_actions_keep_arriving():
    stack = combo_stack.ComboStack()
    lengths = []
    for _ in range(6):
        stack.append(_performed("Swipe Up"))
        stack.on_reset_tick()
        lengths.append(len(stack))
    assert lengths == sorted(lengths)
    assert lengths[-1] == 6


def test_one_idle_interval_flushes_the_stack():
    stack = combo_stack.ComboStack()
    stack.append(_performed("Single Tap"))
    stack.append(_performed("Double Tap"))
    assert not stack.on_reset_tick()
    assert len(stack) == 2
    assert stack.on_reset_tick()
    assert len(stack) == 0
    assert stack.pending_clear


def test_remove_last():
    stack = combo_stack.ComboStack()
    for title in ("Single Tap", "Swipe Up", "Swipe Down"):
        stack.append(_performed(title))
    removed = stack.remove_last(2)
    assert [item.action.title for item in removed] == ["Swipe Up", "Swipe Down"]
    assert stack.descriptions() == ["Single Tap"]
    with pytest.raises(ValueError):
        stack.remove_last(2)
    with pytest.raises(ValueError):
        stack.remove_last(-1)


def test_default_detector_finds_nothing():
    stack = combo_stack.ComboStack()
    stack.append(_performed("Single Tap"))
    assert stack.check_for_combo() is None
    assert combo_stack.no_combo(stack.entries()) is None


def test_sequence_detector_prefers_longest_suffix():
    short_combo = combo_stack.ComboDefinition(title="Up Down", point_value=3000)
    long_combo = combo_stack.ComboDefinition(title="Tap Up Down", point_value=8000)
    detector = combo_stack.SequenceComboDetector(
        [
            combo_stack.ComboPattern(combo=short_combo, titles=("Swipe Up", "Swipe Down")),
            combo_stack.ComboPattern(combo=long_combo, titles=("Single Tap", "Swipe Up", "Swipe Down")),
        ]
    )

    stack = combo_stack.ComboStack()
    stack.append(_performed("Swipe Up"))
    assert stack.check_for_combo(detector) is None
    stack.append(_performed("Swipe Down"))
    assert stack.check_for_combo(detector) == combo_stack.ComboMatch(combo=short_combo, length=2)

    stack.clear()
    for title in ("Single Tap", "Swipe Up", "Swipe Down"):
        stack.append(_performed(title))
    assert stack.check_for_combo(detector) == combo_stack.ComboMatch(combo=long_combo, length=3)


def test_detector_is_pure():
    combo = combo_stack.ComboDefinition(title="Double Up", point_value=2500)
    detector = combo_stack.SequenceComboDetector(
        [combo_stack.ComboPattern(combo=combo, titles=("Swipe Up", "Swipe Up"))]
    )
    entries = (_performed("Swipe Up"), _performed("Swipe Up"))
    assert detector(entries) == detector(entries)


def test_detector_rejects_empty_patterns():
    with pytest.raises(ValueError):
        combo_stack.SequenceComboDetector(
            [combo_stack.ComboPattern(combo=combo_stack.ComboDefinition(title="Nothing", point_value=1), titles=())]
        )


def test_oversized_match_is_rejected():
    combo = combo_stack.ComboDefinition(title="Bogus", point_value=1)
    stack = combo_stack.ComboStack()
    stack.append(_performed("Single Tap"))
    with pytest.raises(ValueError):
        stack.check_for_combo(lambda entries: combo_stack.ComboMatch(combo=combo, length=5))
