import itertools

import actions
import gesture_rules


def test_requires_failure_orders_taps_by_tap_count():
    for first, second in itertools.product(actions.TAPS, repeat=2):
        expected = first.touch_count == second.touch_count and first.tap_count < second.tap_count
        assert gesture_rules.requires_failure(first, second) is expected


def test_requires_failure_is_a_strict_order():
    for action in actions.TAPS:
        assert not gesture_rules.requires_failure(action, action)
    for first, second in itertools.product(actions.TAPS, repeat=2):
        if gesture_rules.requires_failure(first, second):
            assert not gesture_rules.requires_failure(second, first)


def test_swipes_never_wait():
    for swipe, other in itertools.product(actions.SWIPES, actions.ALL_ACTIONS):
        assert not gesture_rules.requires_failure(swipe, other)
        assert not gesture_rules.requires_failure(other, swipe)


def test_failure_dependencies():
    dependencies = gesture_rules.failure_dependencies()
    assert len(dependencies) == 16
    assert dependencies["Two-Finger Double Tap"] == ["Two-Finger Triple Tap", "Two-Finger Quadruple Tap"]
    assert dependencies["Quadruple Tap"] == []


def test_recognizer_specs_follow_the_variant():
    specs = gesture_rules.recognizer_specs()
    assert len(specs) == len(actions.ALL_ACTIONS)

    tap_spec = gesture_rules.recognizer_spec_for(actions.find_tap(3, 2))
    assert tap_spec.kind == gesture_rules.RECOGNIZER_KIND_TAP
    assert tap_spec.touch_count == 3
    assert tap_spec.tap_count == 2
    assert tap_spec.direction is None
    assert tap_spec.action_title == "Three-Finger Double Tap"

    swipe_spec = gesture_rules.recognizer_spec_for(actions.find_swipe(2, "left"))
    assert swipe_spec.kind == gesture_rules.RECOGNIZER_KIND_SWIPE
    assert swipe_spec.tap_count is None
    assert swipe_spec.direction is actions.SwipeDirection.LEFT
