# -*- coding: utf-8 -*-
########################
# gesture_rules.py
########################
# Purpose:
# - Tap conflict rule evaluated by the host input framework before dispatching a gesture.
# - Platform-neutral recognizer configuration derived from each catalog action.
#
# Design notes:
# - No Qt usage. Pure and stateless.
# - A tap must wait for every tap with the same touch count and more taps to fail first,
#   so a double tap never also fires as a single tap.
# - Swipes never wait on anything.
#
########################
# Interfaces:
# Public dataclasses:
# - RecognizerSpec(kind: str, touch_count: int, tap_count: Optional[int],
#                  direction: Optional[SwipeDirection], action_title: str)
#
# Public functions:
# - requires_failure(action: ActionDefinition, other: ActionDefinition) -> bool
# - failure_dependencies(actions: Iterable[ActionDefinition]) -> dict[str, list[str]]
# - recognizer_spec_for(action: ActionDefinition) -> RecognizerSpec
# - recognizer_specs(actions: Iterable[ActionDefinition]) -> list[RecognizerSpec]
#
# Inputs:
# - ActionDefinition values from actions.py.
#
# Outputs:
# - Booleans and recognizer specs consumed by the host UI framework.
#
########################

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import actions


RECOGNIZER_KIND_TAP = "tap"
RECOGNIZER_KIND_SWIPE = "swipe"


@dataclass(frozen=True)
class RecognizerSpec:
    kind: str
    touch_count: int
    tap_count: Optional[int]
    direction: Optional[actions.SwipeDirection]
    action_title: str


def requires_failure(action: actions.ActionDefinition, other: actions.ActionDefinition) -> bool:
    """
    True when `action` must not fire until `other` has definitively failed.
    """
    if not isinstance(action.kind, actions.TapGesture):
        return False
    if not isinstance(other.kind, actions.TapGesture):
        return False
    same_touch_count = int(action.touch_count) == int(other.touch_count)
    fewer_taps = int(action.kind.tap_count) < int(other.kind.tap_count)
    return same_touch_count and fewer_taps


def failure_dependencies(
    action_list: Iterable[actions.ActionDefinition] = actions.ALL_ACTIONS,
) -> Dict[str, List[str]]:
    candidates = list(action_list)
    dependencies: Dict[str, List[str]] = {}
    for action in candidates:
        if not action.is_tap:
            continue
        dependencies[action.title] = [other.title for other in candidates if requires_failure(action, other)]
    return dependencies


def recognizer_spec_for(action: actions.ActionDefinition) -> RecognizerSpec:
    kind = action.kind
    if isinstance(kind, actions.TapGesture):
        return RecognizerSpec(
            kind=RECOGNIZER_KIND_TAP,
            touch_count=int(action.touch_count),
            tap_count=int(kind.tap_count),
            direction=None,
            action_title=action.title,
        )
    if isinstance(kind, actions.SwipeGesture):
        return RecognizerSpec(
            kind=RECOGNIZER_KIND_SWIPE,
            touch_count=int(action.touch_count),
            tap_count=None,
            direction=kind.direction,
            action_title=action.title,
        )
    raise TypeError(f"Unsupported gesture kind: {kind!r}")


def recognizer_specs(
    action_list: Iterable[actions.ActionDefinition] = actions.ALL_ACTIONS,
) -> List[RecognizerSpec]:
    return [recognizer_spec_for(action) for action in action_list]


def _run_unit_tests() -> None:
    single = actions.find_tap(1, 1)
    double = actions.find_tap(1, 2)
    two_finger_double = actions.find_tap(2, 2)
    swipe_up = actions.find_swipe(1, actions.SwipeDirection.UP)

    assert requires_failure(single, double)
    assert not requires_failure(double, single)
    assert not requires_failure(single, two_finger_double)
    assert not requires_failure(swipe_up, double)
    assert not requires_failure(single, swipe_up)

    dependencies = failure_dependencies()
    assert dependencies["Single Tap"] == ["Double Tap", "Triple Tap", "Quadruple Tap"]
    assert dependencies["Four-Finger Quadruple Tap"] == []
    assert "Swipe Up" not in dependencies

    spec = recognizer_spec_for(swipe_up)
    assert spec.kind == RECOGNIZER_KIND_SWIPE
    assert spec.direction is actions.SwipeDirection.UP


if __name__ == "__main__":
    _run_unit_tests()
    print("gesture_rules.py: ok")
