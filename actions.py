# -*- coding: utf-8 -*-
########################
# actions.py
########################
# Purpose:
# - Static catalog of every recognizable gameplay action (taps and swipes).
# - Deterministic lookup from a discrete host gesture to exactly one ActionDefinition.
#
# Design notes:
# - The catalog is built once at import time and never mutated.
# - No Qt usage. Pure data.
# - Order is fixed: taps (touch count outer, tap count inner), then swipes
#   (touch count outer, direction Up/Down/Left/Right inner).
#
########################
# Interfaces:
# Public enums:
# - class SwipeDirection(enum.Enum): UP | DOWN | LEFT | RIGHT
#
# Public dataclasses:
# - TapGesture(tap_count: int)
# - SwipeGesture(direction: SwipeDirection)
# - ActionDefinition(title: str, point_value: int, touch_count: int, kind: TapGesture | SwipeGesture)
#
# Public constants:
# - TAPS, SWIPES, ALL_ACTIONS: tuple[ActionDefinition, ...]
#
# Public functions:
# - find_tap(touch_count: int, tap_count: int) -> ActionDefinition
# - find_swipe(touch_count: int, direction: SwipeDirection | str) -> ActionDefinition
# - find_action(touch_count: int, *, tap_count: Optional[int], direction: Optional[SwipeDirection | str]) -> ActionDefinition
# - find_by_title(title: str) -> ActionDefinition
#
# Errors:
# - UnknownGestureError(LookupError) when no catalog entry matches.
#
########################

from __future__ import annotations

from dataclasses import dataclass
import enum
from typing import Dict, Optional, Tuple, Union


MAX_TOUCH_COUNT = 4
MAX_TAP_COUNT = 4
POINTS_PER_TAP_UNIT = 1_000
SWIPE_POINT_VALUE = 1_000

_TOUCH_COUNT_WORDS = {2: "Two", 3: "Three", 4: "Four"}
_TAP_COUNT_ORDINALS = {1: "Single", 2: "Double", 3: "Triple", 4: "Quadruple"}


class UnknownGestureError(LookupError):
    pass


class SwipeDirection(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Union["SwipeDirection", str]) -> "SwipeDirection":
        if isinstance(value, SwipeDirection):
            return value
        text = str(value or "").strip().lower()
        for direction in cls:
            if direction.value == text:
                return direction
        raise UnknownGestureError(f"Unknown swipe direction: {value!r}")


@dataclass(frozen=True)
class TapGesture:
    tap_count: int


@dataclass(frozen=True)
class SwipeGesture:
    direction: SwipeDirection


GestureKind = Union[TapGesture, SwipeGesture]


@dataclass(frozen=True)
class ActionDefinition:
    title: str
    point_value: int
    touch_count: int
    kind: GestureKind

    @property
    def is_tap(self) -> bool:
        return isinstance(self.kind, TapGesture)

    @property
    def is_swipe(self) -> bool:
        return isinstance(self.kind, SwipeGesture)

    @property
    def tap_count(self) -> Optional[int]:
        if isinstance(self.kind, TapGesture):
            return int(self.kind.tap_count)
        return None

    @property
    def direction(self) -> Optional[SwipeDirection]:
        if isinstance(self.kind, SwipeGesture):
            return self.kind.direction
        return None


def _finger_prefix(touch_count: int) -> str:
    if touch_count == 1:
        return ""
    return f"{_TOUCH_COUNT_WORDS[touch_count]}-Finger "


def tap_title(touch_count: int, tap_count: int) -> str:
    return f"{_finger_prefix(touch_count)}{_TAP_COUNT_ORDINALS[tap_count]} Tap"


def swipe_title(touch_count: int, direction: SwipeDirection) -> str:
    return f"{_finger_prefix(touch_count)}Swipe {direction.label}"


def _build_taps() -> Tuple[ActionDefinition, ...]:
    taps = []
    for touch_count in range(1, MAX_TOUCH_COUNT + 1):
        for tap_count in range(1, MAX_TAP_COUNT + 1):
            taps.append(
                ActionDefinition(
                    title=tap_title(touch_count, tap_count),
                    point_value=touch_count * tap_count * POINTS_PER_TAP_UNIT,
                    touch_count=touch_count,
                    kind=TapGesture(tap_count=tap_count),
                )
            )
    return tuple(taps)


def _build_swipes() -> Tuple[ActionDefinition, ...]:
    swipes = []
    for touch_count in range(1, MAX_TOUCH_COUNT + 1):
        for direction in (SwipeDirection.UP, SwipeDirection.DOWN, SwipeDirection.LEFT, SwipeDirection.RIGHT):
            swipes.append(
                ActionDefinition(
                    title=swipe_title(touch_count, direction),
                    point_value=SWIPE_POINT_VALUE,
                    touch_count=touch_count,
                    kind=SwipeGesture(direction=direction),
                )
            )
    return tuple(swipes)


TAPS: Tuple[ActionDefinition, ...] = _build_taps()
SWIPES: Tuple[ActionDefinition, ...] = _build_swipes()
ALL_ACTIONS: Tuple[ActionDefinition, ...] = TAPS + SWIPES

_TAPS_BY_KEY: Dict[Tuple[int, int], ActionDefinition] = {
    (action.touch_count, int(action.tap_count or 0)): action for action in TAPS
}
_SWIPES_BY_KEY: Dict[Tuple[int, SwipeDirection], ActionDefinition] = {
    (action.touch_count, action.kind.direction): action for action in SWIPES  # type: ignore[union-attr]
}
_ACTIONS_BY_TITLE: Dict[str, ActionDefinition] = {action.title: action for action in ALL_ACTIONS}


def find_tap(touch_count: int, tap_count: int) -> ActionDefinition:
    action = _TAPS_BY_KEY.get((int(touch_count), int(tap_count)))
    if action is None:
        raise UnknownGestureError(f"No tap action for touch_count={touch_count}, tap_count={tap_count}")
    return action


def find_swipe(touch_count: int, direction: Union[SwipeDirection, str]) -> ActionDefinition:
    parsed_direction = SwipeDirection.parse(direction)
    action = _SWIPES_BY_KEY.get((int(touch_count), parsed_direction))
    if action is None:
        raise UnknownGestureError(
            f"No swipe action for touch_count={touch_count}, direction={parsed_direction.value}"
        )
    return action


def find_action(
    touch_count: int,
    *,
    tap_count: Optional[int] = None,
    direction: Optional[Union[SwipeDirection, str]] = None,
) -> ActionDefinition:
    """
    Map a discrete gesture to its catalog entry.

    Exactly one of tap_count or direction must be given.
    """
    if (tap_count is None) == (direction is None):
        raise ValueError("Exactly one of tap_count or direction must be provided")
    if tap_count is not None:
        return find_tap(touch_count, tap_count)
    return find_swipe(touch_count, direction)  # type: ignore[arg-type]


def find_by_title(title: str) -> ActionDefinition:
    action = _ACTIONS_BY_TITLE.get(str(title))
    if action is None:
        raise UnknownGestureError(f"No action titled {title!r}")
    return action


def _run_unit_tests() -> None:
    assert len(TAPS) == 16
    assert len(SWIPES) == 16
    assert ALL_ACTIONS[0].title == "Single Tap"
    assert ALL_ACTIONS[0].point_value == 1000
    assert ALL_ACTIONS[15].title == "Four-Finger Quadruple Tap"
    assert ALL_ACTIONS[15].point_value == 16000
    assert ALL_ACTIONS[16].title == "Swipe Up"
    assert ALL_ACTIONS[-1].title == "Four-Finger Swipe Right"

    assert find_action(3, tap_count=3).title == "Three-Finger Triple Tap"
    assert find_action(2, direction="left").title == "Two-Finger Swipe Left"

    try:
        find_tap(5, 1)
    except UnknownGestureError:
        pass
    else:
        raise AssertionError("Expected UnknownGestureError for five-finger tap")


if __name__ == "__main__":
    _run_unit_tests()
    print("actions.py: ok")
