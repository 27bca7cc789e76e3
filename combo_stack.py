# -*- coding: utf-8 -*-
########################
# combo_stack.py
########################
# Purpose:
# - Ordered, time-windowed log of recently performed actions.
# - Reset policy driven by a periodic tick: one idle interval flushes the whole stack.
# - Pluggable combo detection over the stack suffix.
#
# Design notes:
# - No Qt usage. The owning GameSession drives on_reset_tick from its QTimer.
# - The stack is only ever cleared as a whole by the reset policy.
# - Combo detectors are pure functions of the stack contents.
#
########################
# Interfaces:
# Public dataclasses:
# - ComboDefinition(title: str, point_value: int)
# - ComboMatch(combo: ComboDefinition, length: int)
# - ComboPattern(combo: ComboDefinition, titles: tuple[str, ...])
#
# Public types:
# - ComboDetector = Callable[[Sequence[PerformedAction]], Optional[ComboMatch]]
#
# Public functions:
# - no_combo(entries) -> None
#
# Public classes:
# - class SequenceComboDetector
#   - __init__(patterns: Iterable[ComboPattern])
#   - __call__(entries) -> Optional[ComboMatch]
# - class ComboStack
#   - append(performed: PerformedAction) -> None
#   - on_reset_tick() -> bool
#   - clear() -> None
#   - remove_last(count: int) -> list[PerformedAction]
#   - entries() -> list[PerformedAction]
#   - descriptions() -> list[str]
#   - pending_clear -> bool
#   - check_for_combo(detector: ComboDetector) -> Optional[ComboMatch]
#
########################

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import gameplay_models


@dataclass(frozen=True)
class ComboDefinition:
    title: str
    point_value: int


@dataclass(frozen=True)
class ComboMatch:
    combo: ComboDefinition
    length: int


@dataclass(frozen=True)
class ComboPattern:
    combo: ComboDefinition
    titles: Tuple[str, ...]


ComboDetector = Callable[[Sequence[gameplay_models.PerformedAction]], Optional[ComboMatch]]


def no_combo(entries: Sequence[gameplay_models.PerformedAction]) -> Optional[ComboMatch]:
    return None


class SequenceComboDetector:
    """
    Matches registered title sequences against the end of the stack.

    The longest matching pattern wins. Among patterns of equal length the one
    registered first wins.
    """

    def __init__(self, patterns: Iterable[ComboPattern]) -> None:
        self._patterns: List[ComboPattern] = []
        for pattern in patterns:
            if not pattern.titles:
                raise ValueError(f"Combo pattern {pattern.combo.title!r} has no actions")
            self._patterns.append(pattern)
        self._patterns.sort(key=lambda item: -len(item.titles))

    def __call__(self, entries: Sequence[gameplay_models.PerformedAction]) -> Optional[ComboMatch]:
        titles = [performed.action.title for performed in entries]
        for pattern in self._patterns:
            pattern_length = len(pattern.titles)
            if pattern_length > len(titles):
                continue
            if tuple(titles[-pattern_length:]) == pattern.titles:
                return ComboMatch(combo=pattern.combo, length=pattern_length)
        return None


class ComboStack:
    def __init__(self) -> None:
        self._entries: List[gameplay_models.PerformedAction] = []
        self._pending_clear: bool = False

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def pending_clear(self) -> bool:
        return self._pending_clear

    def entries(self) -> List[gameplay_models.PerformedAction]:
        return list(self._entries)

    def descriptions(self) -> List[str]:
        return [performed.description for performed in self._entries]

    def append(self, performed: gameplay_models.PerformedAction) -> None:
        self._entries.append(performed)
        self._pending_clear = False

    def on_reset_tick(self) -> bool:
        cleared = False
        if self._pending_clear and self._entries:
            self._entries.clear()
            cleared = True
        # Cleared on the next tick unless another action arrives first.
        self._pending_clear = True
        return cleared

    def clear(self) -> None:
        self._entries.clear()

    def remove_last(self, count: int) -> List[gameplay_models.PerformedAction]:
        remove_count = int(count)
        if remove_count < 0 or remove_count > len(self._entries):
            raise ValueError(f"Cannot remove {remove_count} entries from a stack of {len(self._entries)}")
        if remove_count == 0:
            return []
        removed = self._entries[-remove_count:]
        del self._entries[-remove_count:]
        return removed

    def check_for_combo(self, detector: ComboDetector = no_combo) -> Optional[ComboMatch]:
        match = detector(tuple(self._entries))
        if match is None:
            return None
        if match.length < 1 or match.length > len(self._entries):
            raise ValueError(
                f"Combo {match.combo.title!r} matched {match.length} entries but the stack holds {len(self._entries)}"
            )
        return match


def _run_unit_tests() -> None:
    import actions

    stack = ComboStack()
    single = gameplay_models.PerformedAction(action=actions.find_tap(1, 1))
    swipe = gameplay_models.PerformedAction(action=actions.find_swipe(1, "up"))

    stack.append(single)
    assert not stack.on_reset_tick()
    assert len(stack) == 1
    assert stack.on_reset_tick()
    assert len(stack) == 0

    stack.append(single)
    stack.append(swipe)
    assert stack.check_for_combo() is None

    detector = SequenceComboDetector(
        [ComboPattern(combo=ComboDefinition(title="Tap Up", point_value=5000), titles=("Single Tap", "Swipe Up"))]
    )
    match = stack.check_for_combo(detector)
    assert match is not None
    assert match.length == 2
    stack.remove_last(match.length)
    assert len(stack) == 0


if __name__ == "__main__":
    _run_unit_tests()
    print("combo_stack.py: ok")
