# -*- coding: utf-8 -*-
########################
# scoring.py
########################
# Purpose:
# - Scoring engine for performed actions and combos.
# - Tracks a per-description repeat counter and the running total for one session.
# - Optionally attenuates repeat firings (diminishing returns).
#
# Design notes:
# - No Qt usage. Pure gameplay logic.
# - Counters are incremented before points are computed, so the divisor is always >= 1.
# - A zero counter at compute time is a programming error and raises ScoringInvariantError.
#
########################
# Interfaces:
# Public classes:
# - class ScoringInvariantError(RuntimeError)
# - class ScoringEngine
#   - __init__(diminishing_returns: bool = False)
#   - diminishing_returns -> bool
#   - total() -> int
#   - counter_for(description: str) -> int
#   - counters() -> dict[str, int]
#   - actions_performed() -> int
#   - reset() -> None
#   - award(performed: PerformedAction) -> ScoreAward
#   - award_combo(combo: ComboDefinition) -> ScoreAward
#
# Public functions:
# - points_for(point_value: int, repeat_count: int, diminishing_returns: bool) -> int
#
# Inputs:
# - PerformedAction from GameSession, ComboDefinition from a combo detector.
#
# Outputs:
# - ScoreAward payloads for the presentation layer.
#
########################

from __future__ import annotations

import logging
from typing import Dict

import combo_stack
import gameplay_models


logger = logging.getLogger(__name__)


class ScoringInvariantError(RuntimeError):
    pass


def points_for(point_value: int, repeat_count: int, diminishing_returns: bool) -> int:
    if not diminishing_returns:
        return int(point_value)
    if int(repeat_count) <= 0:
        raise ScoringInvariantError(f"Repeat counter must be >= 1 when scoring, got {repeat_count}")
    return int(point_value) // int(repeat_count)


class ScoringEngine:
    def __init__(self, diminishing_returns: bool = False) -> None:
        self._diminishing_returns = bool(diminishing_returns)
        self._counters: Dict[str, int] = {}
        self._total: int = 0
        self._actions_performed: int = 0

    @property
    def diminishing_returns(self) -> bool:
        return self._diminishing_returns

    def total(self) -> int:
        return int(self._total)

    def counter_for(self, description: str) -> int:
        return int(self._counters.get(str(description), 0))

    def counters(self) -> Dict[str, int]:
        return dict(self._counters)

    def actions_performed(self) -> int:
        return int(self._actions_performed)

    def reset(self) -> None:
        self._counters.clear()
        self._total = 0
        self._actions_performed = 0

    def award(self, performed: gameplay_models.PerformedAction) -> gameplay_models.ScoreAward:
        return self._award(
            description=performed.description,
            point_value=int(performed.action.point_value),
            is_combo=False,
        )

    def award_combo(self, combo: combo_stack.ComboDefinition) -> gameplay_models.ScoreAward:
        return self._award(description=combo.title, point_value=int(combo.point_value), is_combo=True)

    def _award(self, *, description: str, point_value: int, is_combo: bool) -> gameplay_models.ScoreAward:
        repeat_count = self._counters.get(description, 0) + 1
        self._counters[description] = repeat_count

        points = points_for(point_value, repeat_count, self._diminishing_returns)
        self._total += points
        self._actions_performed += 1

        logger.debug("Scored %s: +%d (x%d, total %d)", description, points, repeat_count, self._total)
        return gameplay_models.ScoreAward(
            description=description,
            points=points,
            total=self._total,
            repeat_count=repeat_count,
            is_combo=is_combo,
        )


def _run_unit_tests() -> None:
    import actions

    single = gameplay_models.PerformedAction(action=actions.find_tap(1, 1))

    engine = ScoringEngine(diminishing_returns=True)
    awarded = [engine.award(single).points for _ in range(3)]
    assert awarded == [1000, 500, 333]
    assert engine.total() == 1833
    assert engine.counter_for("Single Tap") == 3

    flat = ScoringEngine(diminishing_returns=False)
    assert [flat.award(single).points for _ in range(3)] == [1000, 1000, 1000]

    try:
        points_for(1000, 0, True)
    except ScoringInvariantError:
        pass
    else:
        raise AssertionError("Expected ScoringInvariantError for a zero counter")


if __name__ == "__main__":
    _run_unit_tests()
    print("scoring.py: ok")
