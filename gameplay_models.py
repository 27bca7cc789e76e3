# -*- coding: utf-8 -*-
########################
# gameplay_models.py
########################
# Purpose:
# - Core gameplay data models shared by the session, combo stack, scoring and router.
# - Defines session states and modes, gesture events, performed-action records and score payloads.
#
# Design notes:
# - Keep these models stable. Prefer extending with new optional fields rather than breaking changes.
# - No Qt usage. These are plain enums and dataclasses.
#
########################
# Interfaces:
# Public enums:
# - SessionState: LOADING | RUNNING | PAUSED | ENDED
# - SessionMode: FREE_PLAY | TIMED
# - Orientation: UNKNOWN | PORTRAIT | PORTRAIT_UPSIDE_DOWN | LANDSCAPE_LEFT | LANDSCAPE_RIGHT | FACE_UP | FACE_DOWN
#
# Public dataclasses:
# - GestureEvent(touch_count: int, tap_count: Optional[int], direction: Optional[SwipeDirection],
#                orientation: Orientation)
# - PerformedAction(action: ActionDefinition, context: Orientation, qualified: bool)
#   - description -> str
# - ScoreAward(description: str, points: int, total: int, repeat_count: int, is_combo: bool)
# - SessionSummary(mode: SessionMode, final_score: int, remaining_seconds: Optional[float],
#                  actions_performed: int, action_counts: dict[str, int])
#
# Inputs/Outputs:
# - These types are exchanged between GestureRouter, GameSession, ComboStack, ScoringEngine
#   and the presentation layer.
#
########################

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

import actions


class SessionState(str, Enum):
    LOADING = "LOADING"
    RUNNING = "RUNNING"
    PAUSED = "PAUSED"
    ENDED = "ENDED"


class SessionMode(str, Enum):
    FREE_PLAY = "FREE_PLAY"
    TIMED = "TIMED"


class Orientation(str, Enum):
    UNKNOWN = "unknown"
    PORTRAIT = "portrait"
    PORTRAIT_UPSIDE_DOWN = "portrait_upside_down"
    LANDSCAPE_LEFT = "landscape_left"
    LANDSCAPE_RIGHT = "landscape_right"
    FACE_UP = "face_up"
    FACE_DOWN = "face_down"

    @property
    def label(self) -> str:
        return _ORIENTATION_LABELS[self]


_ORIENTATION_LABELS: Dict[Orientation, str] = {
    Orientation.UNKNOWN: "",
    Orientation.PORTRAIT: "Portrait",
    Orientation.PORTRAIT_UPSIDE_DOWN: "Upside Down",
    Orientation.LANDSCAPE_LEFT: "Landscape Left",
    Orientation.LANDSCAPE_RIGHT: "Landscape Right",
    Orientation.FACE_UP: "Face Up",
    Orientation.FACE_DOWN: "Face Down",
}


@dataclass(frozen=True)
class GestureEvent:
    touch_count: int
    tap_count: Optional[int] = None
    direction: Optional[actions.SwipeDirection] = None
    orientation: Orientation = Orientation.UNKNOWN

    def resolve_action(self) -> actions.ActionDefinition:
        return actions.find_action(
            int(self.touch_count),
            tap_count=self.tap_count,
            direction=self.direction,
        )


@dataclass(frozen=True)
class PerformedAction:
    action: actions.ActionDefinition
    context: Orientation = Orientation.UNKNOWN
    qualified: bool = False

    @property
    def description(self) -> str:
        # Descriptions key the repeat counters, so qualified and unqualified
        # firings of the same action are scored independently.
        if self.qualified and self.context is not Orientation.UNKNOWN:
            return f"{self.action.title} ({self.context.label})"
        return self.action.title


@dataclass(frozen=True)
class ScoreAward:
    description: str
    points: int
    total: int
    repeat_count: int
    is_combo: bool = False


@dataclass(frozen=True)
class SessionSummary:
    mode: SessionMode
    final_score: int
    remaining_seconds: Optional[float]
    actions_performed: int
    action_counts: Dict[str, int] = field(default_factory=dict)
