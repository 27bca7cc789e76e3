# -*- coding: utf-8 -*-
########################
# gesture_router.py
########################
# Purpose:
# - Single entry point for recognized gestures coming from the host UI/input framework.
# - Translates recognizer callbacks into gameplay_models.GestureEvent and emits a Qt signal.
#
# Design notes:
# - This must be the only gesture source for a session. No duplicate mapping elsewhere.
# - The host has already resolved touch counts, tap counts and swipe directions.
#   This router only validates them against the catalog and attaches the orientation.
# - Orientation source is injected as a callable.
#
########################
# Interfaces:
# Public classes:
# - class GestureRouter(PyQt6.QtCore.QObject)
#   - Signals:
#     - gestureEvent(gameplay_models.GestureEvent)
#   - Methods:
#     - handle_tap(touch_count: int, tap_count: int) -> bool
#     - handle_swipe(touch_count: int, direction: SwipeDirection | str) -> bool
#     - handle_recognizer(spec: gesture_rules.RecognizerSpec) -> bool
#     - reset_stats() -> None
#
# Inputs:
# - Recognizer callbacks from the host framework.
#
# Outputs:
# - Normalized gesture events consumed by GameSession.on_gesture_event.
#
########################

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from PyQt6.QtCore import QObject, pyqtSignal

import actions
import gameplay_models
import gesture_rules


logger = logging.getLogger(__name__)


class GestureRouter(QObject):
    """
    Central router for recognized gestures.

    This object never scores. Its only job is to:
      - check that the gesture maps to a catalog action
      - attach the current orientation from the injected provider
      - emit a gameplay_models.GestureEvent for each valid gesture
    """

    gestureEvent = pyqtSignal(object)

    def __init__(
        self,
        orientation_provider: Optional[Callable[[], gameplay_models.Orientation]] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        """
        orientation_provider:
            Callable that returns the current device orientation.
            Defaults to always reporting Orientation.UNKNOWN.
        parent:
            Optional QObject parent.
        """
        super().__init__(parent)

        self._orientation_provider: Callable[[], gameplay_models.Orientation] = (
            orientation_provider if orientation_provider is not None else (lambda: gameplay_models.Orientation.UNKNOWN)
        )

        self._total_events: int = 0
        self._ignored_events: int = 0

    # ------------------------------------------------------------------
    # Public API used by the host framework
    # ------------------------------------------------------------------

    def handle_tap(self, touch_count: int, tap_count: int) -> bool:
        """
        Handle a recognized tap.

        Returns True if the tap matched a catalog action and was emitted.
        """
        try:
            actions.find_tap(touch_count, tap_count)
        except actions.UnknownGestureError:
            self._ignore(f"tap touch_count={touch_count} tap_count={tap_count}")
            return False

        self._emit(int(touch_count), tap_count=int(tap_count))
        return True

    def handle_swipe(self, touch_count: int, direction: Union[actions.SwipeDirection, str]) -> bool:
        """
        Handle a recognized swipe.

        Returns True if the swipe matched a catalog action and was emitted.
        """
        try:
            action = actions.find_swipe(touch_count, direction)
        except actions.UnknownGestureError:
            self._ignore(f"swipe touch_count={touch_count} direction={direction!r}")
            return False

        self._emit(int(touch_count), direction=action.direction)
        return True

    def handle_recognizer(self, spec: gesture_rules.RecognizerSpec) -> bool:
        if spec.kind == gesture_rules.RECOGNIZER_KIND_TAP and spec.tap_count is not None:
            return self.handle_tap(spec.touch_count, spec.tap_count)
        if spec.kind == gesture_rules.RECOGNIZER_KIND_SWIPE and spec.direction is not None:
            return self.handle_swipe(spec.touch_count, spec.direction)
        self._ignore(f"recognizer {spec!r}")
        return False

    def reset_stats(self) -> None:
        self._total_events = 0
        self._ignored_events = 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _current_orientation(self) -> gameplay_models.Orientation:
        try:
            return gameplay_models.Orientation(self._orientation_provider())
        except ValueError:
            return gameplay_models.Orientation.UNKNOWN

    def _emit(
        self,
        touch_count: int,
        *,
        tap_count: Optional[int] = None,
        direction: Optional[actions.SwipeDirection] = None,
    ) -> None:
        routed = gameplay_models.GestureEvent(
            touch_count=touch_count,
            tap_count=tap_count,
            direction=direction,
            orientation=self._current_orientation(),
        )
        self._total_events += 1
        self.gestureEvent.emit(routed)

    def _ignore(self, text: str) -> None:
        self._ignored_events += 1
        logger.debug("Ignored unrecognized gesture: %s", text)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------

    @property
    def total_events(self) -> int:
        return self._total_events

    @property
    def ignored_events(self) -> int:
        return self._ignored_events
