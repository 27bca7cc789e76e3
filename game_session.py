# -*- coding: utf-8 -*-
########################
# game_session.py
########################
# Purpose:
# - Session state machine for one gameplay screen: LOADING -> RUNNING <-> PAUSED -> ENDED.
# - Gates every gesture, feeds the ComboStack and ScoringEngine, and owns both periodic timers.
#
# Design notes:
# - One GameSession per gameplay screen instance. Counters and score live and die with it.
# - Gestures arriving while not RUNNING are dropped: no counter, score or combo change.
# - Two independent QTimers: the combo reset tick (coarse) and, in timed mode, the countdown tick (fine).
#   Both are stopped by end(), so no tick is delivered after ENDED.
# - Ticks delivered while PAUSED or LOADING are inert.
# - Pausing flushes the combo stack, so a combo never spans a pause.
# - All handlers run on the Qt thread. Hosts with other threads must queue onto it.
#
########################
# Interfaces:
# Public dataclasses:
# - SessionSettings(mode: SessionMode, diminishing_returns: bool, duration_seconds: Optional[float],
#                   combo_reset_interval_ms: int, countdown_tick_ms: int, qualify_descriptions: bool)
#   - free_play(app_config: Optional[AppConfig]) -> SessionSettings
#   - timed(app_config: Optional[AppConfig], duration_seconds: Optional[float]) -> SessionSettings
#
# Public classes:
# - class GameSession(PyQt6.QtCore.QObject)
#   - Signals:
#     - stateChanged(SessionState)
#     - scoreChanged(int)
#     - actionScored(ScoreAward)
#     - remainingTimeChanged(float)
#     - secondsLeftChanged(int)
#     - pauseLabelChanged(str)
#     - feedbackRetracted()
#     - gestureDropped(GestureEvent)
#     - sessionEnded(SessionSummary)
#     - exitRequested()
#   - Methods:
#     - start() -> bool
#     - pause() -> bool
#     - unpause() -> bool
#     - toggle_pause() -> bool
#     - end() -> bool
#     - on_gesture_event(event: GestureEvent) -> Optional[ScoreAward]
#     - perform_action(action: ActionDefinition, context: Orientation) -> Optional[ScoreAward]
#     - on_combo_reset_tick() -> None
#     - on_countdown_tick() -> None
#     - set_combo_detector(detector: ComboDetector) -> None
#     - state(), settings(), total_score(), combo_stack(), scoring(), remaining_seconds(),
#       timers_active(), summary()
#
# Inputs:
# - GestureEvent from GestureRouter (or any host), pause/end requests from the presentation layer.
#
# Outputs:
# - Signals for feedback labels, score label, top label, pause control and screen exit.
#
########################

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from PyQt6.QtCore import QObject, Qt, QTimer, pyqtSignal

import actions
import combo_stack
import config as config_module
import countdown_model
import gameplay_models
import scoring


logger = logging.getLogger(__name__)

PAUSE_LABEL_TEXT = "pause"
PLAY_LABEL_TEXT = "play"


@dataclass(frozen=True)
class SessionSettings:
    mode: gameplay_models.SessionMode = gameplay_models.SessionMode.FREE_PLAY
    diminishing_returns: bool = False
    duration_seconds: Optional[float] = None
    combo_reset_interval_ms: int = 1000
    countdown_tick_ms: int = 10
    qualify_descriptions: bool = False

    @property
    def is_timed(self) -> bool:
        return self.mode == gameplay_models.SessionMode.TIMED

    @classmethod
    def free_play(cls, app_config: Optional[config_module.AppConfig] = None) -> "SessionSettings":
        resolved = app_config if app_config is not None else config_module.AppConfig()
        return cls(
            mode=gameplay_models.SessionMode.FREE_PLAY,
            diminishing_returns=bool(resolved.free_play.diminishing_returns),
            duration_seconds=None,
            combo_reset_interval_ms=int(resolved.timing.combo_reset_interval_ms),
            countdown_tick_ms=int(resolved.timing.countdown_tick_ms),
            qualify_descriptions=bool(resolved.feedback.qualify_descriptions_by_orientation),
        )

    @classmethod
    def timed(
        cls,
        app_config: Optional[config_module.AppConfig] = None,
        *,
        duration_seconds: Optional[float] = None,
    ) -> "SessionSettings":
        resolved = app_config if app_config is not None else config_module.AppConfig()
        duration = duration_seconds if duration_seconds is not None else resolved.timed_mode.duration_seconds
        return cls(
            mode=gameplay_models.SessionMode.TIMED,
            diminishing_returns=bool(resolved.timed_mode.diminishing_returns),
            duration_seconds=float(duration),
            combo_reset_interval_ms=int(resolved.timing.combo_reset_interval_ms),
            countdown_tick_ms=int(resolved.timing.countdown_tick_ms),
            qualify_descriptions=bool(resolved.feedback.qualify_descriptions_by_orientation),
        )


class GameSession(QObject):
    stateChanged = pyqtSignal(object)
    scoreChanged = pyqtSignal(int)
    actionScored = pyqtSignal(object)
    remainingTimeChanged = pyqtSignal(float)
    secondsLeftChanged = pyqtSignal(int)
    pauseLabelChanged = pyqtSignal(str)
    feedbackRetracted = pyqtSignal()
    gestureDropped = pyqtSignal(object)
    sessionEnded = pyqtSignal(object)
    exitRequested = pyqtSignal()

    def __init__(
        self,
        settings: Optional[SessionSettings] = None,
        *,
        combo_detector: combo_stack.ComboDetector = combo_stack.no_combo,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else SessionSettings()
        if self._settings.is_timed and self._settings.duration_seconds is None:
            raise ValueError("Timed sessions require duration_seconds")
        if int(self._settings.countdown_tick_ms) < 1:
            raise ValueError(f"countdown_tick_ms must be >= 1, got {self._settings.countdown_tick_ms}")
        if int(self._settings.combo_reset_interval_ms) < 1:
            raise ValueError(f"combo_reset_interval_ms must be >= 1, got {self._settings.combo_reset_interval_ms}")

        self._state = gameplay_models.SessionState.LOADING
        self._combo_stack = combo_stack.ComboStack()
        self._combo_detector: combo_stack.ComboDetector = combo_detector
        self._scoring = scoring.ScoringEngine(diminishing_returns=self._settings.diminishing_returns)
        self._countdown: Optional[countdown_model.CountdownModel] = None
        self._last_whole_seconds: Optional[int] = None
        if self._settings.is_timed:
            self._countdown = countdown_model.CountdownModel(float(self._settings.duration_seconds or 0.0))

        self._combo_timer = QTimer(self)
        self._combo_timer.setInterval(int(self._settings.combo_reset_interval_ms))
        self._combo_timer.timeout.connect(self.on_combo_reset_tick)

        self._countdown_timer = QTimer(self)
        self._countdown_timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._countdown_timer.setInterval(int(self._settings.countdown_tick_ms))
        self._countdown_timer.timeout.connect(self.on_countdown_tick)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def state(self) -> gameplay_models.SessionState:
        return self._state

    def settings(self) -> SessionSettings:
        return self._settings

    def total_score(self) -> int:
        return self._scoring.total()

    def combo_stack(self) -> combo_stack.ComboStack:
        return self._combo_stack

    def scoring(self) -> scoring.ScoringEngine:
        return self._scoring

    def remaining_seconds(self) -> Optional[float]:
        if self._countdown is None:
            return None
        return self._countdown.remaining_seconds()

    def timers_active(self) -> bool:
        return bool(self._combo_timer.isActive() or self._countdown_timer.isActive())

    def set_combo_detector(self, detector: combo_stack.ComboDetector) -> None:
        self._combo_detector = detector

    def summary(self) -> gameplay_models.SessionSummary:
        return gameplay_models.SessionSummary(
            mode=self._settings.mode,
            final_score=self._scoring.total(),
            remaining_seconds=self.remaining_seconds(),
            actions_performed=self._scoring.actions_performed(),
            action_counts=self._scoring.counters(),
        )

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def start(self) -> bool:
        if self._state != gameplay_models.SessionState.LOADING:
            logger.debug("Ignoring start() in state %s", self._state.value)
            return False

        self._set_state(gameplay_models.SessionState.RUNNING)
        self._combo_timer.start()
        if self._countdown is not None:
            self._countdown_timer.start()

        logger.info("Session started (%s)", self._settings.mode.value)
        self.pauseLabelChanged.emit(PAUSE_LABEL_TEXT)
        self.scoreChanged.emit(self._scoring.total())
        self._emit_remaining_time()
        return True

    def pause(self) -> bool:
        if self._state != gameplay_models.SessionState.RUNNING:
            logger.debug("Ignoring pause() in state %s", self._state.value)
            return False

        self._combo_stack.clear()
        self._set_state(gameplay_models.SessionState.PAUSED)
        logger.info("Session paused")
        self.feedbackRetracted.emit()
        self.pauseLabelChanged.emit(PLAY_LABEL_TEXT)
        return True

    def unpause(self) -> bool:
        if self._state != gameplay_models.SessionState.PAUSED:
            logger.debug("Ignoring unpause() in state %s", self._state.value)
            return False

        self._set_state(gameplay_models.SessionState.RUNNING)
        logger.info("Session resumed")
        self.pauseLabelChanged.emit(PAUSE_LABEL_TEXT)
        self._emit_remaining_time()
        return True

    def toggle_pause(self) -> bool:
        if self._state == gameplay_models.SessionState.RUNNING:
            return self.pause()
        if self._state == gameplay_models.SessionState.PAUSED:
            return self.unpause()
        return False

    def end(self) -> bool:
        if self._state == gameplay_models.SessionState.ENDED:
            return False

        self._combo_timer.stop()
        self._countdown_timer.stop()
        self._set_state(gameplay_models.SessionState.ENDED)

        summary = self.summary()
        logger.info(
            "Session ended (%s): score=%d actions=%d",
            summary.mode.value,
            summary.final_score,
            summary.actions_performed,
        )
        self.sessionEnded.emit(summary)
        self.exitRequested.emit()
        return True

    # ------------------------------------------------------------------
    # Input path
    # ------------------------------------------------------------------

    def on_gesture_event(self, event: gameplay_models.GestureEvent) -> Optional[gameplay_models.ScoreAward]:
        if self._state != gameplay_models.SessionState.RUNNING:
            self._drop(event)
            return None
        action = event.resolve_action()
        return self.perform_action(action, event.orientation)

    def perform_action(
        self,
        action: actions.ActionDefinition,
        context: gameplay_models.Orientation = gameplay_models.Orientation.UNKNOWN,
    ) -> Optional[gameplay_models.ScoreAward]:
        if self._state != gameplay_models.SessionState.RUNNING:
            self._drop(
                gameplay_models.GestureEvent(
                    touch_count=int(action.touch_count),
                    tap_count=action.tap_count,
                    direction=action.direction,
                    orientation=context,
                )
            )
            return None

        performed = gameplay_models.PerformedAction(
            action=action,
            context=context,
            qualified=self._settings.qualify_descriptions,
        )
        logger.debug("Perform %s", performed.description)
        self._combo_stack.append(performed)

        match = self._combo_stack.check_for_combo(self._combo_detector)
        if match is not None:
            self._combo_stack.remove_last(match.length)
            award = self._scoring.award_combo(match.combo)
            logger.debug("Combo %s consumed %d actions", match.combo.title, match.length)
        else:
            award = self._scoring.award(performed)

        self.scoreChanged.emit(award.total)
        self.actionScored.emit(award)
        return award

    # ------------------------------------------------------------------
    # Timer ticks
    # ------------------------------------------------------------------

    def on_combo_reset_tick(self) -> None:
        if self._state != gameplay_models.SessionState.RUNNING:
            return
        if self._combo_stack.on_reset_tick():
            logger.debug("Combo stack expired")

    def on_countdown_tick(self) -> None:
        if self._countdown is None:
            return
        if self._state != gameplay_models.SessionState.RUNNING:
            return

        expired = self._countdown.tick(int(self._settings.countdown_tick_ms))
        self._emit_remaining_time()
        if expired:
            logger.info("Time is up")
            self.end()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _set_state(self, new_state: gameplay_models.SessionState) -> None:
        self._state = new_state
        self.stateChanged.emit(new_state)

    def _emit_remaining_time(self) -> None:
        if self._countdown is None:
            return
        snapshot = self._countdown.snapshot()
        self.remainingTimeChanged.emit(float(snapshot.remaining_seconds))
        # The top label shows whole seconds, so it only changes once per second.
        whole_seconds = self._countdown.whole_seconds_left()
        if whole_seconds != self._last_whole_seconds:
            self._last_whole_seconds = whole_seconds
            self.secondsLeftChanged.emit(whole_seconds)

    def _drop(self, dropped: gameplay_models.GestureEvent) -> None:
        logger.debug("Dropped %r while %s", dropped, self._state.value)
        self.gestureDropped.emit(dropped)
