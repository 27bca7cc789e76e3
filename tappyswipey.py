"""
tappyswipey.py

Command line entrypoint for the gameplay core. There is no UI here: the host
application owns rendering and touch input.

Modes
- --list-actions: print the action catalog as JSON
- --run-tests: run the in-module self tests (no event loop)
- --simulate timed|free: run a headless Qt event loop that feeds random catalog
  gestures through a GestureRouter into a GameSession and prints the summary
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import json
import logging
import random
import sys
from typing import Any, Dict, List, Optional

from PyQt6.QtCore import QCoreApplication, QTimer

import actions
import config as config_module
import game_session
import gameplay_models
import gesture_router
import gesture_rules


logger = logging.getLogger(__name__)


@dataclass
class _SimulationState:
    gestures_sent: int = 0
    gestures_scored: int = 0
    gestures_dropped: int = 0
    summary: Optional[gameplay_models.SessionSummary] = None


def _catalog_payload() -> List[Dict[str, Any]]:
    payload: List[Dict[str, Any]] = []
    dependencies = gesture_rules.failure_dependencies()
    for action in actions.ALL_ACTIONS:
        spec = gesture_rules.recognizer_spec_for(action)
        payload.append(
            {
                "title": action.title,
                "point_value": action.point_value,
                "touch_count": action.touch_count,
                "kind": spec.kind,
                "tap_count": spec.tap_count,
                "direction": spec.direction.value if spec.direction is not None else None,
                "requires_failure_of": dependencies.get(action.title, []),
            }
        )
    return payload


def _summary_payload(summary: gameplay_models.SessionSummary, state: _SimulationState) -> Dict[str, Any]:
    return {
        "mode": summary.mode.value,
        "final_score": summary.final_score,
        "remaining_seconds": summary.remaining_seconds,
        "actions_performed": summary.actions_performed,
        "action_counts": dict(sorted(summary.action_counts.items())),
        "gestures_sent": state.gestures_sent,
        "gestures_scored": state.gestures_scored,
        "gestures_dropped": state.gestures_dropped,
    }


def _run_self_tests() -> None:
    import combo_stack
    import countdown_model
    import scoring

    actions._run_unit_tests()
    gesture_rules._run_unit_tests()
    combo_stack._run_unit_tests()
    scoring._run_unit_tests()
    countdown_model._run_unit_tests()


def _run_simulation(
    *,
    mode: str,
    duration_seconds: float,
    gestures_per_second: float,
    seed: Optional[int],
) -> int:
    app_config, config_path = config_module.get_config()
    logger.debug("Loaded config from %s", config_path or "(defaults)")

    qt_application = QCoreApplication.instance() or QCoreApplication(sys.argv)

    if mode == "timed":
        settings = game_session.SessionSettings.timed(app_config, duration_seconds=duration_seconds)
    else:
        settings = game_session.SessionSettings.free_play(app_config)

    session = game_session.GameSession(settings)
    rng = random.Random(seed)
    orientations = [item for item in gameplay_models.Orientation if item is not gameplay_models.Orientation.UNKNOWN]
    router = gesture_router.GestureRouter(lambda: rng.choice(orientations))
    specs = gesture_rules.recognizer_specs()
    state = _SimulationState()

    router.gestureEvent.connect(session.on_gesture_event)

    def on_scored(award: gameplay_models.ScoreAward) -> None:
        state.gestures_scored += 1
        logger.debug("%s +%d -> %d", award.description, award.points, award.total)

    def on_dropped(_dropped: gameplay_models.GestureEvent) -> None:
        state.gestures_dropped += 1

    def on_ended(summary: gameplay_models.SessionSummary) -> None:
        state.summary = summary

    session.actionScored.connect(on_scored)
    session.gestureDropped.connect(on_dropped)
    session.sessionEnded.connect(on_ended)
    session.exitRequested.connect(qt_application.quit)

    feed_timer = QTimer()
    feed_timer.setInterval(max(1, int(1000.0 / max(0.1, float(gestures_per_second)))))

    def feed_one_gesture() -> None:
        state.gestures_sent += 1
        router.handle_recognizer(rng.choice(specs))

    feed_timer.timeout.connect(feed_one_gesture)

    if not settings.is_timed:
        QTimer.singleShot(int(duration_seconds * 1000.0), session.end)

    session.start()
    feed_timer.start()
    qt_application.exec()
    feed_timer.stop()

    summary = state.summary if state.summary is not None else session.summary()
    print(json.dumps(_summary_payload(summary, state), ensure_ascii=False, indent=2))
    return 0


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TappySwipey gameplay core")
    parser.add_argument("--list-actions", action="store_true", help="Print the action catalog as JSON.")
    parser.add_argument("--run-tests", action="store_true", help="Run pure logic self tests.")
    parser.add_argument(
        "--simulate",
        choices=["timed", "free"],
        default=None,
        help="Run a headless session fed with random gestures.",
    )
    parser.add_argument("--duration", type=float, default=5.0, help="Simulated session length in seconds.")
    parser.add_argument("--gestures-per-second", type=float, default=4.0, help="Random gesture rate.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the simulation.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main() -> int:
    args = build_argument_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_actions:
        print(json.dumps(_catalog_payload(), ensure_ascii=False, indent=2))
        return 0

    if args.run_tests:
        try:
            _run_self_tests()
        except AssertionError as exc:
            print("Self tests: FAIL")
            print(str(exc))
            return 2
        print("Self tests: PASS")
        return 0

    if args.simulate is not None:
        return _run_simulation(
            mode=str(args.simulate),
            duration_seconds=float(args.duration),
            gestures_per_second=float(args.gestures_per_second),
            seed=args.seed,
        )

    build_argument_parser().print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
