import json
import sys

import config
import tappyswipey


def test_catalog_payload_lists_every_action():
    payload = tappyswipey._catalog_payload()
    assert len(payload) == 32
    assert payload[0]["title"] == "Single Tap"
    assert payload[0]["requires_failure_of"] == ["Double Tap", "Triple Tap", "Quadruple Tap"]
    assert payload[16]["kind"] == "swipe"
    assert payload[16]["direction"] == "up"
    assert payload[16]["requires_failure_of"] == []


def test_list_actions_cli(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["tappyswipey.py", "--list-actions"])
    assert tappyswipey.main() == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed[-1]["title"] == "Four-Finger Swipe Right"


def test_self_tests_pass(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["tappyswipey.py", "--run-tests"])
    assert tappyswipey.main() == 0
    assert "PASS" in capsys.readouterr().out


def test_timed_simulation_ends_on_its_own(monkeypatch, capsys):
    monkeypatch.setattr(config, "get_config", lambda: (config.AppConfig(), None))
    result = tappyswipey._run_simulation(mode="timed", duration_seconds=0.05, gestures_per_second=200.0, seed=7)
    assert result == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["mode"] == "TIMED"
    assert summary["remaining_seconds"] == 0.0
    assert summary["final_score"] >= 0
