import json

import pytest

import config


@pytest.fixture
def no_default_config(monkeypatch, tmp_path):
    monkeypatch.delenv("TAPPYSWIPEY_CONFIG_PATH", raising=False)
    monkeypatch.setattr(config, "_default_config_candidates", lambda: [tmp_path / "missing.json"])


def test_defaults_without_a_config_file(no_default_config):
    app_config, resolved_path = config.load_config()
    assert resolved_path is None
    assert app_config.timing.combo_reset_interval_ms == 1000
    assert app_config.timing.countdown_tick_ms == 10
    assert app_config.timed_mode.duration_seconds == 60.0
    assert app_config.timed_mode.diminishing_returns is True
    assert app_config.free_play.diminishing_returns is False
    assert app_config.feedback.qualify_descriptions_by_orientation is False


def test_load_from_file(no_default_config, tmp_path):
    config_path = tmp_path / "tappyswipey_config.json"
    config_path.write_text(
        json.dumps({"timed_mode": {"duration_seconds": 30}, "feedback": {"qualify_descriptions_by_orientation": True}}),
        encoding="utf-8",
    )
    app_config, resolved_path = config.load_config(config_path)
    assert resolved_path == config_path
    assert app_config.timed_mode.duration_seconds == 30.0
    assert app_config.feedback.qualify_descriptions_by_orientation is True


def test_explicit_path_from_environment(monkeypatch, tmp_path):
    config_path = tmp_path / "custom.json"
    config_path.write_text(json.dumps({"timing": {"combo_reset_interval_ms": 500}}), encoding="utf-8")
    monkeypatch.setenv("TAPPYSWIPEY_CONFIG_PATH", str(config_path))
    app_config, resolved_path = config.load_config()
    assert resolved_path == config_path
    assert app_config.timing.combo_reset_interval_ms == 500


def test_environment_overrides(no_default_config, monkeypatch):
    monkeypatch.setenv("TAPPYSWIPEY_COUNTDOWN_TICK_MS", "1")
    monkeypatch.setenv("TAPPYSWIPEY_TIMED_DURATION_SECONDS", "90.5")
    monkeypatch.setenv("TAPPYSWIPEY_FREE_PLAY_DIMINISHING_RETURNS", "yes")
    monkeypatch.setenv("TAPPYSWIPEY_TIMED_DIMINISHING_RETURNS", "off")
    monkeypatch.setenv("TAPPYSWIPEY_COMBO_RESET_INTERVAL_MS", "not-a-number")
    app_config, _ = config.load_config()
    assert app_config.timing.countdown_tick_ms == 1
    assert app_config.timing.combo_reset_interval_ms == 1000
    assert app_config.timed_mode.duration_seconds == 90.5
    assert app_config.free_play.diminishing_returns is True
    assert app_config.timed_mode.diminishing_returns is False


def test_invalid_json_raises_value_error(no_default_config, tmp_path):
    config_path = tmp_path / "broken.json"
    config_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        config.load_config(config_path)


def test_non_object_root_raises_value_error(no_default_config, tmp_path):
    config_path = tmp_path / "list.json"
    config_path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        config.load_config(config_path)


def test_validation_failure_raises_value_error(no_default_config, tmp_path):
    config_path = tmp_path / "invalid.json"
    config_path.write_text(json.dumps({"timing": {"countdown_tick_ms": 0}}), encoding="utf-8")
    with pytest.raises(ValueError):
        config.load_config(config_path)


def test_to_json_round_trips(no_default_config):
    app_config, _ = config.load_config()
    assert json.loads(config.to_json(app_config))["timed_mode"]["duration_seconds"] == 60.0
