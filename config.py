"""
config.py

Typed configuration loading and validation for TappySwipey.

Design goals
- Load at most one UTF-8 JSON config file
- Validate with pydantic (defaults included)
- Support environment variable overrides
- No other I/O beyond reading the config file (no directory creation)

Config file location
- If TAPPYSWIPEY_CONFIG_PATH is set, that file is used.
- Otherwise TappySwipey searches these paths in order and uses the first one that exists:
  1) ./tappyswipey_config.json (current working directory)
  2) <user config dir>/TappySwipey/TappySwipey/tappyswipey_config.json
- If none exists, built-in defaults are used.

Example config file (tappyswipey_config.json)
{
  "timing": {
    "combo_reset_interval_ms": 1000,
    "countdown_tick_ms": 10
  },
  "timed_mode": {
    "duration_seconds": 60.0,
    "diminishing_returns": true
  },
  "free_play": {
    "diminishing_returns": false
  },
  "feedback": {
    "qualify_descriptions_by_orientation": false
  }
}
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError


class TimingConfig(BaseModel):
    combo_reset_interval_ms: int = Field(
        default=1000, ge=1, description="Combo stack reset tick period in milliseconds."
    )
    countdown_tick_ms: int = Field(default=10, ge=1, description="Timed mode countdown tick period in milliseconds.")


class TimedModeConfig(BaseModel):
    duration_seconds: float = Field(default=60.0, gt=0.0, description="Starting remaining time in seconds.")
    diminishing_returns: bool = Field(default=True, description="Attenuate repeat firings of the same action.")


class FreePlayConfig(BaseModel):
    diminishing_returns: bool = Field(default=False, description="Attenuate repeat firings of the same action.")


class FeedbackConfig(BaseModel):
    qualify_descriptions_by_orientation: bool = Field(
        default=False, description="Append the device orientation to action descriptions."
    )


class AppConfig(BaseModel):
    timing: TimingConfig = Field(default_factory=TimingConfig)
    timed_mode: TimedModeConfig = Field(default_factory=TimedModeConfig)
    free_play: FreePlayConfig = Field(default_factory=FreePlayConfig)
    feedback: FeedbackConfig = Field(default_factory=FeedbackConfig)


def _default_config_candidates() -> List[Path]:
    config_directory = Path(user_config_dir("TappySwipey", "TappySwipey"))
    return [
        Path.cwd() / "tappyswipey_config.json",
        config_directory / "tappyswipey_config.json",
    ]


def _resolve_config_path() -> Optional[Path]:
    explicit_path_text = os.environ.get("TAPPYSWIPEY_CONFIG_PATH", "").strip()
    if explicit_path_text:
        return Path(explicit_path_text)

    for candidate_path in _default_config_candidates():
        if candidate_path.exists():
            return candidate_path

    return None


def _read_json_file_utf8(config_path: Path) -> Dict[str, Any]:
    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except OSError as exception:
        raise OSError(f"Failed to read config file: {config_path}. Error: {exception}") from exception

    try:
        parsed = json.loads(raw_text)
    except json.JSONDecodeError as exception:
        raise ValueError(f"Config file is not valid JSON: {config_path}. Error: {exception}") from exception

    if not isinstance(parsed, dict):
        raise ValueError(f"Config file root must be a JSON object: {config_path}")

    return parsed


def _apply_environment_overrides(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Environment overrides are optional. The config file is the primary source of truth.

    Override variables:
    - TAPPYSWIPEY_COMBO_RESET_INTERVAL_MS
    - TAPPYSWIPEY_COUNTDOWN_TICK_MS
    - TAPPYSWIPEY_TIMED_DURATION_SECONDS
    - TAPPYSWIPEY_TIMED_DIMINISHING_RETURNS
    - TAPPYSWIPEY_FREE_PLAY_DIMINISHING_RETURNS
    - TAPPYSWIPEY_QUALIFY_DESCRIPTIONS
    """
    def ensure_nested(config_root: Dict[str, Any], section_name: str) -> Dict[str, Any]:
        section = config_root.get(section_name)
        if isinstance(section, dict):
            return section
        section = {}
        config_root[section_name] = section
        return section

    updated_config = dict(config_dict)

    timing_section = ensure_nested(updated_config, "timing")
    timed_mode_section = ensure_nested(updated_config, "timed_mode")
    free_play_section = ensure_nested(updated_config, "free_play")
    feedback_section = ensure_nested(updated_config, "feedback")

    def override_int(env_name: str, target_dict: Dict[str, Any], key_name: str) -> None:
        value_text = os.environ.get(env_name, "").strip()
        if not value_text:
            return
        try:
            target_dict[key_name] = int(value_text)
        except ValueError:
            return

    def override_float(env_name: str, target_dict: Dict[str, Any], key_name: str) -> None:
        value_text = os.environ.get(env_name, "").strip()
        if not value_text:
            return
        try:
            target_dict[key_name] = float(value_text)
        except ValueError:
            return

    def override_bool(env_name: str, target_dict: Dict[str, Any], key_name: str) -> None:
        value_text = os.environ.get(env_name, "").strip().lower()
        if not value_text:
            return
        truthy = {"1", "true", "yes", "on"}
        falsy = {"0", "false", "no", "off"}
        if value_text in truthy:
            target_dict[key_name] = True
        elif value_text in falsy:
            target_dict[key_name] = False

    override_int("TAPPYSWIPEY_COMBO_RESET_INTERVAL_MS", timing_section, "combo_reset_interval_ms")
    override_int("TAPPYSWIPEY_COUNTDOWN_TICK_MS", timing_section, "countdown_tick_ms")

    override_float("TAPPYSWIPEY_TIMED_DURATION_SECONDS", timed_mode_section, "duration_seconds")
    override_bool("TAPPYSWIPEY_TIMED_DIMINISHING_RETURNS", timed_mode_section, "diminishing_returns")

    override_bool("TAPPYSWIPEY_FREE_PLAY_DIMINISHING_RETURNS", free_play_section, "diminishing_returns")

    override_bool("TAPPYSWIPEY_QUALIFY_DESCRIPTIONS", feedback_section, "qualify_descriptions_by_orientation")

    return updated_config


def load_config(config_path: Optional[Path] = None) -> Tuple[AppConfig, Optional[Path]]:
    resolved_path = config_path if config_path is not None else _resolve_config_path()
    json_dict: Dict[str, Any] = {}
    if resolved_path is not None:
        json_dict = _read_json_file_utf8(resolved_path)
    json_dict = _apply_environment_overrides(json_dict)

    try:
        config = AppConfig.model_validate(json_dict)
    except ValidationError as exception:
        source_text = str(resolved_path) if resolved_path is not None else "(defaults)"
        raise ValueError(f"Config validation failed for {source_text}:\n{exception}") from exception

    return config, resolved_path


@lru_cache(maxsize=1)
def get_config() -> Tuple[AppConfig, Optional[Path]]:
    return load_config()


def to_json(config: AppConfig) -> str:
    return json.dumps(config.model_dump(), ensure_ascii=False, indent=2)


def main() -> int:
    try:
        config, resolved_path = load_config()
    except Exception as exception:
        error_payload = {"ok": False, "error": str(exception)}
        print(json.dumps(error_payload, ensure_ascii=False, indent=2))
        return 2

    output_payload = {
        "ok": True,
        "config_path": str(resolved_path) if resolved_path is not None else None,
        "config": json.loads(to_json(config)),
    }
    print(json.dumps(output_payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
