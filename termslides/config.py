"""TOML-based playback and logging configuration.

Loads ~/.termslides/defaults.toml (global) and termslides.toml (project),
merges them, and resolves the result into Settings.

Example termslides.toml:

    [playback]
    timer = "precise"
    speed = 1.5

    [logging]
    enabled = true
    level = "DEBUG"
"""

from __future__ import annotations

import math
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from termslides.exceptions import ConfigurationError
from termslides.observability import LOG_LEVELS, LogConfig
from termslides.timer import TIMER_KINDS, Sleeper, get_sleeper

type RawConfig = dict[str, Any]

GLOBAL_CONFIG_PATH = Path.home() / ".termslides" / "defaults.toml"
PROJECT_CONFIG_NAME = "termslides.toml"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved configuration.

    Attributes:
        timer: Sleep implementation, "standard" or "precise".
        speed: Playback speed; every interval and duration is divided by it.
        logging: Logging configuration, or None when logging stays off.
    """

    timer: str = "standard"
    speed: float = 1.0
    logging: LogConfig | None = None

    def sleeper(self) -> Sleeper:
        return get_sleeper(self.timer, speed=self.speed)


def _deep_merge(base: RawConfig, override: RawConfig) -> RawConfig:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_toml(path: Path) -> RawConfig:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc


def load_config(
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
) -> RawConfig:
    global_cfg = _read_toml(global_path or GLOBAL_CONFIG_PATH)
    project_path = (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME
    project_cfg = _read_toml(project_path)

    merged = _deep_merge(global_cfg, project_cfg)
    merged.setdefault("playback", {})
    merged.setdefault("logging", {})
    return merged


def _build_playback(raw: RawConfig) -> tuple[str, float]:
    timer = raw.get("timer", "standard")
    if timer not in TIMER_KINDS:
        raise ConfigurationError(
            f"Unknown timer '{timer}'. Valid: {', '.join(TIMER_KINDS)}"
        )

    speed = raw.get("speed", 1.0)
    bad_type = isinstance(speed, bool) or not isinstance(speed, int | float)
    if bad_type or not math.isfinite(speed) or speed <= 0:
        raise ConfigurationError(f"playback.speed must be a positive finite number, got {speed!r}")

    return timer, float(speed)


def _build_logging(raw: RawConfig) -> LogConfig | None:
    raw = dict(raw)
    if not raw.pop("enabled", False):
        return None

    level = str(raw.get("level", "INFO")).upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level '{level}'. Valid: {', '.join(LOG_LEVELS)}"
        )
    raw["level"] = level

    try:
        return LogConfig(**raw)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid [logging] section: {exc}") from exc


def load_settings(
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
) -> Settings:
    config = load_config(project_dir=project_dir, global_path=global_path)
    timer, speed = _build_playback(config["playback"])
    return Settings(timer=timer, speed=speed, logging=_build_logging(config["logging"]))
