"""Environment-driven settings for the CLI, API and player directory."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)

PLAYERS_PATH_ENV = "GAMEDAY_PLAYERS_PATH"
LOG_LEVEL_ENV = "GAMEDAY_LOG_LEVEL"
EXPOSURE_PRECISION_ENV = "GAMEDAY_EXPOSURE_PRECISION"

DEFAULT_PLAYERS_PATH = Path(__file__).resolve().parent.parent / "data" / "players.json"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_EXPOSURE_PRECISION = 1
_MAX_EXPOSURE_PRECISION = 4


@dataclass(frozen=True)
class Settings:
    players_path: Path
    log_level: str
    exposure_precision: int


def _env_int(name: str, default: int, *, min_value: int | None = None, max_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Invalid log level for %s: %s; using default %s", name, raw, default)
        return default
    return level


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return Path(raw).expanduser()


def load_settings() -> Settings:
    """Read settings from the environment, falling back to packaged defaults."""

    return Settings(
        players_path=_env_path(PLAYERS_PATH_ENV, DEFAULT_PLAYERS_PATH),
        log_level=_env_log_level(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        exposure_precision=_env_int(
            EXPOSURE_PRECISION_ENV,
            DEFAULT_EXPOSURE_PRECISION,
            min_value=0,
            max_value=_MAX_EXPOSURE_PRECISION,
        ),
    )
