"""Runtime configuration helpers."""

from .settings import (
    DEFAULT_PLAYERS_PATH,
    EXPOSURE_PRECISION_ENV,
    LOG_LEVEL_ENV,
    PLAYERS_PATH_ENV,
    Settings,
    load_settings,
)

__all__ = [
    "DEFAULT_PLAYERS_PATH",
    "EXPOSURE_PRECISION_ENV",
    "LOG_LEVEL_ENV",
    "PLAYERS_PATH_ENV",
    "Settings",
    "load_settings",
]
