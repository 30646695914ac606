"""Pydantic models for API I/O."""

from .analysis import (
    AnalysisStatsResponse,
    ExposureResponse,
    GamedayResponse,
    PlayerAllegianceResponse,
    PlayerExposurePercentageResponse,
    PlayerExposureResponse,
    ValidationResponse,
)
from .players import PlayerInfoResponse, PlayerSearchResponse

__all__ = [
    "AnalysisStatsResponse",
    "ExposureResponse",
    "GamedayResponse",
    "PlayerAllegianceResponse",
    "PlayerExposurePercentageResponse",
    "PlayerExposureResponse",
    "PlayerInfoResponse",
    "PlayerSearchResponse",
    "ValidationResponse",
]
