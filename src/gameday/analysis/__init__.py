"""Allegiance and exposure analysis over league snapshots."""

from .allegiance import compute_allegiance
from .exposure import compute_exposure, player_exposure_percentage
from .reconcile import reconcile_allegiances
from .results import (
    AnalysisStats,
    DisplayMode,
    ExposureData,
    GamedayData,
    LeagueBreakdown,
    PlayerAllegiance,
    PlayerExposure,
)
from .service import AnalysisService, analysis_stats, format_exposure, league_breakdown
from .validation import validate_input

__all__ = [
    "AnalysisService",
    "AnalysisStats",
    "DisplayMode",
    "ExposureData",
    "GamedayData",
    "LeagueBreakdown",
    "PlayerAllegiance",
    "PlayerExposure",
    "analysis_stats",
    "compute_allegiance",
    "compute_exposure",
    "format_exposure",
    "league_breakdown",
    "player_exposure_percentage",
    "reconcile_allegiances",
    "validate_input",
]
