"""Report rows and containers produced by the analysis engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from gameday.models import TeamSelection


class DisplayMode(str, Enum):
    """How a report's numeric column is presented."""

    COUNT = "count"
    PERCENTAGE = "percentage"


@dataclass(frozen=True)
class PlayerAllegiance:
    """A player to cheer for or against, with the leagues that put them there."""

    player_id: str
    player_name: str
    position: str
    team: str
    count: int
    leagues: Tuple[str, ...]


@dataclass(frozen=True)
class PlayerExposure:
    """Share of the selected teams that roster a player."""

    player_id: str
    player_name: str
    position: str
    team: str
    exposure_percentage: float
    team_count: int
    total_teams: int
    leagues: Tuple[str, ...]


@dataclass(frozen=True)
class GamedayData:
    cheering_for: Tuple[PlayerAllegiance, ...]
    cheering_against: Tuple[PlayerAllegiance, ...]
    user_teams: Tuple[TeamSelection, ...]
    display_mode: DisplayMode = field(default=DisplayMode.COUNT, init=False)


@dataclass(frozen=True)
class ExposureData:
    exposure_report: Tuple[PlayerExposure, ...]
    total_selected_teams: int
    display_mode: DisplayMode = field(default=DisplayMode.PERCENTAGE, init=False)


@dataclass(frozen=True)
class AnalysisStats:
    total_cheering_for: int
    total_cheering_against: int
    selected_teams: int
    total_teams: int


@dataclass(frozen=True)
class LeagueBreakdown:
    """Payload for the "which leagues?" popup shown when a count is clicked."""

    player_id: str
    player_name: str
    display_mode: DisplayMode
    value: str
    leagues: Tuple[str, ...]


__all__ = [
    "AnalysisStats",
    "DisplayMode",
    "ExposureData",
    "GamedayData",
    "LeagueBreakdown",
    "PlayerAllegiance",
    "PlayerExposure",
]
