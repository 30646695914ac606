from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict

from gameday.models import TeamSelection


class ValidationResponse(BaseModel):
    errors: List[str]


class PlayerAllegianceResponse(BaseModel):
    player_id: str
    player_name: str
    position: str
    team: str
    count: int
    leagues: List[str]

    model_config = ConfigDict(from_attributes=True)


class AnalysisStatsResponse(BaseModel):
    total_cheering_for: int
    total_cheering_against: int
    selected_teams: int
    total_teams: int

    model_config = ConfigDict(from_attributes=True)


class GamedayResponse(BaseModel):
    display_mode: Literal["count"] = "count"
    cheering_for: List[PlayerAllegianceResponse]
    cheering_against: List[PlayerAllegianceResponse]
    user_teams: List[TeamSelection]
    stats: AnalysisStatsResponse


class PlayerExposureResponse(BaseModel):
    player_id: str
    player_name: str
    position: str
    team: str
    exposure_percentage: float
    exposure_display: str
    team_count: int
    total_teams: int
    leagues: List[str]


class ExposureResponse(BaseModel):
    display_mode: Literal["percentage"] = "percentage"
    exposure_report: List[PlayerExposureResponse]
    total_selected_teams: int


class PlayerExposurePercentageResponse(BaseModel):
    player_id: str
    exposure_percentage: float
    selected_teams: int
