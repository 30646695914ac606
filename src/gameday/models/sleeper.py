"""Immutable snapshots of league, roster and matchup data for one analysis call."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


def _none_to_list(value: object) -> object:
    # The platform sends ``null`` for empty rosters and unfilled lineups.
    return [] if value is None else value


class League(BaseModel):
    """League metadata as returned by the platform's league endpoints."""

    league_id: str = Field(..., min_length=1)
    name: str
    season: str = ""
    status: str = ""
    total_rosters: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


class TeamSelection(BaseModel):
    """The acting user's team in one league and whether it is included."""

    league_id: str = Field(..., min_length=1)
    league_name: str
    roster_id: int
    is_selected: bool = True

    model_config = ConfigDict(frozen=True)


class RosterSnapshot(BaseModel):
    """Full roster for one team: starters, bench, taxi squad and injured reserve."""

    roster_id: int
    owner_id: Optional[str] = None
    players: List[Optional[str]] = Field(default_factory=list)
    starters: List[Optional[str]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("players", "starters", mode="before")
    @classmethod
    def coerce_lists(cls, value: object) -> object:
        return _none_to_list(value)


class MatchupSnapshot(BaseModel):
    """One roster's lineup for a week; rosters sharing ``matchup_id`` are opponents."""

    roster_id: int
    matchup_id: Optional[int] = None
    starters: List[Optional[str]] = Field(default_factory=list)
    points: float = 0.0

    model_config = ConfigDict(frozen=True)

    @field_validator("starters", mode="before")
    @classmethod
    def coerce_starters(cls, value: object) -> object:
        return _none_to_list(value)

    @field_validator("points", mode="before")
    @classmethod
    def coerce_points(cls, value: object) -> object:
        return 0.0 if value is None else value


class AnalysisInput(BaseModel):
    """Everything the engine needs for one week, keyed by league id."""

    user_id: str = ""
    user_teams: List[TeamSelection] = Field(default_factory=list)
    leagues: List[League] = Field(default_factory=list)
    rosters: Dict[str, List[RosterSnapshot]] = Field(default_factory=dict)
    matchups: Dict[str, List[MatchupSnapshot]] = Field(default_factory=dict)
    week: Optional[int] = Field(default=None, ge=0)

    model_config = ConfigDict(frozen=True)

    def selected_teams(self) -> List[TeamSelection]:
        return [team for team in self.user_teams if team.is_selected]

    def league_for(self, league_id: str) -> Optional[League]:
        for league in self.leagues:
            if league.league_id == league_id:
                return league
        return None
