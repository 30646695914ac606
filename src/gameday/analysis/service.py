"""Facade bundling the analysis operations around one player directory."""

from __future__ import annotations

from typing import List, Mapping, Sequence

from gameday.analysis.allegiance import compute_allegiance
from gameday.analysis.exposure import compute_exposure, player_exposure_percentage
from gameday.analysis.reconcile import reconcile_allegiances
from gameday.analysis.results import (
    AnalysisStats,
    DisplayMode,
    ExposureData,
    GamedayData,
    LeagueBreakdown,
    PlayerAllegiance,
    PlayerExposure,
)
from gameday.analysis.validation import validate_input
from gameday.models import AnalysisInput, RosterSnapshot, TeamSelection
from gameday.players import PlayerDirectory, get_default_directory


def analysis_stats(gameday: GamedayData) -> AnalysisStats:
    return AnalysisStats(
        total_cheering_for=len(gameday.cheering_for),
        total_cheering_against=len(gameday.cheering_against),
        selected_teams=sum(1 for team in gameday.user_teams if team.is_selected),
        total_teams=len(gameday.user_teams),
    )


def format_exposure(row: PlayerExposure, *, precision: int = 1) -> str:
    return f"{row.exposure_percentage:.{precision}f}%"


def league_breakdown(
    row: PlayerAllegiance | PlayerExposure,
    *,
    precision: int = 1,
) -> LeagueBreakdown:
    """Describe where a clicked player was counted."""

    if isinstance(row, PlayerExposure):
        mode = DisplayMode.PERCENTAGE
        value = f"{format_exposure(row, precision=precision)} ({row.team_count}/{row.total_teams} teams)"
    else:
        mode = DisplayMode.COUNT
        value = str(row.count)
    return LeagueBreakdown(
        player_id=row.player_id,
        player_name=row.player_name,
        display_mode=mode,
        value=value,
        leagues=row.leagues,
    )


class AnalysisService:
    """Stateless entry point holding the directory used to resolve players.

    Without an explicit directory the bundled dataset is loaded here, which
    raises :class:`PlayerDataError` when the dataset is unreadable.
    """

    def __init__(self, directory: PlayerDirectory | None = None):
        if directory is None:
            directory = get_default_directory()
        self._directory = directory

    @property
    def directory(self) -> PlayerDirectory:
        return self._directory

    def validate_input(self, snapshot: AnalysisInput) -> List[str]:
        return validate_input(snapshot)

    def compute_allegiance(
        self,
        snapshot: AnalysisInput,
        *,
        resolve_conflicts: bool = False,
    ) -> GamedayData:
        gameday = compute_allegiance(snapshot, directory=self.directory)
        if resolve_conflicts:
            gameday = reconcile_allegiances(gameday)
        return gameday

    def compute_exposure(self, snapshot: AnalysisInput) -> ExposureData:
        return compute_exposure(snapshot, directory=self.directory)

    def player_exposure_percentage(
        self,
        player_id: str,
        user_teams: Sequence[TeamSelection],
        rosters: Mapping[str, Sequence[RosterSnapshot]],
    ) -> float:
        return player_exposure_percentage(player_id, user_teams, rosters)

    def analysis_stats(self, gameday: GamedayData) -> AnalysisStats:
        return analysis_stats(gameday)

    def league_breakdown(
        self, row: PlayerAllegiance | PlayerExposure, *, precision: int = 1
    ) -> LeagueBreakdown:
        return league_breakdown(row, precision=precision)


__all__ = [
    "AnalysisService",
    "analysis_stats",
    "format_exposure",
    "league_breakdown",
]
