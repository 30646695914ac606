"""Portfolio exposure: share of selected teams that roster each player."""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from gameday.analysis.counting import PlayerTally, clean_player_ids
from gameday.analysis.ranking import rank_exposures
from gameday.analysis.results import ExposureData, PlayerExposure
from gameday.models import AnalysisInput, RosterSnapshot, TeamSelection
from gameday.players import PlayerDirectory


logger = logging.getLogger(__name__)


def find_roster(rosters: Sequence[RosterSnapshot], roster_id: int) -> Optional[RosterSnapshot]:
    for roster in rosters:
        if roster.roster_id == roster_id:
            return roster
    return None


def all_roster_players(roster: RosterSnapshot) -> list[str]:
    """Every player on the roster (starters, bench, taxi squad, IR), once each."""

    return clean_player_ids(roster.players)


def exposure_percentage(team_count: int, total_teams: int) -> float:
    if total_teams <= 0:
        return 0.0
    return 100.0 * team_count / total_teams


def count_roster_players(snapshot: AnalysisInput) -> PlayerTally:
    tally = PlayerTally()
    for team in snapshot.selected_teams():
        league = snapshot.league_for(team.league_id)
        league_rosters = snapshot.rosters.get(team.league_id)
        if league is None or league_rosters is None:
            logger.warning(
                "Missing data for league %s (league=%s, rosters=%s); skipping",
                team.league_name,
                league is not None,
                league_rosters is not None,
            )
            continue

        roster = find_roster(league_rosters, team.roster_id)
        if roster is None:
            logger.warning(
                "No roster found for %s, roster %s; skipping",
                team.league_name,
                team.roster_id,
            )
            continue

        if tally.add_lineup(all_roster_players(roster), league.name) == 0:
            logger.warning(
                "No players found for %s, roster %s",
                team.league_name,
                team.roster_id,
            )
    return tally


def compute_exposure(
    snapshot: AnalysisInput,
    *,
    directory: PlayerDirectory,
) -> ExposureData:
    """Build the exposure report across every selected team's full roster.

    The denominator is the number of selected teams, including teams whose
    roster could not be found.
    """

    total_teams = len(snapshot.selected_teams())
    if total_teams == 0:
        return ExposureData(exposure_report=(), total_selected_teams=0)

    rows = []
    for entry in count_roster_players(snapshot):
        info = directory.resolve(entry.player_id)
        rows.append(
            PlayerExposure(
                player_id=entry.player_id,
                player_name=info.name,
                position=info.position,
                team=info.team,
                exposure_percentage=exposure_percentage(entry.count, total_teams),
                team_count=entry.count,
                total_teams=total_teams,
                leagues=tuple(entry.leagues),
            )
        )

    ranked = rank_exposures(rows)
    logger.debug("Exposure report: %d players across %d teams", len(ranked), total_teams)
    return ExposureData(exposure_report=tuple(ranked), total_selected_teams=total_teams)


def player_exposure_percentage(
    player_id: str,
    user_teams: Sequence[TeamSelection],
    rosters: Mapping[str, Sequence[RosterSnapshot]],
) -> float:
    """Exposure of a single player across the selected teams, 0-100."""

    selected = [team for team in user_teams if team.is_selected]
    if not selected:
        return 0.0

    teams_with_player = 0
    for team in selected:
        league_rosters = rosters.get(team.league_id)
        if not league_rosters:
            continue
        roster = find_roster(league_rosters, team.roster_id)
        if roster is None:
            continue
        if player_id in all_roster_players(roster):
            teams_with_player += 1

    return exposure_percentage(teams_with_player, len(selected))


__all__ = [
    "all_roster_players",
    "compute_exposure",
    "count_roster_players",
    "exposure_percentage",
    "find_roster",
    "player_exposure_percentage",
]
