"""Cheer-for / cheer-against counts from this week's starting lineups."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from gameday.analysis.counting import PlayerCount, PlayerTally
from gameday.analysis.ranking import rank_allegiances
from gameday.analysis.results import GamedayData, PlayerAllegiance
from gameday.models import AnalysisInput, MatchupSnapshot
from gameday.players import PlayerDirectory


logger = logging.getLogger(__name__)


def find_user_matchup(
    matchups: Sequence[MatchupSnapshot], roster_id: int
) -> Optional[MatchupSnapshot]:
    for matchup in matchups:
        if matchup.roster_id == roster_id:
            return matchup
    return None


def find_opponent_matchup(
    matchups: Sequence[MatchupSnapshot], user_matchup: MatchupSnapshot
) -> Optional[MatchupSnapshot]:
    """Return the other roster sharing the user's pairing id, if any.

    An unpaired roster (``matchup_id`` of ``None``) has no opponent.
    """

    if user_matchup.matchup_id is None:
        return None
    for matchup in matchups:
        if (
            matchup.matchup_id == user_matchup.matchup_id
            and matchup.roster_id != user_matchup.roster_id
        ):
            return matchup
    return None


def count_starters(snapshot: AnalysisInput) -> tuple[PlayerTally, PlayerTally]:
    """Tally the user's starters and their opponents' starters over selected teams."""

    user_counts = PlayerTally()
    opponent_counts = PlayerTally()

    for team in snapshot.selected_teams():
        league = snapshot.league_for(team.league_id)
        league_matchups = snapshot.matchups.get(team.league_id)
        if league is None or league_matchups is None:
            logger.warning(
                "Missing data for league %s (league=%s, matchups=%s); skipping",
                team.league_name,
                league is not None,
                league_matchups is not None,
            )
            continue

        user_matchup = find_user_matchup(league_matchups, team.roster_id)
        if user_matchup is None:
            logger.warning(
                "No matchup found for %s, roster %s; skipping",
                team.league_name,
                team.roster_id,
            )
            continue
        user_counts.add_lineup(user_matchup.starters, league.name)

        opponent = find_opponent_matchup(league_matchups, user_matchup)
        if opponent is None:
            logger.warning(
                "No opponent matchup found for %s, roster %s; skipping opponent",
                league.name,
                team.roster_id,
            )
            continue
        opponent_counts.add_lineup(opponent.starters, league.name)

    return user_counts, opponent_counts


def _to_allegiance(entry: PlayerCount, directory: PlayerDirectory) -> PlayerAllegiance:
    info = directory.resolve(entry.player_id)
    return PlayerAllegiance(
        player_id=entry.player_id,
        player_name=info.name,
        position=info.position,
        team=info.team,
        count=entry.count,
        leagues=tuple(entry.leagues),
    )


def compute_allegiance(
    snapshot: AnalysisInput,
    *,
    directory: PlayerDirectory,
) -> GamedayData:
    """Build the gameday report for the selected teams.

    A player started by the user and by an opponent appears in both tables,
    each with its own count and league list. Leagues missing the user's
    matchup or an opponent are left out of the affected table.
    """
    user_counts, opponent_counts = count_starters(snapshot)

    cheering_for = rank_allegiances(_to_allegiance(entry, directory) for entry in user_counts)
    cheering_against = rank_allegiances(
        _to_allegiance(entry, directory) for entry in opponent_counts
    )
    logger.debug(
        "Gameday report: %d cheering for, %d cheering against",
        len(cheering_for),
        len(cheering_against),
    )
    return GamedayData(
        cheering_for=tuple(cheering_for),
        cheering_against=tuple(cheering_against),
        user_teams=tuple(snapshot.user_teams),
    )


__all__ = [
    "compute_allegiance",
    "count_starters",
    "find_opponent_matchup",
    "find_user_matchup",
]
