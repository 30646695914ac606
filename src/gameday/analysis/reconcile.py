"""Optional pass that keeps a doubly-listed player in only one gameday table."""

from __future__ import annotations

from gameday.analysis.results import GamedayData


def reconcile_allegiances(gameday: GamedayData) -> GamedayData:
    """Drop each player from the table where their count is lower.

    A player started both by the user and by an opponent stays in whichever
    table has the higher count; equal counts keep them in ``cheering_for``.
    Ordering within each table is preserved.
    """

    for_counts = {row.player_id: row.count for row in gameday.cheering_for}
    against_counts = {row.player_id: row.count for row in gameday.cheering_against}
    shared = for_counts.keys() & against_counts.keys()
    if not shared:
        return gameday

    against_wins = {
        player_id for player_id in shared if against_counts[player_id] > for_counts[player_id]
    }
    return GamedayData(
        cheering_for=tuple(
            row for row in gameday.cheering_for if row.player_id not in against_wins
        ),
        cheering_against=tuple(
            row
            for row in gameday.cheering_against
            if row.player_id not in shared or row.player_id in against_wins
        ),
        user_teams=gameday.user_teams,
    )


__all__ = ["reconcile_allegiances"]
