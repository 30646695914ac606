"""Structural checks run on a snapshot before any report is computed."""

from __future__ import annotations

from typing import List

from gameday.models import AnalysisInput


def validate_input(snapshot: AnalysisInput) -> List[str]:
    """Return human-readable problems with ``snapshot``; empty means valid.

    Every check runs even when an earlier one fails. A selected team whose
    roster id is absent from its league's data is not reported here; the
    calculators skip it with a warning instead.
    """

    errors: List[str] = []

    if not snapshot.user_id or not snapshot.user_id.strip():
        errors.append("User ID is required")

    if not snapshot.user_teams:
        errors.append("At least one user team is required")

    if not snapshot.leagues:
        errors.append("League information is required")

    selected = snapshot.selected_teams()
    if not selected:
        errors.append("At least one team must be selected")

    for team in selected:
        if team.league_id not in snapshot.rosters:
            errors.append(f"Missing roster data for league: {team.league_name}")
        if team.league_id not in snapshot.matchups:
            errors.append(f"Missing matchup data for league: {team.league_name}")

    return errors


__all__ = ["validate_input"]
