"""Input adapters that turn raw league JSON into analysis snapshots."""

from .snapshot import (
    apply_selection,
    build_team_selections,
    deselect_all_teams,
    load_snapshot,
    parse_snapshot,
    select_all_teams,
    toggle_team,
    with_user_teams,
)

__all__ = [
    "apply_selection",
    "build_team_selections",
    "deselect_all_teams",
    "load_snapshot",
    "parse_snapshot",
    "select_all_teams",
    "toggle_team",
    "with_user_teams",
]
