"""Load analysis snapshots from JSON and derive/adjust team selections."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Sequence

from pydantic import ValidationError

from gameday.errors import SnapshotLoadError
from gameday.models import AnalysisInput, League, RosterSnapshot, TeamSelection


logger = logging.getLogger(__name__)


def build_team_selections(
    user_id: str,
    leagues: Sequence[League],
    rosters: Mapping[str, Sequence[RosterSnapshot]],
) -> List[TeamSelection]:
    """One selected team per league in which ``user_id`` owns a roster."""

    teams: List[TeamSelection] = []
    for league in leagues:
        league_rosters = rosters.get(league.league_id) or []
        owned = next((roster for roster in league_rosters if roster.owner_id == user_id), None)
        if owned is None:
            logger.debug("User %s has no roster in league %s", user_id, league.name)
            continue
        teams.append(
            TeamSelection(
                league_id=league.league_id,
                league_name=league.name,
                roster_id=owned.roster_id,
                is_selected=True,
            )
        )
    return teams


def parse_snapshot(payload: Any) -> AnalysisInput:
    """Validate a decoded snapshot; teams are derived from rosters when omitted."""

    if not isinstance(payload, Mapping):
        raise SnapshotLoadError("snapshot must be a JSON object")
    try:
        snapshot = AnalysisInput.model_validate(payload)
    except ValidationError as exc:
        raise SnapshotLoadError(f"invalid snapshot: {exc}") from exc

    if "user_teams" not in payload and snapshot.user_id:
        teams = build_team_selections(snapshot.user_id, snapshot.leagues, snapshot.rosters)
        snapshot = with_user_teams(snapshot, teams)
    return snapshot


def load_snapshot(path: Path) -> AnalysisInput:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise SnapshotLoadError(f"snapshot not found: {path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise SnapshotLoadError(f"unable to read snapshot {path}: {exc}") from exc
    return parse_snapshot(payload)


def with_user_teams(snapshot: AnalysisInput, teams: Iterable[TeamSelection]) -> AnalysisInput:
    return snapshot.model_copy(update={"user_teams": list(teams)})


def toggle_team(teams: Sequence[TeamSelection], league_id: str) -> List[TeamSelection]:
    return [
        team.model_copy(update={"is_selected": not team.is_selected})
        if team.league_id == league_id
        else team
        for team in teams
    ]


def select_all_teams(teams: Sequence[TeamSelection]) -> List[TeamSelection]:
    return [team.model_copy(update={"is_selected": True}) for team in teams]


def deselect_all_teams(teams: Sequence[TeamSelection]) -> List[TeamSelection]:
    return [team.model_copy(update={"is_selected": False}) for team in teams]


def apply_selection(
    teams: Sequence[TeamSelection], league_ids: Iterable[str]
) -> List[TeamSelection]:
    """Select exactly the teams whose league id is in ``league_ids``."""

    wanted = set(league_ids)
    unknown = wanted.difference(team.league_id for team in teams)
    if unknown:
        logger.warning("Ignoring unknown league ids in selection: %s", ", ".join(sorted(unknown)))
    return [team.model_copy(update={"is_selected": team.league_id in wanted}) for team in teams]
