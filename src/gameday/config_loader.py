"""Persist and load CLI team-selection profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from gameday.errors import ProfileLoadError
from gameday.models import TeamSelection


@dataclass
class SelectionProfile:
    selected_league_ids: List[str] = field(default_factory=list)

    @classmethod
    def load(cls, path: Path) -> "SelectionProfile":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ProfileLoadError(f"selection profile not found: {path}") from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise ProfileLoadError(f"unable to read selection profile {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ProfileLoadError(f"selection profile {path} must be a JSON object")
        league_ids = data.get("selected_league_ids", [])
        if not isinstance(league_ids, list):
            raise ProfileLoadError(f"selection profile {path}: selected_league_ids must be a list")
        return cls(selected_league_ids=[str(item) for item in league_ids])

    @classmethod
    def from_teams(cls, teams: Sequence[TeamSelection]) -> "SelectionProfile":
        return cls(selected_league_ids=[team.league_id for team in teams if team.is_selected])

    def save(self, path: Path) -> None:
        payload = {"selected_league_ids": self.selected_league_ids}
        try:
            path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:
            raise ProfileLoadError(f"unable to write selection profile {path}: {exc}") from exc
