"""Read-only player lookup with display fallbacks for unknown players."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from gameday.config import load_settings
from gameday.errors import PlayerDataError


logger = logging.getLogger(__name__)

UNKNOWN_PLAYER_NAME = "Unknown Player"
UNKNOWN_POSITION = "Unknown"
FREE_AGENT_TEAM = "FA"


@dataclass(frozen=True)
class PlayerInfo:
    """Display attributes for one player after fallbacks are applied."""

    player_id: str
    name: str
    position: str
    team: str


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class PlayerDirectory:
    """Maps player ids to name, position and team.

    The backing mapping is copied on construction and never modified, so a
    single instance can be shared by every analysis call in the process.
    """

    def __init__(self, players: Mapping[str, Mapping[str, Any]]):
        self._players: Dict[str, Mapping[str, Any]] = {
            str(player_id): record
            for player_id, record in players.items()
            if isinstance(record, Mapping)
        }

    @classmethod
    def from_payload(cls, payload: Any) -> "PlayerDirectory":
        """Build a directory from a decoded dataset, with or without a ``data`` wrapper."""

        if isinstance(payload, Mapping) and isinstance(payload.get("data"), Mapping):
            payload = payload["data"]
        if not isinstance(payload, Mapping):
            raise PlayerDataError("player dataset must be a JSON object keyed by player id")
        return cls(payload)

    @classmethod
    def load(cls, path: Path) -> "PlayerDirectory":
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise PlayerDataError(f"player dataset not found: {path}") from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise PlayerDataError(f"unable to read player dataset {path}: {exc}") from exc
        directory = cls.from_payload(payload)
        logger.debug("Loaded %d players from %s", len(directory), path)
        return directory

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def get_player_name(self, player_id: str) -> str:
        record = self._players.get(player_id)
        return (record and _text(record.get("full_name"))) or UNKNOWN_PLAYER_NAME

    def get_player_position(self, player_id: str) -> str:
        record = self._players.get(player_id)
        return (record and _text(record.get("position"))) or UNKNOWN_POSITION

    def get_player_team(self, player_id: str) -> str:
        record = self._players.get(player_id)
        return (record and _text(record.get("team"))) or FREE_AGENT_TEAM

    def resolve(self, player_id: str) -> PlayerInfo:
        return PlayerInfo(
            player_id=player_id,
            name=self.get_player_name(player_id),
            position=self.get_player_position(player_id),
            team=self.get_player_team(player_id),
        )

    def get_player_info(self, player_id: str) -> Optional[Mapping[str, Any]]:
        """Return the raw dataset record, or ``None`` when the id is unknown."""

        return self._players.get(player_id)

    def has_player(self, player_id: str) -> bool:
        return player_id in self._players

    def all_player_ids(self) -> List[str]:
        return list(self._players.keys())

    def search_players_by_name(self, term: str) -> List[str]:
        """Case-insensitive substring search over full, first and last names."""

        needle = term.strip().lower()
        if not needle:
            return []
        matches = [
            player_id
            for player_id, record in self._players.items()
            if any(needle in value.lower() for value in _name_fields(record))
        ]
        return sorted(matches)


def _name_fields(record: Mapping[str, Any]) -> Iterable[str]:
    for key in ("full_name", "first_name", "last_name"):
        value = _text(record.get(key))
        if value:
            yield value


@lru_cache(maxsize=1)
def get_default_directory() -> PlayerDirectory:
    """Load the configured player dataset once per process."""

    settings = load_settings()
    return PlayerDirectory.load(settings.players_path)


__all__ = [
    "FREE_AGENT_TEAM",
    "UNKNOWN_PLAYER_NAME",
    "UNKNOWN_POSITION",
    "PlayerDirectory",
    "PlayerInfo",
    "get_default_directory",
]
