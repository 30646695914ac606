"""Per-player tallies shared by the allegiance and exposure calculators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional


@dataclass
class PlayerCount:
    player_id: str
    count: int = 0
    leagues: List[str] = field(default_factory=list)


def clean_player_ids(player_ids: Iterable[Optional[str]]) -> List[str]:
    """Drop null/blank ids and repeats, keeping first-seen order."""

    seen: set[str] = set()
    cleaned: List[str] = []
    for player_id in player_ids:
        if player_id is None:
            continue
        text = str(player_id).strip()
        if not text or text in seen:
            continue
        seen.add(text)
        cleaned.append(text)
    return cleaned


class PlayerTally:
    """Accumulates one count per (player, team) plus the leagues seen."""

    def __init__(self) -> None:
        self._counts: Dict[str, PlayerCount] = {}

    def add_lineup(self, player_ids: Iterable[Optional[str]], league_name: str) -> int:
        """Count every player in a lineup or roster once; returns players added."""

        added = 0
        for player_id in clean_player_ids(player_ids):
            entry = self._counts.get(player_id)
            if entry is None:
                entry = PlayerCount(player_id=player_id)
                self._counts[player_id] = entry
            entry.count += 1
            if league_name not in entry.leagues:
                entry.leagues.append(league_name)
            added += 1
        return added

    def __iter__(self) -> Iterator[PlayerCount]:
        return iter(self._counts.values())

    def __len__(self) -> int:
        return len(self._counts)

    def get(self, player_id: str) -> Optional[PlayerCount]:
        return self._counts.get(player_id)
