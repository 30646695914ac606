"""Deterministic ordering shared by both report types."""

from __future__ import annotations

from typing import Iterable, List

from gameday.analysis.results import PlayerAllegiance, PlayerExposure


def rank_allegiances(rows: Iterable[PlayerAllegiance]) -> List[PlayerAllegiance]:
    """Order by count descending, then player name, then id."""

    return sorted(rows, key=lambda row: (-row.count, row.player_name, row.player_id))


def rank_exposures(rows: Iterable[PlayerExposure]) -> List[PlayerExposure]:
    """Order by exposure descending, then player name, then id."""

    return sorted(
        rows,
        key=lambda row: (-row.exposure_percentage, row.player_name, row.player_id),
    )


__all__ = ["rank_allegiances", "rank_exposures"]
