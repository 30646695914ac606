"""CSV export helpers for gameday and exposure reports."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Sequence

from gameday.analysis.results import ExposureData, GamedayData, PlayerAllegiance
from gameday.errors import ReportExportError


ALLEGIANCE_HEADERS = ("table", "player_id", "name", "position", "team", "count", "leagues")
EXPOSURE_HEADERS = (
    "player_id",
    "name",
    "position",
    "team",
    "exposure",
    "team_count",
    "total_teams",
    "leagues",
)

_TABLES = ("for", "against")
LEAGUE_SEPARATOR = "; "


def _allegiance_rows(table: str, rows: Sequence[PlayerAllegiance]) -> list[list[object]]:
    return [
        [
            table,
            row.player_id,
            row.player_name,
            row.position,
            row.team,
            row.count,
            LEAGUE_SEPARATOR.join(row.leagues),
        ]
        for row in rows
    ]


def export_gameday_to_csv(gameday: GamedayData, *, tables: Sequence[str] = _TABLES) -> str:
    """Write the cheering-for and/or cheering-against tables as one CSV."""

    unknown = [table for table in tables if table not in _TABLES]
    if unknown:
        raise ReportExportError(f"Unknown gameday table(s): {', '.join(unknown)}")

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(ALLEGIANCE_HEADERS)
    for table in tables:
        rows = gameday.cheering_for if table == "for" else gameday.cheering_against
        writer.writerows(_allegiance_rows(table, rows))
    return buffer.getvalue()


def export_exposure_to_csv(exposure: ExposureData, *, precision: int = 1) -> str:
    if precision < 0:
        raise ReportExportError("precision must be non-negative")

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(EXPOSURE_HEADERS)
    for row in exposure.exposure_report:
        writer.writerow([
            row.player_id,
            row.player_name,
            row.position,
            row.team,
            f"{row.exposure_percentage:.{precision}f}",
            row.team_count,
            row.total_teams,
            LEAGUE_SEPARATOR.join(row.leagues),
        ])
    return buffer.getvalue()


__all__ = [
    "ALLEGIANCE_HEADERS",
    "EXPOSURE_HEADERS",
    "export_exposure_to_csv",
    "export_gameday_to_csv",
]
