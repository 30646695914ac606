"""Report rendering helpers (CSV export)."""

from .export import export_exposure_to_csv, export_gameday_to_csv

__all__ = [
    "export_exposure_to_csv",
    "export_gameday_to_csv",
]
