"""Exceptions raised by the loading, export and service layers."""

from __future__ import annotations


class GamedayError(RuntimeError):
    """Base class for failures outside the analysis engine."""


class SnapshotLoadError(GamedayError):
    """Raised when an analysis snapshot cannot be read or parsed."""


class PlayerDataError(GamedayError):
    """Raised when the player dataset cannot be read or parsed."""


class ProfileLoadError(GamedayError):
    """Raised when a selection profile cannot be read, parsed or written."""


class ReportExportError(GamedayError):
    """Raised when a report cannot be rendered in the requested format or written out."""


__all__ = [
    "GamedayError",
    "SnapshotLoadError",
    "PlayerDataError",
    "ProfileLoadError",
    "ReportExportError",
]
