"""Canonical league, roster and matchup models consumed by the analysis engine."""

from .sleeper import AnalysisInput, League, MatchupSnapshot, RosterSnapshot, TeamSelection

__all__ = [
    "AnalysisInput",
    "League",
    "MatchupSnapshot",
    "RosterSnapshot",
    "TeamSelection",
]
