"""Gameday allegiance and roster exposure analysis for multi-league fantasy players."""

__version__ = "0.1.0"
