"""Player directory used to resolve display attributes."""

from .directory import (
    FREE_AGENT_TEAM,
    UNKNOWN_PLAYER_NAME,
    UNKNOWN_POSITION,
    PlayerDirectory,
    PlayerInfo,
    get_default_directory,
)

__all__ = [
    "FREE_AGENT_TEAM",
    "UNKNOWN_PLAYER_NAME",
    "UNKNOWN_POSITION",
    "PlayerDirectory",
    "PlayerInfo",
    "get_default_directory",
]
