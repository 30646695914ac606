from __future__ import annotations

from typing import List

from pydantic import BaseModel


class PlayerInfoResponse(BaseModel):
    player_id: str
    name: str
    position: str
    team: str
    known: bool


class PlayerSearchResponse(BaseModel):
    query: str
    players: List[PlayerInfoResponse]
