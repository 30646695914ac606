from __future__ import annotations

import pytest

from gameday.models import AnalysisInput
from gameday.players import PlayerDirectory

from .sample_data import PLAYERS, snapshot_payload


@pytest.fixture
def directory() -> PlayerDirectory:
    return PlayerDirectory(PLAYERS)


@pytest.fixture
def payload() -> dict:
    return snapshot_payload()


@pytest.fixture
def snapshot(payload: dict) -> AnalysisInput:
    return AnalysisInput.model_validate(payload)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
