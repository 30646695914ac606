import pytest
from httpx import ASGITransport, AsyncClient

from gameday.api import create_app
from gameday.config import EXPOSURE_PRECISION_ENV
from gameday.players import PlayerDirectory

from .sample_data import PLAYERS, snapshot_payload


@pytest.fixture
async def client(monkeypatch):
    monkeypatch.delenv(EXPOSURE_PRECISION_ENV, raising=False)
    app = create_app(PlayerDirectory(PLAYERS))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_validate_endpoint(client: AsyncClient):
    payload = snapshot_payload()
    del payload["rosters"]["A"]

    resp = await client.post("/validate", json=payload)

    assert resp.status_code == 200
    assert resp.json()["errors"] == ["Missing roster data for league: League A"]


@pytest.mark.anyio
async def test_gameday_endpoint(client: AsyncClient):
    resp = await client.post("/gameday", json=snapshot_payload())
    assert resp.status_code == 200
    body = resp.json()

    assert body["display_mode"] == "count"
    assert [row["player_id"] for row in body["cheering_for"]] == ["p1", "p2", "p7"]
    assert body["cheering_for"][0]["leagues"] == ["League A", "League B"]
    assert [row["count"] for row in body["cheering_against"]] == [2, 1, 1]
    assert body["stats"] == {
        "total_cheering_for": 3,
        "total_cheering_against": 3,
        "selected_teams": 2,
        "total_teams": 2,
    }


@pytest.mark.anyio
async def test_gameday_resolve_conflicts(client: AsyncClient):
    payload = snapshot_payload()
    payload["matchups"]["A"][0]["starters"] = ["p1", "p4"]

    plain = (await client.post("/gameday", json=payload)).json()
    resolved = (await client.post("/gameday", json=payload, params={"resolve_conflicts": "true"})).json()

    assert "p4" in [row["player_id"] for row in plain["cheering_for"]]
    assert "p4" not in [row["player_id"] for row in resolved["cheering_for"]]


@pytest.mark.anyio
async def test_invalid_snapshot_rejected_unless_forced(client: AsyncClient):
    payload = snapshot_payload()
    for team in payload["user_teams"]:
        team["is_selected"] = False

    resp = await client.post("/exposure", json=payload)
    assert resp.status_code == 422
    assert resp.json()["detail"]["errors"] == ["At least one team must be selected"]

    resp = await client.post("/exposure", json=payload, params={"force": "true"})
    assert resp.status_code == 200
    assert resp.json() == {
        "display_mode": "percentage",
        "exposure_report": [],
        "total_selected_teams": 0,
    }


@pytest.mark.anyio
async def test_exposure_endpoint(client: AsyncClient):
    resp = await client.post("/exposure", json=snapshot_payload())
    assert resp.status_code == 200
    body = resp.json()

    assert body["total_selected_teams"] == 2
    top = body["exposure_report"][0]
    assert top["player_id"] == "p1"
    assert top["exposure_percentage"] == pytest.approx(100.0)
    assert top["exposure_display"] == "100.0%"
    assert [row["player_id"] for row in body["exposure_report"]] == ["p1", "p2", "p3", "p7", "p8"]


@pytest.mark.anyio
async def test_single_player_exposure(client: AsyncClient):
    resp = await client.post("/players/p7/exposure", json=snapshot_payload())
    assert resp.status_code == 200
    assert resp.json() == {"player_id": "p7", "exposure_percentage": 50.0, "selected_teams": 2}


@pytest.mark.anyio
async def test_player_lookup_and_search(client: AsyncClient):
    resp = await client.get("/players/p4")
    assert resp.json() == {
        "player_id": "p4",
        "name": "Delta Four",
        "position": "WR",
        "team": "PHI",
        "known": True,
    }

    resp = await client.get("/players/ghost")
    assert resp.json()["name"] == "Unknown Player"
    assert resp.json()["known"] is False

    resp = await client.get("/players", params={"q": "echo"})
    assert [player["player_id"] for player in resp.json()["players"]] == ["p5"]


@pytest.mark.anyio
async def test_malformed_body_is_rejected(client: AsyncClient):
    resp = await client.post("/gameday", json={"user_teams": [{"league_id": "A"}]})
    assert resp.status_code == 422
