"""REST API exposing the gameday and exposure reports."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query

from gameday.analysis import (
    AnalysisService,
    ExposureData,
    GamedayData,
    format_exposure,
)
from gameday.api.schemas import (
    AnalysisStatsResponse,
    ExposureResponse,
    GamedayResponse,
    PlayerAllegianceResponse,
    PlayerExposurePercentageResponse,
    PlayerExposureResponse,
    PlayerInfoResponse,
    PlayerSearchResponse,
    ValidationResponse,
)
from gameday.config import load_settings
from gameday.models import AnalysisInput
from gameday.players import PlayerDirectory


logger = logging.getLogger(__name__)

_SEARCH_LIMIT_DEFAULT = 25


def _gameday_response(gameday: GamedayData, service: AnalysisService) -> GamedayResponse:
    return GamedayResponse(
        cheering_for=[
            PlayerAllegianceResponse.model_validate(row) for row in gameday.cheering_for
        ],
        cheering_against=[
            PlayerAllegianceResponse.model_validate(row) for row in gameday.cheering_against
        ],
        user_teams=list(gameday.user_teams),
        stats=AnalysisStatsResponse.model_validate(service.analysis_stats(gameday)),
    )


def _exposure_response(exposure: ExposureData, *, precision: int) -> ExposureResponse:
    return ExposureResponse(
        exposure_report=[
            PlayerExposureResponse(
                player_id=row.player_id,
                player_name=row.player_name,
                position=row.position,
                team=row.team,
                exposure_percentage=row.exposure_percentage,
                exposure_display=format_exposure(row, precision=precision),
                team_count=row.team_count,
                total_teams=row.total_teams,
                leagues=list(row.leagues),
            )
            for row in exposure.exposure_report
        ],
        total_selected_teams=exposure.total_selected_teams,
    )


def _player_response(directory: PlayerDirectory, player_id: str) -> PlayerInfoResponse:
    info = directory.resolve(player_id)
    return PlayerInfoResponse(
        player_id=info.player_id,
        name=info.name,
        position=info.position,
        team=info.team,
        known=directory.has_player(player_id),
    )


def create_app(directory: PlayerDirectory | None = None) -> FastAPI:
    app = FastAPI(title="gameday helper")
    service = AnalysisService(directory)
    settings = load_settings()
    app.state.analysis_service = service

    def ensure_valid(snapshot: AnalysisInput, force: bool) -> None:
        errors = service.validate_input(snapshot)
        if errors and not force:
            raise HTTPException(status_code=422, detail={"errors": errors})
        if errors:
            logger.info("Proceeding with invalid snapshot (force=true): %s", "; ".join(errors))

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/validate", response_model=ValidationResponse)
    async def validate(snapshot: AnalysisInput) -> ValidationResponse:
        return ValidationResponse(errors=service.validate_input(snapshot))

    @app.post("/gameday", response_model=GamedayResponse)
    async def gameday(
        snapshot: AnalysisInput,
        force: bool = Query(False),
        resolve_conflicts: bool = Query(False),
    ) -> GamedayResponse:
        ensure_valid(snapshot, force)
        result = service.compute_allegiance(snapshot, resolve_conflicts=resolve_conflicts)
        return _gameday_response(result, service)

    @app.post("/exposure", response_model=ExposureResponse)
    async def exposure(
        snapshot: AnalysisInput,
        force: bool = Query(False),
    ) -> ExposureResponse:
        ensure_valid(snapshot, force)
        result = service.compute_exposure(snapshot)
        return _exposure_response(result, precision=settings.exposure_precision)

    @app.post("/players/{player_id}/exposure", response_model=PlayerExposurePercentageResponse)
    async def player_exposure(player_id: str, snapshot: AnalysisInput) -> PlayerExposurePercentageResponse:
        percentage = service.player_exposure_percentage(
            player_id, snapshot.user_teams, snapshot.rosters
        )
        return PlayerExposurePercentageResponse(
            player_id=player_id,
            exposure_percentage=percentage,
            selected_teams=len(snapshot.selected_teams()),
        )

    @app.get("/players/{player_id}", response_model=PlayerInfoResponse)
    async def get_player(player_id: str) -> PlayerInfoResponse:
        return _player_response(service.directory, player_id)

    @app.get("/players", response_model=PlayerSearchResponse)
    async def search_players(
        q: str = Query(..., min_length=1),
        limit: int = Query(_SEARCH_LIMIT_DEFAULT, ge=1, le=500),
    ) -> PlayerSearchResponse:
        directory = service.directory
        matches = directory.search_players_by_name(q)[:limit]
        return PlayerSearchResponse(
            query=q,
            players=[_player_response(directory, player_id) for player_id in matches],
        )

    return app


__all__ = ["create_app"]
