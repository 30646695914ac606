"""Command-line interface for gameday allegiance and exposure reports."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

from gameday.analysis import (
    AnalysisService,
    ExposureData,
    GamedayData,
    PlayerAllegiance,
    PlayerExposure,
    validate_input,
)
from gameday.config import Settings, load_settings
from gameday.config_loader import SelectionProfile
from gameday.errors import GamedayError, ReportExportError
from gameday.ingest import apply_selection, load_snapshot, with_user_teams
from gameday.models import AnalysisInput
from gameday.players import PlayerDirectory
from gameday.report import export_exposure_to_csv, export_gameday_to_csv


logger = logging.getLogger(__name__)

_PREVIEW_ROWS = 10


def _add_snapshot_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("snapshot", type=Path, help="Path to analysis snapshot JSON")
    parser.add_argument("--players", type=Path, default=None, help="Player dataset JSON")
    parser.add_argument(
        "--select",
        action="append",
        default=[],
        metavar="LEAGUE_ID",
        help="League id to include (repeatable); selects exactly these leagues",
    )
    parser.add_argument("--load-profile", type=Path, help="Load team selection JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save team selection JSON", default=None)


def _add_report_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--output", type=Path, default=None, help="Write the report as CSV")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Compute the report even when the snapshot fails validation",
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Gameday allegiance and roster exposure reports")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Check a snapshot for structural problems")
    _add_snapshot_arguments(validate)

    gameday = subparsers.add_parser("gameday", help="Players to cheer for and against")
    _add_snapshot_arguments(gameday)
    _add_report_arguments(gameday)
    gameday.add_argument(
        "--resolve-conflicts",
        action="store_true",
        help="List a player started on both sides only in the table with the higher count",
    )

    exposure = subparsers.add_parser("exposure", help="Roster exposure across selected teams")
    _add_snapshot_arguments(exposure)
    _add_report_arguments(exposure)

    serve = subparsers.add_parser("serve", help="Run the REST API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--players", type=Path, default=None, help="Player dataset JSON")

    return parser.parse_args(argv)


def _load_directory(path: Path | None, settings: Settings) -> PlayerDirectory:
    return PlayerDirectory.load(path or settings.players_path)


def _prepare_snapshot(args: argparse.Namespace) -> AnalysisInput:
    snapshot = load_snapshot(args.snapshot)
    teams = list(snapshot.user_teams)

    if args.load_profile:
        profile = SelectionProfile.load(args.load_profile)
        teams = apply_selection(teams, profile.selected_league_ids)
    if args.select:
        teams = apply_selection(teams, args.select)
    snapshot = with_user_teams(snapshot, teams)

    if args.save_profile:
        SelectionProfile.from_teams(teams).save(args.save_profile)
        print(f"Saved selection profile to {args.save_profile}", file=sys.stderr)
    return snapshot


def _write_report(path: Path, text: str, label: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ReportExportError(f"unable to write {label} report to {path}: {exc}") from exc
    print(f"Wrote {label} report to {path}", file=sys.stderr)


def _report_errors(errors: Sequence[str]) -> None:
    for error in errors:
        print(f"error: {error}", file=sys.stderr)


def _print_allegiance(title: str, rows: Sequence[PlayerAllegiance], service: AnalysisService) -> None:
    print(f"{title} ({len(rows)} players)")
    for row in rows[:_PREVIEW_ROWS]:
        breakdown = service.league_breakdown(row)
        print(
            f"  {row.player_name} ({row.position}, {row.team}): {breakdown.value}"
            f" - {', '.join(breakdown.leagues)}"
        )
    more = len(rows) - _PREVIEW_ROWS
    if more > 0:
        print(f"  +{more} more")


def _print_exposure(rows: Sequence[PlayerExposure], service: AnalysisService, precision: int) -> None:
    for row in rows[:_PREVIEW_ROWS]:
        breakdown = service.league_breakdown(row, precision=precision)
        print(f"  {row.player_name} ({row.position}, {row.team}): {breakdown.value}")
    more = len(rows) - _PREVIEW_ROWS
    if more > 0:
        print(f"  +{more} more")


def _emit_gameday(args: argparse.Namespace, gameday: GamedayData, service: AnalysisService) -> None:
    if args.output:
        _write_report(args.output, export_gameday_to_csv(gameday), "gameday")
    if args.json:
        print(json.dumps(asdict(gameday), indent=2, default=_json_default))
        return
    stats = service.analysis_stats(gameday)
    print(f"Analyzed {stats.selected_teams}/{stats.total_teams} teams")
    _print_allegiance("Cheering for", gameday.cheering_for, service)
    _print_allegiance("Cheering against", gameday.cheering_against, service)


def _emit_exposure(
    args: argparse.Namespace,
    exposure: ExposureData,
    service: AnalysisService,
    precision: int,
) -> None:
    if args.output:
        _write_report(args.output, export_exposure_to_csv(exposure, precision=precision), "exposure")
    if args.json:
        print(json.dumps(asdict(exposure), indent=2, default=_json_default))
        return
    print(
        f"Exposure across {exposure.total_selected_teams} selected teams"
        f" ({len(exposure.exposure_report)} players)"
    )
    _print_exposure(exposure.exposure_report, service, precision)


def _json_default(value: object) -> object:
    if hasattr(value, "model_dump"):
        return value.model_dump()  # type: ignore[union-attr]
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _serve(args: argparse.Namespace, settings: Settings) -> int:
    import uvicorn

    from gameday.api import create_app

    app = create_app(_load_directory(args.players, settings))
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


def run(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "serve":
            return _serve(args, settings)

        snapshot = _prepare_snapshot(args)
        errors = validate_input(snapshot)
        if args.command == "validate":
            if errors:
                _report_errors(errors)
                return 1
            print("Snapshot is valid")
            return 0

        if errors and not args.force:
            _report_errors(errors)
            return 1
        if errors:
            logger.warning("Continuing despite %d validation error(s)", len(errors))

        service = AnalysisService(_load_directory(args.players, settings))
        if args.command == "gameday":
            gameday = service.compute_allegiance(
                snapshot, resolve_conflicts=args.resolve_conflicts
            )
            _emit_gameday(args, gameday, service)
        else:
            exposure = service.compute_exposure(snapshot)
            _emit_exposure(args, exposure, service, settings.exposure_precision)
    except GamedayError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
