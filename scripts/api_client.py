"""Lightweight REST client for the gameday API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_snapshot(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid snapshot JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the gameday REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("snapshot", type=Path, nargs="?", help="Analysis snapshot JSON")
    parser.add_argument("--validate-only", action="store_true", help="Only run validation")
    parser.add_argument("--exposure", action="store_true", help="Request the exposure report")
    parser.add_argument("--resolve-conflicts", action="store_true", help="Reconcile players listed on both sides")
    parser.add_argument("--force", action="store_true", help="Compute even when validation fails")
    parser.add_argument("--player", metavar="PLAYER_ID", help="Look up a single player and exit")
    parser.add_argument("--search", metavar="NAME", help="Search players by name and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.player or args.search:
            if args.player:
                resp = client.get(f"/players/{args.player}")
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))
            if args.search:
                resp = client.get("/players", params={"q": args.search})
                resp.raise_for_status()
                print(json.dumps(resp.json(), indent=2))
            return

        if args.snapshot is None:
            raise SystemExit("snapshot is required unless using --player/--search")
        snapshot = load_snapshot(args.snapshot)

        resp = client.post("/validate", json=snapshot)
        resp.raise_for_status()
        errors = resp.json()["errors"]
        if errors:
            print("Validation errors:", json.dumps(errors, indent=2))
        if args.validate_only:
            return

        params = {"force": str(args.force).lower()}
        if args.exposure:
            resp = client.post("/exposure", json=snapshot, params=params)
        else:
            params["resolve_conflicts"] = str(args.resolve_conflicts).lower()
            resp = client.post("/gameday", json=snapshot, params=params)
        if resp.status_code == 422:
            raise SystemExit(f"snapshot rejected: {resp.json()['detail']}")
        resp.raise_for_status()
        payload = resp.json()
        if args.exposure:
            print(f"Exposure across {payload['total_selected_teams']} teams")
            for row in payload["exposure_report"][:10]:
                print(f"  {row['player_name']}: {row['exposure_display']}")
        else:
            print(f"Cheering for {len(payload['cheering_for'])} players")
            print(f"Cheering against {len(payload['cheering_against'])} players")
            print(json.dumps(payload["stats"], indent=2))


if __name__ == "__main__":
    main()
