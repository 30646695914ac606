from gameday.analysis import compute_allegiance, reconcile_allegiances
from gameday.models import AnalysisInput


def _ids(rows):
    return [row.player_id for row in rows]


def test_no_overlap_returns_report_unchanged(snapshot, directory):
    gameday = compute_allegiance(snapshot, directory=directory)
    assert reconcile_allegiances(gameday) is gameday


def test_higher_count_wins(payload, directory):
    # p4 started against the user twice and once for the user.
    payload["matchups"]["A"][0]["starters"] = ["p1", "p4"]
    gameday = compute_allegiance(AnalysisInput.model_validate(payload), directory=directory)

    reconciled = reconcile_allegiances(gameday)

    assert "p4" not in _ids(reconciled.cheering_for)
    assert "p4" in _ids(reconciled.cheering_against)


def test_tie_favours_the_user(payload, directory):
    payload["matchups"]["B"][1]["starters"] = ["p7", "p9"]
    gameday = compute_allegiance(AnalysisInput.model_validate(payload), directory=directory)
    assert "p7" in _ids(gameday.cheering_against)

    reconciled = reconcile_allegiances(gameday)

    assert "p7" in _ids(reconciled.cheering_for)
    assert "p7" not in _ids(reconciled.cheering_against)
    assert _ids(reconciled.cheering_against) == ["p4", "p5", "p9"]
    assert reconciled.user_teams == gameday.user_teams
