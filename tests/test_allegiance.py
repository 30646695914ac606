import logging

from gameday.analysis import DisplayMode, compute_allegiance
from gameday.analysis.allegiance import find_opponent_matchup, find_user_matchup
from gameday.ingest import toggle_team, with_user_teams
from gameday.models import AnalysisInput, MatchupSnapshot


def _counts(rows):
    return {row.player_id: row.count for row in rows}


def test_two_league_scenario(snapshot, directory):
    gameday = compute_allegiance(snapshot, directory=directory)

    assert _counts(gameday.cheering_for) == {"p1": 2, "p2": 1, "p7": 1}
    assert _counts(gameday.cheering_against) == {"p4": 2, "p5": 1, "p9": 1}

    top = gameday.cheering_for[0]
    assert top.player_id == "p1"
    assert top.player_name == "Alpha One"
    assert top.leagues == ("League A", "League B")
    assert [row.player_id for row in gameday.cheering_for] == ["p1", "p2", "p7"]
    assert [row.player_id for row in gameday.cheering_against] == ["p4", "p5", "p9"]
    assert gameday.display_mode is DisplayMode.COUNT
    assert gameday.user_teams == tuple(snapshot.user_teams)


def test_ties_broken_by_name_not_id(payload, directory):
    payload["matchups"]["A"][0]["starters"] = ["p7", "p2", "p3"]
    payload["matchups"]["B"][0]["starters"] = []
    snapshot = AnalysisInput.model_validate(payload)

    gameday = compute_allegiance(snapshot, directory=directory)

    names = [row.player_name for row in gameday.cheering_for]
    assert names == ["Bravo Two", "Charlie Three", "Golf Seven"]


def test_sort_invariant_holds(snapshot, directory):
    gameday = compute_allegiance(snapshot, directory=directory)
    for rows in (gameday.cheering_for, gameday.cheering_against):
        for current, following in zip(rows, rows[1:]):
            assert current.count >= following.count
            if current.count == following.count:
                assert current.player_name <= following.player_name


def test_null_and_repeated_starters_counted_once(payload, directory):
    payload["matchups"]["A"][0]["starters"] = ["p1", None, "", "p1", "p2"]
    snapshot = AnalysisInput.model_validate(payload)

    gameday = compute_allegiance(snapshot, directory=directory)

    assert _counts(gameday.cheering_for) == {"p1": 2, "p2": 1, "p7": 1}


def test_player_in_both_tables_keeps_table_scoped_counts(payload, directory):
    payload["matchups"]["B"][1]["starters"] = ["p1", "p9"]
    snapshot = AnalysisInput.model_validate(payload)

    gameday = compute_allegiance(snapshot, directory=directory)

    assert _counts(gameday.cheering_for)["p1"] == 2
    against = {row.player_id: row for row in gameday.cheering_against}
    assert against["p1"].count == 1
    assert against["p1"].leagues == ("League B",)


def test_deselected_team_contributes_nothing(snapshot, directory):
    deselected = with_user_teams(snapshot, toggle_team(snapshot.user_teams, "B"))

    gameday = compute_allegiance(deselected, directory=directory)

    assert _counts(gameday.cheering_for) == {"p1": 1, "p2": 1}
    assert _counts(gameday.cheering_against) == {"p4": 1, "p5": 1}
    assert all(row.leagues == ("League A",) for row in gameday.cheering_for)
    assert len(gameday.user_teams) == 2


def test_missing_user_matchup_skips_league_with_warning(payload, directory, caplog):
    payload["matchups"]["B"] = [
        {"roster_id": 4, "matchup_id": 2, "starters": ["p4", "p9"], "points": 0},
    ]
    snapshot = AnalysisInput.model_validate(payload)

    with caplog.at_level(logging.WARNING, logger="gameday.analysis.allegiance"):
        gameday = compute_allegiance(snapshot, directory=directory)

    assert _counts(gameday.cheering_for) == {"p1": 1, "p2": 1}
    assert _counts(gameday.cheering_against) == {"p4": 1, "p5": 1}
    assert "No matchup found for League B" in caplog.text


def test_missing_opponent_only_skips_opponent_side(payload, directory, caplog):
    payload["matchups"]["B"] = [
        {"roster_id": 3, "matchup_id": 2, "starters": ["p1", "p7"], "points": 0},
    ]
    snapshot = AnalysisInput.model_validate(payload)

    with caplog.at_level(logging.WARNING, logger="gameday.analysis.allegiance"):
        gameday = compute_allegiance(snapshot, directory=directory)

    assert _counts(gameday.cheering_for) == {"p1": 2, "p2": 1, "p7": 1}
    assert _counts(gameday.cheering_against) == {"p4": 1, "p5": 1}
    assert "No opponent matchup found for League B" in caplog.text


def test_missing_league_data_returns_partial_result(payload, directory):
    del payload["matchups"]["B"]
    snapshot = AnalysisInput.model_validate(payload)

    gameday = compute_allegiance(snapshot, directory=directory)

    assert _counts(gameday.cheering_for) == {"p1": 1, "p2": 1}


def test_unknown_players_use_fallbacks(payload, directory):
    payload["matchups"]["A"][0]["starters"] = ["ghost"]
    payload["user_teams"][1]["is_selected"] = False
    snapshot = AnalysisInput.model_validate(payload)

    gameday = compute_allegiance(snapshot, directory=directory)

    row = gameday.cheering_for[0]
    assert (row.player_name, row.position, row.team) == ("Unknown Player", "Unknown", "FA")


def test_repeated_calls_are_identical(snapshot, directory):
    first = compute_allegiance(snapshot, directory=directory)
    second = compute_allegiance(snapshot, directory=directory)
    assert first == second


def test_no_selected_teams_yields_empty_tables(payload, directory):
    for team in payload["user_teams"]:
        team["is_selected"] = False
    snapshot = AnalysisInput.model_validate(payload)

    gameday = compute_allegiance(snapshot, directory=directory)

    assert gameday.cheering_for == ()
    assert gameday.cheering_against == ()


def test_unpaired_matchup_has_no_opponent():
    matchups = [
        MatchupSnapshot(roster_id=1, matchup_id=None, starters=["p1"]),
        MatchupSnapshot(roster_id=2, matchup_id=None, starters=["p2"]),
    ]
    user = find_user_matchup(matchups, 1)
    assert user is not None
    assert find_opponent_matchup(matchups, user) is None
