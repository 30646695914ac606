import json
from pathlib import Path

import pytest

from gameday.config import DEFAULT_PLAYERS_PATH
from gameday.errors import PlayerDataError
from gameday.players import PlayerDirectory, PlayerInfo


def test_resolve_known_player(directory):
    assert directory.resolve("p1") == PlayerInfo(
        player_id="p1", name="Alpha One", position="QB", team="KC"
    )


def test_unknown_player_fallbacks(directory):
    info = directory.resolve("does-not-exist")
    assert info.name == "Unknown Player"
    assert info.position == "Unknown"
    assert info.team == "FA"


def test_missing_fields_fall_back_individually():
    directory = PlayerDirectory({"x": {"full_name": "", "position": None}})
    assert directory.get_player_name("x") == "Unknown Player"
    assert directory.get_player_position("x") == "Unknown"
    assert directory.get_player_team("x") == "FA"
    assert directory.has_player("x")


def test_raw_record_lookup(directory):
    assert directory.get_player_info("p2")["team"] == "SF"
    assert directory.get_player_info("nope") is None
    assert "p2" in directory
    assert len(directory) == len(directory.all_player_ids())


def test_search_by_name_is_case_insensitive(directory):
    assert directory.search_players_by_name("ECHO") == ["p5"]
    assert directory.search_players_by_name("nine") == ["p9"]
    assert directory.search_players_by_name("v") == ["p2", "p5", "p7"]
    assert directory.search_players_by_name("  ") == []


def test_from_payload_unwraps_data_key():
    directory = PlayerDirectory.from_payload({"data": {"7": {"full_name": "Seven"}}})
    assert directory.get_player_name("7") == "Seven"


def test_from_payload_rejects_non_mapping():
    with pytest.raises(PlayerDataError):
        PlayerDirectory.from_payload(["not", "a", "mapping"])


def test_load_from_file(tmp_path: Path):
    path = tmp_path / "players.json"
    path.write_text(json.dumps({"42": {"full_name": "Answer", "position": "WR", "team": "HHG"}}))
    directory = PlayerDirectory.load(path)
    assert directory.resolve("42").team == "HHG"


def test_load_missing_or_corrupt_file(tmp_path: Path):
    with pytest.raises(PlayerDataError):
        PlayerDirectory.load(tmp_path / "missing.json")
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(PlayerDataError):
        PlayerDirectory.load(broken)


def test_packaged_dataset_loads():
    directory = PlayerDirectory.load(DEFAULT_PLAYERS_PATH)
    assert directory.get_player_name("4046") == "Patrick Mahomes"
    # Team defenses carry no full_name in the dataset.
    assert directory.get_player_name("KC") == "Unknown Player"
    assert directory.get_player_team("4227") == "FA"
