import json

import pytest
from pydantic import ValidationError

from config_models import GameConfiguration, load_configuration


def test_defaults_follow_the_standard_rules():
    config = GameConfiguration()

    assert config.player_names == ["Player 1", "Player 2"]
    assert config.board_size == 91
    assert config.hand_size == 6
    assert config.copies_per_tile == 3


@pytest.mark.parametrize(
    "overrides",
    [
        {"board_size": 50},
        {"player_names": ["Solo"]},
        {"player_names": ["A", "B", "C", "D", "E"]},
        {"hand_size": 0},
        {"hand_size": 7},
        {"copies_per_tile": 0},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(ValidationError):
        GameConfiguration(**overrides)


def test_load_configuration_from_json(tmp_path):
    path = tmp_path / "game.json"
    path.write_text(json.dumps({"player_names": ["Ann", "Bob", "Cy"], "hand_size": 4, "seed": 2}))

    config = load_configuration(path)

    assert config.player_names == ["Ann", "Bob", "Cy"]
    assert config.hand_size == 4
    assert config.seed == 2


def test_create_session_uses_the_settings():
    session = GameConfiguration(player_names=["Ann", "Bob"], hand_size=4, copies_per_tile=1, seed=8).create_session()

    assert [p.name for p in session.players] == ["Ann", "Bob"]
    assert [len(p.hand) for p in session.players] == [4, 4]
    assert session.bag.size() == 36 - 8
    assert session.board.size == 91
