import pytest
from pydantic import ValidationError

from draughts.config import (
    DraughtsConfig,
    GameSettings,
    LoggingSettings,
    get_config,
    get_game_settings,
    reset_config,
)
from draughts.rules import Color


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for name in ("DRAUGHTS_AI_COLOR", "DRAUGHTS_AI_DELAY", "DRAUGHTS_GAMES",
                 "DRAUGHTS_MAX_PLIES", "DRAUGHTS_SEED", "DRAUGHTS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = DraughtsConfig()
    assert config.game.ai_player_color == Color.LIGHT
    assert config.game.ai_move_delay == 1.0
    assert config.selfplay.games == 10
    assert config.selfplay.max_plies == 200
    assert config.selfplay.seed is None
    assert config.logging.log_level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("DRAUGHTS_AI_COLOR", "DARK")
    monkeypatch.setenv("DRAUGHTS_AI_DELAY", "0.25")
    monkeypatch.setenv("DRAUGHTS_GAMES", "3")
    monkeypatch.setenv("DRAUGHTS_SEED", "42")
    monkeypatch.setenv("DRAUGHTS_LOG_LEVEL", "debug")
    config = get_config()
    assert config.game.ai_player_color == Color.DARK
    assert config.game.ai_move_delay == 0.25
    assert config.selfplay.games == 3
    assert config.selfplay.seed == 42
    assert config.logging.log_level == "DEBUG"
    assert get_config() is config
    assert get_game_settings() is config.game


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        LoggingSettings(log_level="LOUD")
    with pytest.raises(ValidationError):
        GameSettings(ai_move_delay=-1)
    with pytest.raises(ValidationError):
        GameSettings(ai_player_color="green")


def test_to_dict():
    data = DraughtsConfig().to_dict()
    assert data["game"] == {"ai_player_color": "light", "ai_move_delay": 1.0}
    assert data["logging"]["log_level"] == "INFO"
    assert data["version"] == "1.0.0"
