"""
Central configuration for the draughts engine.
Pydantic models give type-safe settings that can be overridden from the environment.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from draughts.rules import AI_PLAYER_COLOR, Color


class GameSettings(BaseModel):
    """Computer opponent settings."""

    ai_player_color: Color = Field(default=AI_PLAYER_COLOR, description="Color played by the computer")
    ai_move_delay: float = Field(default=1.0, ge=0, le=60, description="Seconds between selecting and moving a piece")

    @field_validator('ai_player_color', mode='before')
    @classmethod
    def validate_color(cls, v):
        return v.lower() if isinstance(v, str) else v


class SelfPlaySettings(BaseModel):
    """Random self-play runner settings."""

    games: int = Field(default=10, ge=1, description="Number of games to play")
    max_plies: int = Field(default=200, ge=1, description="Moves per game before it is reported unfinished")
    seed: Optional[int] = Field(default=None, description="Random seed for reproducible runs")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class DraughtsConfig(BaseModel):
    """Main configuration model."""

    game: GameSettings = Field(default_factory=GameSettings)
    selfplay: SelfPlaySettings = Field(default_factory=SelfPlaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    version: str = Field(default="1.0.0", description="Configuration version")

    @classmethod
    def from_env(cls) -> 'DraughtsConfig':
        """Create configuration from environment variables."""
        seed = os.getenv('DRAUGHTS_SEED')
        return cls(
            game=GameSettings(
                ai_player_color=os.getenv('DRAUGHTS_AI_COLOR', AI_PLAYER_COLOR.value),
                ai_move_delay=float(os.getenv('DRAUGHTS_AI_DELAY', '1.0')),
            ),
            selfplay=SelfPlaySettings(
                games=int(os.getenv('DRAUGHTS_GAMES', '10')),
                max_plies=int(os.getenv('DRAUGHTS_MAX_PLIES', '200')),
                seed=int(seed) if seed else None,
            ),
            logging=LoggingSettings(
                log_level=os.getenv('DRAUGHTS_LOG_LEVEL', 'INFO'),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a plain dictionary."""
        return self.model_dump(mode='json')


# Global configuration instance
_config: Optional[DraughtsConfig] = None


def get_config() -> DraughtsConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = DraughtsConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset the global configuration so the next access re-reads the environment."""
    global _config
    _config = None


def get_game_settings() -> GameSettings:
    return get_config().game


def get_selfplay_settings() -> SelfPlaySettings:
    return get_config().selfplay


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once, controlled by DRAUGHTS_LOG_LEVEL."""
    if getattr(setup_logging, "_configured", False):
        return
    name = level or get_config().logging.log_level
    logging.basicConfig(
        level=getattr(logging, name.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
