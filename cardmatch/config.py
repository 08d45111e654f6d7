"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from cardmatch.logging import GameLogConfig
from cardmatch.models.player import PlayerKind


class GameConfig(BaseModel):
    """Game configuration."""

    hand_size: int = Field(default=7, ge=1)
    num_games: int = Field(default=1, ge=1)
    seed: int | None = None  # Fixed seed for reproducible deals

    # Refill an exhausted draw pile from the discard pile
    reshuffle_discards: bool = False


class PlayerConfig(BaseModel):
    """Seat configuration for one player."""

    name: str
    kind: PlayerKind = PlayerKind.HUMAN


def default_players() -> list[PlayerConfig]:
    return [
        PlayerConfig(name="Player", kind=PlayerKind.HUMAN),
        PlayerConfig(name="CPU 1", kind=PlayerKind.COMPUTER),
        PlayerConfig(name="CPU 2", kind=PlayerKind.COMPUTER),
    ]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    players: list[PlayerConfig] = Field(default_factory=default_players)
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
