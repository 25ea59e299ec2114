"""
Sync server configuration using pydantic-settings.

Environment variables (prefix: MONOPOLY_), also read from a .env file:
    MONOPOLY_HOST             - Bind address (default: 0.0.0.0)
    MONOPOLY_PORT             - TCP port (default: 8080)
    MONOPOLY_WS_PATH          - WebSocket endpoint path (default: /game)
    MONOPOLY_PING_INTERVAL    - Seconds between WebSocket pings (default: 15)
    MONOPOLY_IDLE_TIMEOUT     - Seconds to wait for a pong before closing (default: 15)
    MONOPOLY_MAX_FRAME_SIZE   - Largest inbound frame in bytes (default: unbounded)
    MONOPOLY_PLAYER_NAMES     - JSON list of starting players (default: ["Player 1", "Player 2"])
    MONOPOLY_STARTING_BALANCE - Starting balance per player (default: 1500)
    MONOPOLY_MAX_PLAYERS      - Roster size limit (default: 8)
    MONOPOLY_SEED             - RNG seed for dice and decks (default: unset)
    MONOPOLY_DRAW_CARDS       - Draw Chance/Community Chest cards (default: false)
    MONOPOLY_MAX_EVENTS       - Events kept in the in-memory log (default: 1000)
    MONOPOLY_LOG_LEVEL        - Logging level (default: INFO)
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from monopoly.config import DEFAULT_PLAYER_NAMES, GameConfig


class ServerSettings(BaseSettings):
    """Configuration for the sync server and the game it hosts."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="MONOPOLY_",
    )

    host: str = Field(default="0.0.0.0", description="Bind address.")
    port: int = Field(default=8080, ge=1, le=65535, description="TCP port.")
    ws_path: str = Field(default="/game", description="WebSocket endpoint path.")

    ping_interval: float = Field(default=15.0, gt=0, description="Seconds between pings.")
    idle_timeout: float = Field(default=15.0, gt=0, description="Seconds to wait for a pong.")
    max_frame_size: int = Field(default=2**63 - 1, gt=0, description="Largest inbound frame in bytes.")

    player_names: List[str] = Field(default_factory=lambda: list(DEFAULT_PLAYER_NAMES))
    starting_balance: int = Field(default=1500)
    max_players: int = Field(default=8, ge=1, le=8)
    seed: Optional[int] = None
    draw_cards: bool = False
    max_events: int = Field(default=1000, ge=1, description="Events retained in the in-memory log.")

    log_level: str = Field(default="INFO")

    @field_validator("ws_path")
    @classmethod
    def leading_slash(cls, value: str) -> str:
        return value if value.startswith("/") else f"/{value}"

    @field_validator("player_names")
    @classmethod
    def unique_names(cls, value: List[str]) -> List[str]:
        if len(set(value)) != len(value):
            raise ValueError("player_names must be unique")
        return value

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def roster_fits(self) -> "ServerSettings":
        if len(self.player_names) > self.max_players:
            raise ValueError(
                f"{len(self.player_names)} player_names configured but max_players is {self.max_players}"
            )
        return self

    def game_config(self) -> GameConfig:
        """Build the engine configuration for the hosted game."""
        return GameConfig(
            starting_balance=self.starting_balance,
            max_players=self.max_players,
            player_names=list(self.player_names),
            seed=self.seed,
            draw_cards=self.draw_cards,
            max_events=self.max_events,
        )


@lru_cache
def get_settings() -> ServerSettings:
    """Return cached settings instance."""
    return ServerSettings()
