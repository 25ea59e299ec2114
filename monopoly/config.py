"""
Game configuration settings.
"""

from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_PLAYER_NAMES = ["Player 1", "Player 2"]


@dataclass
class GameConfig:
    """Configuration for a single game."""

    starting_balance: int = 1500
    max_players: int = 8

    player_names: List[str] = field(default_factory=lambda: list(DEFAULT_PLAYER_NAMES))

    seed: Optional[int] = None

    # Chance / Community Chest draw cards only when enabled
    draw_cards: bool = False

    # Events retained in the in-memory log
    max_events: int = 1000

    def __post_init__(self) -> None:
        if self.max_players < 1:
            raise ValueError("max_players must be at least 1")
        if len(self.player_names) > self.max_players:
            raise ValueError(
                f"{len(self.player_names)} player names configured but max_players is {self.max_players}"
            )
        if self.max_events < 1:
            raise ValueError("max_events must be at least 1")
