"""
Monopoly Rules Engine

The authoritative game state and the rules of a single turn.
"""

from .board import Board
from .config import GameConfig
from .engine import LandingOutcome, TurnResult, take_turn
from .player import PlayerState
from .state import GameStateStore, Snapshot

__all__ = [
    "Board",
    "GameConfig",
    "GameStateStore",
    "LandingOutcome",
    "PlayerState",
    "Snapshot",
    "TurnResult",
    "take_turn",
]
