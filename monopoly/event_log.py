"""
Game event logging.
"""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from itertools import islice
from typing import Any, Deque, Dict, List, Optional

DEFAULT_MAX_EVENTS = 1000


class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    PLAYER_JOINED = "player_joined"

    DICE_ROLL = "dice_roll"
    MOVE = "move"
    LAND = "land"

    PURCHASE = "purchase"
    PURCHASE_SKIPPED = "purchase_skipped"
    RENT_PAYMENT = "rent_payment"

    CARD_DRAW = "card_draw"
    CARD_EFFECT = "card_effect"

    TURN_END = "turn_end"
    REMOTE_UPDATE = "remote_update"


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    player: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        player_str = self.player if self.player is not None else "System"
        return f"[{player_str}] {self.event_type.value}: {self.details}"


class EventLog:
    """
    Manages the game event log.

    Only the most recent ``max_events`` events are retained. Indices are
    absolute: the n-th event ever logged keeps index n after older events
    have been dropped.
    """

    def __init__(self, max_events: int = DEFAULT_MAX_EVENTS):
        if max_events < 1:
            raise ValueError("max_events must be at least 1")
        self.events: Deque[GameEvent] = deque(maxlen=max_events)
        self._logged = 0

    def __len__(self) -> int:
        return len(self.events)

    @property
    def next_index(self) -> int:
        """Absolute index the next logged event will get."""
        return self._logged

    @property
    def first_index(self) -> int:
        """Absolute index of the oldest retained event."""
        return self._logged - len(self.events)

    def log(self, event_type: EventType, player: Optional[str] = None, **details: Any) -> GameEvent:
        """Log a game event."""
        event = GameEvent(event_type, player, details)
        self.events.append(event)
        self._logged += 1
        return event

    def get_events(self) -> List[GameEvent]:
        """Get all retained events."""
        return list(self.events)

    def get_events_since(self, index: int) -> List[GameEvent]:
        """Retained events whose absolute index is at or after ``index``."""
        start = max(index, self.first_index) - self.first_index
        return list(islice(self.events, start, None))
