from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, Set

from events.mapper import map_events
from monopoly.config import GameConfig
from monopoly.engine import TurnResult, take_turn
from monopoly.exceptions import MessageDecodeError, PlayerNotFoundError
from monopoly.player import PlayerState
from monopoly.state import GameStateStore, Snapshot
from server.schemas import decode_update
from snapshot import encode_roster

logger = logging.getLogger(__name__)


class SyncHub:
    """Owns the authoritative game state and fans snapshots out to clients.

    Responsibilities:
    - Keep the broadcast group (one outbound queue per connected client)
    - Serialise every read-modify-broadcast sequence behind one lock
    - Translate inbound player updates into store mutations
    """

    def __init__(self, store: Optional[GameStateStore] = None):
        self._store = store or GameStateStore()
        self._clients: Set[asyncio.Queue] = set()
        self._lock = asyncio.Lock()

    @classmethod
    def from_config(cls, config: GameConfig) -> "SyncHub":
        return cls(GameStateStore(config))

    @property
    def board(self):
        return self._store.board

    @property
    def client_count(self) -> int:
        return len(self._clients)

    # Subscription management for WS
    async def subscribe(self) -> asyncio.Queue:
        """Join the broadcast group; the new queue starts with the current snapshot."""
        q: asyncio.Queue = asyncio.Queue()
        async with self._lock:
            q.put_nowait(encode_roster(self._store.snapshot()))
            self._clients.add(q)
        logger.info(f"Client connected ({len(self._clients)} connected)")
        return q

    async def unsubscribe(self, q: asyncio.Queue) -> None:
        self._clients.discard(q)
        logger.info(f"Client disconnected ({len(self._clients)} connected)")

    def _broadcast(self, payload: str) -> None:
        # Caller holds the lock. Queues are unbounded so this never blocks.
        for q in list(self._clients):
            q.put_nowait(payload)

    # Reads and writes
    async def snapshot(self) -> Snapshot:
        async with self._lock:
            return self._store.snapshot()

    async def get_events_since(self, since_index: int) -> Dict[str, Any]:
        """Mapped events logged after `since_index`, plus the index range returned.

        Events older than the retained window are gone; `from_index` then
        starts at the oldest event still held.
        """
        async with self._lock:
            log = self._store.event_log
            start = max(since_index + 1, log.first_index)
            events = log.get_events_since(start)
            return {
                "events": map_events(self.board, events, start=start),
                "from_index": start,
                "to_index": log.next_index - 1,
            }

    async def handle_message(self, text: str) -> bool:
        """Apply a client-asserted update and broadcast the result.

        Returns True if at least one player was updated (and a broadcast sent).
        Malformed messages and unknown player names are dropped silently.
        """
        try:
            records = decode_update(text)
        except MessageDecodeError as e:
            logger.debug(f"Dropping inbound message: {e}")
            return False

        async with self._lock:
            applied = 0
            for record in records:
                try:
                    self._store.apply_move(record.name, record.position, record.balance)
                except PlayerNotFoundError:
                    logger.debug(f"Ignoring update for unknown player {record.name!r}")
                    continue
                applied += 1
            if applied:
                self._broadcast(encode_roster(self._store.snapshot()))
        return applied > 0

    async def take_turn(self) -> TurnResult:
        """Roll for the current player, apply the turn and broadcast."""
        async with self._lock:
            result = take_turn(self._store)
            self._broadcast(encode_roster(result.snapshot))
        logger.info(
            f"{result.player} rolled {result.steps} -> {result.to_position} "
            f"({result.outcome.value}); next: {result.next_player}"
        )
        return result

    async def add_player(self, name: str, piece: Optional[str] = None) -> PlayerState:
        async with self._lock:
            player = self._store.add_player(name, piece=piece)
            self._broadcast(encode_roster(self._store.snapshot()))
        logger.info(f"Player {name!r} joined")
        return player
