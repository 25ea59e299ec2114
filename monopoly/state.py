"""
Authoritative game state: the roster, the turn pointer and the board.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from monopoly.board import Board
from monopoly.cards import Deck, create_chance_deck, create_community_chest_deck
from monopoly.config import GameConfig
from monopoly.event_log import EventLog, EventType
from monopoly.exceptions import (
    DuplicatePlayerError,
    EmptyRosterError,
    PlayerNotFoundError,
    RosterFullError,
)
from monopoly.player import PlayerState


@dataclass(frozen=True)
class PropertySnapshot:
    name: str
    cost: int
    rent: int
    owner: Optional[str]


@dataclass(frozen=True)
class PlayerSnapshot:
    name: str
    position: int
    balance: int
    properties: Tuple[PropertySnapshot, ...] = ()
    piece: Optional[str] = None


@dataclass(frozen=True)
class Snapshot:
    """Immutable copy of the roster and whose turn it is."""

    players: Tuple[PlayerSnapshot, ...]
    current_player_index: int

    @property
    def current_player(self) -> Optional[PlayerSnapshot]:
        if not self.players:
            return None
        return self.players[self.current_player_index]

    def get_player(self, name: str) -> Optional[PlayerSnapshot]:
        for player in self.players:
            if player.name == name:
                return player
        return None


class GameStateStore:
    """
    Single source of truth for a running game.

    The store is not thread-safe and does no locking of its own; the sync hub
    serialises access to it. Every method runs to completion without awaiting,
    so a snapshot can never observe a half-applied mutation.
    """

    def __init__(self, config: Optional[GameConfig] = None, board: Optional[Board] = None):
        self.config = config or GameConfig()
        self.board = board or Board()
        self.event_log = EventLog(self.config.max_events)
        self.rng = random.Random(self.config.seed)

        self.players: List[PlayerState] = []
        self.current_player_index = 0

        self.chance_deck: Deck = create_chance_deck(self.rng)
        self.community_chest_deck: Deck = create_community_chest_deck(self.rng)

        for name in self.config.player_names:
            self.add_player(name)

        self.event_log.log(
            EventType.GAME_START,
            players=[p.name for p in self.players],
            starting_balance=self.config.starting_balance,
            seed=self.config.seed,
        )

    # ---- Roster ----

    def add_player(self, name: str, piece: Optional[str] = None, balance: Optional[int] = None) -> PlayerState:
        """Append a player to the end of the turn order."""
        if self.find_player(name) is not None:
            raise DuplicatePlayerError(name)
        if len(self.players) >= self.config.max_players:
            raise RosterFullError(f"Roster is full ({self.config.max_players} players)")

        player = PlayerState(
            name,
            self.config.starting_balance if balance is None else balance,
            piece=piece,
        )
        self.players.append(player)
        self.event_log.log(EventType.PLAYER_JOINED, player=name, piece=piece)
        return player

    def find_player(self, name: str) -> Optional[PlayerState]:
        for player in self.players:
            if player.name == name:
                return player
        return None

    def get_player(self, name: str) -> PlayerState:
        player = self.find_player(name)
        if player is None:
            raise PlayerNotFoundError(name)
        return player

    def current_player(self) -> PlayerState:
        if not self.players:
            raise EmptyRosterError("No players in the roster")
        return self.players[self.current_player_index]

    def advance_turn(self) -> int:
        """Move the turn pointer to the next player, wrapping to the first."""
        if not self.players:
            raise EmptyRosterError("No players in the roster")
        self.current_player_index = (self.current_player_index + 1) % len(self.players)
        return self.current_player_index

    # ---- Reads and writes ----

    def snapshot(self) -> Snapshot:
        """Return an immutable copy of the current roster and turn pointer."""
        players = []
        for p in self.players:
            props = []
            for pos in p.properties:
                space = self.board.get_space(pos)
                props.append(PropertySnapshot(space.name, space.cost, space.rent, space.owner))
            players.append(PlayerSnapshot(p.name, p.position, p.balance, tuple(props), p.piece))
        return Snapshot(tuple(players), self.current_player_index)

    def apply_move(self, name: str, position: int, balance: int) -> PlayerState:
        """
        Overwrite a player's position and balance.

        This is the lowest-level mutator, used for client-asserted updates.
        It never touches the turn pointer or property ownership.

        Raises:
            PlayerNotFoundError: no player with that name
        """
        player = self.get_player(name)
        old_position, old_balance = player.position, player.balance
        player.position = position % len(self.board)
        player.balance = balance

        self.event_log.log(
            EventType.REMOTE_UPDATE,
            player=name,
            from_position=old_position,
            to_position=player.position,
            balance_before=old_balance,
            balance_after=balance,
        )
        return player
