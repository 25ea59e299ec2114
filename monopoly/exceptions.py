"""
Custom exception hierarchy for the game engine and sync server.

Provides typed errors that can be handled consistently across
the core engine, the sync hub, and the HTTP layer.
"""


class MonopolyError(Exception):
    """Base exception for all game-related errors."""


class PlayerNotFoundError(MonopolyError):
    """No player with the given name is in the roster."""

    def __init__(self, name: str):
        super().__init__(f"Player {name!r} is not in the roster")
        self.name = name


class DuplicatePlayerError(MonopolyError):
    """A player with the given name already exists."""

    def __init__(self, name: str):
        super().__init__(f"Player {name!r} is already in the roster")
        self.name = name


class RosterFullError(MonopolyError):
    """The roster has reached its player limit."""


class EmptyRosterError(MonopolyError):
    """A turn was requested but nobody is playing."""


class MessageDecodeError(MonopolyError):
    """Inbound message does not parse as a player update."""
