"""
Player state.
"""

from typing import List, Optional


class PlayerState:
    """Mutable state of a player in the roster."""

    def __init__(self, name: str, balance: int, position: int = 0, piece: Optional[str] = None):
        self.name = name
        self.position = position
        self.balance = balance
        self.piece = piece
        # Board positions in purchase order
        self.properties: List[int] = []

    def __repr__(self) -> str:
        return (
            f"PlayerState(name='{self.name}', position={self.position}, "
            f"balance={self.balance}, properties={self.properties})"
        )
