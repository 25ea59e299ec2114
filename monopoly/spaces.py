"""
Board space definitions and types.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SpaceType(Enum):
    """Types of spaces on the board."""

    GO = "go"
    PROPERTY = "property"
    CHANCE = "chance"
    COMMUNITY_CHEST = "community_chest"
    JAIL = "jail"
    FREE_PARKING = "free_parking"
    GO_TO_JAIL = "go_to_jail"


@dataclass
class Property:
    """
    A single board space.

    Every space is a Property; corner and card spaces simply have a cost of 0.
    Ownership is the only field that changes during a game.
    """

    name: str
    position: int
    cost: int
    rent: int
    space_type: SpaceType = SpaceType.PROPERTY
    owner: Optional[str] = None

    def is_purchasable(self) -> bool:
        """A space can be bought only if it has a price."""
        return self.cost > 0

    def is_owned(self) -> bool:
        return self.owner is not None

    def __repr__(self) -> str:
        return f"Property(name='{self.name}', position={self.position}, owner={self.owner!r})"


def go_space(position: int = 0) -> Property:
    return Property("Go", position, 0, 0, SpaceType.GO)


def chance_space(position: int) -> Property:
    return Property("Chance", position, 0, 0, SpaceType.CHANCE)


def community_chest_space(position: int) -> Property:
    return Property("Community Chest", position, 0, 0, SpaceType.COMMUNITY_CHEST)


def jail_space(position: int) -> Property:
    return Property("Jail", position, 0, 0, SpaceType.JAIL)


def free_parking_space(position: int) -> Property:
    return Property("Free Parking", position, 0, 0, SpaceType.FREE_PARKING)


def go_to_jail_space(position: int) -> Property:
    return Property("Go to Jail", position, 0, 0, SpaceType.GO_TO_JAIL)
