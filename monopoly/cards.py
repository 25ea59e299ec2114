"""
Chance and Community Chest cards.

Card effects are plain data; the turn engine interprets them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
import random


class CardEffect(Enum):
    """Kinds of card effects."""

    MOVE_TO = "move_to"
    COLLECT = "collect"
    PAY = "pay"
    NONE = "none"


@dataclass(frozen=True)
class Card:
    """Represents a Chance or Community Chest card."""

    description: str
    effect: CardEffect = CardEffect.NONE
    amount: int = 0
    target: Optional[str] = None  # space name for MOVE_TO

    def __post_init__(self):
        if self.effect == CardEffect.MOVE_TO and not self.target:
            raise ValueError(f"MOVE_TO card {self.description!r} needs a target space")
        if self.amount < 0:
            raise ValueError("Card amounts are unsigned; use PAY or COLLECT for direction")

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "effect": self.effect.value,
            "amount": self.amount,
            "target": self.target,
        }

    def __repr__(self) -> str:
        return f"Card('{self.description}')"


class Deck:
    """A deck of cards that can be shuffled and drawn from."""

    def __init__(self, name: str, cards: List[Card], rng: random.Random):
        self.name = name
        self.cards = cards.copy()
        self.rng = rng
        self.discard_pile: List[Card] = []
        self.shuffle()

    def shuffle(self) -> None:
        """Shuffle the deck."""
        self.rng.shuffle(self.cards)

    def draw(self) -> Card:
        """
        Draw a card from the deck.

        Drawn cards go to the discard pile; an empty deck is refilled by
        shuffling the discard pile back in.
        """
        if not self.cards:
            if not self.discard_pile:
                return Card("No cards available")
            self.cards = self.discard_pile.copy()
            self.discard_pile.clear()
            self.shuffle()

        card = self.cards.pop(0)
        self.discard_pile.append(card)
        return card


def create_chance_deck(rng: random.Random) -> Deck:
    """Create the Chance deck."""
    cards = [
        Card("Advance to Go", CardEffect.MOVE_TO, target="Go"),
        Card("Advance to Illinois Avenue", CardEffect.MOVE_TO, target="Illinois Avenue"),
        Card("Advance to St. Charles Place", CardEffect.MOVE_TO, target="St. Charles Place"),
        Card("Take a walk on the Boardwalk", CardEffect.MOVE_TO, target="Boardwalk"),
        Card("Bank pays you dividend of $50", CardEffect.COLLECT, amount=50),
        Card("Your building loan matures. Collect $150", CardEffect.COLLECT, amount=150),
        Card("Pay poor tax of $15", CardEffect.PAY, amount=15),
        Card("Speeding fine. Pay $15", CardEffect.PAY, amount=15),
        Card("Nothing happens. Enjoy the view", CardEffect.NONE),
    ]
    return Deck("chance", cards, rng)


def create_community_chest_deck(rng: random.Random) -> Deck:
    """Create the Community Chest deck."""
    cards = [
        Card("Advance to Go", CardEffect.MOVE_TO, target="Go"),
        Card("Bank error in your favor. Collect $200", CardEffect.COLLECT, amount=200),
        Card("Doctor's fees. Pay $50", CardEffect.PAY, amount=50),
        Card("From sale of stock you get $50", CardEffect.COLLECT, amount=50),
        Card("Holiday fund matures. Receive $100", CardEffect.COLLECT, amount=100),
        Card("Income tax refund. Collect $20", CardEffect.COLLECT, amount=20),
        Card("Hospital fees. Pay $100", CardEffect.PAY, amount=100),
        Card("School fees. Pay $50", CardEffect.PAY, amount=50),
        Card("You have won second prize in a beauty contest. Collect $10", CardEffect.COLLECT, amount=10),
        Card("You inherit $100", CardEffect.COLLECT, amount=100),
    ]
    return Deck("community_chest", cards, rng)
