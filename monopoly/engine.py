"""
Turn engine: the rules of a single turn.

A turn is roll -> move -> resolve landing -> advance the turn pointer.
All edge cases (insufficient funds, self-owned space, free space) are
named no-op outcomes rather than errors.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from monopoly.cards import Card, CardEffect
from monopoly.event_log import EventType, GameEvent
from monopoly.player import PlayerState
from monopoly.spaces import SpaceType
from monopoly.state import GameStateStore, Snapshot

logger = logging.getLogger(__name__)


class LandingOutcome(Enum):
    """What happened on the space a player landed on."""

    PURCHASED = "purchased"
    PURCHASE_SKIPPED_INSUFFICIENT_FUNDS = "purchase_skipped_insufficient_funds"
    RENT_PAID = "rent_paid"
    OWN_PROPERTY = "own_property"
    NO_TRANSACTION = "no_transaction"


@dataclass
class Landing:
    """Result of resolving one landing."""

    outcome: LandingOutcome
    position: int
    amount: int = 0
    counterparty: Optional[str] = None


@dataclass
class TurnResult:
    """Everything a caller needs to know about a completed turn."""

    player: str
    dice: Tuple[int, int]
    from_position: int
    to_position: int
    landing: Landing
    next_player: str
    snapshot: Snapshot
    card: Optional[Card] = None
    card_landing: Optional[Landing] = None
    events: List[GameEvent] = field(default_factory=list)

    @property
    def steps(self) -> int:
        return self.dice[0] + self.dice[1]

    @property
    def outcome(self) -> LandingOutcome:
        return self.landing.outcome

    @property
    def final_landing(self) -> Landing:
        """The landing at `to_position`: the card destination after a MOVE_TO card."""
        return self.card_landing or self.landing


def roll_dice(rng: random.Random) -> Tuple[int, int]:
    """Roll two independent six-sided dice."""
    return rng.randint(1, 6), rng.randint(1, 6)


def resolve_landing(store: GameStateStore, player: PlayerState) -> Landing:
    """
    Apply the purchase or rent rules for the space the player is standing on.

    Cases are checked in order: unowned purchasable space, space owned by
    someone else, anything else.
    """
    position = player.position
    space = store.board.get_space(position)

    if space.is_purchasable() and not space.is_owned():
        if player.balance >= space.cost:
            player.balance -= space.cost
            space.owner = player.name
            player.properties.append(position)
            store.event_log.log(
                EventType.PURCHASE,
                player=player.name,
                property=space.name,
                position=position,
                price=space.cost,
                new_balance=player.balance,
            )
            return Landing(LandingOutcome.PURCHASED, position, amount=space.cost)

        store.event_log.log(
            EventType.PURCHASE_SKIPPED,
            player=player.name,
            property=space.name,
            position=position,
            price=space.cost,
            balance=player.balance,
        )
        return Landing(LandingOutcome.PURCHASE_SKIPPED_INSUFFICIENT_FUNDS, position, amount=space.cost)

    if space.is_owned() and space.owner != player.name:
        # No funds check: the mover's balance may go negative
        player.balance -= space.rent
        owner = store.find_player(space.owner)
        if owner is not None:
            owner.balance += space.rent
        store.event_log.log(
            EventType.RENT_PAYMENT,
            player=player.name,
            owner=space.owner,
            property=space.name,
            position=position,
            amount=space.rent,
            payer_balance=player.balance,
            owner_balance=owner.balance if owner is not None else None,
        )
        return Landing(LandingOutcome.RENT_PAID, position, amount=space.rent, counterparty=space.owner)

    if space.is_owned():
        return Landing(LandingOutcome.OWN_PROPERTY, position)

    return Landing(LandingOutcome.NO_TRANSACTION, position)


def draw_card(store: GameStateStore, player: PlayerState) -> Optional[Card]:
    """Draw from the deck matching the player's space, if it is a card space."""
    space = store.board.get_space(player.position)
    if space.space_type == SpaceType.CHANCE:
        deck = store.chance_deck
    elif space.space_type == SpaceType.COMMUNITY_CHEST:
        deck = store.community_chest_deck
    else:
        return None

    card = deck.draw()
    store.event_log.log(EventType.CARD_DRAW, player=player.name, deck=deck.name, card=card.description)
    return card


def apply_card(store: GameStateStore, player: PlayerState, card: Card) -> Optional[Landing]:
    """
    Interpret a card effect.

    Returns the landing resolved after a MOVE_TO card, otherwise None.
    """
    balance_before = player.balance
    landing: Optional[Landing] = None

    if card.effect == CardEffect.MOVE_TO:
        old_position = player.position
        player.position = store.board.position_of(card.target)
        store.event_log.log(
            EventType.MOVE,
            player=player.name,
            details={"from": old_position, "to": player.position, "direct": True},
        )
        landing = resolve_landing(store, player)
    elif card.effect == CardEffect.COLLECT:
        player.balance += card.amount
    elif card.effect == CardEffect.PAY:
        player.balance -= card.amount

    store.event_log.log(
        EventType.CARD_EFFECT,
        player=player.name,
        card=card.description,
        effect_type=card.effect.value,
        amount=card.amount,
        cash_before=balance_before,
        cash_after=player.balance,
    )
    return landing


def take_turn(
    store: GameStateStore,
    rng: Optional[random.Random] = None,
    dice: Optional[Tuple[int, int]] = None,
) -> TurnResult:
    """
    Play one turn for the current player.

    Mutates the store in place and returns a summary of what happened.

    Args:
        store: the game to play on
        rng: random source for the dice (defaults to the store's RNG)
        dice: fixed dice values, bypassing the roll

    Raises:
        EmptyRosterError: the roster has no players
    """
    player = store.current_player()
    first_event = store.event_log.next_index

    if dice is None:
        dice = roll_dice(rng or store.rng)
    steps = dice[0] + dice[1]
    store.event_log.log(
        EventType.DICE_ROLL,
        player=player.name,
        details={"die1": dice[0], "die2": dice[1], "total": steps, "doubles": dice[0] == dice[1]},
    )

    old_position = player.position
    player.position = (old_position + steps) % len(store.board)
    store.event_log.log(
        EventType.MOVE,
        player=player.name,
        details={"from": old_position, "to": player.position, "spaces": steps},
    )
    store.event_log.log(
        EventType.LAND,
        player=player.name,
        position=player.position,
        space=store.board.get_space(player.position).name,
    )

    landing = resolve_landing(store, player)

    card = None
    card_landing = None
    if store.config.draw_cards:
        card = draw_card(store, player)
        if card is not None:
            card_landing = apply_card(store, player, card)

    store.advance_turn()
    next_player = store.current_player()
    store.event_log.log(EventType.TURN_END, player=player.name, next_player=next_player.name)

    logger.debug(
        f"{player.name} rolled {dice} and moved {old_position} -> {player.position}: "
        f"{landing.outcome.value}"
    )

    return TurnResult(
        player=player.name,
        dice=dice,
        from_position=old_position,
        to_position=player.position,
        landing=landing,
        next_player=next_player.name,
        snapshot=store.snapshot(),
        card=card,
        card_landing=card_landing,
        events=store.event_log.get_events_since(first_event),
    )
