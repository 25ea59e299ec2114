"""
Tests for Chance / Community Chest card effects.
"""

import random

import pytest

from monopoly.cards import Card, CardEffect, Deck, create_chance_deck, create_community_chest_deck
from monopoly.config import GameConfig
from monopoly.engine import LandingOutcome, apply_card, take_turn
from monopoly.state import GameStateStore


@pytest.fixture
def card_store():
    return GameStateStore(GameConfig(player_names=["A", "B"], seed=3, draw_cards=True))


def test_collect_card(store):
    player = store.get_player("A")
    apply_card(store, player, Card("Bank error", CardEffect.COLLECT, amount=200))
    assert player.balance == 1700


def test_pay_card_has_no_lower_bound(store):
    player = store.get_player("A")
    player.balance = 10
    apply_card(store, player, Card("Hospital fees", CardEffect.PAY, amount=100))
    assert player.balance == -90


def test_none_card_changes_nothing(store):
    before = store.snapshot()
    apply_card(store, store.get_player("A"), Card("Nothing"))
    assert store.snapshot() == before


def test_move_to_card_resolves_landing(store):
    player = store.get_player("A")
    player.position = 4
    landing = apply_card(store, player, Card("Boardwalk", CardEffect.MOVE_TO, target="Boardwalk"))
    assert player.position == 27
    assert landing.outcome == LandingOutcome.PURCHASED
    assert store.board.get_space(27).owner == "A"
    assert player.balance == 1100


def test_move_to_card_requires_target():
    with pytest.raises(ValueError):
        Card("Go somewhere", CardEffect.MOVE_TO)


def test_deck_recycles_discard_pile():
    rng = random.Random(0)
    deck = Deck("test", [Card("one"), Card("two")], rng)
    drawn = [deck.draw().description for _ in range(4)]
    assert sorted(drawn[:2]) == ["one", "two"]
    assert sorted(drawn[2:]) == ["one", "two"]


def test_deck_targets_exist_on_board(store):
    rng = random.Random(0)
    for deck in (create_chance_deck(rng), create_community_chest_deck(rng)):
        for card in deck.cards:
            if card.effect == CardEffect.MOVE_TO:
                store.board.position_of(card.target)


def test_cards_only_drawn_when_enabled(store):
    store.players[0].position = 2
    result = take_turn(store, dice=(1, 1))
    assert result.to_position == 4
    assert result.card is None


def test_card_drawn_on_chance(card_store):
    card_store.players[0].position = 2
    result = take_turn(card_store, dice=(1, 1))
    assert result.landing.outcome == LandingOutcome.NO_TRANSACTION
    assert result.card is not None
    assert result.card in card_store.chance_deck.discard_pile
    assert card_store.current_player().name == "B"


def test_card_drawn_on_community_chest(card_store):
    card_store.players[0].position = 8
    result = take_turn(card_store, dice=(1, 1))
    assert result.card is not None
    assert result.card in card_store.community_chest_deck.discard_pile


def test_no_card_on_property(card_store):
    result = take_turn(card_store, dice=(1, 0))
    assert result.card is None
    assert result.outcome == LandingOutcome.PURCHASED
