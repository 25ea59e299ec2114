"""
Tests for the game state store: roster, snapshots and trusted updates.
"""

import dataclasses

import pytest

from monopoly.config import GameConfig
from monopoly.engine import take_turn
from monopoly.exceptions import (
    DuplicatePlayerError,
    EmptyRosterError,
    PlayerNotFoundError,
    RosterFullError,
)
from monopoly.state import GameStateStore


def test_initial_roster(store):
    snap = store.snapshot()
    assert [p.name for p in snap.players] == ["A", "B"]
    assert all(p.position == 0 and p.balance == 1500 for p in snap.players)
    assert snap.current_player_index == 0
    assert snap.current_player.name == "A"


def test_snapshot_is_idempotent(store):
    assert store.snapshot() == store.snapshot()


def test_snapshot_is_immutable(store):
    snap = store.snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.players[0].balance = 0
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.current_player_index = 1


def test_snapshot_is_detached_from_later_moves(store):
    before = store.snapshot()
    take_turn(store, dice=(1, 2))
    assert before.players[0].position == 0
    assert before.current_player_index == 0
    assert store.snapshot() != before


def test_snapshot_lists_owned_properties(store):
    take_turn(store, dice=(1, 0))
    props = store.snapshot().get_player("A").properties
    assert len(props) == 1
    assert props[0].name == "Mediterranean Avenue"
    assert props[0].owner == "A"


def test_apply_move_updates_position_and_balance(store):
    store.apply_move("B", 5, 1234)
    player = store.get_player("B")
    assert player.position == 5
    assert player.balance == 1234


def test_apply_move_does_not_touch_turn_or_ownership(store):
    store.apply_move("A", 1, 10)
    assert store.current_player_index == 0
    assert store.board.get_space(1).owner is None
    assert store.get_player("A").properties == []


def test_apply_move_allows_negative_balance(store):
    store.apply_move("A", 3, -200)
    assert store.get_player("A").balance == -200


def test_apply_move_wraps_position(store):
    store.apply_move("A", 30, 1500)
    assert store.get_player("A").position == 2


def test_apply_move_unknown_player(store):
    before = store.snapshot()
    with pytest.raises(PlayerNotFoundError):
        store.apply_move("Z", 4, 100)
    assert store.snapshot() == before


def test_add_player_appends_to_turn_order(store):
    store.add_player("C", piece="hat")
    snap = store.snapshot()
    assert [p.name for p in snap.players] == ["A", "B", "C"]
    assert snap.players[2].piece == "hat"
    assert snap.players[2].balance == 1500


def test_add_player_rejects_duplicate_name(store):
    with pytest.raises(DuplicatePlayerError):
        store.add_player("A")


def test_roster_limit():
    store = GameStateStore(GameConfig(player_names=["A"], max_players=2))
    store.add_player("B")
    with pytest.raises(RosterFullError):
        store.add_player("C")


def test_config_rejects_too_many_names():
    with pytest.raises(ValueError):
        GameConfig(player_names=["A", "B", "C"], max_players=2)


def test_empty_roster_has_no_current_player():
    store = GameStateStore(GameConfig(player_names=[]))
    assert store.snapshot().current_player is None
    with pytest.raises(EmptyRosterError):
        store.current_player()
    with pytest.raises(EmptyRosterError):
        take_turn(store)


def test_game_start_is_logged(store):
    first = store.event_log.get_events()[-1]
    assert first.event_type.value == "game_start"
    assert first.details["players"] == ["A", "B"]


def test_event_log_keeps_only_recent_events():
    store = GameStateStore(GameConfig(player_names=["A", "B"], max_events=50))
    start = store.event_log.next_index
    for i in range(5000):
        store.apply_move("A", i % 28, 1000)

    assert len(store.event_log) == 50
    assert store.event_log.next_index == start + 5000
    assert store.event_log.first_index == start + 5000 - 50
    # Evicted indices are skipped rather than failing
    assert len(store.event_log.get_events_since(0)) == 50


def test_event_log_indices_survive_eviction():
    store = GameStateStore(GameConfig(player_names=["A", "B"], max_events=5))
    for i in range(10):
        store.apply_move("B", i, 1500 - i)

    last_two = store.event_log.get_events_since(store.event_log.next_index - 2)
    assert [e.details["to_position"] for e in last_two] == [8, 9]


def test_turn_events_are_complete_with_small_log():
    store = GameStateStore(GameConfig(player_names=["A", "B"], max_events=8))
    for _ in range(20):
        result = take_turn(store, dice=(1, 0))
        assert result.events[0].event_type.value == "dice_roll"
        assert result.events[-1].event_type.value == "turn_end"


def test_max_events_must_be_positive():
    with pytest.raises(ValueError):
        GameConfig(max_events=0)
