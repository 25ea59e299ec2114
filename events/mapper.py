"""
Mapping from internal EventLog objects to canonical public JSON events.

The internal engine emits GameEvent objects where:
- event_type is event_log.EventType
- player is an optional player name
- details may be nested (often passed as details={...})

This module produces stable, UI-friendly dicts with consistent
event_type strings and payload keys.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from monopoly.board import Board
from monopoly.event_log import EventType, GameEvent


def _flatten_details(details: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize nested details payloads from engine logs."""
    if not details:
        return {}
    if "details" in details and isinstance(details["details"], dict):
        return details["details"]
    return details


def _space_name(board: Board, position: Optional[int]) -> Optional[str]:
    if position is None:
        return None
    return board.get_space(position).name


def map_event(board: Board, event: GameEvent) -> Dict[str, Any]:
    """
    Map a single GameEvent to a canonical JSON dict.

    Args:
        board: Board instance (for resolving space names)
        event: internal event object

    Returns:
        dict with keys: event_type (str), player (optional), and event-specific fields
    """
    etype = event.event_type.value
    d = _flatten_details(event.details)

    base: Dict[str, Any] = {"event_type": etype}
    if event.player is not None:
        base["player"] = event.player

    # Dice
    if event.event_type == EventType.DICE_ROLL:
        base.update(
            die1=d.get("die1"),
            die2=d.get("die2"),
            total=d.get("total"),
            is_doubles=d.get("doubles"),
        )
        return base

    # Movement
    if event.event_type == EventType.MOVE:
        to_pos = d.get("to")
        base.update(
            from_position=d.get("from"),
            to_position=to_pos,
            spaces=d.get("spaces"),
            direct=d.get("direct", False),
            space_name=_space_name(board, to_pos),
        )
        return base

    if event.event_type == EventType.LAND:
        position = d.get("position")
        base.update(position=position, space_name=d.get("space") or _space_name(board, position))
        return base

    # Purchases and payments
    if event.event_type == EventType.PURCHASE:
        base.update(
            property_name=d.get("property"),
            position=d.get("position"),
            price=d.get("price"),
            balance_after=d.get("new_balance"),
        )
        return base

    if event.event_type == EventType.PURCHASE_SKIPPED:
        base.update(
            property_name=d.get("property"),
            position=d.get("position"),
            price=d.get("price"),
            balance=d.get("balance"),
            reason="insufficient_funds",
        )
        return base

    if event.event_type == EventType.RENT_PAYMENT:
        base.update(
            payer=event.player,
            owner=d.get("owner"),
            property_name=d.get("property"),
            amount=d.get("amount"),
            payer_balance_after=d.get("payer_balance"),
            owner_balance_after=d.get("owner_balance"),
        )
        return base

    # Cards
    if event.event_type == EventType.CARD_DRAW:
        base.update(deck=d.get("deck"), card=d.get("card"))
        return base

    if event.event_type == EventType.CARD_EFFECT:
        base.update(
            card=d.get("card"),
            effect_type=d.get("effect_type"),
            amount=d.get("amount"),
            balance_before=d.get("cash_before"),
            balance_after=d.get("cash_after"),
        )
        return base

    if event.event_type == EventType.TURN_END:
        base.update(next_player=d.get("next_player"))
        return base

    if event.event_type == EventType.GAME_START:
        players = d.get("players") or []
        base.update(
            player_names=players,
            num_players=len(players),
            starting_balance=d.get("starting_balance"),
            seed=d.get("seed"),
        )
        return base

    # Default: echo raw fields
    base.update(d)
    return base


def map_events(board: Board, events: Iterable[GameEvent], *, start: int = 0) -> List[Dict[str, Any]]:
    """Map a sequence of GameEvent objects.

    Args:
        board: Board instance
        events: iterable of GameEvent
        start: log index of the first event, used for "seq"
    """
    mapped: List[Dict[str, Any]] = []
    for idx, ev in enumerate(events, start):
        mev = map_event(board, ev)
        mev["seq"] = idx
        mapped.append(mev)
    return mapped
