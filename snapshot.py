"""
Public snapshot serialization.

Produces the wire form of a game snapshot: a JSON array of player records.
The same shape is used for the initial push on connect and for every
broadcast afterwards.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from monopoly.board import Board
from monopoly.state import PlayerSnapshot, Snapshot


def serialize_player(player: PlayerSnapshot) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "name": player.name,
        "position": player.position,
        "balance": player.balance,
        "properties": [
            {"name": p.name, "cost": p.cost, "rent": p.rent, "owner": p.owner}
            for p in player.properties
        ],
    }
    if player.piece is not None:
        record["piece"] = player.piece
    return record


def serialize_roster(snapshot: Snapshot) -> List[Dict[str, Any]]:
    """Serialize a snapshot into the roster envelope (a list of player records)."""
    return [serialize_player(p) for p in snapshot.players]


def encode_roster(snapshot: Snapshot) -> str:
    """JSON text of the roster envelope, ready to send as a text frame."""
    return json.dumps(serialize_roster(snapshot))


def serialize_snapshot(snapshot: Snapshot) -> Dict[str, Any]:
    """Roster plus the turn pointer, for the HTTP presentation API."""
    current = snapshot.current_player
    return {
        "current_player_index": snapshot.current_player_index,
        "current_player": current.name if current is not None else None,
        "players": serialize_roster(snapshot),
    }


def serialize_board(board: Board) -> List[Dict[str, Any]]:
    return [
        {
            "position": s.position,
            "name": s.name,
            "type": s.space_type.value,
            "cost": s.cost,
            "rent": s.rent,
            "owner": s.owner,
        }
        for s in board.spaces
    ]
