import json

from events.mapper import map_events
from monopoly.engine import take_turn
from snapshot import encode_roster, serialize_board, serialize_roster, serialize_snapshot


def test_roster_envelope_structure(store):
    store.add_player("C", piece="dog")
    take_turn(store, dice=(1, 0))

    roster = serialize_roster(store.snapshot())

    assert isinstance(roster, list) and len(roster) == 3
    a = roster[0]
    assert set(a.keys()) == {"name", "position", "balance", "properties"}
    assert a["properties"] == [
        {"name": "Mediterranean Avenue", "cost": 60, "rent": 2, "owner": "A"}
    ]
    # piece is optional and only present when set
    assert roster[2]["piece"] == "dog"


def test_encode_roster_is_json_array(store):
    decoded = json.loads(encode_roster(store.snapshot()))
    assert [p["name"] for p in decoded] == ["A", "B"]
    assert decoded[0]["balance"] == 1500


def test_snapshot_includes_turn_pointer(store):
    take_turn(store, dice=(2, 2))
    data = serialize_snapshot(store.snapshot())
    assert data["current_player_index"] == 1
    assert data["current_player"] == "B"
    assert len(data["players"]) == 2


def test_board_serialization(board):
    spaces = serialize_board(board)
    assert len(spaces) == 28
    assert spaces[0] == {"position": 0, "name": "Go", "type": "go", "cost": 0, "rent": 0, "owner": None}


def test_turn_events_map_to_public_json(store):
    take_turn(store, dice=(1, 0))
    result = take_turn(store, dice=(1, 0))

    mapped = map_events(store.board, result.events)

    assert [e["seq"] for e in mapped] == list(range(len(mapped)))
    dice = mapped[0]
    assert dice["event_type"] == "dice_roll"
    assert dice["total"] == 1
    move = mapped[1]
    assert move["space_name"] == "Mediterranean Avenue"
    rent = next(e for e in mapped if e["event_type"] == "rent_payment")
    assert rent["payer"] == "B"
    assert rent["owner"] == "A"
    assert rent["amount"] == 2
    assert rent["owner_balance_after"] == 1442
