import pytest

from monopoly.exceptions import MessageDecodeError
from server.schemas import decode_update


def test_decode_single_record():
    records = decode_update('{"name": "A", "position": 3, "balance": 1400, "properties": []}')
    assert len(records) == 1
    assert (records[0].name, records[0].position, records[0].balance) == ("A", 3, 1400)


def test_decode_roster_array():
    records = decode_update(
        '[{"name": "A", "position": 1, "balance": 1440, "properties": [], "piece": "hat"},'
        ' {"name": "B", "position": 0, "balance": 1500, "properties": []}]'
    )
    assert [r.name for r in records] == ["A", "B"]
    assert records[0].piece == "hat"


def test_properties_are_optional():
    records = decode_update('{"name": "A", "position": 1, "balance": 10}')
    assert records[0].properties == []


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "",
        "42",
        '{"name": "A"}',
        '{"name": "A", "position": "3", "balance": 10}',
        '{"name": "A", "position": 3.5, "balance": 10}',
        '{"name": 7, "position": 3, "balance": 10}',
        '[{"name": "A", "position": 1, "balance": 1}, {"oops": true}]',
    ],
)
def test_malformed_messages_raise_decode_error(text):
    with pytest.raises(MessageDecodeError):
        decode_update(text)
