from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter, ValidationError

from monopoly.exceptions import MessageDecodeError


class PlayerRecord(BaseModel):
    """One player record of the roster envelope, as sent by a client."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    position: StrictInt
    balance: StrictInt
    properties: List[Any] = Field(default_factory=list)
    piece: Optional[StrictStr] = None


_update_adapter: TypeAdapter = TypeAdapter(Union[PlayerRecord, List[PlayerRecord]])


def decode_update(text: str) -> List[PlayerRecord]:
    """
    Decode an inbound text frame into player records.

    Accepts a single record object or the full roster array.

    Raises:
        MessageDecodeError: the frame is not valid JSON or not the record shape
    """
    try:
        decoded = _update_adapter.validate_json(text)
    except ValidationError as e:
        raise MessageDecodeError(f"Malformed player update: {e.error_count()} error(s)") from e
    if isinstance(decoded, PlayerRecord):
        return [decoded]
    return decoded


class JoinRequest(BaseModel):
    name: str = Field(min_length=1, max_length=64)
    piece: Optional[str] = Field(default=None, max_length=64)


class PropertyDTO(BaseModel):
    name: str
    cost: int
    rent: int
    owner: Optional[str] = None


class PlayerDTO(BaseModel):
    name: str
    position: int
    balance: int
    properties: List[PropertyDTO] = Field(default_factory=list)
    piece: Optional[str] = None


class SnapshotResponse(BaseModel):
    current_player_index: int
    current_player: Optional[str] = None
    players: List[PlayerDTO]


class TurnResponse(BaseModel):
    player: str
    dice: List[int]
    from_position: int
    to_position: int
    space: str
    outcome: str
    amount: int = 0
    counterparty: Optional[str] = None
    card: Optional[Dict[str, Any]] = None
    next_player: str
    events: List[Dict[str, Any]] = Field(default_factory=list)
    snapshot: SnapshotResponse


class EventsResponse(BaseModel):
    events: List[Dict[str, Any]]
    from_index: int
    to_index: int
