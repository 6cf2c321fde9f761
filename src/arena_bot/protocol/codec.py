"""Wire codec for the arena protocol.

Inbound frames are JSON arrays of message records. Outbound commands are
single JSON objects in either the nested ``{"sys": {...}, "data": ...}`` shape
or the flattened ``{"type": ..., "id": ..., "data": ...}`` shape.
"""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from arena_bot.actions import Action, MoveAction, RotateAction, ShootAction
from arena_bot.exceptions import MessageDecodeError
from arena_bot.models import (
    MessageKind,
    Movement,
    MovePlayerRequest,
    RegisterPlayerRequest,
    RequestTypes,
    RotatePlayerRequest,
)


class WireFormat(StrEnum):
    """Envelope shape used for outbound requests."""

    NESTED = "nested"
    FLAT = "flat"


def decode_batch(raw: str | bytes) -> list[Any]:
    """Decode one inbound frame into an ordered list of records.

    A frame holding a single JSON object is treated as a one-element batch.
    Records are returned as-is; classification decides what they mean.

    Args:
        raw: Frame received from the transport.

    Returns:
        The records in delivery order.

    Raises:
        MessageDecodeError: If the frame is not UTF-8, not JSON, or not an
            array/object.
    """
    if isinstance(raw, bytes):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MessageDecodeError(f"Frame is not valid UTF-8: {e}", raw) from e
    else:
        text = raw

    try:
        decoded = json.loads(text)
    except json.JSONDecodeError as e:
        raise MessageDecodeError(f"Frame is not valid JSON: {e}", raw) from e

    if isinstance(decoded, dict):
        return [decoded]
    if isinstance(decoded, list):
        return decoded

    raise MessageDecodeError(
        f"Frame must be a JSON array or object, got {type(decoded).__name__}",
        raw,
    )


def build_request(
    request_id: RequestTypes,
    data: BaseModel | None = None,
    wire_format: WireFormat = WireFormat.NESTED,
) -> dict[str, Any]:
    """Build an outbound request record.

    Args:
        request_id: Request id placed in the envelope.
        data: Optional payload model, serialized by alias.
        wire_format: Envelope shape to produce.

    Returns:
        The request as a JSON-compatible dict.
    """
    if wire_format == WireFormat.NESTED:
        message: dict[str, Any] = {
            "sys": {"type": MessageKind.REQUEST.value, "id": request_id.value}
        }
    else:
        message = {"type": MessageKind.REQUEST.value, "id": request_id.value}

    if data is not None:
        message["data"] = data.model_dump(mode="json", by_alias=True, exclude_none=True)
    return message


def build_register_request(
    player_id: str, wire_format: WireFormat = WireFormat.NESTED
) -> dict[str, Any]:
    """Build the RegisterPlayer request sent right after connecting."""
    return build_request(
        RequestTypes.REGISTER_PLAYER,
        RegisterPlayerRequest(id=player_id),
        wire_format,
    )


def build_action_request(
    action: Action, wire_format: WireFormat = WireFormat.NESTED
) -> dict[str, Any]:
    """Build the outbound request for an engine action.

    Raises:
        TypeError: If the action is not a known action model.
    """
    if isinstance(action, MoveAction):
        return build_request(
            RequestTypes.MOVE_PLAYER,
            MovePlayerRequest(movement=Movement(direction=action.direction)),
            wire_format,
        )
    if isinstance(action, RotateAction):
        return build_request(
            RequestTypes.ROTATE_PLAYER,
            RotatePlayerRequest(rotation=action.rotation),
            wire_format,
        )
    if isinstance(action, ShootAction):
        return build_request(RequestTypes.SHOOT, None, wire_format)

    raise TypeError(f"Unsupported action: {action!r}")


def encode(message: dict[str, Any]) -> str:
    """Serialize an outbound record for the transport."""
    return json.dumps(message)
