"""Message classifier.

Maps a decoded record onto exactly one typed inbound event, keyed by the
``(kind, id)`` pair of its envelope. Classification never raises: anything
that does not match a known pair, or whose payload fails validation, comes
back as an :class:`UnrecognizedMessage` for the caller to log and ignore.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from pydantic import ValidationError

from arena_bot.models import (
    DeployMineResponse,
    HitData,
    HitNotification,
    InboundMessage,
    JoinGameNotification,
    MessageKey,
    MessageKind,
    MovePlayerResponse,
    NotificationTypes,
    RadarScanData,
    RadarScanNotification,
    RegisterPlayerResponse,
    ResponseMessageBase,
    ResponseTypes,
    RotatePlayerDetails,
    RotatePlayerResponse,
    ShootResponse,
    StartGameNotification,
    WireMessage,
)


@dataclass(frozen=True)
class UnrecognizedMessage:
    """Classification miss.

    Attributes:
        record: The record as decoded from the wire.
        reason: Why the record could not be classified.
    """

    record: Any
    reason: str


Classification: TypeAlias = InboundMessage | UnrecognizedMessage

_RESPONSE_MODELS: dict[MessageKey, type[ResponseMessageBase]] = {
    model.message_key(): model
    for model in (
        RegisterPlayerResponse,
        MovePlayerResponse,
        RotatePlayerResponse,
        ShootResponse,
        DeployMineResponse,
    )
}

_COMPONENT_UPDATE_KEY: MessageKey = (
    MessageKind.RESPONSE.value,
    ResponseTypes.COMPONENT_UPDATE.value,
)
_RADAR_SCAN_KEY: MessageKey = RadarScanNotification.message_key()
_START_GAME_KEY: MessageKey = StartGameNotification.message_key()
_JOIN_GAME_KEY: MessageKey = JoinGameNotification.message_key()
_HIT_KEY: MessageKey = HitNotification.message_key()


def classify(record: Any) -> Classification:
    """Classify one decoded record.

    Args:
        record: A record produced by :func:`arena_bot.protocol.codec.decode_batch`.

    Returns:
        The typed inbound event, or an UnrecognizedMessage.
    """
    if not isinstance(record, dict):
        return UnrecognizedMessage(record, "record is not an object")

    try:
        wire = WireMessage.model_validate(record)
    except ValidationError as e:
        return UnrecognizedMessage(record, f"invalid envelope: {_summarize(e)}")

    key = wire.key
    if key is None:
        return UnrecognizedMessage(record, "envelope has no type/id")

    try:
        if key in _RESPONSE_MODELS:
            return _classify_response(_RESPONSE_MODELS[key], wire, record)
        if key == _COMPONENT_UPDATE_KEY:
            return _classify_component_update(wire, record)
        if key == _RADAR_SCAN_KEY:
            payload = wire.payload if wire.payload is not None else {}
            return RadarScanNotification(scan=RadarScanData.model_validate(payload))
        if key == _START_GAME_KEY:
            return StartGameNotification()
        if key == _JOIN_GAME_KEY:
            return JoinGameNotification()
        if key == _HIT_KEY:
            return HitNotification(hit=HitData.model_validate(wire.payload))
    except ValidationError as e:
        return UnrecognizedMessage(
            record, f"invalid {key[0]}/{key[1]} payload: {_summarize(e)}"
        )

    return UnrecognizedMessage(record, f"unknown message {key[0]}/{key[1]}")


def _classify_response(
    model: type[ResponseMessageBase], wire: WireMessage, record: Any
) -> Classification:
    success, payload = wire.response_parts()
    if success is None:
        return UnrecognizedMessage(
            record, f"{model.ID} response without a boolean success flag"
        )

    if success:
        # Acknowledgements with all-optional details may omit the payload
        details = payload if payload is not None else {}
        return model.model_validate({"success": True, "details": details})

    return model.model_validate({"success": False, "error": payload})


def _classify_component_update(wire: WireMessage, record: Any) -> Classification:
    success, payload = wire.response_parts()
    if success is not True or payload is None:
        return UnrecognizedMessage(record, "component update is not a rotation ack")

    details = RotatePlayerDetails.model_validate(payload)
    if details.rotation is None:
        return UnrecognizedMessage(record, "component update is not a rotation ack")

    return RotatePlayerResponse(success=True, details=details)


def _summarize(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']}"
