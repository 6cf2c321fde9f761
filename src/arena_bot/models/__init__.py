"""Pydantic models for the arena bot client.

This package provides type-safe data validation and serialization for all
interactions between the bot and the arena game server.

Usage:
    from arena_bot.models import Position, RadarScanData, MovePlayerResponse
    from arena_bot.models import ARENA_CONSTANTS, MessageKind
"""

from arena_bot.models.base import (
    Position,
    Rotation,
    angle_difference,
    bearing,
    normalize_rotation,
)
from arena_bot.models.constants import ARENA_CONSTANTS, ArenaConstants
from arena_bot.models.messages import (
    DeployMineResponse,
    HitData,
    HitNotification,
    InboundMessage,
    InboundMessageBase,
    JoinGameNotification,
    MessageKey,
    MessageKind,
    Movement,
    MovementDirection,
    MovePlayerDetails,
    MovePlayerRequest,
    MovePlayerResponse,
    NotificationTypes,
    RadarScanData,
    RadarScanNotification,
    RegisterPlayerDetails,
    RegisterPlayerRequest,
    RegisterPlayerResponse,
    RequestTypes,
    ResponseMessageBase,
    ResponseTypes,
    RotatePlayerDetails,
    RotatePlayerRequest,
    RotatePlayerResponse,
    ScannedObject,
    ScannedPlayer,
    ScannedShot,
    ShootResponse,
    StartGameNotification,
    SysHeader,
    TokenDetails,
    WireMessage,
)

__all__ = [
    # Base
    "Position",
    "Rotation",
    "angle_difference",
    "bearing",
    "normalize_rotation",
    # Constants
    "ArenaConstants",
    "ARENA_CONSTANTS",
    # Message types
    "MessageKey",
    "MessageKind",
    "RequestTypes",
    "ResponseTypes",
    "NotificationTypes",
    "MovementDirection",
    # Envelope
    "SysHeader",
    "WireMessage",
    # Payloads
    "RegisterPlayerDetails",
    "MovePlayerDetails",
    "RotatePlayerDetails",
    "TokenDetails",
    "ScannedPlayer",
    "ScannedObject",
    "ScannedShot",
    "RadarScanData",
    "HitData",
    # Inbound
    "InboundMessage",
    "InboundMessageBase",
    "ResponseMessageBase",
    "RegisterPlayerResponse",
    "MovePlayerResponse",
    "RotatePlayerResponse",
    "ShootResponse",
    "DeployMineResponse",
    "RadarScanNotification",
    "StartGameNotification",
    "JoinGameNotification",
    "HitNotification",
    # Outbound
    "RegisterPlayerRequest",
    "Movement",
    "MovePlayerRequest",
    "RotatePlayerRequest",
]
