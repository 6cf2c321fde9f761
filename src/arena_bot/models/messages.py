"""Wire message models.

This module contains Pydantic models for the arena protocol: the envelope
shapes accepted from the server, the payloads carried by each message, the
typed inbound events produced by the classifier and the outbound request
payloads produced by the codec.
"""

from enum import StrEnum
from typing import Any, ClassVar, TypeAlias

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    model_validator,
)

from arena_bot.models.base import Position, Rotation

# =============================================================================
# Message Types (Constants)
# =============================================================================


class MessageKind(StrEnum):
    """Top-level message kind found in the envelope header."""

    REQUEST = "Request"
    RESPONSE = "Response"
    NOTIFICATION = "Notification"


class RequestTypes(StrEnum):
    """Request ids (client -> server)."""

    REGISTER_PLAYER = "RegisterPlayer"
    MOVE_PLAYER = "MovePlayer"
    ROTATE_PLAYER = "RotatePlayer"
    SHOOT = "Shoot"
    DEPLOY_MINE = "DeployMine"


class ResponseTypes(StrEnum):
    """Response ids (server -> client)."""

    REGISTER_PLAYER = "RegisterPlayer"
    MOVE_PLAYER = "MovePlayer"
    ROTATE_PLAYER = "RotatePlayer"
    SHOOT = "Shoot"
    DEPLOY_MINE = "DeployMine"
    # Older servers acknowledge rotations as component updates
    COMPONENT_UPDATE = "ComponentUpdate"


class NotificationTypes(StrEnum):
    """Notification ids (server -> client)."""

    RADAR_SCAN = "RadarScan"
    START_GAME = "StartGame"
    JOIN_GAME = "JoinGame"
    HIT = "Hit"


MessageKey: TypeAlias = tuple[str, str]


class MovementDirection(StrEnum):
    """Direction of a MovePlayer request relative to the bot's heading."""

    FORWARD = "Forward"
    BACKWARD = "Backward"


# =============================================================================
# Envelope
# =============================================================================


class SysHeader(BaseModel):
    """Nested envelope header: ``{"sys": {"type": ..., "id": ...}}``."""

    type: str
    id: str


class WireMessage(BaseModel):
    """A single decoded record in either envelope shape.

    Nested shape::

        {"sys": {"type": "Response", "id": "MovePlayer"}, "success": true, "data": {...}}

    Flattened shape::

        {"type": "Response", "id": "MovePlayer", "success": true, "details": {...}}
    """

    model_config = ConfigDict(extra="allow")

    sys: SysHeader | None = None
    type: str | None = None
    id: str | None = None
    success: StrictBool | None = None
    data: Any = None
    details: Any = None

    @property
    def kind(self) -> str | None:
        if self.sys is not None:
            return self.sys.type
        return self.type

    @property
    def message_id(self) -> str | None:
        if self.sys is not None:
            return self.sys.id
        return self.id

    @property
    def key(self) -> MessageKey | None:
        if self.kind is None or self.message_id is None:
            return None
        return (self.kind, self.message_id)

    @property
    def payload(self) -> Any:
        """Message payload, preferring ``data`` over ``details``."""
        if self.data is not None:
            return self.data
        return self.details

    def response_parts(self) -> tuple[bool | None, Any]:
        """Split a response into its success flag and payload.

        The flag is read from the envelope first. Nested-shape responses that
        carry ``success`` inside ``data`` are unwrapped one level.
        """
        if self.success is not None:
            return self.success, self.payload

        inner = self.data
        if isinstance(inner, dict) and isinstance(inner.get("success"), bool):
            payload = inner.get("data")
            if payload is None:
                payload = inner.get("details")
            return inner["success"], payload

        return None, self.payload


# =============================================================================
# Payloads
# =============================================================================


def _flatten_component(data: Any) -> Any:
    """Flatten ``{component: {details: {...}}, request: {...}}`` payloads."""
    if not isinstance(data, dict) or "component" not in data:
        return data

    component = data.get("component") or {}
    flattened = dict(component.get("details") or {})
    request = data.get("request") or {}
    for key in ("cost", "withTurbo"):
        if key in request:
            flattened.setdefault(key, request[key])
    return flattened


class _ResponseDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _unwrap_component(cls, data: Any) -> Any:
        return _flatten_component(data)


class RegisterPlayerDetails(_ResponseDetails):
    """Payload of a successful RegisterPlayer response."""

    id: str | None = None
    position: Position
    rotation: Rotation = 0.0


class MovePlayerDetails(_ResponseDetails):
    """Payload of a successful MovePlayer response."""

    position: Position
    tokens: int | None = None
    cost: float | None = None
    with_turbo: bool | None = Field(default=None, alias="withTurbo")


class RotatePlayerDetails(_ResponseDetails):
    """Payload of a successful RotatePlayer response.

    The rotation is optional because some servers acknowledge without echoing
    the new heading.
    """

    rotation: Rotation | None = None
    tokens: int | None = None
    cost: float | None = None


class TokenDetails(_ResponseDetails):
    """Payload of successful Shoot and DeployMine responses."""

    tokens: int | None = None
    cost: float | None = None


class ScannedPlayer(BaseModel):
    """A player seen by the radar."""

    model_config = ConfigDict(frozen=True)

    position: Position
    id: str | None = None
    rotation: Rotation | None = None


class ScannedObject(BaseModel):
    """An unidentified object or a mine seen by the radar."""

    model_config = ConfigDict(frozen=True)

    position: Position


class ScannedShot(BaseModel):
    """A shot in flight seen by the radar."""

    model_config = ConfigDict(frozen=True)

    position: Position
    rotation: Rotation | None = None


class RadarScanData(BaseModel):
    """Full radar snapshot. Identities are not stable across scans."""

    model_config = ConfigDict(frozen=True)

    players: list[ScannedPlayer] = Field(default_factory=list)
    unknown: list[ScannedObject] = Field(default_factory=list)
    mines: list[ScannedObject] = Field(default_factory=list)
    shots: list[ScannedShot] = Field(default_factory=list)


class HitData(BaseModel):
    """Payload of a Hit notification."""

    model_config = ConfigDict(frozen=True)

    damage: float


# =============================================================================
# Inbound Messages (Server -> Client)
# =============================================================================


class InboundMessageBase(BaseModel):
    """Base class of every typed inbound event.

    Subclasses pin their ``(kind, id)`` classification key.
    """

    model_config = ConfigDict(frozen=True)

    KIND: ClassVar[MessageKind]
    ID: ClassVar[str]

    @classmethod
    def message_key(cls) -> MessageKey:
        return (cls.KIND.value, str(cls.ID))


class ResponseMessageBase(InboundMessageBase):
    """A command acknowledgement.

    ``details`` is present if and only if ``success`` is true. Failure
    payloads are kept verbatim in ``error`` and never interpreted.
    """

    KIND: ClassVar[MessageKind] = MessageKind.RESPONSE

    success: StrictBool
    details: Any = None
    error: Any = None

    @model_validator(mode="after")
    def _check_details(self) -> "ResponseMessageBase":
        if self.success and self.details is None:
            raise ValueError(f"successful {self.ID} response without details")
        if not self.success and self.details is not None:
            raise ValueError(f"failed {self.ID} response must not carry details")
        return self


class RegisterPlayerResponse(ResponseMessageBase):
    ID: ClassVar[str] = ResponseTypes.REGISTER_PLAYER

    details: RegisterPlayerDetails | None = None


class MovePlayerResponse(ResponseMessageBase):
    ID: ClassVar[str] = ResponseTypes.MOVE_PLAYER

    details: MovePlayerDetails | None = None


class RotatePlayerResponse(ResponseMessageBase):
    ID: ClassVar[str] = ResponseTypes.ROTATE_PLAYER

    details: RotatePlayerDetails | None = None


class ShootResponse(ResponseMessageBase):
    ID: ClassVar[str] = ResponseTypes.SHOOT

    details: TokenDetails | None = None


class DeployMineResponse(ResponseMessageBase):
    ID: ClassVar[str] = ResponseTypes.DEPLOY_MINE

    details: TokenDetails | None = None


class RadarScanNotification(InboundMessageBase):
    KIND: ClassVar[MessageKind] = MessageKind.NOTIFICATION
    ID: ClassVar[str] = NotificationTypes.RADAR_SCAN

    scan: RadarScanData


class StartGameNotification(InboundMessageBase):
    KIND: ClassVar[MessageKind] = MessageKind.NOTIFICATION
    ID: ClassVar[str] = NotificationTypes.START_GAME


class JoinGameNotification(InboundMessageBase):
    KIND: ClassVar[MessageKind] = MessageKind.NOTIFICATION
    ID: ClassVar[str] = NotificationTypes.JOIN_GAME


class HitNotification(InboundMessageBase):
    KIND: ClassVar[MessageKind] = MessageKind.NOTIFICATION
    ID: ClassVar[str] = NotificationTypes.HIT

    hit: HitData


InboundMessage: TypeAlias = (
    RegisterPlayerResponse
    | MovePlayerResponse
    | RotatePlayerResponse
    | ShootResponse
    | DeployMineResponse
    | RadarScanNotification
    | StartGameNotification
    | JoinGameNotification
    | HitNotification
)


# =============================================================================
# Outbound Requests (Client -> Server)
# =============================================================================


class RegisterPlayerRequest(BaseModel):
    """RegisterPlayer request payload."""

    id: str


class Movement(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    direction: MovementDirection
    with_turbo: bool | None = Field(default=None, alias="withTurbo")


class MovePlayerRequest(BaseModel):
    """MovePlayer request payload."""

    movement: Movement


class RotatePlayerRequest(BaseModel):
    """RotatePlayer request payload."""

    rotation: Rotation
