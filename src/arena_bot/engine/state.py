"""Bot state variants for the shot-sprayer state machine.

``BotState`` is a discriminated union on ``status``. Each variant is frozen
and forbids unknown fields, so a status can never carry another status's
extra data. Transitions build a new variant with ``model_copy`` or the
variant constructor.
"""

from enum import StrEnum
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from arena_bot.models import Position, Rotation


class Status(StrEnum):
    """Discriminant of the active BotState variant."""

    UNREGISTERED = "Unregistered"
    NOT_STARTED = "NotStarted"
    ROTATED_TO_ARENA_CENTER = "RotatedToArenaCenter"
    MOVING_TO_ARENA_CENTER = "MovingToArenaCenter"
    ROTATING = "Rotating"
    SHOOTING = "Shooting"
    STOP = "Stop"


class _BotStateBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    position: Position = Field(default_factory=lambda: Position(x=0.0, y=0.0))
    rotation: Rotation = 0.0


class UnregisteredState(_BotStateBase):
    status: Literal[Status.UNREGISTERED] = Status.UNREGISTERED


class NotStartedState(_BotStateBase):
    status: Literal[Status.NOT_STARTED] = Status.NOT_STARTED


class RotatedToArenaCenterState(_BotStateBase):
    status: Literal[Status.ROTATED_TO_ARENA_CENTER] = Status.ROTATED_TO_ARENA_CENTER
    rotation_to_arena_center: Rotation


class MovingToArenaCenterState(_BotStateBase):
    status: Literal[Status.MOVING_TO_ARENA_CENTER] = Status.MOVING_TO_ARENA_CENTER


class RotatingState(_BotStateBase):
    status: Literal[Status.ROTATING] = Status.ROTATING
    ticks_to_next_rotation: int = Field(ge=0)


class ShootingState(_BotStateBase):
    status: Literal[Status.SHOOTING] = Status.SHOOTING
    shots_fired: int = Field(ge=0)


class StopState(_BotStateBase):
    """Terminal state. Every event is ignored once stopped."""

    status: Literal[Status.STOP] = Status.STOP


BotState: TypeAlias = Annotated[
    UnregisteredState
    | NotStartedState
    | RotatedToArenaCenterState
    | MovingToArenaCenterState
    | RotatingState
    | ShootingState
    | StopState,
    Field(discriminator="status"),
]

BOT_STATE_ADAPTER: TypeAdapter[BotState] = TypeAdapter(BotState)


def initial_state() -> UnregisteredState:
    """State of a freshly connected bot."""
    return UnregisteredState()


def stopped(state: _BotStateBase) -> StopState:
    """Move any state to the terminal Stop status, keeping position and rotation."""
    return StopState(position=state.position, rotation=state.rotation)
