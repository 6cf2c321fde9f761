"""Bot action alphabet.

This module defines the actions produced by the decision engines. Each action
maps 1:1 onto an outbound request:

- Move (direction): MovePlayer request
- Rotate (rotation): RotatePlayer request
- Shoot: Shoot request

Usage:
    from arena_bot.actions import move_forward_action, rotate_action

    actions = [rotate_action(90.0), move_forward_action()]
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from arena_bot.models import MovementDirection, Rotation


class ActionTypes(StrEnum):
    """Action discriminator values."""

    MOVE = "Move"
    ROTATE = "Rotate"
    SHOOT = "Shoot"


class MoveAction(BaseModel):
    """Move one step in a direction relative to the current heading."""

    model_config = ConfigDict(frozen=True)

    type: Literal[ActionTypes.MOVE] = ActionTypes.MOVE
    direction: MovementDirection


class RotateAction(BaseModel):
    """Turn to an absolute heading in degrees."""

    model_config = ConfigDict(frozen=True)

    type: Literal[ActionTypes.ROTATE] = ActionTypes.ROTATE
    rotation: Rotation


class ShootAction(BaseModel):
    """Fire along the current heading."""

    model_config = ConfigDict(frozen=True)

    type: Literal[ActionTypes.SHOOT] = ActionTypes.SHOOT


Action: TypeAlias = Annotated[
    MoveAction | RotateAction | ShootAction, Field(discriminator="type")
]


def move_action(direction: MovementDirection) -> MoveAction:
    return MoveAction(direction=direction)


def move_forward_action() -> MoveAction:
    return MoveAction(direction=MovementDirection.FORWARD)


def rotate_action(rotation: Rotation) -> RotateAction:
    return RotateAction(rotation=rotation)


def shoot_action() -> ShootAction:
    return ShootAction()


def is_movement_action(action: MoveAction | RotateAction | ShootAction) -> bool:
    """Check if an action is a movement action.

    Args:
        action: The action to check.

    Returns:
        True if the action would send a MovePlayer request.
    """
    return action.type == ActionTypes.MOVE


def action_to_string(action: MoveAction | RotateAction | ShootAction) -> str:
    """Get a human-readable string for an action.

    Args:
        action: The action to describe.

    Returns:
        A short description such as ``Move(Forward)`` or ``Rotate(45.0)``.
    """
    if isinstance(action, MoveAction):
        return f"Move({action.direction.value})"
    if isinstance(action, RotateAction):
        return f"Rotate({action.rotation})"
    return "Shoot"
