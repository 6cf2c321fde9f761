"""Base models for arena coordinates and headings.

This module contains the foundational value types shared by the wire models,
the decision engine and the strategy collaborators.
"""

import math

from pydantic import BaseModel, ConfigDict

# Rotation is expressed in degrees.
Rotation = float

FULL_TURN_DEGREES: float = 360.0


class Position(BaseModel):
    """Represents a 2D coordinate in the arena."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def distance_to(self, other: "Position") -> float:
        """Euclidean distance to another position."""
        return math.hypot(other.x - self.x, other.y - self.y)


def normalize_rotation(rotation: Rotation) -> Rotation:
    """Normalize a rotation into the range [0, 360).

    Args:
        rotation: Rotation in degrees, any value.

    Returns:
        The equivalent rotation in [0, 360).

    Example:
        >>> normalize_rotation(370)
        10.0
        >>> normalize_rotation(-15)
        345.0
    """
    normalized = float(rotation) % FULL_TURN_DEGREES
    # -0.0 % 360 and tiny negatives can land exactly on 360.0
    if normalized >= FULL_TURN_DEGREES:
        return 0.0
    return normalized


def angle_difference(a: Rotation, b: Rotation) -> Rotation:
    """Smallest absolute difference between two headings, in [0, 180]."""
    diff = abs(normalize_rotation(a) - normalize_rotation(b))
    return min(diff, FULL_TURN_DEGREES - diff)


def bearing(origin: Position, target: Position) -> Rotation:
    """Angle in degrees from origin to target.

    Uses the two-argument arctangent of the coordinate deltas and
    normalizes the result into [0, 360).
    """
    angle = math.degrees(math.atan2(target.y - origin.y, target.x - origin.x))
    return normalize_rotation(angle)
