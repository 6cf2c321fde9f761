"""Reference movement planner.

Walks along the current heading and reverses before leaving the arena. In
tracker mode it steps toward (or back away from, when too close) the
nearest visible player instead.
"""

import math
from dataclasses import dataclass

from arena_bot.models import (
    ARENA_CONSTANTS,
    ArenaConstants,
    MovementDirection,
    Position,
    RadarScanData,
    ScannedPlayer,
)
from arena_bot.strategy.base import BotRecord, Locations


@dataclass
class PlannerConfig:
    """Configuration for the reference planner."""

    # Distance from the arena edge the bot refuses to cross
    edge_margin: float = 10.0

    # Tracker mode keeps at least this distance to the followed player
    min_tracking_distance: float = 50.0

    # Look-ahead distance used to detect a step that would leave the arena.
    # The server does not report its step size, so this is an estimate.
    movement_step: float = 1.0


class Planner:
    """Movement planner that bounces between arena edges.

    Attributes:
        locations: Confirmed-location bookkeeping updated by the session.
        direction: Direction used for the last planned step.
        tracker: Follow the nearest visible player when True.
    """

    def __init__(
        self,
        position: Position,
        rotation: float = 0.0,
        direction: MovementDirection = MovementDirection.FORWARD,
        tracker: bool = False,
        arena: ArenaConstants = ARENA_CONSTANTS,
        config: PlannerConfig | None = None,
    ) -> None:
        self.locations = Locations(current=position)
        self.rotation = rotation
        self.direction = direction
        self.tracker = tracker
        self.arena = arena
        self.config = config or PlannerConfig()

    def next_direction(self, bot: BotRecord, scan: RadarScanData) -> MovementDirection:
        """Direction of the next step.

        Args:
            bot: Bot record with the confirmed heading.
            scan: Latest radar snapshot.

        Returns:
            The direction to move in; also stored on ``self.direction``.
        """
        self.rotation = bot.rotation

        if self.tracker:
            target = self._nearest_player(scan)
            if target is not None:
                self.direction = self._direction_towards(target.position)
                return self.direction

        if not self._is_inside(self._project(self.direction)):
            self.direction = _reverse(self.direction)
        return self.direction

    def _project(self, direction: MovementDirection) -> Position:
        """Position after one step in the given direction."""
        sign = 1.0 if direction == MovementDirection.FORWARD else -1.0
        radians = math.radians(self.rotation)
        step = self.config.movement_step * sign
        current = self.locations.current
        return Position(
            x=current.x + math.cos(radians) * step,
            y=current.y + math.sin(radians) * step,
        )

    def _is_inside(self, position: Position) -> bool:
        margin = self.config.edge_margin
        return (
            margin <= position.x <= self.arena.ARENA_WIDTH - margin
            and margin <= position.y <= self.arena.ARENA_HEIGHT - margin
        )

    def _nearest_player(self, scan: RadarScanData) -> ScannedPlayer | None:
        if not scan.players:
            return None
        current = self.locations.current
        return min(scan.players, key=lambda p: current.distance_to(p.position))

    def _direction_towards(self, target: Position) -> MovementDirection:
        current = self.locations.current
        dx = target.x - current.x
        dy = target.y - current.y
        radians = math.radians(self.rotation)
        ahead = dx * math.cos(radians) + dy * math.sin(radians) >= 0

        if current.distance_to(target) < self.config.min_tracking_distance:
            ahead = not ahead

        direction = MovementDirection.FORWARD if ahead else MovementDirection.BACKWARD
        if not self._is_inside(self._project(direction)):
            direction = _reverse(direction)
        return direction


def _reverse(direction: MovementDirection) -> MovementDirection:
    if direction == MovementDirection.FORWARD:
        return MovementDirection.BACKWARD
    return MovementDirection.FORWARD
