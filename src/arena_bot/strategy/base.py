"""Strategy collaborator contracts for the delegated decision style.

The session only ever talks to these protocols. Any object with matching
attributes and methods can be plugged in; the implementations in this
package are simple reference strategies.
"""

from dataclasses import dataclass, field
from typing import Protocol

from arena_bot.actions import Action
from arena_bot.models import MovementDirection, Position, RadarScanData, Rotation


@dataclass
class Locations:
    """Confirmed location bookkeeping kept by a movement planner.

    Attributes:
        current: Last position confirmed by a MovePlayer acknowledgement.
        previous: Position confirmed before ``current``, if any.
    """

    current: Position
    previous: Position | None = None

    def confirm(self, position: Position) -> None:
        """Record a newly confirmed position."""
        self.previous = self.current
        self.current = position


@dataclass
class BotRecord:
    """Long-lived bot record for the delegated style.

    Attributes:
        location: Last confirmed position.
        rotation: Last confirmed heading in degrees.
        damage_taken: Total damage reported by Hit notifications.
    """

    location: Position
    rotation: Rotation = 0.0
    damage_taken: float = field(default=0.0)


class MovementPlanner(Protocol):
    """Chooses where the bot walks next.

    Attributes:
        locations: Mutable confirmed-location bookkeeping. The session writes
            ``locations.current`` on every successful MovePlayer response.
    """

    locations: Locations

    def next_direction(self, bot: BotRecord, scan: RadarScanData) -> MovementDirection:
        """Direction of the next MovePlayer request."""
        ...


class TargetingModule(Protocol):
    """Chooses where the bot aims."""

    def aim(self, origin: Position, scan: RadarScanData) -> Rotation | None:
        """Heading to shoot along from origin, or None when nothing is visible."""
        ...


class Strategy(Protocol):
    """Picks the single next action after a radar scan."""

    def decide(
        self,
        bot: BotRecord,
        scan: RadarScanData,
        planner: MovementPlanner,
        gunner: TargetingModule,
    ) -> Action | None:
        """Decide the next action.

        Args:
            bot: The session's bot record. Must not be mutated.
            scan: The radar snapshot that triggered the decision.
            planner: Movement planning collaborator.
            gunner: Targeting collaborator.

        Returns:
            Exactly one action, or None to do nothing this scan.
        """
        ...
