"""Reference decision strategy for the delegated style."""

import logging
from dataclasses import dataclass

from arena_bot.actions import (
    Action,
    move_action,
    rotate_action,
    shoot_action,
)
from arena_bot.models import RadarScanData, angle_difference
from arena_bot.strategy.base import BotRecord, MovementPlanner, TargetingModule

logger = logging.getLogger(__name__)


@dataclass
class OracleConfig:
    """Configuration for the reference oracle."""

    # Fire only when the heading is within this many degrees of the target
    aim_tolerance: float = 5.0


class Oracle:
    """Shoot what is in sight, otherwise keep walking.

    With ``shooter`` enabled the oracle asks the gunner for a target heading:
    it fires when already aligned and turns toward the target when not.
    Without a target (or with shooting disabled) it asks the planner for the
    next step.
    """

    def __init__(self, shooter: bool = False, config: OracleConfig | None = None):
        self.shooter = shooter
        self.config = config or OracleConfig()

    def decide(
        self,
        bot: BotRecord,
        scan: RadarScanData,
        planner: MovementPlanner,
        gunner: TargetingModule,
    ) -> Action | None:
        if self.shooter:
            target = gunner.aim(bot.location, scan)
            if target is not None:
                if angle_difference(bot.rotation, target) <= self.config.aim_tolerance:
                    logger.debug("Target in sight at %.1f, shooting", target)
                    return shoot_action()
                logger.debug("Turning from %.1f to target at %.1f", bot.rotation, target)
                return rotate_action(target)

        return move_action(planner.next_direction(bot, scan))
