"""Strategy collaborators for the delegated decision style."""

from arena_bot.strategy.base import (
    BotRecord,
    Locations,
    MovementPlanner,
    Strategy,
    TargetingModule,
)
from arena_bot.strategy.gunner import Gunner
from arena_bot.strategy.oracle import Oracle, OracleConfig
from arena_bot.strategy.planner import Planner, PlannerConfig

__all__ = [
    "BotRecord",
    "Locations",
    "MovementPlanner",
    "Strategy",
    "TargetingModule",
    "Gunner",
    "Oracle",
    "OracleConfig",
    "Planner",
    "PlannerConfig",
]
