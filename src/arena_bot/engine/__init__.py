"""Status-tagged decision engine (shot-sprayer bot)."""

from arena_bot.engine.shot_sprayer import (
    ShotSprayerConfig,
    ShotSprayerEngine,
    Transition,
)
from arena_bot.engine.state import (
    BOT_STATE_ADAPTER,
    BotState,
    MovingToArenaCenterState,
    NotStartedState,
    RotatedToArenaCenterState,
    RotatingState,
    ShootingState,
    Status,
    StopState,
    UnregisteredState,
    initial_state,
    stopped,
)

__all__ = [
    "ShotSprayerConfig",
    "ShotSprayerEngine",
    "Transition",
    "BOT_STATE_ADAPTER",
    "BotState",
    "Status",
    "UnregisteredState",
    "NotStartedState",
    "RotatedToArenaCenterState",
    "MovingToArenaCenterState",
    "RotatingState",
    "ShootingState",
    "StopState",
    "initial_state",
    "stopped",
]
