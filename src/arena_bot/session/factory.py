"""Build a session from configuration."""

from arena_bot.config import BotConfig, StrategyStyle
from arena_bot.models import Position, Rotation
from arena_bot.session.base import Session
from arena_bot.session.delegated import DelegatedSession
from arena_bot.session.shot_sprayer import ShotSprayerSession
from arena_bot.strategy import Gunner, Oracle, OracleConfig, Planner, PlannerConfig


def create_session(config: BotConfig) -> Session:
    """Create a fresh session for one connection.

    Args:
        config: Bot configuration selecting the decision style.

    Returns:
        A new session with no shared state.
    """
    if config.style == StrategyStyle.REDUCER:
        return ShotSprayerSession(config.engine)

    settings = config.strategy

    def planner_factory(position: Position, rotation: Rotation) -> Planner:
        return Planner(
            position=position,
            rotation=rotation,
            tracker=settings.tracker,
            config=PlannerConfig(edge_margin=settings.edge_margin),
        )

    return DelegatedSession(
        strategy=Oracle(
            shooter=settings.shooter,
            config=OracleConfig(aim_tolerance=settings.aim_tolerance),
        ),
        gunner=Gunner(),
        planner_factory=planner_factory,
    )
