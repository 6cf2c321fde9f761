"""Session driving the status-tagged shot-sprayer engine."""

from arena_bot.actions import Action
from arena_bot.engine import (
    BotState,
    ShotSprayerConfig,
    ShotSprayerEngine,
    initial_state,
)
from arena_bot.models import InboundMessageBase
from arena_bot.session.base import Session


class ShotSprayerSession(Session):
    """Holds the single live BotState and folds events through the engine.

    Attributes:
        state: Current bot state; starts Unregistered.
        engine: The reducer deciding transitions.
    """

    def __init__(self, config: ShotSprayerConfig | None = None) -> None:
        super().__init__()
        self.engine = ShotSprayerEngine(config)
        self.state: BotState = initial_state()

    def _decide(self, event: InboundMessageBase) -> list[Action]:
        transition = self.engine.handle(self.state, event)
        self.state = transition.state
        return transition.actions

    def reset(self) -> None:
        super().reset()
        self.state = initial_state()
