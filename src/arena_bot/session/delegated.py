"""Session delegating decisions to strategy collaborators.

The session keeps bookkeeping (confirmed location and heading) up to date
from acknowledgements and asks the strategy for one action per radar scan,
but only while no move is in flight.
"""

from collections.abc import Callable

from arena_bot.actions import Action, RotateAction, move_forward_action
from arena_bot.models import (
    HitNotification,
    InboundMessageBase,
    MovePlayerResponse,
    Position,
    RadarScanNotification,
    RegisterPlayerResponse,
    RotatePlayerResponse,
    Rotation,
    StartGameNotification,
    normalize_rotation,
)
from arena_bot.session.base import Session
from arena_bot.strategy import BotRecord, MovementPlanner, Strategy, TargetingModule

PlannerFactory = Callable[[Position, Rotation], MovementPlanner]


class DelegatedSession(Session):
    """Session for the delegated-strategy style.

    Attributes:
        strategy: Picks the next action after each radar scan.
        gunner: Targeting collaborator passed to the strategy.
        bot: Bot record, created by a successful registration.
        planner: Movement planner, created alongside the bot record.
        requested_rotation: Heading of the last emitted rotate, until acknowledged.
    """

    def __init__(
        self,
        strategy: Strategy,
        gunner: TargetingModule,
        planner_factory: PlannerFactory,
    ) -> None:
        """Initialize the session.

        Args:
            strategy: Decision strategy (e.g. Oracle).
            gunner: Targeting collaborator (e.g. Gunner).
            planner_factory: Builds the planner from the registered position
                and rotation.
        """
        super().__init__()
        self.strategy = strategy
        self.gunner = gunner
        self.planner_factory = planner_factory
        self.bot: BotRecord | None = None
        self.planner: MovementPlanner | None = None
        self.requested_rotation: Rotation | None = None

    def _decide(self, event: InboundMessageBase) -> list[Action]:
        if isinstance(event, RegisterPlayerResponse):
            self._on_register(event)
        elif isinstance(event, MovePlayerResponse):
            self._on_move(event)
        elif isinstance(event, RotatePlayerResponse):
            self._on_rotate(event)
        elif isinstance(event, HitNotification):
            if self.bot is not None:
                self.bot.damage_taken += event.hit.damage
            self._logger.info("Hit for %s damage", event.hit.damage)
        elif isinstance(event, RadarScanNotification):
            return self._on_radar_scan(event)
        elif isinstance(event, StartGameNotification):
            self._logger.info("Game started")
            return [move_forward_action()]
        return []

    def _on_register(self, event: RegisterPlayerResponse) -> None:
        if not event.success or event.details is None:
            self._logger.warning("Registration rejected: %s", event.error)
            return

        position = event.details.position
        rotation = normalize_rotation(event.details.rotation)
        self.bot = BotRecord(location=position, rotation=rotation)
        self.planner = self.planner_factory(position, rotation)
        self.move_in_flight = False
        self._logger.info("Registered at (%.1f, %.1f)", position.x, position.y)

    def _on_move(self, event: MovePlayerResponse) -> None:
        if not event.success or event.details is None:
            self._logger.debug("Move rejected: %s", event.error)
            return
        if self.bot is None or self.planner is None:
            return

        position = event.details.position
        self.planner.locations.confirm(position)
        self.bot.location = position

    def _on_rotate(self, event: RotatePlayerResponse) -> None:
        requested = self.requested_rotation
        self.requested_rotation = None
        if not event.success or event.details is None:
            self._logger.debug("Rotation rejected: %s", event.error)
            return
        if self.bot is None:
            return

        # Acks may omit the new heading; fall back to the one we asked for
        rotation = event.details.rotation
        if rotation is None:
            rotation = requested
        if rotation is not None:
            self.bot.rotation = normalize_rotation(rotation)

    def _on_radar_scan(self, event: RadarScanNotification) -> list[Action]:
        if self.bot is None or self.planner is None:
            return []
        if self.move_in_flight:
            return []

        action = self.strategy.decide(self.bot, event.scan, self.planner, self.gunner)
        if action is None:
            return []
        if isinstance(action, RotateAction):
            self.requested_rotation = action.rotation
        return [action]

    def reset(self) -> None:
        super().reset()
        self.bot = None
        self.planner = None
        self.requested_rotation = None
