"""Shot-sprayer decision engine.

A status-tagged reducer: for the current :data:`BotState` and one inbound
event it derives the next state and the actions to send. The bot registers,
turns toward the arena center, walks there, and then alternates between
short bursts of shots and small sweeping rotations.

Any (status, event) pair without a row in the transition table leaves the
state untouched and emits nothing. Once the bot reaches ``Stop`` every event
is ignored.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from arena_bot.actions import (
    Action,
    move_forward_action,
    rotate_action,
    shoot_action,
)
from arena_bot.engine.state import (
    BotState,
    MovingToArenaCenterState,
    NotStartedState,
    RotatedToArenaCenterState,
    RotatingState,
    ShootingState,
    StopState,
    UnregisteredState,
    stopped,
)
from arena_bot.models import (
    ARENA_CONSTANTS,
    DeployMineResponse,
    HitNotification,
    InboundMessageBase,
    JoinGameNotification,
    MovePlayerResponse,
    Position,
    RadarScanNotification,
    RegisterPlayerResponse,
    RotatePlayerResponse,
    ShootResponse,
    StartGameNotification,
    bearing,
    normalize_rotation,
)


class ShotSprayerConfig(BaseModel):
    """Tuning for the shot-sprayer state machine."""

    model_config = ConfigDict(frozen=True)

    arena_center: Position = Field(
        default_factory=lambda: ARENA_CONSTANTS.arena_center,
        description="Rally point the bot walks to before shooting",
    )
    arrival_tolerance: float = Field(
        5.0,
        gt=0,
        description="Max distance on each axis to count as arrived (inclusive)",
    )
    arrival_rotation_step: float = Field(
        5.0,
        description="Degrees turned when the bot reaches the arena center",
    )
    arrival_ticks: int = Field(
        10,
        ge=0,
        description="Radar scans to wait after arriving before sweeping",
    )
    sweep_rotation_step: float = Field(
        15.0,
        description="Degrees turned per sweep",
    )
    sweep_ticks: int = Field(
        5,
        ge=0,
        description="Radar scans between sweeps",
    )
    shots_per_burst: int = Field(
        2,
        ge=1,
        description="Successful shots fired before sweeping again",
    )


@dataclass(frozen=True)
class Transition:
    """Result of folding one event into the state machine."""

    state: BotState
    actions: list[Action] = field(default_factory=list)


class ShotSprayerEngine:
    """Status-tagged reducer for the shot-sprayer bot.

    Example:
        engine = ShotSprayerEngine()
        state = initial_state()
        transition = engine.handle(state, event)
        state = transition.state
        for action in transition.actions:
            ...
    """

    def __init__(self, config: ShotSprayerConfig | None = None) -> None:
        """Initialize the engine.

        Args:
            config: Optional tuning; defaults match the server arena.
        """
        self.config = config or ShotSprayerConfig()
        self._logger = logging.getLogger(__name__)
        self._handlers: dict[
            type[InboundMessageBase], Callable[[Any, BotState], Transition]
        ] = {
            RegisterPlayerResponse: self._on_register_player_response,
            MovePlayerResponse: self._on_move_player_response,
            RotatePlayerResponse: self._on_rotate_player_response,
            ShootResponse: self._on_shoot_response,
            DeployMineResponse: self._on_deploy_mine_response,
            RadarScanNotification: self._on_radar_scan,
            StartGameNotification: self._on_game_start,
            JoinGameNotification: self._on_game_start,
            HitNotification: self._on_hit,
        }

    def handle(self, state: BotState, event: InboundMessageBase) -> Transition:
        """Fold one event into the state machine.

        Args:
            state: Current bot state.
            event: Classified inbound event.

        Returns:
            The next state and the actions to send, in order.
        """
        if isinstance(state, StopState):
            return Transition(state)

        handler = self._handlers.get(type(event))
        if handler is None:
            self._logger.debug("No handler for %s", type(event).__name__)
            return Transition(state)

        transition = handler(event, state)
        if transition.state.status != state.status:
            self._logger.info(
                "%s: %s -> %s",
                type(event).__name__,
                state.status.value,
                transition.state.status.value,
            )
        return transition

    # =========================================================================
    # Responses
    # =========================================================================

    def _on_register_player_response(
        self, event: RegisterPlayerResponse, state: BotState
    ) -> Transition:
        self._logger.debug("RegisterPlayerResponse success=%s", event.success)
        if not isinstance(state, UnregisteredState):
            return Transition(state)
        if not event.success or event.details is None:
            return Transition(state)

        # The server's reported rotation is not trusted; the bot starts at 0
        return Transition(NotStartedState(position=event.details.position, rotation=0.0))

    def _on_move_player_response(
        self, event: MovePlayerResponse, state: BotState
    ) -> Transition:
        self._logger.debug("MovePlayerResponse success=%s", event.success)
        if not isinstance(state, MovingToArenaCenterState):
            return Transition(state)
        if not event.success or event.details is None:
            return Transition(stopped(state))

        position = event.details.position
        if self._has_arrived(position):
            rotation = normalize_rotation(
                state.rotation + self.config.arrival_rotation_step
            )
            return Transition(
                RotatingState(
                    position=position,
                    rotation=rotation,
                    ticks_to_next_rotation=self.config.arrival_ticks,
                ),
                [rotate_action(rotation)],
            )

        return Transition(
            state.model_copy(update={"position": position}),
            [move_forward_action()],
        )

    def _on_rotate_player_response(
        self, event: RotatePlayerResponse, state: BotState
    ) -> Transition:
        self._logger.debug("RotatePlayerResponse success=%s", event.success)
        if not isinstance(state, RotatingState | RotatedToArenaCenterState):
            return Transition(state)
        if not event.success:
            return Transition(stopped(state))

        if isinstance(state, RotatingState):
            return Transition(
                ShootingState(
                    position=state.position, rotation=state.rotation, shots_fired=0
                ),
                [shoot_action()],
            )

        return Transition(
            MovingToArenaCenterState(position=state.position, rotation=state.rotation),
            [move_forward_action()],
        )

    def _on_shoot_response(self, event: ShootResponse, state: BotState) -> Transition:
        self._logger.debug("ShootResponse success=%s", event.success)
        if not isinstance(state, ShootingState):
            return Transition(state)

        if not event.success:
            # Out of tokens; keep trying
            return Transition(state, [shoot_action()])

        if state.shots_fired + 1 >= self.config.shots_per_burst:
            return self._sweep(state)

        return Transition(
            state.model_copy(update={"shots_fired": state.shots_fired + 1}),
            [shoot_action()],
        )

    def _on_deploy_mine_response(
        self, event: DeployMineResponse, state: BotState
    ) -> Transition:
        self._logger.debug("DeployMineResponse success=%s", event.success)
        return Transition(state)

    # =========================================================================
    # Notifications
    # =========================================================================

    def _on_radar_scan(
        self, event: RadarScanNotification, state: BotState
    ) -> Transition:
        self._logger.debug(
            "RadarScanNotification players=%d shots=%d",
            len(event.scan.players),
            len(event.scan.shots),
        )
        if not isinstance(state, RotatingState):
            return Transition(state)

        if state.ticks_to_next_rotation == 0:
            return self._sweep(state)

        return Transition(
            state.model_copy(
                update={"ticks_to_next_rotation": state.ticks_to_next_rotation - 1}
            )
        )

    def _on_game_start(
        self,
        event: StartGameNotification | JoinGameNotification,
        state: BotState,
    ) -> Transition:
        self._logger.debug("%s", type(event).__name__)
        if not isinstance(state, NotStartedState):
            return Transition(state)

        rotation_to_arena_center = bearing(state.position, self.config.arena_center)
        return Transition(
            RotatedToArenaCenterState(
                position=state.position,
                rotation=rotation_to_arena_center,
                rotation_to_arena_center=rotation_to_arena_center,
            ),
            [rotate_action(rotation_to_arena_center)],
        )

    def _on_hit(self, event: HitNotification, state: BotState) -> Transition:
        self._logger.debug("HitNotification damage=%s", event.hit.damage)
        return Transition(state)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _has_arrived(self, position: Position) -> bool:
        center = self.config.arena_center
        tolerance = self.config.arrival_tolerance
        return (
            abs(position.x - center.x) <= tolerance
            and abs(position.y - center.y) <= tolerance
        )

    def _sweep(self, state: RotatingState | ShootingState) -> Transition:
        rotation = normalize_rotation(state.rotation + self.config.sweep_rotation_step)
        return Transition(
            RotatingState(
                position=state.position,
                rotation=rotation,
                ticks_to_next_rotation=self.config.sweep_ticks,
            ),
            [rotate_action(rotation)],
        )
