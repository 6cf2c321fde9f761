"""Unit tests for the reference strategy collaborators.

Tests cover:
- Locations bookkeeping
- Planner edge reversal and tracker mode
- Gunner target selection
- Oracle shoot / rotate / move decisions
"""

from unittest.mock import MagicMock

import pytest

from arena_bot.actions import MoveAction, RotateAction, ShootAction
from arena_bot.models import MovementDirection, Position, RadarScanData
from arena_bot.strategy import (
    BotRecord,
    Gunner,
    Locations,
    Oracle,
    OracleConfig,
    Planner,
    PlannerConfig,
)


def _scan(*players: tuple[float, float]) -> RadarScanData:
    return RadarScanData.model_validate(
        {
            "players": [
                {"id": f"p{i}", "position": {"x": x, "y": y}}
                for i, (x, y) in enumerate(players)
            ]
        }
    )


def _bot(x: float, y: float, rotation: float = 0.0) -> BotRecord:
    return BotRecord(location=Position(x=x, y=y), rotation=rotation)


class TestLocations:
    """Tests for Locations."""

    def test_confirm_shifts_previous(self) -> None:
        locations = Locations(current=Position(x=1, y=1))

        locations.confirm(Position(x=2, y=1))

        assert locations.current == Position(x=2, y=1)
        assert locations.previous == Position(x=1, y=1)


class TestPlanner:
    """Tests for the reference planner."""

    def test_keeps_direction_inside_arena(self) -> None:
        planner = Planner(Position(x=250, y=250))

        assert planner.next_direction(_bot(250, 250), _scan()) == MovementDirection.FORWARD

    def test_reverses_at_edge(self) -> None:
        """A step past the margin flips the direction."""
        planner = Planner(Position(x=490, y=250))

        direction = planner.next_direction(_bot(490, 250, rotation=0), _scan())

        assert direction == MovementDirection.BACKWARD
        assert planner.direction == MovementDirection.BACKWARD

    def test_step_onto_margin_is_allowed(self) -> None:
        planner = Planner(Position(x=489, y=250))

        assert planner.next_direction(_bot(489, 250), _scan()) == MovementDirection.FORWARD

    def test_uses_bot_heading(self) -> None:
        """The projection follows the confirmed heading."""
        planner = Planner(Position(x=250, y=490), rotation=0)

        direction = planner.next_direction(_bot(250, 490, rotation=90), _scan())

        assert direction == MovementDirection.BACKWARD
        assert planner.rotation == 90

    def test_movement_step_sets_look_ahead(self) -> None:
        """A longer step reaches the margin sooner."""
        bot = _bot(480, 250, rotation=0)
        short = Planner(Position(x=480, y=250))
        long = Planner(Position(x=480, y=250), config=PlannerConfig(movement_step=15))

        assert short.next_direction(bot, _scan()) == MovementDirection.FORWARD
        assert long.next_direction(bot, _scan()) == MovementDirection.BACKWARD

    def test_custom_edge_margin(self) -> None:
        planner = Planner(Position(x=470, y=250), config=PlannerConfig(edge_margin=30))

        assert planner.next_direction(_bot(470, 250), _scan()) == MovementDirection.BACKWARD

    def test_ignores_players_without_tracker(self) -> None:
        planner = Planner(Position(x=300, y=250))

        direction = planner.next_direction(_bot(300, 250), _scan((100, 250)))

        assert direction == MovementDirection.FORWARD

    def test_tracker_follows_player_behind(self) -> None:
        planner = Planner(Position(x=300, y=250), tracker=True)

        direction = planner.next_direction(_bot(300, 250), _scan((100, 250)))

        assert direction == MovementDirection.BACKWARD

    def test_tracker_follows_player_ahead(self) -> None:
        planner = Planner(Position(x=100, y=100), tracker=True)

        direction = planner.next_direction(_bot(100, 100), _scan((300, 100)))

        assert direction == MovementDirection.FORWARD

    def test_tracker_backs_off_when_close(self) -> None:
        planner = Planner(Position(x=100, y=100), tracker=True)

        direction = planner.next_direction(_bot(100, 100), _scan((120, 100)))

        assert direction == MovementDirection.BACKWARD

    def test_tracker_without_players_patrols(self) -> None:
        planner = Planner(Position(x=490, y=250), tracker=True)

        assert planner.next_direction(_bot(490, 250), _scan()) == MovementDirection.BACKWARD


class TestGunner:
    """Tests for the reference gunner."""

    def test_no_players(self) -> None:
        assert Gunner().aim(Position(x=0, y=0), _scan()) is None

    def test_aims_at_nearest(self) -> None:
        rotation = Gunner().aim(Position(x=0, y=0), _scan((10, 0), (0, 5)))

        assert rotation == pytest.approx(90.0)

    def test_heading_is_normalized(self) -> None:
        rotation = Gunner().aim(Position(x=100, y=100), _scan((100, 50)))

        assert rotation == pytest.approx(270.0)


class TestOracle:
    """Tests for the reference oracle."""

    def _planner(self, direction: MovementDirection = MovementDirection.FORWARD) -> MagicMock:
        planner = MagicMock()
        planner.next_direction.return_value = direction
        return planner

    def test_moves_without_shooter(self) -> None:
        gunner = MagicMock()
        planner = self._planner(MovementDirection.BACKWARD)

        action = Oracle().decide(_bot(10, 10), _scan((20, 20)), planner, gunner)

        assert isinstance(action, MoveAction)
        assert action.direction == MovementDirection.BACKWARD
        gunner.aim.assert_not_called()

    def test_shoots_when_aligned(self) -> None:
        gunner = MagicMock()
        gunner.aim.return_value = 90.0

        action = Oracle(shooter=True).decide(
            _bot(10, 10, rotation=88.0), _scan(), self._planner(), gunner
        )

        assert isinstance(action, ShootAction)

    def test_alignment_wraps_around_zero(self) -> None:
        gunner = MagicMock()
        gunner.aim.return_value = 2.0

        action = Oracle(shooter=True).decide(
            _bot(10, 10, rotation=358.0), _scan(), self._planner(), gunner
        )

        assert isinstance(action, ShootAction)

    def test_rotates_towards_target(self) -> None:
        gunner = MagicMock()
        gunner.aim.return_value = 90.0

        action = Oracle(shooter=True).decide(
            _bot(10, 10, rotation=0.0), _scan(), self._planner(), gunner
        )

        assert isinstance(action, RotateAction)
        assert action.rotation == 90.0

    def test_custom_tolerance(self) -> None:
        gunner = MagicMock()
        gunner.aim.return_value = 90.0
        oracle = Oracle(shooter=True, config=OracleConfig(aim_tolerance=20))

        action = oracle.decide(_bot(10, 10, rotation=75.0), _scan(), self._planner(), gunner)

        assert isinstance(action, ShootAction)

    def test_moves_without_target(self) -> None:
        gunner = MagicMock()
        gunner.aim.return_value = None
        planner = self._planner()

        action = Oracle(shooter=True).decide(_bot(10, 10), _scan(), planner, gunner)

        assert isinstance(action, MoveAction)
        planner.next_direction.assert_called_once()

    def test_does_not_mutate_bot(self) -> None:
        bot = _bot(10, 10, rotation=0.0)
        gunner = MagicMock()
        gunner.aim.return_value = 90.0

        Oracle(shooter=True).decide(bot, _scan(), self._planner(), gunner)

        assert bot == _bot(10, 10, rotation=0.0)
