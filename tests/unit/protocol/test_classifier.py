"""Unit tests for the message classifier.

Tests cover:
- Every known (kind, id) pair maps to its typed event
- Nested and flattened envelopes classify identically
- Success/failure is keyed strictly off the boolean flag
- Component-style payloads are flattened
- Unknown, malformed and ambiguous records are reported, never raised
"""

from typing import Any

import pytest

from arena_bot.models import (
    DeployMineResponse,
    HitNotification,
    JoinGameNotification,
    MovePlayerResponse,
    Position,
    RadarScanNotification,
    RegisterPlayerResponse,
    RotatePlayerResponse,
    ShootResponse,
    StartGameNotification,
)
from arena_bot.protocol import UnrecognizedMessage, classify
from tests.conftest import flat_record, nested_record, radar_scan_record


class TestResponses:
    """Tests for response classification."""

    def test_register_player_success_nested(self) -> None:
        """Successful registration carries the starting position."""
        record = nested_record(
            "Response",
            "RegisterPlayer",
            success=True,
            data={"id": "bot", "position": {"x": 10, "y": 20}, "rotation": 90},
        )
        event = classify(record)

        assert isinstance(event, RegisterPlayerResponse)
        assert event.success is True
        assert event.details is not None
        assert event.details.position == Position(x=10, y=20)
        assert event.details.rotation == 90

    def test_register_player_success_flat_details(self) -> None:
        """Flattened envelopes may use ``details`` instead of ``data``."""
        record = flat_record(
            "Response",
            "RegisterPlayer",
            success=True,
            details={"id": "bot", "position": {"x": 1, "y": 2}, "rotation": 0},
        )
        event = classify(record)

        assert isinstance(event, RegisterPlayerResponse)
        assert event.details is not None
        assert event.details.position == Position(x=1, y=2)

    def test_register_player_failure_keeps_error(self) -> None:
        """Failure payloads are kept verbatim and never parsed as details."""
        record = flat_record(
            "Response", "RegisterPlayer", success=False, data="already registered"
        )
        event = classify(record)

        assert isinstance(event, RegisterPlayerResponse)
        assert event.success is False
        assert event.details is None
        assert event.error == "already registered"

    def test_move_player_component_payload(self) -> None:
        """``component.details`` payloads are flattened."""
        record = flat_record(
            "Response",
            "MovePlayer",
            success=True,
            data={
                "component": {"details": {"position": {"x": 5, "y": 6}, "tokens": 90}},
                "request": {"withTurbo": False, "cost": 1},
            },
        )
        event = classify(record)

        assert isinstance(event, MovePlayerResponse)
        assert event.details is not None
        assert event.details.position == Position(x=5, y=6)
        assert event.details.tokens == 90
        assert event.details.cost == 1
        assert event.details.with_turbo is False

    def test_move_player_failure_ignores_payload_shape(self) -> None:
        """A failed move with a payload that looks successful is still a failure."""
        record = flat_record(
            "Response",
            "MovePlayer",
            success=False,
            data={"position": {"x": 5, "y": 6}},
        )
        event = classify(record)

        assert isinstance(event, MovePlayerResponse)
        assert event.success is False
        assert event.details is None

    def test_success_flag_inside_nested_data(self) -> None:
        """Nested responses may carry success inside ``data``."""
        record = nested_record(
            "Response",
            "MovePlayer",
            data={"success": True, "data": {"position": {"x": 3, "y": 4}}},
        )
        event = classify(record)

        assert isinstance(event, MovePlayerResponse)
        assert event.success is True
        assert event.details is not None
        assert event.details.position == Position(x=3, y=4)

    def test_rotate_success_without_payload(self) -> None:
        """Rotation acknowledgements may omit the payload."""
        event = classify(flat_record("Response", "RotatePlayer", success=True))

        assert isinstance(event, RotatePlayerResponse)
        assert event.success is True
        assert event.details is not None
        assert event.details.rotation is None

    def test_shoot_and_deploy_mine(self) -> None:
        """Shoot and DeployMine responses classify to their own types."""
        shoot = classify(flat_record("Response", "Shoot", success=False))
        mine = classify(
            flat_record(
                "Response",
                "DeployMine",
                success=True,
                data={"component": {"details": {"tokens": 3}}, "request": {"cost": 2}},
            )
        )

        assert isinstance(shoot, ShootResponse)
        assert shoot.success is False
        assert isinstance(mine, DeployMineResponse)
        assert mine.details is not None
        assert mine.details.tokens == 3

    def test_component_update_with_rotation(self) -> None:
        """Rotation acks sent as ComponentUpdate become RotatePlayer responses."""
        record = flat_record(
            "Response",
            "ComponentUpdate",
            success=True,
            data={"component": {"details": {"rotation": 45, "tokens": 9}}},
        )
        event = classify(record)

        assert isinstance(event, RotatePlayerResponse)
        assert event.details is not None
        assert event.details.rotation == 45


class TestNotifications:
    """Tests for notification classification."""

    def test_radar_scan(self) -> None:
        """Radar scans parse all four object lists."""
        record = radar_scan_record(
            players=[{"id": "p1", "position": {"x": 1, "y": 1}, "rotation": 10}],
            unknown=[{"position": {"x": 2, "y": 2}}],
            mines=[{"position": {"x": 3, "y": 3}}],
            shots=[{"position": {"x": 4, "y": 4}, "rotation": 180}],
        )
        event = classify(record)

        assert isinstance(event, RadarScanNotification)
        assert event.scan.players[0].id == "p1"
        assert event.scan.unknown[0].position == Position(x=2, y=2)
        assert event.scan.mines[0].position == Position(x=3, y=3)
        assert event.scan.shots[0].rotation == 180

    def test_radar_scan_missing_lists_default_empty(self) -> None:
        """Absent lists are treated as empty."""
        event = classify(nested_record("Notification", "RadarScan", data={}))

        assert isinstance(event, RadarScanNotification)
        assert event.scan.players == []
        assert event.scan.mines == []

    @pytest.mark.parametrize(
        ("message_id", "expected"),
        [("StartGame", StartGameNotification), ("JoinGame", JoinGameNotification)],
    )
    def test_lifecycle(self, message_id: str, expected: type) -> None:
        """Lifecycle notifications carry no payload."""
        assert isinstance(classify(nested_record("Notification", message_id)), expected)

    def test_hit(self) -> None:
        """Hit notifications carry the damage taken."""
        event = classify(flat_record("Notification", "Hit", data={"damage": 2}))

        assert isinstance(event, HitNotification)
        assert event.hit.damage == 2


class TestUnrecognized:
    """Records that must be reported instead of classified."""

    @pytest.mark.parametrize(
        "record",
        [
            nested_record("Notification", "Teleport"),
            nested_record("Request", "MovePlayer", data={}),
            flat_record("Response", "Unknown", success=True),
        ],
    )
    def test_unknown_pairs(self, record: dict[str, Any]) -> None:
        """Unknown (kind, id) pairs are not coerced into another type."""
        result = classify(record)
        assert isinstance(result, UnrecognizedMessage)
        assert "unknown message" in result.reason

    @pytest.mark.parametrize("record", [None, 42, "RadarScan", ["sys"]])
    def test_non_object_records(self, record: Any) -> None:
        """Records that are not objects are rejected."""
        assert isinstance(classify(record), UnrecognizedMessage)

    def test_missing_header(self) -> None:
        """Records without type/id cannot be classified."""
        result = classify({"data": {}})
        assert isinstance(result, UnrecognizedMessage)
        assert "type/id" in result.reason

    def test_non_boolean_success_is_rejected(self) -> None:
        """Truthy strings are not accepted as a success flag."""
        record = flat_record(
            "Response", "MovePlayer", success="true", data={"position": {"x": 1, "y": 1}}
        )
        assert isinstance(classify(record), UnrecognizedMessage)

    def test_missing_success_flag(self) -> None:
        """Responses must say whether they succeeded."""
        record = flat_record("Response", "Shoot", data={})
        result = classify(record)
        assert isinstance(result, UnrecognizedMessage)
        assert "success" in result.reason

    def test_successful_move_without_position(self) -> None:
        """A successful move without a position is invalid, not a failure."""
        record = flat_record("Response", "MovePlayer", success=True)
        result = classify(record)
        assert isinstance(result, UnrecognizedMessage)
        assert "MovePlayer" in result.reason

    def test_hit_without_damage(self) -> None:
        """Invalid notification payloads are reported."""
        assert isinstance(classify(flat_record("Notification", "Hit")), UnrecognizedMessage)

    def test_component_update_without_rotation(self) -> None:
        """Component updates that are not rotation acks are not guessed at."""
        record = flat_record(
            "Response",
            "ComponentUpdate",
            success=True,
            data={"component": {"details": {"tokens": 5}}},
        )
        assert isinstance(classify(record), UnrecognizedMessage)

    def test_classify_does_not_mutate_record(self) -> None:
        """Classification is side-effect free."""
        record = flat_record(
            "Response",
            "MovePlayer",
            success=True,
            data={"component": {"details": {"position": {"x": 1, "y": 1}}}},
        )
        snapshot = repr(record)
        classify(record)
        assert repr(record) == snapshot
