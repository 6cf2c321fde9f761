"""Shared fixtures and message builders for arena bot tests.

This module provides:
- Builders for inbound wire records in both envelope shapes
- Typed event factories used by engine and session tests
- Custom markers for test categorization
"""

from typing import Any

import pytest

from arena_bot.models import (
    HitNotification,
    JoinGameNotification,
    MovePlayerResponse,
    RadarScanNotification,
    RegisterPlayerResponse,
    RotatePlayerResponse,
    ShootResponse,
    StartGameNotification,
)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers", "websocket: marks tests as WebSocket-specific tests"
    )


# =============================================================================
# Wire records
# =============================================================================


def nested_record(kind: str, message_id: str, **fields: Any) -> dict[str, Any]:
    """Record in the nested ``{"sys": {...}}`` envelope."""
    record: dict[str, Any] = {"sys": {"type": kind, "id": message_id}}
    record.update(fields)
    return record


def flat_record(kind: str, message_id: str, **fields: Any) -> dict[str, Any]:
    """Record in the flattened envelope."""
    record: dict[str, Any] = {"type": kind, "id": message_id}
    record.update(fields)
    return record


def radar_scan_record(**scan: Any) -> dict[str, Any]:
    data: dict[str, Any] = {"players": [], "unknown": [], "mines": [], "shots": []}
    data.update(scan)
    return nested_record("Notification", "RadarScan", data=data)


# =============================================================================
# Typed events
# =============================================================================


def register_ok(x: float = 10.0, y: float = 10.0, rotation: float = 0.0) -> RegisterPlayerResponse:
    return RegisterPlayerResponse.model_validate(
        {
            "success": True,
            "details": {"id": "bot", "position": {"x": x, "y": y}, "rotation": rotation},
        }
    )


def register_failed() -> RegisterPlayerResponse:
    return RegisterPlayerResponse(success=False, error="name taken")


def move_ok(x: float, y: float) -> MovePlayerResponse:
    return MovePlayerResponse.model_validate(
        {"success": True, "details": {"position": {"x": x, "y": y}}}
    )


def move_failed() -> MovePlayerResponse:
    return MovePlayerResponse(success=False, error="blocked")


def rotate_ok(rotation: float | None = None) -> RotatePlayerResponse:
    details: dict[str, Any] = {}
    if rotation is not None:
        details["rotation"] = rotation
    return RotatePlayerResponse.model_validate({"success": True, "details": details})


def rotate_failed() -> RotatePlayerResponse:
    return RotatePlayerResponse(success=False)


def shoot_ok() -> ShootResponse:
    return ShootResponse.model_validate({"success": True, "details": {"tokens": 10}})


def shoot_failed() -> ShootResponse:
    return ShootResponse(success=False)


def radar_scan(players: list[tuple[float, float]] | None = None) -> RadarScanNotification:
    return RadarScanNotification.model_validate(
        {
            "scan": {
                "players": [
                    {"id": f"p{i}", "position": {"x": x, "y": y}, "rotation": 0}
                    for i, (x, y) in enumerate(players or [])
                ]
            }
        }
    )


def start_game() -> StartGameNotification:
    return StartGameNotification()


def join_game() -> JoinGameNotification:
    return JoinGameNotification()


def hit(damage: float = 1.0) -> HitNotification:
    return HitNotification.model_validate({"hit": {"damage": damage}})
