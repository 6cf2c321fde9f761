"""WebSocket client driving one bot session.

This module provides the ArenaClient class, which connects to the game
server, registers the bot and then processes every inbound frame through the
protocol pipeline:

    decode -> classify -> sequence -> session -> encode -> send

Frames are handled strictly one at a time; a frame's events are fully folded
through the session and the resulting commands sent before the next frame is
read.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import websockets
from websockets import ClientConnection
from websockets.exceptions import ConnectionClosed

from arena_bot.actions import Action, action_to_string
from arena_bot.client.message_log import MessageLog
from arena_bot.config import BotConfig
from arena_bot.exceptions import ArenaClientError, MessageDecodeError
from arena_bot.models import InboundMessage
from arena_bot.protocol import (
    UnrecognizedMessage,
    build_action_request,
    build_register_request,
    classify,
    decode_batch,
    encode,
    order_messages,
)
from arena_bot.session import Session, create_session


def default_player_id() -> str:
    """Player id used when none is configured: current epoch millis."""
    return str(int(time.time() * 1000))


class ArenaClient:
    """Connects a bot session to the arena game server.

    Example:
        async with ArenaClient(BotConfig(server_url="ws://localhost:8080")) as client:
            await client.run()  # returns when the server closes the connection
    """

    def __init__(
        self,
        config: BotConfig | None = None,
        session: Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Connection and decision settings.
            session: Optional pre-built session; by default one is created
                from the configuration.
        """
        self.config = config or BotConfig()
        self.player_id = self.config.player_id or default_player_id()
        self.session = session or create_session(self.config)

        if self.config.log_dir is not None:
            self.message_log = MessageLog.for_player(self.config.log_dir, self.player_id)
        else:
            self.message_log = MessageLog()

        self._websocket: ClientConnection | None = None
        self._logger = logging.getLogger(__name__)

    # =========================================================================
    # Context Manager
    # =========================================================================

    async def __aenter__(self) -> ArenaClient:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    # =========================================================================
    # Connection Methods
    # =========================================================================

    async def connect(self) -> None:
        """Open the WebSocket and send the RegisterPlayer request."""
        if self._websocket is not None:
            return

        self._logger.info("Connecting to %s", self.config.server_url)
        self._websocket = await websockets.connect(self.config.server_url)

        self.message_log.truncate()
        await self._send(build_register_request(self.player_id, self.config.wire_format))
        self._logger.info("Registering player %s", self.player_id)

    async def run(self) -> None:
        """Process frames until the server closes the connection.

        Raises:
            ArenaClientError: If called before connect().
            MessageDecodeError: If a frame cannot be decoded.
        """
        if self._websocket is None:
            raise ArenaClientError("WebSocket not connected")

        try:
            async for frame in self._websocket:
                await self.handle_frame(frame)
        except ConnectionClosed as e:
            self._logger.info("Connection closed: %s", e)
        else:
            self._logger.info("Connection closed")

    async def close(self) -> None:
        """Close the WebSocket and reset the session."""
        if self._websocket is not None:
            try:
                await self._websocket.close()
            except Exception as e:
                self._logger.warning("Error closing WebSocket: %s", e)
            self._websocket = None

        self.session.reset()

    @property
    def is_connected(self) -> bool:
        return self._websocket is not None

    # =========================================================================
    # Message Pipeline
    # =========================================================================

    async def handle_frame(self, frame: str | bytes) -> list[Action]:
        """Fold one inbound frame through the session and send the results.

        Args:
            frame: Raw frame from the transport.

        Returns:
            The actions that were sent, in order.

        Raises:
            MessageDecodeError: If the frame cannot be decoded.
        """
        try:
            records = decode_batch(frame)
        except MessageDecodeError:
            raw = frame.decode("utf-8", "replace") if isinstance(frame, bytes) else frame
            self.message_log.write("recv", raw)
            self._logger.error("Failed to decode frame: %s", raw)
            raise

        self.message_log.write("recv", records)

        sent: list[Action] = []
        for event in order_messages(self._classify_all(records)):
            for action in self.session.handle(event):
                await self.send_action(action)
                sent.append(action)
        return sent

    def _classify_all(self, records: list[Any]) -> list[InboundMessage]:
        events: list[InboundMessage] = []
        for record in records:
            result = classify(record)
            if isinstance(result, UnrecognizedMessage):
                self._logger.warning(
                    "Unrecognized message (%s): %s", result.reason, result.record
                )
                continue
            events.append(result)
        return events

    async def send_action(self, action: Action) -> None:
        """Encode and send one action.

        Raises:
            ArenaClientError: If the WebSocket is not connected.
        """
        self._logger.debug("Sending %s", action_to_string(action))
        await self._send(build_action_request(action, self.config.wire_format))

    async def _send(self, message: dict[str, Any]) -> None:
        if self._websocket is None:
            raise ArenaClientError("WebSocket not connected")

        self.message_log.write("send", message)
        await self._websocket.send(encode(message))
