"""Append-only diagnostic log of raw protocol traffic.

Each line is ``[send]<json>`` or ``[recv]<json>``. The log is a side channel
for debugging matches and plays no part in the protocol.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

from arena_bot.exceptions import MessageLogError

Direction = Literal["send", "recv"]


class MessageLog:
    """Per-run message log.

    A log constructed without a path accepts writes and discards them.

    Example:
        log = MessageLog.for_player(Path("logs"), "1700000000000")
        log.truncate()
        log.write("send", {"sys": {"type": "Request", "id": "Shoot"}})
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path

    @classmethod
    def for_player(cls, log_dir: Path, player_id: str) -> MessageLog:
        """Log at ``<log_dir>/<player_id>-messages.log``."""
        return cls(log_dir / f"{player_id}-messages.log")

    @property
    def enabled(self) -> bool:
        return self.path is not None

    def truncate(self) -> None:
        """Start a fresh log, creating parent directories if needed.

        Raises:
            MessageLogError: If the file cannot be created.
        """
        if self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("")
        except OSError as e:
            raise MessageLogError(f"Cannot write {self.path}: {e}") from e

    def write(self, direction: Direction, payload: Any) -> None:
        """Append one record.

        Args:
            direction: ``send`` for outbound, ``recv`` for inbound.
            payload: JSON-compatible value, or a raw string that could not
                be decoded.

        Raises:
            MessageLogError: If the file cannot be appended to.
        """
        if self.path is None:
            return
        line = f"[{direction}]{json.dumps(payload)}\n"
        try:
            with open(self.path, "a") as f:
                f.write(line)
        except OSError as e:
            raise MessageLogError(f"Cannot write {self.path}: {e}") from e
