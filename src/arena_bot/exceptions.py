"""Custom exceptions for the arena bot client.

This module defines the exception hierarchy shared by the codec, the client
and the configuration layer.
"""


class ArenaBotError(Exception):
    """Base exception for arena bot errors."""

    pass


class MessageDecodeError(ArenaBotError):
    """Raised when an inbound frame cannot be decoded into a batch."""

    def __init__(self, message: str, raw: str | bytes | None = None):
        super().__init__(message)
        self.raw = raw


class ArenaClientError(ArenaBotError):
    """Raised when the client is used out of order."""

    pass


class ConfigError(ArenaBotError):
    """Raised when a configuration file cannot be loaded."""

    pass


class MessageLogError(ArenaBotError):
    """Raised when the message log cannot be written."""

    pass
