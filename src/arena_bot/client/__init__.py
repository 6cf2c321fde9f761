"""WebSocket client module for the arena bot.

Usage:
    from arena_bot.client import ArenaClient

    async with ArenaClient(config) as client:
        await client.run()
"""

from arena_bot.client.game_client import ArenaClient, default_player_id
from arena_bot.client.message_log import MessageLog

__all__ = [
    "ArenaClient",
    "MessageLog",
    "default_player_id",
]
