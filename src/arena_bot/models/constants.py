"""Arena constants matching the game server defaults.

These values are used by the decision engine defaults and the reference
strategy collaborators.
"""

from pydantic import BaseModel

from arena_bot.models.base import Position


class ArenaConstants(BaseModel):
    """Arena geometry and timing constants.

    All values are class-level defaults that match the server.
    This model can be instantiated with custom values for testing.
    """

    ARENA_WIDTH: float = 500.0
    ARENA_HEIGHT: float = 500.0

    # Rally point used by the shot-sprayer bot
    ARENA_CENTER_X: float = 250.0  # ARENA_WIDTH / 2
    ARENA_CENTER_Y: float = 250.0  # ARENA_HEIGHT / 2

    @property
    def arena_center(self) -> Position:
        return Position(x=self.ARENA_CENTER_X, y=self.ARENA_CENTER_Y)


# Module-level instance for convenient access
ARENA_CONSTANTS = ArenaConstants()
