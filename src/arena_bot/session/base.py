"""Session base class and the at-most-one-move gate.

A session owns all mutable bot state for one connection. The client feeds it
one event at a time and sends whatever actions it returns.
"""

import logging
from abc import ABC, abstractmethod

from arena_bot.actions import Action, action_to_string, is_movement_action
from arena_bot.models import InboundMessageBase, MovePlayerResponse


class Session(ABC):
    """Base class for per-connection decision sessions.

    Subclasses implement :meth:`_decide`. This class enforces that at most
    one MovePlayer request is outstanding: a move emitted while another is
    in flight is dropped, and any MovePlayer response clears the flag before
    the subclass sees the event.

    Attributes:
        move_in_flight: True between sending a MovePlayer request and
            receiving its response.
    """

    def __init__(self) -> None:
        self.move_in_flight = False
        self._logger = logging.getLogger(__name__)

    def handle(self, event: InboundMessageBase) -> list[Action]:
        """Process one event and return the actions to send, in order.

        Args:
            event: Classified inbound event.

        Returns:
            Actions that passed the movement gate.
        """
        if isinstance(event, MovePlayerResponse):
            self.move_in_flight = False

        return self._gate(self._decide(event))

    def reset(self) -> None:
        """Forget all per-connection state."""
        self.move_in_flight = False

    @abstractmethod
    def _decide(self, event: InboundMessageBase) -> list[Action]:
        """Derive actions for one event, updating session state."""
        pass

    def _gate(self, actions: list[Action]) -> list[Action]:
        allowed: list[Action] = []
        for action in actions:
            if is_movement_action(action):
                if self.move_in_flight:
                    self._logger.warning(
                        "Dropping %s: previous move not acknowledged",
                        action_to_string(action),
                    )
                    continue
                self.move_in_flight = True
            allowed.append(action)
        return allowed
