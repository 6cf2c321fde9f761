"""Message sequencer.

Orders the events of one batch for processing. Events whose ``(kind, id)``
key appears in the priority list move to the front, in priority order; every
other event keeps its relative delivery order.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from arena_bot.models import (
    InboundMessageBase,
    MessageKey,
    MovePlayerResponse,
    RadarScanNotification,
)

E = TypeVar("E", bound=InboundMessageBase)

# Move acknowledgements must update bookkeeping before a scan triggers a decision
DEFAULT_PRIORITY: tuple[MessageKey, ...] = (
    MovePlayerResponse.message_key(),
    RadarScanNotification.message_key(),
)


def priority_rank(
    event: InboundMessageBase, priority: Sequence[MessageKey] = DEFAULT_PRIORITY
) -> int | None:
    """Position of the event's key in the priority list.

    Returns:
        The rank (0 is highest), or None when the event has no priority.
    """
    key = event.message_key()
    for rank, candidate in enumerate(priority):
        if candidate == key:
            return rank
    return None


def order_messages(
    events: Iterable[E], priority: Sequence[MessageKey] = DEFAULT_PRIORITY
) -> list[E]:
    """Return the batch in processing order.

    The sort is stable: priority events come first ordered by rank, then all
    remaining events in the order they were delivered. The input is not
    modified.

    Args:
        events: Classified events in delivery order.
        priority: Keys that must be processed first, highest priority first.

    Returns:
        A new list in processing order.
    """
    unranked = len(priority)

    def sort_key(event: E) -> int:
        rank = priority_rank(event, priority)
        return unranked if rank is None else rank

    return sorted(events, key=sort_key)
