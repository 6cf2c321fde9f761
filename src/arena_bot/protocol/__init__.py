"""Protocol layer: wire codec, message classifier and batch sequencer.

Usage:
    from arena_bot.protocol import classify, decode_batch, order_messages

    records = decode_batch(frame)
    events = [e for e in map(classify, records) if not isinstance(e, UnrecognizedMessage)]
    for event in order_messages(events):
        ...
"""

from arena_bot.protocol.classifier import (
    Classification,
    UnrecognizedMessage,
    classify,
)
from arena_bot.protocol.codec import (
    WireFormat,
    build_action_request,
    build_register_request,
    build_request,
    decode_batch,
    encode,
)
from arena_bot.protocol.sequencer import (
    DEFAULT_PRIORITY,
    order_messages,
    priority_rank,
)

__all__ = [
    "Classification",
    "UnrecognizedMessage",
    "classify",
    "WireFormat",
    "build_action_request",
    "build_register_request",
    "build_request",
    "decode_batch",
    "encode",
    "DEFAULT_PRIORITY",
    "order_messages",
    "priority_rank",
]
