"""Relay – the chat-forwarding decorator and its composition/serialization glue."""
from relaylog.relay.registry import LogTypeRegistry, Registration, default_registry
from relaylog.relay.snapshot import Snapshot
from relaylog.relay.composite import CompositeLog
from relaylog.relay.forwarding import ChatForwardingLog

__all__ = [
    "ChatForwardingLog",
    "CompositeLog",
    "LogTypeRegistry",
    "Registration",
    "Snapshot",
    "default_registry",
]
