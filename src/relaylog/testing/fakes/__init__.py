"""Testing fakes – in-memory doubles for relaylog ports."""
from relaylog.testing.fakes.transport import InMemoryTransport, PostedRequest

__all__ = ["InMemoryTransport", "PostedRequest"]
