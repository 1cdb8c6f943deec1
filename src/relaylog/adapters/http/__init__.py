"""HTTP adapter – transport used to deliver chat messages."""
from relaylog.adapters.http.transport import HttpxTransport, Transport

__all__ = ["HttpxTransport", "Transport"]
