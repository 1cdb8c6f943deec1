"""
relaylog – chat-forwarding log decorator.

Import path convention::

    from relaylog.kernel.log import InMemoryLog, LogEntry, LogLevel
    from relaylog.relay import ChatForwardingLog
    from relaylog.formatting import VanillaEntryFormatter
    from relaylog.adapters.http import HttpxTransport
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
