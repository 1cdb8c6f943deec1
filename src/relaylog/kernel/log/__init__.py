"""Kernel log – levels, entries, the Log capability and built-in logs."""
from relaylog.kernel.log.level import LogLevel
from relaylog.kernel.log.entry import LogEntry
from relaylog.kernel.log.protocol import EmbeddableLog, Log
from relaylog.kernel.log.memory import InMemoryLog, NullLog
from relaylog.kernel.log.console import ConsoleLog

__all__ = [
    "ConsoleLog",
    "EmbeddableLog",
    "InMemoryLog",
    "Log",
    "LogEntry",
    "LogLevel",
    "NullLog",
]
