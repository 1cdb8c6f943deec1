"""Kernel log – capability protocols every underlying log satisfies."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from relaylog.kernel.log.entry import LogEntry


@runtime_checkable
class Log(Protocol):
    """Port: an immutable, append-only log.

    ``append_entry`` never mutates the receiver; it returns the log value
    that includes *entry*.
    """

    def append_entry(self, entry: LogEntry) -> "Log": ...

    def serialize(self) -> dict[str, Any]: ...

    def deserialize(self, state: Mapping[str, Any]) -> "Log": ...


@runtime_checkable
class EmbeddableLog(Log, Protocol):
    """A log that can absorb another log at its own discretion (e.g. multiplexing)."""

    def embed_log(self, other: Log) -> "Log": ...


__all__ = ["EmbeddableLog", "Log"]
