"""Kernel log – InMemoryLog and NullLog."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from relaylog.kernel.errors import MalformedSnapshotError
from relaylog.kernel.log.entry import LogEntry


@dataclasses.dataclass(frozen=True)
class InMemoryLog:
    """Log that keeps every entry in an immutable tuple."""

    entries: tuple[LogEntry, ...] = ()

    def append_entry(self, entry: LogEntry) -> "InMemoryLog":
        return dataclasses.replace(self, entries=self.entries + (entry,))

    def serialize(self) -> dict[str, Any]:
        return {"entries": [e.serialized() for e in self.entries]}

    def deserialize(self, state: Mapping[str, Any]) -> "InMemoryLog":
        if not isinstance(state, Mapping) or not isinstance(state.get("entries"), list):
            raise MalformedSnapshotError(
                "InMemoryLog state requires an 'entries' list", payload_type="memory"
            )
        return InMemoryLog(tuple(LogEntry.from_serialized(e) for e in state["entries"]))

    def __len__(self) -> int:
        return len(self.entries)

    def last(self) -> LogEntry | None:
        return self.entries[-1] if self.entries else None


@dataclasses.dataclass(frozen=True)
class NullLog:
    """Log that discards everything."""

    def append_entry(self, entry: LogEntry) -> "NullLog":  # noqa: ARG002
        return self

    def serialize(self) -> dict[str, Any]:
        return {}

    def deserialize(self, state: Mapping[str, Any]) -> "NullLog":
        if not isinstance(state, Mapping):
            raise MalformedSnapshotError("NullLog state must be a mapping", payload_type="null")
        return NullLog()


__all__ = ["InMemoryLog", "NullLog"]
