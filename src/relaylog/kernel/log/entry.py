"""Kernel log – LogEntry value object."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from relaylog.kernel.errors import MalformedSnapshotError
from relaylog.kernel.log.level import LogLevel


@dataclasses.dataclass(frozen=True)
class LogEntry:
    """One immutable record: when, how severe, and what."""

    level: LogLevel
    text: str
    timestamp: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))

    def serialized(self) -> dict[str, Any]:
        return {
            "dt": self.timestamp.isoformat(),
            "level": self.level.to_int(),
            "text": self.text,
        }

    @classmethod
    def from_serialized(cls, data: Mapping[str, Any]) -> "LogEntry":
        """Inverse of :meth:`serialized`."""
        if not isinstance(data, Mapping):
            raise MalformedSnapshotError("Log entry state must be a mapping", payload_type="entry")
        dt, level, text = data.get("dt"), data.get("level"), data.get("text")
        if not isinstance(dt, str) or not isinstance(text, str):
            raise MalformedSnapshotError("Log entry requires string 'dt' and 'text'", payload_type="entry")
        try:
            return cls(
                level=LogLevel.from_int(level),  # type: ignore[arg-type]
                text=text,
                timestamp=datetime.fromisoformat(dt),
            )
        except ValueError as exc:
            raise MalformedSnapshotError(
                f"Invalid log entry state: {exc}", payload_type="entry", cause=exc
            ) from exc


__all__ = ["LogEntry"]
