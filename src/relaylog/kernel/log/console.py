"""Kernel log – ConsoleLog writes entries through structlog."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from relaylog.kernel.errors import MalformedSnapshotError
from relaylog.kernel.log.entry import LogEntry
from relaylog.observability.logging.processors import get_logger


@dataclasses.dataclass(frozen=True)
class ConsoleLog:
    """Emit each entry on the named structlog logger at the matching level.

    Rendering (JSON, console, …) is whatever
    :class:`~relaylog.observability.logging.JsonLoggerFactory` configured.
    """

    name: str = "relaylog.console"

    def append_entry(self, entry: LogEntry) -> "ConsoleLog":
        logger = get_logger(self.name)
        emit = getattr(logger, entry.level.label.lower())
        emit(entry.text, entry_timestamp=entry.timestamp.isoformat())
        return self

    def serialize(self) -> dict[str, Any]:
        return {"name": self.name}

    def deserialize(self, state: Mapping[str, Any]) -> "ConsoleLog":
        if not isinstance(state, Mapping) or not isinstance(state.get("name"), str):
            raise MalformedSnapshotError(
                "ConsoleLog state requires a string 'name'", payload_type="console"
            )
        return ConsoleLog(name=state["name"])


__all__ = ["ConsoleLog"]
