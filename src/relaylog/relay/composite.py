"""Relay – CompositeLog fans every entry out to several logs."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from relaylog.kernel.errors import MalformedSnapshotError
from relaylog.kernel.log import Log, LogEntry
from relaylog.relay.registry import LogTypeRegistry, default_registry


@dataclasses.dataclass(frozen=True)
class CompositeLog:
    """Embeddable log: ``embed_log`` adds a child, ``append_entry`` writes to all.

    Example::

        base = CompositeLog((InMemoryLog(),)).embed_log(ConsoleLog())
        relay = ChatForwardingLog(base).with_embedded_log(NullLog())  # 3 children
    """

    logs: tuple[Log, ...] = ()
    registry: LogTypeRegistry = dataclasses.field(
        default_factory=default_registry, compare=False, repr=False
    )

    def append_entry(self, entry: LogEntry) -> "CompositeLog":
        return dataclasses.replace(self, logs=tuple(log.append_entry(entry) for log in self.logs))

    def embed_log(self, other: Log) -> "CompositeLog":
        return dataclasses.replace(self, logs=self.logs + (other,))

    def with_type_registry(self, registry: LogTypeRegistry) -> "CompositeLog":
        return dataclasses.replace(self, registry=registry)

    def serialize(self) -> dict[str, Any]:
        return {"logs": [self.registry.dump(log) for log in self.logs]}

    def deserialize(self, state: Mapping[str, Any]) -> "CompositeLog":
        if not isinstance(state, Mapping) or not isinstance(state.get("logs"), list):
            raise MalformedSnapshotError(
                "CompositeLog state requires a 'logs' list", payload_type="composite"
            )
        return dataclasses.replace(
            self, logs=tuple(self.registry.load(tagged) for tagged in state["logs"])
        )


__all__ = ["CompositeLog"]
