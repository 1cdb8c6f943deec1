"""Relay – Snapshot, the wire form of a ChatForwardingLog.

::

    {
        "i": {"chatId": 42, "requestUri": "https://…/sendMessage"},
        "minLevel": 1,
        "original": {"typeTag": "memory", "state": {...}},
    }

Keys inside ``i`` appear only when set.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from relaylog.kernel.errors import MalformedSnapshotError
from relaylog.kernel.log import LogLevel
from relaylog.relay.registry import STATE_KEY, TYPE_TAG_KEY, parse_tagged

CONFIG_KEY = "i"
MIN_LEVEL_KEY = "minLevel"
ORIGINAL_KEY = "original"
CHAT_ID_KEY = "chatId"
REQUEST_URI_KEY = "requestUri"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclasses.dataclass(frozen=True)
class Snapshot:
    min_level: LogLevel
    type_tag: str
    state: Mapping[str, Any]
    chat_id: int | None = None
    request_uri: str | None = None

    def to_dict(self) -> dict[str, Any]:
        config: dict[str, Any] = {}
        if self.chat_id is not None:
            config[CHAT_ID_KEY] = self.chat_id
        if self.request_uri is not None:
            config[REQUEST_URI_KEY] = self.request_uri
        return {
            CONFIG_KEY: config,
            MIN_LEVEL_KEY: self.min_level.to_int(),
            ORIGINAL_KEY: {TYPE_TAG_KEY: self.type_tag, STATE_KEY: dict(self.state)},
        }

    @classmethod
    def parse(cls, data: Any) -> "Snapshot":
        """Validate *data* and return a :class:`Snapshot`.

        Raises :class:`MalformedSnapshotError` on any missing or mistyped field.
        Nothing is constructed from a partially valid record.
        """
        if not isinstance(data, Mapping):
            raise MalformedSnapshotError("Snapshot must be a mapping")

        rank = data.get(MIN_LEVEL_KEY)
        if not _is_int(rank):
            raise MalformedSnapshotError(f"Snapshot requires an integer {MIN_LEVEL_KEY!r}")
        try:
            min_level = LogLevel.from_int(rank)
        except ValueError as exc:
            raise MalformedSnapshotError(f"Unknown severity rank {rank!r}", cause=exc) from exc

        config = data.get(CONFIG_KEY)
        if not isinstance(config, Mapping):
            raise MalformedSnapshotError(f"Snapshot requires a mapping {CONFIG_KEY!r}")
        chat_id = config.get(CHAT_ID_KEY)
        if chat_id is not None and not _is_int(chat_id):
            raise MalformedSnapshotError(f"{CHAT_ID_KEY!r} must be an integer")
        request_uri = config.get(REQUEST_URI_KEY)
        if request_uri is not None and not isinstance(request_uri, str):
            raise MalformedSnapshotError(f"{REQUEST_URI_KEY!r} must be a string")

        if ORIGINAL_KEY not in data:
            raise MalformedSnapshotError(f"Snapshot requires {ORIGINAL_KEY!r}")
        type_tag, state = parse_tagged(data[ORIGINAL_KEY])

        return cls(
            min_level=min_level,
            type_tag=type_tag,
            state=state,
            chat_id=chat_id,
            request_uri=request_uri,
        )


__all__ = [
    "CHAT_ID_KEY",
    "CONFIG_KEY",
    "MIN_LEVEL_KEY",
    "ORIGINAL_KEY",
    "REQUEST_URI_KEY",
    "Snapshot",
]
