"""Formatting – EntryFormatter port and shared field extraction."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from relaylog.kernel.errors import MalformedEntryError

_REQUIRED_FIELDS = ("timestamp", "level", "text")


@runtime_checkable
class EntryFormatter(Protocol):
    """Port: turn one log entry into message text."""

    def format(self, entry: Any) -> str: ...


def entry_fields(entry: Any) -> tuple[str, str, str]:
    """Return ``(timestamp, level label, text)`` rendered as strings.

    Raises :class:`MalformedEntryError` when any field is absent or ``None``.
    """
    values = {name: getattr(entry, name, None) for name in _REQUIRED_FIELDS}
    missing = [name for name, value in values.items() if value is None]
    if missing:
        raise MalformedEntryError(
            f"Log entry is missing required field(s): {', '.join(missing)}",
            missing=missing,
        )
    timestamp = values["timestamp"]
    level = values["level"]
    return (
        timestamp.isoformat() if isinstance(timestamp, datetime) else str(timestamp),
        getattr(level, "label", None) or str(level),
        str(values["text"]),
    )


__all__ = ["EntryFormatter", "entry_fields"]
