"""Formatting – CompactEntryFormatter."""
from __future__ import annotations

from typing import Any

from relaylog.formatting.base import entry_fields


class CompactEntryFormatter:
    """Single-line ``[LEVEL] timestamp text`` layout for busy chats."""

    def format(self, entry: Any) -> str:
        timestamp, level, text = entry_fields(entry)
        return f"[{level}] {timestamp} {text}\n"


__all__ = ["CompactEntryFormatter"]
