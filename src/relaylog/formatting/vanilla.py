"""Formatting – VanillaEntryFormatter, the default four-line layout."""
from __future__ import annotations

from typing import Any

from relaylog.formatting.base import entry_fields

SEPARATOR = "==="


class VanillaEntryFormatter:
    """Timestamp, level, separator and text, one per line.

    Example output::

        2026-01-01T12:00:00+00:00
        WARNING
        ===
        disk almost full

    The message always ends with a newline.
    """

    def format(self, entry: Any) -> str:
        timestamp, level, text = entry_fields(entry)
        return f"{timestamp}\n{level}\n{SEPARATOR}\n{text}\n"


__all__ = ["SEPARATOR", "VanillaEntryFormatter"]
