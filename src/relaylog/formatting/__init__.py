"""Formatting – strategies that render a log entry as chat message text."""
from relaylog.formatting.base import EntryFormatter, entry_fields
from relaylog.formatting.compact import CompactEntryFormatter
from relaylog.formatting.vanilla import SEPARATOR, VanillaEntryFormatter

__all__ = [
    "SEPARATOR",
    "CompactEntryFormatter",
    "EntryFormatter",
    "VanillaEntryFormatter",
    "entry_fields",
]
