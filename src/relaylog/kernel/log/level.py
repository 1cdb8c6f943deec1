"""Kernel log – LogLevel severity scale."""
from __future__ import annotations

from enum import IntEnum


class LogLevel(IntEnum):
    """Total-ordered severity of a log entry.

    The integer value is the rank written into snapshots.
    """

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4

    @property
    def label(self) -> str:
        """Display string, e.g. ``"WARNING"``."""
        return self.name

    def to_int(self) -> int:
        return int(self.value)

    @classmethod
    def from_int(cls, rank: int) -> "LogLevel":
        """Return the level for *rank*; unknown ranks raise :class:`ValueError`."""
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise ValueError(f"Severity rank must be an int, got {type(rank).__name__}")
        return cls(rank)

    @classmethod
    def parse(cls, value: str | int | "LogLevel") -> "LogLevel":
        """Accept a level, a rank, a name (``"warning"``) or a numeric string."""
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, int):
            return cls.from_int(value)
        text = str(value).strip()
        if text.lstrip("-").isdigit():
            return cls.from_int(int(text))
        alias = {"WARN": "WARNING", "FATAL": "CRITICAL"}.get(text.upper(), text.upper())
        try:
            return cls[alias]
        except KeyError:
            raise ValueError(f"Unknown log level {value!r}") from None


__all__ = ["LogLevel"]
