"""Observability – structlog redaction processor and get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

from relaylog.observability.logging.filters import SensitiveFieldsFilter


class RedactionProcessor:
    """structlog processor that masks sensitive keys in every event dict.

    Usage::

        import structlog
        from relaylog.observability.logging.processors import RedactionProcessor

        structlog.configure(processors=[RedactionProcessor(), ...])
    """

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._filter = SensitiveFieldsFilter(sensitive_fields)

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self._filter.redact_deep(event_dict)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Falls back to :func:`logging.getLogger` when structlog is not installed.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    try:
        import structlog

        logger = structlog.get_logger(name)
        if initial_values:
            logger = logger.bind(**initial_values)
        return logger
    except ImportError:
        return logging.getLogger(name)


__all__ = ["RedactionProcessor", "get_logger"]
