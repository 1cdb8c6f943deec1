"""Observability – structured logging helpers."""
from relaylog.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from relaylog.observability.logging.factory import JsonLoggerFactory
from relaylog.observability.logging.processors import RedactionProcessor, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "RedactionProcessor",
    "SensitiveFieldsFilter",
    "get_logger",
]
