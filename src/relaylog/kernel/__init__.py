"""Kernel – framework-agnostic building blocks."""

from relaylog.kernel.errors import (
    ApplicationError,
    BaseError,
    ConfigurationError,
    DeliveryError,
    DomainError,
    InfrastructureError,
    MalformedEntryError,
    MalformedSnapshotError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigurationError",
    "DeliveryError",
    "DomainError",
    "InfrastructureError",
    "MalformedEntryError",
    "MalformedSnapshotError",
    "SerializationError",
]
