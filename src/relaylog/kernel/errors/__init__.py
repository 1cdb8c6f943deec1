"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── MalformedEntryError
    ├── ApplicationError     (application.py)
    │   └── ConfigurationError
    └── InfrastructureError  (infrastructure.py)
        ├── SerializationError
        │   ├── MalformedSnapshotError
        │   └── UnregisteredLogTypeError
        └── ExternalServiceError
            └── DeliveryError
"""

from relaylog.kernel.errors.application import ApplicationError, ConfigurationError
from relaylog.kernel.errors.base import BaseError
from relaylog.kernel.errors.domain import DomainError, MalformedEntryError
from relaylog.kernel.errors.infrastructure import (
    DeliveryError,
    ExternalServiceError,
    InfrastructureError,
    MalformedSnapshotError,
    SerializationError,
    UnregisteredLogTypeError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigurationError",
    "DeliveryError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "MalformedEntryError",
    "MalformedSnapshotError",
    "SerializationError",
    "UnregisteredLogTypeError",
]
