"""Infrastructure errors — I/O failures, snapshots, external integrations."""

from __future__ import annotations

from typing import Any

from relaylog.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a data rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class MalformedSnapshotError(SerializationError):
    """A snapshot is structurally invalid or names an unusable log type."""

    default_code = "malformed_snapshot"


class UnregisteredLogTypeError(SerializationError):
    """A log cannot be snapshotted because its type has no registered tag."""

    default_code = "unregistered_log_type"


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class DeliveryError(ExternalServiceError):
    """A log entry could not be delivered to the chat endpoint."""

    default_code = "delivery_error"


__all__ = [
    "DeliveryError",
    "ExternalServiceError",
    "InfrastructureError",
    "MalformedSnapshotError",
    "SerializationError",
    "UnregisteredLogTypeError",
]
