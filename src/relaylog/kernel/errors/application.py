"""Application-layer errors — misuse of the library at call time."""

from __future__ import annotations

from relaylog.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ConfigurationError(ApplicationError):
    """Configuration is incomplete or invalid for the requested operation."""

    default_code = "configuration_error"


__all__ = ["ApplicationError", "ConfigurationError"]
