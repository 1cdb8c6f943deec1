"""Domain errors — malformed log data."""

from __future__ import annotations

from typing import Any

from relaylog.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a value handed to the library breaks a data rule."""

    default_code = "domain_error"


class MalformedEntryError(DomainError):
    """A log entry lacks one of the fields a formatter needs.

    ``missing`` lists the absent field names.
    """

    default_code = "malformed_entry"

    def __init__(
        self,
        message: str,
        *,
        missing: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.missing: list[str] = missing or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["missing"] = self.missing
        return base


__all__ = ["DomainError", "MalformedEntryError"]
