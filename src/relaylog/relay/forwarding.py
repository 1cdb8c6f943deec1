"""Relay – ChatForwardingLog, a log decorator that also posts to a chat.

Every entry goes to the wrapped log. Entries at or above the minimum
severity are additionally rendered by the formatter and POSTed to the
configured endpoint as ``chat_id`` / ``text`` form fields (the Telegram
``sendMessage`` contract).

Usage::

    relay = (
        ChatForwardingLog(InMemoryLog())
        .with_destination_id(-100123456)
        .with_endpoint_address("https://api.telegram.org/bot<token>/sendMessage")
        .with_minimum_severity(LogLevel.WARNING)
    )
    relay = relay.append_entry(LogEntry(LogLevel.ERROR, "disk full"))
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from relaylog.adapters.http import HttpxTransport, Transport
from relaylog.config.settings.relay import RelaySettings
from relaylog.formatting import EntryFormatter, VanillaEntryFormatter
from relaylog.kernel.errors import ConfigurationError, DeliveryError, MalformedEntryError
from relaylog.kernel.log import EmbeddableLog, Log, LogEntry, LogLevel
from relaylog.observability.logging import get_logger
from relaylog.relay.registry import LogTypeRegistry, default_registry
from relaylog.relay.snapshot import Snapshot

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class ChatForwardingLog:
    """Immutable decorator: each ``with_*`` and ``append_entry`` returns a new instance.

    Parameters
    ----------
    wrapped_log:
        The underlying log; receives every entry.
    destination_id:
        Chat id messages are sent to.
    endpoint_address:
        URL of the send endpoint.  Usually embeds a bot token, so it is kept
        out of ``repr`` and never logged.
    minimum_severity:
        Entries strictly below this level are recorded but not forwarded.
    formatter, transport, registry:
        Collaborators.  They are not part of equality or of the snapshot and
        survive every ``with_*`` call and :meth:`deserialize`.
    """

    wrapped_log: Log
    destination_id: int | None = None
    endpoint_address: str | None = dataclasses.field(default=None, repr=False)
    minimum_severity: LogLevel = LogLevel.INFO
    formatter: EntryFormatter = dataclasses.field(
        default_factory=VanillaEntryFormatter, compare=False, repr=False
    )
    transport: Transport = dataclasses.field(
        default_factory=HttpxTransport, compare=False, repr=False
    )
    registry: LogTypeRegistry = dataclasses.field(
        default_factory=default_registry, compare=False, repr=False
    )

    @classmethod
    def from_settings(
        cls,
        wrapped_log: Log,
        settings: RelaySettings,
        *,
        formatter: EntryFormatter | None = None,
    ) -> "ChatForwardingLog":
        """Build a decorator whose transport honours the timeout/TLS settings."""
        return cls(
            wrapped_log=wrapped_log,
            destination_id=settings.chat_id,
            endpoint_address=settings.request_uri,
            minimum_severity=settings.minimum_severity,
            formatter=formatter or VanillaEntryFormatter(),
            transport=HttpxTransport(timeout=settings.timeout, verify=settings.verify_tls),
        )

    # -- configuration ---------------------------------------------------

    def with_destination_id(self, destination_id: int) -> "ChatForwardingLog":
        return dataclasses.replace(self, destination_id=destination_id)

    def with_endpoint_address(self, endpoint_address: str) -> "ChatForwardingLog":
        return dataclasses.replace(self, endpoint_address=endpoint_address)

    def with_minimum_severity(self, level: LogLevel) -> "ChatForwardingLog":
        return dataclasses.replace(self, minimum_severity=level)

    def with_formatter(self, formatter: EntryFormatter) -> "ChatForwardingLog":
        return dataclasses.replace(self, formatter=formatter)

    def with_type_registry(self, registry: LogTypeRegistry) -> "ChatForwardingLog":
        return dataclasses.replace(self, registry=registry)

    def with_embedded_log(self, other: Log) -> "ChatForwardingLog":
        """Let an embeddable wrapped log absorb *other*; otherwise *other* replaces it."""
        if isinstance(self.wrapped_log, EmbeddableLog):
            return dataclasses.replace(self, wrapped_log=self.wrapped_log.embed_log(other))
        return dataclasses.replace(self, wrapped_log=other)

    embed_log = with_embedded_log

    # -- Log capability --------------------------------------------------

    def append_entry(self, entry: LogEntry) -> "ChatForwardingLog":
        """Record *entry* in the wrapped log and forward it when severe enough.

        Raises
        ------
        ConfigurationError
            The entry must be forwarded but destination or endpoint is unset.
        MalformedEntryError
            The entry lacks a field the formatter needs.
        DeliveryError
            The endpoint could not be reached or answered with an error.

        On any of these the updated wrapped log is discarded together with
        the candidate decorator.
        """
        candidate = dataclasses.replace(self, wrapped_log=self.wrapped_log.append_entry(entry))
        level = getattr(entry, "level", None)
        if level is None:
            raise MalformedEntryError("Log entry has no level", missing=["level"])
        if level < self.minimum_severity:
            logger.debug(
                "relay.entry_below_threshold",
                level=level.label,
                minimum=self.minimum_severity.label,
            )
            return candidate
        self._deliver(entry)
        return candidate

    def _deliver(self, entry: LogEntry) -> None:
        missing = [
            name
            for name, value in (
                ("destination_id", self.destination_id),
                ("endpoint_address", self.endpoint_address),
            )
            if value is None
        ]
        if missing:
            logger.warning("relay.not_configured", missing=missing)
            raise ConfigurationError(
                f"Chat forwarding is not configured: {', '.join(missing)} unset",
                detail={"missing": missing},
            )

        message = self.formatter.format(entry)
        fields = {"chat_id": self.destination_id, "text": message}
        try:
            self.transport.post(self.endpoint_address, fields)  # type: ignore[arg-type]
        except DeliveryError as exc:
            logger.error(
                "relay.delivery_failed",
                chat_id=self.destination_id,
                code=exc.code,
                status_code=exc.status_code,
            )
            raise
        except Exception as exc:
            logger.error(
                "relay.delivery_failed",
                chat_id=self.destination_id,
                error=type(exc).__name__,
            )
            raise DeliveryError(
                service=type(self.transport).__name__,
                message=f"Transport raised {type(exc).__name__}",
            ) from exc
        logger.info("relay.entry_delivered", chat_id=self.destination_id, level=entry.level.label)

    def serialize(self) -> dict[str, Any]:
        """Return the snapshot dict; the wrapped log is tagged via the registry."""
        return Snapshot(
            min_level=self.minimum_severity,
            type_tag=self.registry.tag_for(self.wrapped_log),
            state=self.wrapped_log.serialize(),
            chat_id=self.destination_id,
            request_uri=self.endpoint_address,
        ).to_dict()

    def deserialize(self, state: Mapping[str, Any]) -> "ChatForwardingLog":
        """Restore a decorator from :meth:`serialize` output.

        Collaborators are taken from the receiver.  Raises
        :class:`~relaylog.kernel.errors.MalformedSnapshotError` for invalid
        data, unknown type tags, or tags whose type is not a log.
        """
        snapshot = Snapshot.parse(state)
        wrapped = self.registry.restore(snapshot.type_tag, snapshot.state)
        return dataclasses.replace(
            self,
            wrapped_log=wrapped,
            destination_id=snapshot.chat_id,
            endpoint_address=snapshot.request_uri,
            minimum_severity=snapshot.min_level,
        )


__all__ = ["ChatForwardingLog"]
