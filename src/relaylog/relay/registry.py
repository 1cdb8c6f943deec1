"""Relay – LogTypeRegistry maps stable type tags to log constructors.

Snapshots never name Python classes. A tag is looked up in an explicit
registry, the registered zero-argument factory builds a blank log, and the
result must satisfy the :class:`~relaylog.kernel.log.Log` capability before
its own ``deserialize`` is trusted with the inner state.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from relaylog.kernel.errors import MalformedSnapshotError, UnregisteredLogTypeError
from relaylog.kernel.log import ConsoleLog, InMemoryLog, Log, NullLog

TYPE_TAG_KEY = "typeTag"
STATE_KEY = "state"


@dataclasses.dataclass(frozen=True)
class Registration:
    log_type: type
    factory: Callable[[], Any]


class LogTypeRegistry:
    """Immutable tag → log type registry.

    ``register`` returns a new registry, so a registry handed to one
    decorator can never change underneath it.
    """

    def __init__(self, registrations: Mapping[str, Registration] | None = None) -> None:
        self._registrations: Mapping[str, Registration] = MappingProxyType(dict(registrations or {}))

    def register(
        self,
        tag: str,
        log_type: type,
        factory: Callable[[], Any] | None = None,
    ) -> "LogTypeRegistry":
        """Return a registry that also knows *tag*.

        *factory* defaults to calling *log_type* with no arguments.
        """
        if not isinstance(tag, str) or not tag:
            raise ValueError("Type tag must be a non-empty string")
        if tag in self._registrations:
            raise ValueError(f"Type tag {tag!r} is already registered")
        for existing_tag, registration in self._registrations.items():
            if registration.log_type is log_type:
                raise ValueError(f"{log_type.__name__} is already registered as {existing_tag!r}")
        registrations = dict(self._registrations)
        registrations[tag] = Registration(log_type=log_type, factory=factory or log_type)
        return LogTypeRegistry(registrations)

    def __contains__(self, tag: object) -> bool:
        return tag in self._registrations

    def __iter__(self) -> Iterator[str]:
        return iter(self._registrations)

    def __len__(self) -> int:
        return len(self._registrations)

    def tag_for(self, log: Any) -> str:
        """Reverse lookup by exact type."""
        for tag, registration in self._registrations.items():
            if type(log) is registration.log_type:
                return tag
        raise UnregisteredLogTypeError(
            f"No type tag registered for {type(log).__name__}",
            payload_type=type(log).__name__,
        )

    def create(self, tag: str) -> Log:
        """Build a blank log for *tag*; unknown or non-conforming types are rejected."""
        registration = self._registrations.get(tag)
        if registration is None:
            raise MalformedSnapshotError(f"Unknown log type tag {tag!r}", payload_type=tag)
        log = registration.factory()
        if not isinstance(log, Log):
            raise MalformedSnapshotError(
                f"Type registered as {tag!r} does not implement the log capability",
                payload_type=tag,
            )
        return log

    def dump(self, log: Any) -> dict[str, Any]:
        """Encode *log* as ``{"typeTag": ..., "state": ...}``."""
        return {TYPE_TAG_KEY: self.tag_for(log), STATE_KEY: log.serialize()}

    def load(self, tagged: Any) -> Log:
        """Decode the output of :meth:`dump`."""
        tag, state = parse_tagged(tagged)
        return self.restore(tag, state)

    def restore(self, tag: str, state: Mapping[str, Any]) -> Log:
        """Create the log registered as *tag* and deserialize *state* into it."""
        log = self.create(tag)
        with_registry = getattr(log, "with_type_registry", None)
        if callable(with_registry):
            log = with_registry(self)
        return log.deserialize(state)

    def __repr__(self) -> str:
        return f"LogTypeRegistry(tags={list(self._registrations)!r})"


def parse_tagged(tagged: Any) -> tuple[str, Mapping[str, Any]]:
    """Validate a tagged-union record and return ``(tag, state)``."""
    if not isinstance(tagged, Mapping):
        raise MalformedSnapshotError("Tagged log record must be a mapping")
    tag = tagged.get(TYPE_TAG_KEY)
    state = tagged.get(STATE_KEY)
    if not isinstance(tag, str) or not tag:
        raise MalformedSnapshotError(f"Tagged log record requires a string {TYPE_TAG_KEY!r}")
    if not isinstance(state, Mapping):
        raise MalformedSnapshotError(f"Tagged log record requires a mapping {STATE_KEY!r}", payload_type=tag)
    return tag, state


def default_registry() -> LogTypeRegistry:
    """Registry with every log type shipped by relaylog."""
    from relaylog.relay.composite import CompositeLog
    from relaylog.relay.forwarding import ChatForwardingLog

    return (
        LogTypeRegistry()
        .register("memory", InMemoryLog)
        .register("null", NullLog)
        .register("console", ConsoleLog)
        .register("composite", CompositeLog)
        .register("chat-forwarding", ChatForwardingLog, lambda: ChatForwardingLog(NullLog()))
    )


__all__ = [
    "STATE_KEY",
    "TYPE_TAG_KEY",
    "LogTypeRegistry",
    "Registration",
    "default_registry",
    "parse_tagged",
]
