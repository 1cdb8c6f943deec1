"""Unit tests for LogTypeRegistry."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

import pytest

from relaylog.kernel.errors import MalformedSnapshotError, UnregisteredLogTypeError
from relaylog.kernel.log import ConsoleLog, InMemoryLog, LogEntry, NullLog
from relaylog.relay import ChatForwardingLog, CompositeLog, LogTypeRegistry, default_registry


@dataclasses.dataclass(frozen=True)
class CountingLog:
    """Custom log used to check that registries travel into nested logs."""

    count: int = 0

    def append_entry(self, entry: LogEntry) -> "CountingLog":  # noqa: ARG002
        return CountingLog(self.count + 1)

    def serialize(self) -> dict[str, Any]:
        return {"count": self.count}

    def deserialize(self, state: Mapping[str, Any]) -> "CountingLog":
        return CountingLog(int(state["count"]))


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


class TestRegister:
    def test_register_returns_new_registry(self) -> None:
        empty = LogTypeRegistry()
        one = empty.register("null", NullLog)
        assert "null" not in empty
        assert "null" in one
        assert len(one) == 1

    def test_duplicate_tag_rejected(self) -> None:
        registry = LogTypeRegistry().register("null", NullLog)
        with pytest.raises(ValueError, match="already registered"):
            registry.register("null", InMemoryLog)

    def test_duplicate_type_rejected(self) -> None:
        registry = LogTypeRegistry().register("null", NullLog)
        with pytest.raises(ValueError, match="already registered"):
            registry.register("void", NullLog)

    @pytest.mark.parametrize("tag", ["", None, 3])
    def test_invalid_tag_rejected(self, tag: Any) -> None:
        with pytest.raises(ValueError):
            LogTypeRegistry().register(tag, NullLog)

    def test_custom_factory_used(self) -> None:
        registry = LogTypeRegistry().register("counting", CountingLog, lambda: CountingLog(10))
        assert registry.create("counting") == CountingLog(10)

    def test_default_registry_tags(self) -> None:
        assert list(default_registry()) == ["memory", "null", "console", "composite", "chat-forwarding"]


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class TestLookup:
    def test_tag_for_exact_type(self) -> None:
        registry = default_registry()
        assert registry.tag_for(InMemoryLog()) == "memory"
        assert registry.tag_for(ChatForwardingLog(NullLog())) == "chat-forwarding"

    def test_tag_for_unknown_type(self) -> None:
        with pytest.raises(UnregisteredLogTypeError):
            default_registry().tag_for(CountingLog())

    def test_create_unknown_tag(self) -> None:
        with pytest.raises(MalformedSnapshotError):
            default_registry().create("builtins.eval")

    def test_create_rejects_non_log(self) -> None:
        registry = LogTypeRegistry().register("text", str)
        with pytest.raises(MalformedSnapshotError):
            registry.create("text")

    def test_create_chat_forwarding_is_blank(self) -> None:
        created = default_registry().create("chat-forwarding")
        assert created == ChatForwardingLog(NullLog())


# ---------------------------------------------------------------------------
# dump / load
# ---------------------------------------------------------------------------


class TestDumpLoad:
    def test_dump(self) -> None:
        assert default_registry().dump(ConsoleLog("ops")) == {
            "typeTag": "console",
            "state": {"name": "ops"},
        }

    def test_load(self) -> None:
        assert default_registry().load({"typeTag": "console", "state": {"name": "ops"}}) == ConsoleLog("ops")

    @pytest.mark.parametrize(
        "tagged",
        [None, {}, {"typeTag": "null"}, {"state": {}}, {"typeTag": 1, "state": {}}, {"typeTag": "null", "state": 1}],
    )
    def test_load_rejects_malformed_record(self, tagged: Any) -> None:
        with pytest.raises(MalformedSnapshotError):
            default_registry().load(tagged)

    def test_registry_reaches_nested_logs(self) -> None:
        registry = default_registry().register("counting", CountingLog)
        composite = CompositeLog((CountingLog(3),), registry=registry)
        relay = ChatForwardingLog(composite, registry=registry)

        restored = ChatForwardingLog(NullLog(), registry=registry).deserialize(relay.serialize())

        assert restored.wrapped_log.logs == (CountingLog(3),)
        assert restored.wrapped_log.registry is registry

    def test_nested_custom_type_unknown_to_default_registry(self) -> None:
        registry = default_registry().register("counting", CountingLog)
        snapshot = ChatForwardingLog(CompositeLog((CountingLog(),), registry=registry), registry=registry).serialize()
        with pytest.raises(MalformedSnapshotError):
            ChatForwardingLog(NullLog()).deserialize(snapshot)
