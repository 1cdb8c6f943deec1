"""Unit tests for CompositeLog."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from relaylog.kernel.errors import MalformedSnapshotError, UnregisteredLogTypeError
from relaylog.kernel.log import EmbeddableLog, InMemoryLog, LogEntry, LogLevel, NullLog
from relaylog.relay import CompositeLog

ENTRY = LogEntry(level=LogLevel.INFO, text="fan out", timestamp=datetime(2026, 1, 1, tzinfo=UTC))


class TestCompositeLog:
    def test_is_embeddable(self) -> None:
        assert isinstance(CompositeLog(), EmbeddableLog)

    def test_append_reaches_every_child(self) -> None:
        log = CompositeLog((InMemoryLog(), InMemoryLog())).append_entry(ENTRY)
        assert all(child.entries == (ENTRY,) for child in log.logs)

    def test_append_does_not_mutate_receiver(self) -> None:
        log = CompositeLog((InMemoryLog(),))
        log.append_entry(ENTRY)
        assert log.logs == (InMemoryLog(),)

    def test_embed_adds_child(self) -> None:
        log = CompositeLog((InMemoryLog(),)).embed_log(NullLog())
        assert log.logs == (InMemoryLog(), NullLog())

    def test_empty_composite_accepts_entries(self) -> None:
        assert CompositeLog().append_entry(ENTRY) == CompositeLog()

    def test_serialize(self) -> None:
        log = CompositeLog((NullLog(), InMemoryLog()))
        assert log.serialize() == {
            "logs": [
                {"typeTag": "null", "state": {}},
                {"typeTag": "memory", "state": {"entries": []}},
            ]
        }

    def test_round_trip(self) -> None:
        log = CompositeLog((NullLog(), InMemoryLog((ENTRY,)), CompositeLog((InMemoryLog(),))))
        assert CompositeLog().deserialize(log.serialize()) == log

    def test_serialize_unregistered_child(self) -> None:
        with pytest.raises(UnregisteredLogTypeError):
            CompositeLog((object(),)).serialize()  # type: ignore[arg-type]

    @pytest.mark.parametrize("state", [{}, {"logs": {}}, {"logs": [{"typeTag": "nope", "state": {}}]}])
    def test_deserialize_rejects_bad_state(self, state: dict) -> None:
        with pytest.raises(MalformedSnapshotError):
            CompositeLog().deserialize(state)
