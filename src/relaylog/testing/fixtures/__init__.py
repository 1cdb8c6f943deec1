"""Testing fixtures – pytest fixtures for fake doubles."""
try:
    import pytest  # noqa: F401

    from relaylog.testing.fixtures.transport import in_memory_transport, memory_log, relay

except ImportError:
    pass

__all__ = ["in_memory_transport", "memory_log", "relay"]
