"""Shared pytest configuration: exposes relaylog's fake-double fixtures."""

pytest_plugins = ["relaylog.testing.fixtures"]
