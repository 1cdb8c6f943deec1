"""Testing support – fakes and fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["relaylog.testing.fixtures"]
"""

from relaylog.testing.fakes import InMemoryTransport, PostedRequest

__all__ = ["InMemoryTransport", "PostedRequest"]
