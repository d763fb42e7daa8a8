"""Test utilities for prettyurl deployments.

Provides an ASGI test client and a recording app that captures the scope
the rewrite middleware hands on::

    from prettyurl.testing import RecordingApp, TestClient
"""

from prettyurl.testing.client import RecordingApp, TestClient, TestResponse

__all__ = ["RecordingApp", "TestClient", "TestResponse"]
