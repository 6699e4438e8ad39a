"""Test utilities for before applications.

Provides an in-process test client and assertions for the client-script
delivery contract::

    from before.testing import TestClient, assert_no_client_script
"""

from before.testing.assertions import assert_client_script, assert_no_client_script
from before.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_client_script",
    "assert_no_client_script",
]
