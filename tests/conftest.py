"""Pytest configuration and shared fixtures for niu-cloud-client tests."""

import pytest

from niu_cloud_client.testing import create_mock_client


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Clear NIU_* environment variables so tests never see real credentials."""
    import os

    test_prefixes = ("NIU_", "TEST_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def mock_client():
    """Factory for clients backed by httpx.MockTransport.

    Returns ``(client, calls)``; ``calls`` collects every request the
    transport receives.
    """
    return create_mock_client
