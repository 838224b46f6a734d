"""Fixtures for end-to-end tests.

The app is served from a test container: in-memory store, a token
verifier that only checks tokens parse and carry a subject, and an image
uploader that never leaves the process.
"""

import pytest
from fastapi.testclient import TestClient

from eats.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container shared by the app and the test for one test."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Test client; entering it runs the app lifespan."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def resolve(client, container):
    """Fetch an object from the app's container on the client's event loop."""

    def _resolve(dependency_type):
        return client.portal.call(container.get, dependency_type)

    return _resolve
