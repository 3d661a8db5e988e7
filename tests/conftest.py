"""Pytest fixtures for the lookup service."""

import pytest
from fastapi.testclient import TestClient

from mock_api.api import create_app


@pytest.fixture
def client():
    """TestClient over a freshly built app."""
    return TestClient(create_app())
