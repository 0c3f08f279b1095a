# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Gives every test its own freshly seeded album store
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_album_store
from app.main import app
from core.services.album_store import AlbumStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """A store loaded with the 8 seed albums."""
    return AlbumStore.seeded()


@pytest.fixture
def empty_store():
    """A store with no albums."""
    return AlbumStore()


@pytest.fixture
def client(store):
    """HTTP client whose requests all hit the ``store`` fixture."""
    app.dependency_overrides[get_album_store] = lambda: store
    # Unhandled errors should come back as 500 responses, not raise in the test
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def queen_album():
    """Payload for an album that is not in the seed data."""
    return {"band": "Queen", "title": "A Night at the Opera", "year": 1975}
