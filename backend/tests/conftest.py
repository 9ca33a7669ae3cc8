"""
Notes API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── store: InMemoryNoteStore holding the three seed notes
    ├── test_settings: Settings pinned to the development environment
    ├── test_app: FastAPI app wired to `store` and `test_settings`
    └── test_client: HTTPX AsyncClient for API endpoint testing
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["NODE_ENV"] = "development"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from notes_api.config import Settings
from notes_api.main import create_app
from notes_api.store import InMemoryNoteStore


@pytest.fixture
def store():
    """A fresh store with seed notes 1, 2 and 3 for each test."""
    return InMemoryNoteStore.with_seed_notes()


@pytest.fixture
def test_settings():
    # Environment comes from NODE_ENV=development set above
    return Settings(_env_file=None, static_dir=None)


@pytest.fixture
def test_app(store, test_settings):
    return create_app(app_settings=test_settings, store=store)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed straight to the app through ASGITransport.

    raise_app_exceptions=False lets tests observe the 500 response produced
    by the catch-all handler instead of the re-raised exception.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
