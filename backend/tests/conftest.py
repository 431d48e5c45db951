"""
NoteKeeper Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── store: Empty MemoryStore
    ├── app: FastAPI app bound to `store`
    ├── test_client: HTTPX AsyncClient talking to `app` in-process
    └── registered_session: (store, sid) for a signed-up, logged-in user
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Must be set before notekeeper.config is imported.
os.environ["LOG_LEVEL"] = "WARNING"

from notekeeper.main import create_app  # noqa: E402
from notekeeper.services.store import MemoryStore  # noqa: E402


@pytest.fixture
def store():
    """A fresh, empty store per test."""
    return MemoryStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_signup(test_client):
            response = await test_client.post("/signup", json={"name": "a"})
            assert response.status_code == 200

    GET and DELETE bodies go through `test_client.request(method, url, json=...)`.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def registered_session(store):
    """A user "a@x.com"/"p" with one open session; returns (store, sid)."""
    store.create_user("a", "a@x.com", "p")
    return store, store.create_session(1)
