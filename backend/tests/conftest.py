"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Every test gets a fresh in-memory storage backend and fresh settings.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_storage, reset_container
from modules.storage.memory import MemoryStorage
from shared.config import get_settings


TEST_SESSION_SECRET = "test-session-secret-for-testing-only"


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Cheap password hashing and a known session secret for every test."""
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("SESSION_SECRET", TEST_SESSION_SECRET)
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    get_settings.cache_clear()
    reset_container()
    yield get_settings()
    get_settings.cache_clear()
    reset_container()


@pytest.fixture
def storage() -> MemoryStorage:
    """A fresh in-memory storage backend."""
    return MemoryStorage()


@pytest.fixture
def app(storage):
    """Create a fresh app wired to the test storage."""
    app = create_app()
    app.dependency_overrides[get_storage] = lambda: storage
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Anonymous client; logs in by calling the auth endpoints."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def other_client(app) -> TestClient:
    """A second client with its own cookie jar."""
    return TestClient(app, raise_server_exceptions=False)


def register(client: TestClient, username: str = "alice", password: str = "pw1", **profile) -> dict:
    """Register (and thereby log in) a user, returning the public user."""
    response = client.post(
        "/api/register",
        json={"username": username, "password": password, **profile},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def alice(client) -> dict:
    """Client logged in as alice."""
    return register(client, "alice", "pw1")


@pytest.fixture
def bob(other_client) -> dict:
    """Other client logged in as bob."""
    return register(other_client, "bob", "pw2")


HOME = {
    "name": "Home",
    "address": "1 Main St",
    "latitude": "12.97",
    "longitude": "77.59",
}


def ride_payload(**overrides) -> dict:
    """A valid POST /api/rides body as the client sends it."""
    payload = {
        "pickupLocation": "1 Main St",
        "dropoffLocation": "Airport",
        "pickupLatitude": "12.97",
        "pickupLongitude": "77.59",
        "dropoffLatitude": "13.19",
        "dropoffLongitude": "77.70",
        "service": "uber",
        "rideType": "UberX",
        "fare": "249",
        "distance": "7.2",
        "duration": "18",
        "status": "booked",
        "paymentMethod": "card",
    }
    payload.update(overrides)
    return payload
