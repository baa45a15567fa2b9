"""Pytest fixtures for flight registry tests."""

import pytest
from fastapi.testclient import TestClient

from src.api import app
from src.api.dependencies import AppState
from src.config import LOCALE_ENV
from src.domain import Flight, Passenger
from src.services import FlightRegistry


@pytest.fixture
def registry() -> FlightRegistry:
    """Create an empty registry for testing."""
    return FlightRegistry()


@pytest.fixture
def sample_flight() -> Flight:
    """Create a sample flight for testing."""
    return Flight(destination="Kyiv", is_vip=False)


@pytest.fixture
def sample_passenger() -> Passenger:
    """Create a sample passenger for testing."""
    return Passenger(name="Anna")


@pytest.fixture
def client(monkeypatch):
    """Create a test client backed by a fresh registry."""
    monkeypatch.delenv(LOCALE_ENV, raising=False)
    AppState.reset()
    yield TestClient(app)
    AppState.reset()
