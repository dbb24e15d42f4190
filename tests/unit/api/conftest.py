"""Fixtures for API route tests."""

import datetime as dt
from typing import Generator

import pytest
from fastapi.testclient import TestClient

TODAY = dt.date(2024, 3, 1)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client with today pinned to 2024-03-01."""
    from venue_calendar_api.dependencies import get_clock
    from venue_calendar_api.main import app

    app.dependency_overrides[get_clock] = lambda: (lambda: TODAY)
    yield TestClient(app)
    app.dependency_overrides.clear()
