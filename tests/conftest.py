"""Pytest configuration and fixtures for venue calendar tests.

This module provides reusable fixtures for testing:
- A fixed clock so past-day blocking is deterministic
- Sample bookings for March 2024
- Ready-made availability services and blocked-day predicates
"""

import datetime as dt
from collections.abc import Callable
from typing import Any, Generator

import pytest

from venue_calendar.models import Booking
from venue_calendar.services.availability import AvailabilityService, DayPredicate

# === Clock ===

TODAY = dt.date(2024, 3, 1)


@pytest.fixture
def today() -> dt.date:
    """The date every test treats as today."""
    return TODAY


@pytest.fixture
def clock() -> Callable[[], dt.date]:
    """Clock pinned to TODAY."""
    return lambda: TODAY


# === Sample Data Fixtures ===


@pytest.fixture
def sample_booking() -> Booking:
    """Booking from 2024-03-10 with checkout on 2024-03-15.

    Blocked nights are 03-10 through 03-14; 03-15 stays free.
    """
    return Booking(id="bk-1", date_from="2024-03-10", date_to="2024-03-15")


@pytest.fixture
def sample_bookings(sample_booking: Booking) -> list[Booking]:
    """Two bookings in March 2024 with a free gap between them."""
    return [
        sample_booking,
        Booking(id="bk-2", date_from="2024-03-22", date_to="2024-03-25"),
    ]


@pytest.fixture
def sample_booking_payload() -> list[dict[str, Any]]:
    """Bookings as the venue API sends them."""
    return [
        {"id": "bk-1", "dateFrom": "2024-03-10", "dateTo": "2024-03-15"},
        {"id": "bk-2", "dateFrom": "2024-03-22", "dateTo": "2024-03-25"},
    ]


@pytest.fixture
def availability_service(
    sample_bookings: list[Booking],
    clock: Callable[[], dt.date],
) -> AvailabilityService:
    """AvailabilityService over the sample bookings with a fixed clock."""
    return AvailabilityService(sample_bookings, clock=clock)


@pytest.fixture
def is_blocked(availability_service: AvailabilityService) -> DayPredicate:
    """Blocked-day predicate for the sample bookings."""
    return availability_service.is_blocked


# === API Fixtures ===


@pytest.fixture(autouse=True)
def reset_api_services() -> Generator[None, None, None]:
    """Clear cached settings and services around each test."""
    from venue_calendar_api.dependencies import reset_services

    reset_services()
    yield
    reset_services()
