"""FastAPI dependency injection providers.

Settings and services are built lazily and cached with ``lru_cache``.
The calendar itself is stateless per request: every request carries the
venue's bookings, so only configuration-derived services are cached.

Usage in routes:
    from venue_calendar_api.dependencies import get_pricing_service

    @router.get("/pricing/summary")
    async def summary(
        pricing: PricingService = Depends(get_pricing_service),
    ):
        ...

Testing:
    Use reset_services() to clear cached instances between tests, or
    override get_clock via app.dependency_overrides to pin "today".
"""

import datetime as dt
from collections.abc import Callable
from functools import lru_cache

from venue_calendar.config import CalendarSettings
from venue_calendar.services.pricing import PricingService


@lru_cache
def get_settings() -> CalendarSettings:
    """Get cached settings read from the environment."""
    return CalendarSettings.from_env()


@lru_cache
def get_pricing_service() -> PricingService:
    """Get cached PricingService configured from settings."""
    return PricingService.from_settings(get_settings())


def get_clock() -> Callable[[], dt.date]:
    """Get the function that returns today's date."""
    return dt.date.today


def reset_services() -> None:
    """Clear all cached settings and service instances.

    Example:
        @pytest.fixture(autouse=True)
        def reset_state():
            yield
            reset_services()
    """
    get_settings.cache_clear()
    get_pricing_service.cache_clear()
