"""Calendar services: availability, range selection, month grid and pricing."""

from .availability import (
    AvailabilityService,
    blocked_ranges_from_bookings,
    build_is_blocked,
    build_is_highlighted,
    check_stay,
    has_blocked_between,
)
from .calendar_grid import (
    build_month,
    days_in_calendar,
    grid_fits,
    month_key,
    parse_month,
    visible_months,
)
from .pricing import PricingService, calculate_price_summary, count_nights
from .selection import RangeSelector, apply_event, preview_range
from .venue_calendar import VenueCalendar

__all__ = [
    "AvailabilityService",
    "PricingService",
    "RangeSelector",
    "VenueCalendar",
    "apply_event",
    "blocked_ranges_from_bookings",
    "build_is_blocked",
    "build_is_highlighted",
    "build_month",
    "calculate_price_summary",
    "check_stay",
    "count_nights",
    "days_in_calendar",
    "grid_fits",
    "has_blocked_between",
    "month_key",
    "parse_month",
    "preview_range",
    "visible_months",
]
