"""Per-venue calendar context tying availability, selection, grid and pricing.

One ``VenueCalendar`` is created when a venue's booking view opens and is
discarded with it; nothing is shared between venues.
"""

import datetime as dt
from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import Optional

from venue_calendar.config import CalendarSettings
from venue_calendar.models import (
    BlockedRange,
    Booking,
    CalendarMonth,
    DateRange,
    PriceSummary,
)
from venue_calendar.utils.dates import add_months, start_of_month

from .availability import AvailabilityService, Clock, DayPredicate
from .calendar_grid import build_month, visible_months
from .pricing import Amount, PricingService
from .selection import RangeSelector


class VenueCalendar:
    """Calendar state and services for a single venue.

    Args:
        nightly_price: The venue's price per night
        bookings: Existing bookings for the venue
        settings: Policy and pricing defaults
        min_nights: Overrides ``settings.min_nights``
        allow_past: Overrides ``settings.allow_past``
        is_date_blocked: Optional custom blocking predicate
        highlighted_ranges: Ranges to emphasize without blocking
        initial: Selection to resume from
        on_close: Called when a range is committed
        clock: Returns today's date
    """

    def __init__(
        self,
        nightly_price: Amount,
        bookings: Optional[Iterable[Booking]] = None,
        *,
        settings: Optional[CalendarSettings] = None,
        min_nights: Optional[int] = None,
        allow_past: Optional[bool] = None,
        is_date_blocked: Optional[DayPredicate] = None,
        highlighted_ranges: Optional[Iterable[BlockedRange]] = None,
        initial: Optional[DateRange] = None,
        on_close: Optional[Callable[[], None]] = None,
        clock: Clock = dt.date.today,
    ) -> None:
        settings = settings or CalendarSettings()
        self.nightly_price = Decimal(str(nightly_price))
        self.clock = clock
        self.availability = AvailabilityService(
            bookings,
            min_nights=settings.min_nights if min_nights is None else min_nights,
            allow_past=settings.allow_past if allow_past is None else allow_past,
            is_date_blocked=is_date_blocked,
            highlighted_ranges=highlighted_ranges,
            clock=clock,
        )
        self.pricing = PricingService.from_settings(settings)
        self.selector = RangeSelector(
            self.availability.is_blocked,
            min_nights=self.availability.min_nights,
            initial=initial,
            on_close=on_close,
        )
        self.visible_month = start_of_month(
            initial.start if initial and initial.start else clock()
        )

    @property
    def selection(self) -> DateRange:
        return self.selector.selection

    def show_next_month(self) -> dt.date:
        self.visible_month = add_months(self.visible_month, 1)
        return self.visible_month

    def show_previous_month(self) -> dt.date:
        self.visible_month = add_months(self.visible_month, -1)
        return self.visible_month

    def month_view(self, month: Optional[dt.date] = None) -> CalendarMonth:
        """Render one month with the current selection and hover preview."""
        return build_month(
            month or self.visible_month,
            self.availability.is_blocked,
            selection=self.selector.selection,
            hovered=self.selector.hovered,
            is_highlighted=self.availability.is_highlighted,
            today=self.clock(),
        )

    def visible_month_views(self, count: int = 2) -> list[CalendarMonth]:
        """Render the visible month and the ones after it."""
        return [self.month_view(m) for m in visible_months(self.visible_month, count)]

    def price_summary(self) -> PriceSummary:
        """Price the current selection."""
        return self.pricing.summary_for(self.nightly_price, self.selector.selection)
