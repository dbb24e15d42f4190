"""Unit tests for the per-venue calendar context."""

import datetime as dt
from collections.abc import Callable
from decimal import Decimal
from unittest.mock import MagicMock

from venue_calendar.config import CalendarSettings
from venue_calendar.models import Booking, DateRange, SelectionState
from venue_calendar.services.venue_calendar import VenueCalendar


def d(value: str) -> dt.date:
    return dt.date.fromisoformat(value)


class TestVenueCalendar:
    """Tests for VenueCalendar wiring."""

    def test_book_a_stay(
        self,
        sample_bookings: list[Booking],
        clock: Callable[[], dt.date],
    ) -> None:
        """Should walk from picking dates to a price summary."""
        on_close = MagicMock()
        calendar = VenueCalendar(100, sample_bookings, on_close=on_close, clock=clock)

        calendar.selector.pick(d("2024-03-15"))
        calendar.selector.pick(d("2024-03-18"))

        assert calendar.selection == DateRange(start=d("2024-03-15"), end=d("2024-03-18"))
        on_close.assert_called_once_with()

        summary = calendar.price_summary()
        assert summary.nights == 3
        assert summary.total == Decimal("357.5")

    def test_settings_drive_policy_and_pricing(
        self,
        sample_bookings: list[Booking],
        clock: Callable[[], dt.date],
    ) -> None:
        """Should take policy and pricing from settings."""
        settings = CalendarSettings(min_nights=3, cleaning_fee=Decimal("0"), tax_rate=Decimal("0"))
        calendar = VenueCalendar(100, sample_bookings, settings=settings, clock=clock)

        calendar.selector.pick(d("2024-03-15"))
        calendar.selector.pick(d("2024-03-17"))
        assert calendar.selection.state == SelectionState.START_ONLY

        calendar.selector.pick(d("2024-03-18"))
        assert calendar.price_summary().total == Decimal("300")

    def test_explicit_min_nights_overrides_settings(
        self, clock: Callable[[], dt.date]
    ) -> None:
        """Should prefer an explicit minimum stay over settings."""
        calendar = VenueCalendar(
            100, settings=CalendarSettings(min_nights=3), min_nights=1, clock=clock
        )
        assert calendar.availability.min_nights == 1
        assert calendar.selector.min_nights == 1

    def test_month_navigation(self, clock: Callable[[], dt.date]) -> None:
        """Should move the visible month back and forth."""
        calendar = VenueCalendar(100, clock=clock)

        assert calendar.visible_month == d("2024-03-01")
        assert calendar.show_next_month() == d("2024-04-01")
        assert calendar.show_previous_month() == d("2024-03-01")
        assert calendar.show_previous_month() == d("2024-02-01")

    def test_visible_month_follows_initial_selection(
        self, clock: Callable[[], dt.date]
    ) -> None:
        """Should open on the month of the initial selection."""
        calendar = VenueCalendar(
            100, initial=DateRange(start=d("2024-07-04")), clock=clock
        )
        assert calendar.visible_month == d("2024-07-01")

    def test_month_views_reflect_selection_and_hover(
        self,
        sample_bookings: list[Booking],
        clock: Callable[[], dt.date],
    ) -> None:
        """Should render both visible months with selection and preview."""
        calendar = VenueCalendar(100, sample_bookings, clock=clock)
        calendar.selector.pick(d("2024-03-26"))
        calendar.selector.hover(d("2024-04-02"))

        march, april = calendar.visible_month_views()

        assert march.month == "2024-03"
        assert april.month == "2024-04"
        march_preview = [day.date for day in march.days if day.is_in_preview and day.is_current_month]
        april_preview = [day.date for day in april.days if day.is_in_preview and day.is_current_month]
        assert march_preview[0] == d("2024-03-26")
        assert april_preview[-1] == d("2024-04-02")

    def test_price_summary_empty_until_committed(self, clock: Callable[[], dt.date]) -> None:
        """Should return an empty summary until a range is committed."""
        calendar = VenueCalendar(100, clock=clock)
        calendar.selector.pick(d("2024-03-05"))

        assert calendar.price_summary().is_empty
