"""Month grid construction for the date picker.

A month is always rendered as six Monday-first weeks (42 cells), padded with
days from the neighbouring months, so the grid shape never changes.
"""

import datetime as dt
import re
from collections.abc import Callable
from typing import Optional

from venue_calendar.models import (
    BookingError,
    CalendarDay,
    CalendarMonth,
    DateRange,
    ErrorCode,
    SelectionState,
)
from venue_calendar.utils.dates import (
    add_days,
    add_months,
    in_preview_range,
    is_same_day,
    start_of_month,
)

from .availability import DayPredicate

GRID_DAYS = 42

_MONTH_KEY = re.compile(r"^(\d{4})-(\d{2})$")


def grid_start(month: dt.date) -> dt.date:
    """Monday on or before the 1st of ``month``: the first cell of its grid."""
    first = start_of_month(month)
    return add_days(first, -first.weekday())  # Monday == 0


def grid_fits(month: dt.date) -> bool:
    """Whether all 42 days of the month's grid are representable dates."""
    try:
        add_days(grid_start(month), GRID_DAYS - 1)
    except OverflowError:
        return False
    return True


def days_in_calendar(month: dt.date) -> list[dt.date]:
    """Build the 42 consecutive days shown for ``month``.

    Leading days come from the previous month and trailing days from the
    next, so the grid always spans six full weeks.

    Args:
        month: Any day within the month to render

    Returns:
        42 dates starting on the Monday on or before the 1st

    Raises:
        OverflowError: If the grid runs past ``date.max`` (see ``grid_fits``)
    """
    start = grid_start(month)
    return [add_days(start, i) for i in range(GRID_DAYS)]


def month_key(month: dt.date) -> str:
    """Format a month as YYYY-MM."""
    return f"{month.year:04d}-{month.month:02d}"


def parse_month(value: str) -> dt.date:
    """Parse a YYYY-MM key into the first day of that month.

    Raises:
        BookingError: INVALID_MONTH when the key is malformed, out of range or
            its grid would run past the last representable date
    """
    match = _MONTH_KEY.match(value.strip())
    if not match:
        raise BookingError(ErrorCode.INVALID_MONTH, {"month": value})

    year, month_num = int(match.group(1)), int(match.group(2))
    if not 1 <= month_num <= 12 or year < 1:
        raise BookingError(ErrorCode.INVALID_MONTH, {"month": value})

    first = dt.date(year, month_num, 1)
    if not grid_fits(first):
        raise BookingError(ErrorCode.INVALID_MONTH, {"month": value})

    return first


def visible_months(month: dt.date, count: int = 2) -> list[dt.date]:
    """First days of ``count`` consecutive months starting at ``month``."""
    first = start_of_month(month)
    return [add_months(first, i) for i in range(count)]


def build_month(
    month: dt.date,
    is_blocked: DayPredicate,
    selection: Optional[DateRange] = None,
    hovered: Optional[dt.date] = None,
    is_highlighted: Optional[Callable[[dt.date], bool]] = None,
    today: Optional[dt.date] = None,
) -> CalendarMonth:
    """Render a month grid with per-day selection and availability flags.

    Args:
        month: Any day within the month to render
        is_blocked: Blocked-day predicate
        selection: Current selection, if any
        hovered: Hovered day, drives the preview span while choosing checkout
        is_highlighted: Optional visual-emphasis predicate
        today: Today's date (defaults to the system date)

    Returns:
        CalendarMonth with exactly 42 days
    """
    selection = selection or DateRange.empty()
    today = today or dt.date.today()
    first = start_of_month(month)
    choosing_checkout = selection.state == SelectionState.START_ONLY

    days: list[CalendarDay] = []
    blocked_count = 0
    available_count = 0

    for day in days_in_calendar(first):
        is_current_month = day.month == first.month and day.year == first.year
        blocked = is_blocked(day)
        is_start = is_same_day(day, selection.start)
        is_end = is_same_day(day, selection.end)

        days.append(
            CalendarDay(
                date=day,
                is_current_month=is_current_month,
                is_start=is_start,
                is_end=is_end,
                is_selected=is_start or is_end,
                is_in_range=selection.contains(day),
                is_in_preview=choosing_checkout
                and in_preview_range(day, selection.start, hovered),
                is_blocked=blocked,
                is_highlighted=bool(is_highlighted and is_highlighted(day)),
                is_today=day == today,
            )
        )

        if is_current_month:
            if blocked:
                blocked_count += 1
            else:
                available_count += 1

    return CalendarMonth(
        month=month_key(first),
        days=days,
        blocked_count=blocked_count,
        available_count=available_count,
    )
