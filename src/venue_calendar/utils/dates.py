"""Calendar-day arithmetic.

Every helper works on ``datetime.date`` values and returns new values;
datetimes are reduced to their local calendar day first.
"""

import datetime as dt
from collections.abc import Iterator

DayLike = dt.date | dt.datetime | str


def parse_instant(value: str) -> dt.date:
    """Parse an ISO-8601 date or date-time string into a local calendar day.

    Args:
        value: ISO string such as '2024-03-10' or '2024-03-10T14:00:00.000Z'

    Returns:
        The calendar day of the instant in the local timezone

    Raises:
        ValueError: If the string is not valid ISO-8601
    """
    parsed = dt.datetime.fromisoformat(value.strip())
    return to_day(parsed)


def to_day(value: DayLike) -> dt.date:
    """Reduce a date, datetime or ISO string to its calendar day.

    Aware datetimes are converted to the local timezone before truncation,
    naive datetimes are taken as local time already.
    """
    if isinstance(value, str):
        return parse_instant(value)
    if isinstance(value, dt.datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def clamp_to_day(value: DayLike | None) -> dt.date | None:
    """Normalize to a calendar day, passing ``None`` through."""
    return to_day(value) if value is not None else None


def add_days(day: dt.date, n: int) -> dt.date:
    """Return the day ``n`` days after ``day`` (negative goes back)."""
    return day + dt.timedelta(days=n)


def days_diff(a: dt.date, b: dt.date) -> int:
    """Signed number of days from ``a`` to ``b``."""
    return (to_day(b) - to_day(a)).days


def is_same_day(a: dt.date | None, b: dt.date | None) -> bool:
    """True when both are set and fall on the same calendar day."""
    return a is not None and b is not None and to_day(a) == to_day(b)


def is_past_day(day: dt.date, today: dt.date | None = None) -> bool:
    """Check if a day is strictly before today."""
    return to_day(day) < (today or dt.date.today())


def start_of_month(day: dt.date) -> dt.date:
    """First day of the month containing ``day``."""
    return dt.date(day.year, day.month, 1)


def add_months(day: dt.date, n: int) -> dt.date:
    """First day of the month ``n`` months after the month of ``day``."""
    index = day.year * 12 + (day.month - 1) + n
    return dt.date(index // 12, index % 12 + 1, 1)


def in_range(day: dt.date, start: dt.date | None, end: dt.date | None) -> bool:
    """Inclusive ``[start, end]`` membership; false when either bound is missing."""
    if start is None or end is None:
        return False
    return start <= to_day(day) <= end


def in_preview_range(
    day: dt.date,
    start: dt.date | None,
    hovered: dt.date | None,
) -> bool:
    """Membership in the span between a fixed start and the hovered day.

    The two bounds may come in either order.
    """
    if start is None or hovered is None:
        return False
    low, high = sorted((start, hovered))
    return in_range(day, low, high)


def iter_days(start: dt.date, end: dt.date) -> Iterator[dt.date]:
    """Yield every day from ``start`` up to ``end`` (end exclusive)."""
    for i in range(max(days_diff(start, end), 0)):
        yield add_days(start, i)
