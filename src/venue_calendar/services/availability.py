"""Availability engine: which days are blocked and which stays are valid.

Everything here is a pure function of its inputs. Existing bookings become
inclusive blocked ranges (checkout day excluded), which are combined with a
past-day policy and an optional caller predicate into a single
``date -> bool`` predicate.
"""

import datetime as dt
from collections.abc import Callable, Iterable, Sequence
from typing import Optional

from venue_calendar.models import (
    AlternativeRange,
    BlockedRange,
    Booking,
    RangeCheck,
    RejectReason,
)
from venue_calendar.utils.dates import (
    add_days,
    days_diff,
    is_past_day,
    iter_days,
    to_day,
)
from venue_calendar.utils.logging import get_logger

logger = get_logger(__name__)

DayPredicate = Callable[[dt.date], bool]
Clock = Callable[[], dt.date]


def blocked_ranges_from_bookings(bookings: Iterable[Booking]) -> list[BlockedRange]:
    """Convert booking records into their occupied-night ranges."""
    return [booking.to_blocked_range() for booking in bookings]


def _normalize_ranges(ranges: Iterable[BlockedRange]) -> list[tuple[dt.date, dt.date]]:
    """Drop inverted ranges; the rest become (start, end) day pairs."""
    normalized = []
    for r in ranges:
        if r.is_malformed:
            logger.debug("Dropping malformed range %s..%s", r.start, r.end)
            continue
        normalized.append((r.start, r.end))
    return normalized


def _in_any(day: dt.date, ranges: Sequence[tuple[dt.date, dt.date]]) -> bool:
    d = to_day(day)
    return any(start <= d <= end for start, end in ranges)


def build_is_blocked(
    unavailable_ranges: Optional[Iterable[BlockedRange]] = None,
    is_date_blocked: Optional[DayPredicate] = None,
    allow_past: bool = False,
    clock: Clock = dt.date.today,
) -> DayPredicate:
    """Build a predicate that tells whether a day can't be selected.

    A day is blocked when past days are disallowed and it is before today,
    when the custom predicate says so, or when it falls inside any
    unavailable range (inclusive on both ends).

    Args:
        unavailable_ranges: Occupied-night ranges; inverted ones are dropped
        is_date_blocked: Optional extra predicate supplied by the caller
        allow_past: Whether days before today are selectable
        clock: Returns today's date, evaluated on every call

    Returns:
        A ``date -> bool`` predicate
    """
    ranges = _normalize_ranges(unavailable_ranges or [])

    def is_blocked(day: dt.date) -> bool:
        if not allow_past and is_past_day(day, clock()):
            return True
        if is_date_blocked is not None and is_date_blocked(to_day(day)):
            return True
        return _in_any(day, ranges)

    return is_blocked


def build_is_highlighted(
    highlighted_ranges: Optional[Iterable[BlockedRange]] = None,
) -> DayPredicate:
    """Build a predicate for purely visual emphasis (never blocks a day)."""
    ranges = _normalize_ranges(highlighted_ranges or [])

    def is_highlighted(day: dt.date) -> bool:
        return _in_any(day, ranges)

    return is_highlighted


def has_blocked_between(a: dt.date, b: dt.date, is_blocked: DayPredicate) -> bool:
    """Check whether any day after the earlier date up to the later one is blocked.

    The earlier day is the first night of the stay and is not checked; the
    later day is. Argument order does not matter. Days are reached as
    offsets from the earlier one, so nothing past the later day is computed.
    """
    start, end = sorted((to_day(a), to_day(b)))
    return any(
        is_blocked(add_days(start, offset)) for offset in range(1, days_diff(start, end) + 1)
    )


def check_stay(
    start: dt.date,
    end: dt.date,
    is_blocked: DayPredicate,
    min_nights: int = 1,
) -> Optional[RejectReason]:
    """Validate a stay whose check-in was already accepted.

    Same-day stays are only allowed when ``min_nights <= 0``.

    Returns:
        None if the stay is valid, otherwise why it is not
    """
    start, end = sorted((to_day(start), to_day(end)))
    if start == end:
        return None if min_nights <= 0 else RejectReason.MINIMUM_NIGHTS_NOT_MET
    if has_blocked_between(start, end, is_blocked):
        return RejectReason.BLOCKED_BETWEEN
    if days_diff(start, end) < min_nights:
        return RejectReason.MINIMUM_NIGHTS_NOT_MET
    return None


class AvailabilityService:
    """Availability checks for one venue.

    Holds the venue's bookings and policy so callers can ask about days and
    ranges without rebuilding predicates.
    """

    def __init__(
        self,
        bookings: Optional[Iterable[Booking]] = None,
        *,
        unavailable_ranges: Optional[Iterable[BlockedRange]] = None,
        min_nights: int = 1,
        allow_past: bool = False,
        is_date_blocked: Optional[DayPredicate] = None,
        highlighted_ranges: Optional[Iterable[BlockedRange]] = None,
        clock: Clock = dt.date.today,
    ) -> None:
        """Initialize availability service.

        Args:
            bookings: Existing bookings (checkout exclusive)
            unavailable_ranges: Extra occupied-night ranges, already inclusive
            min_nights: Minimum stay length
            allow_past: Whether days before today are selectable
            is_date_blocked: Optional custom blocking predicate
            highlighted_ranges: Ranges to emphasize without blocking
            clock: Returns today's date
        """
        self.bookings = list(bookings or [])
        self.unavailable_ranges = blocked_ranges_from_bookings(self.bookings) + list(
            unavailable_ranges or []
        )
        self.min_nights = min_nights
        self.allow_past = allow_past
        self.clock = clock
        self.is_blocked = build_is_blocked(
            self.unavailable_ranges,
            is_date_blocked=is_date_blocked,
            allow_past=allow_past,
            clock=clock,
        )
        self.is_highlighted = build_is_highlighted(highlighted_ranges)

    def validate_range(
        self,
        check_in: dt.date,
        check_out: dt.date,
    ) -> tuple[bool, Optional[RejectReason]]:
        """Check a proposed stay with the same rules as the date picker.

        Args:
            check_in: Check-in date
            check_out: Check-out date

        Returns:
            Tuple of (is_valid, reason)
        """
        start, end = sorted((to_day(check_in), to_day(check_out)))
        if self.is_blocked(start):
            return False, RejectReason.DAY_BLOCKED

        reason = check_stay(start, end, self.is_blocked, self.min_nights)
        return reason is None, reason

    def blocked_dates(self, check_in: dt.date, check_out: dt.date) -> list[dt.date]:
        """List blocked days from check-in through checkout (inclusive)."""
        start, end = sorted((to_day(check_in), to_day(check_out)))
        return [d for d in (*iter_days(start, end), end) if self.is_blocked(d)]

    def check_range(
        self,
        check_in: dt.date,
        check_out: dt.date,
        suggest: bool = True,
    ) -> RangeCheck:
        """Validate a stay and suggest alternatives when it is not bookable.

        Args:
            check_in: Check-in date
            check_out: Check-out date
            suggest: Whether to search for alternatives on failure

        Returns:
            RangeCheck with validity, reason, blocked days and alternatives
        """
        start, end = sorted((to_day(check_in), to_day(check_out)))
        is_valid, reason = self.validate_range(start, end)

        alternatives: list[AlternativeRange] = []
        if not is_valid and suggest and reason != RejectReason.MINIMUM_NIGHTS_NOT_MET:
            alternatives = self.suggest_alternative_dates(start, end)

        logger.info(
            "Range check %s..%s valid=%s reason=%s",
            start,
            end,
            is_valid,
            reason.value if reason else None,
        )

        return RangeCheck(
            check_in=start,
            check_out=end,
            nights=days_diff(start, end),
            min_nights=self.min_nights,
            is_valid=is_valid,
            reason=reason,
            blocked_dates=self.blocked_dates(start, end),
            alternatives=alternatives,
        )

    def suggest_alternative_dates(
        self,
        requested_start: dt.date,
        requested_end: dt.date,
        search_window_days: int = 14,
        max_suggestions: int = 3,
    ) -> list[AlternativeRange]:
        """Find valid stays of the same length near the requested dates.

        Offsets are tried closest first, earlier before later for the same
        offset. Every candidate goes through ``validate_range``; candidates
        that would fall outside the representable dates are skipped.

        Args:
            requested_start: Originally requested check-in date
            requested_end: Originally requested check-out date
            search_window_days: How many days before/after to shift
            max_suggestions: Maximum number of alternatives to return

        Returns:
            Alternatives sorted by absolute offset
        """
        requested_nights = days_diff(requested_start, requested_end)
        suggestions: list[AlternativeRange] = []

        for offset in range(1, search_window_days + 1):
            if len(suggestions) >= max_suggestions:
                break

            for signed, direction in ((-offset, "earlier"), (offset, "later")):
                if len(suggestions) >= max_suggestions:
                    break

                try:
                    candidate_start = add_days(requested_start, signed)
                    candidate_end = add_days(candidate_start, requested_nights)
                except OverflowError:
                    # Shifted past date.min or date.max
                    continue

                is_valid, _ = self.validate_range(candidate_start, candidate_end)
                if is_valid:
                    suggestions.append(
                        AlternativeRange(
                            check_in=candidate_start,
                            check_out=candidate_end,
                            nights=requested_nights,
                            offset_days=signed,
                            direction=direction,
                        )
                    )

        suggestions.sort(key=lambda s: abs(s.offset_days))
        return suggestions[:max_suggestions]
