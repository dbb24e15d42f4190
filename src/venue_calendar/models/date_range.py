"""Date range models: user selections, blocked nights and booking records."""

import datetime as dt
from typing import Any, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from venue_calendar.utils.dates import add_days, clamp_to_day, days_diff, in_range

from .enums import SelectionState


def coerce_day(value: Any) -> Any:
    """Reduce datetimes and ISO strings to calendar days before validation."""
    if isinstance(value, (dt.date, str)):
        return clamp_to_day(value)
    return value


class DateRange(BaseModel):
    """A check-in/check-out selection, possibly incomplete.

    ``start`` only means the user has picked a check-in day and is choosing
    the checkout. Both set means a committed range. The range is never
    stored inverted and never holds an end without a start.
    """

    model_config = ConfigDict(frozen=True)

    start: Optional[dt.date] = None
    end: Optional[dt.date] = None

    @field_validator("start", "end", mode="before")
    @classmethod
    def normalize_day(cls, v: Any) -> Any:
        """Accept datetimes and ISO strings as calendar days."""
        return coerce_day(v)

    @model_validator(mode="after")
    def check_order(self) -> "DateRange":
        """Reject end-only and inverted ranges."""
        if self.end is not None and self.start is None:
            raise ValueError("end requires start")
        if self.start is not None and self.end is not None and self.start > self.end:
            raise ValueError("end must not be before start")
        return self

    @classmethod
    def empty(cls) -> "DateRange":
        return cls()

    @classmethod
    def between(cls, a: dt.date, b: dt.date) -> "DateRange":
        """Build a committed range from two days given in any order."""
        low, high = sorted((a, b))
        return cls(start=low, end=high)

    @property
    def state(self) -> SelectionState:
        if self.start is None:
            return SelectionState.EMPTY
        if self.end is None:
            return SelectionState.START_ONLY
        return SelectionState.COMMITTED

    @property
    def is_committed(self) -> bool:
        return self.state == SelectionState.COMMITTED

    @property
    def nights(self) -> int:
        """Nights covered by a committed range, 0 otherwise."""
        if self.start is None or self.end is None:
            return 0
        return days_diff(self.start, self.end)

    def contains(self, day: dt.date) -> bool:
        return in_range(day, self.start, self.end)


class BlockedRange(BaseModel):
    """Inclusive span of occupied nights.

    ``end`` is the last blocked night, so the checkout day of the
    underlying booking stays free. Inverted ranges are accepted here and
    dropped by the availability engine.
    """

    model_config = ConfigDict(frozen=True)

    start: dt.date
    end: dt.date

    @field_validator("start", "end", mode="before")
    @classmethod
    def normalize_day(cls, v: Any) -> Any:
        """Accept datetimes and ISO strings as calendar days."""
        return coerce_day(v)

    @property
    def is_malformed(self) -> bool:
        return self.start > self.end

    def contains(self, day: dt.date) -> bool:
        return in_range(day, self.start, self.end)


class Booking(BaseModel):
    """An existing booking as delivered by the venue API.

    ``date_from`` is the check-in instant and ``date_to`` the checkout
    instant. Both are accepted as ISO-8601 strings (the upstream
    ``dateFrom``/``dateTo`` names work too) and stored as local days.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[str] = None
    date_from: dt.date = Field(
        ...,
        validation_alias=AliasChoices("date_from", "dateFrom"),
        description="Check-in day",
    )
    date_to: dt.date = Field(
        ...,
        validation_alias=AliasChoices("date_to", "dateTo"),
        description="Checkout day (exclusive)",
    )
    guests: Optional[int] = Field(default=None, ge=1)

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def normalize_day(cls, v: Any) -> Any:
        """Accept datetimes and ISO strings as calendar days."""
        return coerce_day(v)

    def to_blocked_range(self) -> BlockedRange:
        """Occupied nights of this booking: check-in through checkout minus one."""
        if self.date_to == dt.date.min:
            # No night can end before the first representable day
            return BlockedRange(start=dt.date.max, end=dt.date.min)
        return BlockedRange(start=self.date_from, end=add_days(self.date_to, -1))
