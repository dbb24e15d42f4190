"""API models for month grid rendering."""

import datetime as dt
from typing import Optional

from pydantic import Field

from venue_calendar.models import DateRange

from .common import AvailabilityContext


class CalendarRequest(AvailabilityContext):
    """Availability context plus the picker state to render."""

    selection: DateRange = Field(default_factory=DateRange)
    hovered: Optional[dt.date] = Field(
        default=None,
        description="Hovered day, drives the checkout preview",
    )
