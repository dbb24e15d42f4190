"""API models for range availability checks."""

import datetime as dt
from typing import Optional

from pydantic import Field, model_validator

from venue_calendar.models import RangeCheck
from venue_calendar.models.errors import ToolError

from .common import AvailabilityContext, check_stay_length


class RangeCheckRequest(AvailabilityContext):
    """Proposed stay plus the venue's availability context."""

    check_in: dt.date = Field(..., description="Check-in date (YYYY-MM-DD)", examples=["2024-03-15"])
    check_out: dt.date = Field(..., description="Check-out date (YYYY-MM-DD)", examples=["2024-03-20"])
    suggest_alternatives: bool = Field(
        default=True,
        description="Search nearby dates when the stay is not bookable",
    )

    @model_validator(mode="after")
    def limit_stay_length(self) -> "RangeCheckRequest":
        check_stay_length(self.check_in, self.check_out)
        return self


class RangeCheckResponse(RangeCheck):
    """Range check result with a ToolError when the stay is not bookable."""

    error: Optional[ToolError] = None
