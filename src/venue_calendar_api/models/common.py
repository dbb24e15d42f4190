"""Shared API request/response models.

``AvailabilityContext`` is the body every calendar endpoint receives: the
venue's existing bookings plus the policy to evaluate them with. Fields left
unset fall back to the service settings.
"""

import datetime as dt
from collections.abc import Callable
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from venue_calendar.config import CalendarSettings
from venue_calendar.models import BlockedRange, Booking
from venue_calendar.models.errors import ErrorCode, ToolError
from venue_calendar.services.availability import AvailabilityService
from venue_calendar.utils.dates import days_diff
from venue_calendar_api.dependencies import get_settings

__all__ = [
    "AvailabilityContext",
    "check_stay_length",
    "ErrorCode",
    "HealthResponse",
    "ToolError",
    "ValidationErrorDetail",
    "ValidationErrorResponse",
]


def check_stay_length(a: Optional[dt.date], b: Optional[dt.date]) -> None:
    """Refuse spans longer than the configured maximum stay.

    Raises:
        ValueError: If the two days are more than ``max_nights`` apart
    """
    if a is None or b is None:
        return
    max_nights = get_settings().max_nights
    if abs(days_diff(a, b)) > max_nights:
        raise ValueError(f"stay must not exceed {max_nights} nights")


class ValidationErrorDetail(BaseModel):
    """Detail of a single validation error."""

    loc: list[str | int] = Field(
        ...,
        description="Path to the field that failed validation",
        examples=[["body", "bookings", 0, "date_from"]],
    )
    msg: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Field required"],
    )
    type: str = Field(
        ...,
        description="Error type identifier",
        examples=["missing"],
    )


class ValidationErrorResponse(BaseModel):
    """Response format for request validation errors (HTTP 422)."""

    success: bool = False
    error_code: str = "ERR_VALIDATION"
    message: str = "Request validation failed"
    recovery: str = "Check the request parameters and try again"
    details: list[ValidationErrorDetail] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Service health and version."""

    status: str = "healthy"
    version: str
    environment: str


class AvailabilityContext(BaseModel):
    """Existing bookings and calendar policy for one venue."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "bookings": [
                        {"dateFrom": "2024-03-10T00:00:00.000Z", "dateTo": "2024-03-15T00:00:00.000Z"}
                    ],
                    "min_nights": 1,
                    "allow_past": False,
                    "highlighted_ranges": [],
                }
            ]
        },
    )

    bookings: list[Booking] = Field(
        default_factory=list,
        description="Existing bookings; dateTo is the checkout instant",
    )
    unavailable_ranges: list[BlockedRange] = Field(
        default_factory=list,
        description="Additional inclusive blocked ranges",
    )
    min_nights: Optional[int] = Field(
        default=None,
        description="Minimum stay length (defaults to the service setting)",
    )
    allow_past: Optional[bool] = Field(
        default=None,
        description="Whether past days are selectable (defaults to the service setting)",
    )
    highlighted_ranges: list[BlockedRange] = Field(
        default_factory=list,
        description="Ranges to emphasize without blocking them",
    )

    def to_service(
        self,
        settings: CalendarSettings,
        clock: Callable[[], dt.date],
    ) -> AvailabilityService:
        """Build the availability service described by this context."""
        return AvailabilityService(
            self.bookings,
            unavailable_ranges=self.unavailable_ranges,
            min_nights=settings.min_nights if self.min_nights is None else self.min_nights,
            allow_past=settings.allow_past if self.allow_past is None else self.allow_past,
            highlighted_ranges=self.highlighted_ranges,
            clock=clock,
        )
