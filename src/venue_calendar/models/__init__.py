"""Pydantic models for venue calendar data entities."""

from .availability import AlternativeRange, RangeCheck
from .calendar import CalendarDay, CalendarMonth
from .date_range import BlockedRange, Booking, DateRange
from .enums import (
    RejectReason,
    SelectionEventType,
    SelectionOutcome,
    SelectionState,
)
from .errors import (
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    BookingError,
    ErrorCode,
    ToolError,
    error_code_for_reason,
)
from .pricing import PriceSummary
from .selection import SelectionEvent, SelectionResult

__all__ = [
    # Enums
    "RejectReason",
    "SelectionEventType",
    "SelectionOutcome",
    "SelectionState",
    # Ranges
    "BlockedRange",
    "Booking",
    "DateRange",
    # Availability
    "AlternativeRange",
    "RangeCheck",
    # Calendar
    "CalendarDay",
    "CalendarMonth",
    # Pricing
    "PriceSummary",
    # Selection
    "SelectionEvent",
    "SelectionResult",
    # Errors
    "BookingError",
    "ErrorCode",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "ToolError",
    "error_code_for_reason",
]
