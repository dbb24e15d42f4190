"""Standard error codes for the venue calendar.

The calendar core itself never raises for user input: rejected picks and
malformed booking ranges are silent. These codes cover the input boundary
(unparseable dates, bad month keys) and give API consumers a stable
vocabulary for rejection reasons.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .enums import RejectReason


class ErrorCode(str, Enum):
    """Standard error codes returned by the calendar API."""

    # Range validation (ERR_001-ERR_002)
    DATES_UNAVAILABLE = "ERR_001"
    MINIMUM_NIGHTS_NOT_MET = "ERR_002"

    # Input errors (ERR_INPUT_001-ERR_INPUT_002)
    INVALID_DATE = "ERR_INPUT_001"
    INVALID_MONTH = "ERR_INPUT_002"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DATES_UNAVAILABLE: "The requested dates are not available",
    ErrorCode.MINIMUM_NIGHTS_NOT_MET: "Minimum stay requirement not met",
    ErrorCode.INVALID_DATE: "Date is not a valid ISO-8601 date or date-time",
    ErrorCode.INVALID_MONTH: "Month is not valid, expected YYYY-MM",
}

# Recovery suggestions for callers
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.DATES_UNAVAILABLE: "Pick dates that avoid booked nights or use the suggested alternatives",
    ErrorCode.MINIMUM_NIGHTS_NOT_MET: "Extend the stay to the minimum number of nights",
    ErrorCode.INVALID_DATE: "Send dates as YYYY-MM-DD or full ISO-8601 date-times",
    ErrorCode.INVALID_MONTH: "Send the month as YYYY-MM (e.g., 2024-03)",
}

REJECT_REASON_TO_ERROR_CODE: dict[RejectReason, ErrorCode] = {
    RejectReason.DAY_BLOCKED: ErrorCode.DATES_UNAVAILABLE,
    RejectReason.BLOCKED_BETWEEN: ErrorCode.DATES_UNAVAILABLE,
    RejectReason.MINIMUM_NIGHTS_NOT_MET: ErrorCode.MINIMUM_NIGHTS_NOT_MET,
}


class ToolError(BaseModel):
    """Standard error response format.

    Returned by the API whenever a BookingError reaches the boundary.
    """

    model_config = ConfigDict(frozen=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ToolError":
        """Create a ToolError from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error

        Returns:
            A ToolError with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class BookingError(Exception):
    """Exception raised for invalid calendar input at the boundary.

    Can be caught and converted to a ToolError for API responses.
    """

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.details = details
        super().__init__(self.message)

    def to_tool_error(self) -> ToolError:
        """Convert this exception to a ToolError for API responses."""
        return ToolError.from_code(self.code, self.details)


def error_code_for_reason(reason: RejectReason) -> ErrorCode:
    """Map a selection rejection reason onto its public error code."""
    return REJECT_REASON_TO_ERROR_CODE[reason]
