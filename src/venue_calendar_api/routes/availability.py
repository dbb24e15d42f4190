"""Range availability endpoint.

Validates a proposed stay with the same rules the date picker applies and
suggests nearby stays of the same length when it isn't bookable.
"""

import datetime as dt
from collections.abc import Callable

from fastapi import APIRouter, Depends

from venue_calendar.config import CalendarSettings
from venue_calendar.models import ToolError, error_code_for_reason
from venue_calendar_api.dependencies import get_clock, get_settings
from venue_calendar_api.models.availability import RangeCheckRequest, RangeCheckResponse

router = APIRouter(tags=["availability"])


@router.post(
    "/availability/check",
    summary="Check a date range",
    description="""
Check whether a check-in/check-out range can be booked.

Returns validity, the rejection reason, blocked days within the range and
up to three alternatives shifted earlier or later.

**Notes:**
- Dates are in YYYY-MM-DD format
- check_out is exclusive (last night is check_out - 1 day)
- Ranges given in reverse order are reordered
- No alternatives are suggested for minimum-stay failures
""",
    response_description="Range validity with alternatives",
    response_model=RangeCheckResponse,
    responses={
        200: {
            "description": "Range checked",
            "content": {
                "application/json": {
                    "example": {
                        "check_in": "2024-03-09",
                        "check_out": "2024-03-12",
                        "nights": 3,
                        "min_nights": 1,
                        "is_valid": False,
                        "reason": "blocked_between",
                        "blocked_dates": ["2024-03-10", "2024-03-11", "2024-03-12"],
                        "alternatives": [
                            {
                                "check_in": "2024-03-06",
                                "check_out": "2024-03-09",
                                "nights": 3,
                                "offset_days": -3,
                                "direction": "earlier",
                            }
                        ],
                        "error": {
                            "success": False,
                            "error_code": "ERR_001",
                            "message": "The requested dates are not available",
                            "recovery": "Pick dates that avoid booked nights or use the suggested alternatives",
                            "details": None,
                        },
                    }
                }
            },
        },
    },
)
async def check_range(
    body: RangeCheckRequest,
    settings: CalendarSettings = Depends(get_settings),
    clock: Callable[[], dt.date] = Depends(get_clock),
) -> RangeCheckResponse:
    service = body.to_service(settings, clock)
    check = service.check_range(
        body.check_in,
        body.check_out,
        suggest=body.suggest_alternatives,
    )

    error = None
    if check.reason is not None:
        error = ToolError.from_code(
            error_code_for_reason(check.reason),
            {"reason": check.reason.value},
        )

    return RangeCheckResponse(**dict(check), error=error)
