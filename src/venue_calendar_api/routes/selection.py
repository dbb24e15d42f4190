"""Date picker transition endpoint.

Clients send the current selection and one event; the response is the next
state. Rejected picks come back with HTTP 200, the selection unchanged and
a ToolError describing why.
"""

import datetime as dt
from collections.abc import Callable

from fastapi import APIRouter, Depends

from venue_calendar.config import CalendarSettings
from venue_calendar.models import SelectionOutcome, ToolError, error_code_for_reason
from venue_calendar.services.selection import apply_event, preview_range
from venue_calendar.utils.logging import get_logger, log_selection_event
from venue_calendar_api.dependencies import get_clock, get_settings
from venue_calendar_api.models.selection import SelectionRequest, SelectionResponse

logger = get_logger(__name__)

router = APIRouter(tags=["selection"])


@router.post(
    "/selection/events",
    summary="Apply a picker event",
    description="""
Apply a pick, hover or clear event to the current selection.

**Notes:**
- The first pick sets check-in; the second commits the range
- Picking before check-in swaps the two days
- A pick on a committed range starts a new selection
- Hovering a blocked day keeps the previous hover
""",
    response_description="Next selection state",
    response_model=SelectionResponse,
)
async def apply_selection_event(
    body: SelectionRequest,
    settings: CalendarSettings = Depends(get_settings),
    clock: Callable[[], dt.date] = Depends(get_clock),
) -> SelectionResponse:
    service = body.to_service(settings, clock)
    result = apply_event(
        body.selection,
        body.event,
        service.is_blocked,
        min_nights=service.min_nights,
        hovered=body.hovered,
    )

    if result.outcome != SelectionOutcome.HOVERED:
        log_selection_event(
            logger,
            result.outcome.value,
            day=body.event.day,
            start=result.selection.start,
            end=result.selection.end,
            reason=result.reason.value if result.reason else None,
        )

    error = None
    if result.reason is not None:
        error = ToolError.from_code(
            error_code_for_reason(result.reason),
            {"reason": result.reason.value},
        )

    return SelectionResponse(
        **dict(result),
        state=result.selection.state,
        preview=preview_range(result.selection, result.hovered),
        error=error,
    )
