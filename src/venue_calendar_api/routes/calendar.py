"""Month grid endpoint.

The request body carries the venue's bookings and the picker state, so the
endpoint is stateless; the response is the same 42-cell grid the date
picker renders.
"""

import datetime as dt
from collections.abc import Callable

from fastapi import APIRouter, Depends

from venue_calendar.config import CalendarSettings
from venue_calendar.models import CalendarMonth
from venue_calendar.services.calendar_grid import build_month, parse_month
from venue_calendar_api.dependencies import get_clock, get_settings
from venue_calendar_api.models.calendar import CalendarRequest

router = APIRouter(tags=["calendar"])


@router.post(
    "/calendar/{month}",
    summary="Render a month grid",
    description="""
Render one month as six Monday-first weeks (42 days).

Each day carries selection, preview, blocked and highlight flags.
Counts cover days of the requested month only.

**Notes:**
- Month format: YYYY-MM (e.g., 2024-03)
- Booking dateTo is the checkout instant; that day stays free
""",
    response_description="42-day grid with per-day flags",
    response_model=CalendarMonth,
    responses={
        400: {"description": "Invalid month format (expected YYYY-MM)"},
    },
)
async def get_calendar(
    month: str,
    body: CalendarRequest,
    settings: CalendarSettings = Depends(get_settings),
    clock: Callable[[], dt.date] = Depends(get_clock),
) -> CalendarMonth:
    first = parse_month(month)
    service = body.to_service(settings, clock)

    return build_month(
        first,
        service.is_blocked,
        selection=body.selection,
        hovered=body.hovered,
        is_highlighted=service.is_highlighted,
        today=clock(),
    )
