"""Health check endpoint."""

from fastapi import APIRouter, Depends

from venue_calendar import __version__
from venue_calendar.config import CalendarSettings
from venue_calendar_api.dependencies import get_settings
from venue_calendar_api.models.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Service health",
    response_model=HealthResponse,
)
async def health(settings: CalendarSettings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(version=__version__, environment=settings.environment)
