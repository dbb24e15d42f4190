"""API routes package.

Routers are organized by domain:

- health: Health check endpoint
- calendar: Month grid rendering
- availability: Range validation and alternative dates
- selection: Date picker state transitions
- pricing: Stay price summaries

All routers are registered in main.py with /api prefix.
"""

from venue_calendar_api.routes.availability import router as availability_router
from venue_calendar_api.routes.calendar import router as calendar_router
from venue_calendar_api.routes.health import router as health_router
from venue_calendar_api.routes.pricing import router as pricing_router
from venue_calendar_api.routes.selection import router as selection_router

__all__ = [
    "availability_router",
    "calendar_router",
    "health_router",
    "pricing_router",
    "selection_router",
]
