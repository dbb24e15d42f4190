"""FastAPI application for the venue calendar REST API.

Exposes the calendar core over HTTP:
- Health checks
- Month grids, range checks, picker transitions and price summaries

Every request carries the venue's bookings; the service keeps no state
between requests.
"""

from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from venue_calendar import __version__
from venue_calendar.utils.logging import configure_logging, get_logger
from venue_calendar_api.dependencies import get_settings
from venue_calendar_api.exceptions import register_exception_handlers
from venue_calendar_api.middleware import CorrelationIdMiddleware
from venue_calendar_api.routes import (
    availability_router,
    calendar_router,
    health_router,
    pricing_router,
    selection_router,
)

settings = get_settings()
configure_logging(settings.log_level)
logger = get_logger(__name__)

app = FastAPI(
    title="Venue Calendar API",
    description="Date availability, range selection and booking price summaries",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

# Register exception handlers for consistent error responses
register_exception_handlers(app)

app.include_router(health_router, prefix="/api")
app.include_router(calendar_router, prefix="/api")
app.include_router(availability_router, prefix="/api")
app.include_router(selection_router, prefix="/api")
app.include_router(pricing_router, prefix="/api")


@app.get("/api/ping")
async def ping() -> dict[str, Any]:
    """Liveness check at /api/ping."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "venue-calendar-api",
    }


# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Run the FastAPI server.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to listen on (default: 8080)
        reload: Enable hot reload for development (default: True)
    """
    import uvicorn

    logger.info("Starting venue calendar API on %s:%s (%s)", host, port, settings.environment)
    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run(
            "venue_calendar_api.main:app",
            host=host,
            port=port,
            reload=True,
            reload_dirs=["src"],
        )
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
