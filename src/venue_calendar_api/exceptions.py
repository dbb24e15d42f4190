"""FastAPI exception handlers for converting domain errors to HTTP responses.

BookingError becomes a ToolError JSON body; request validation failures
become a ValidationErrorResponse. Status mapping:
- 400 Bad Request: malformed dates or month keys
- 422 Unprocessable Entity: request body/query validation

Usage:
    from venue_calendar_api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from venue_calendar.models.errors import BookingError, ErrorCode
from venue_calendar.utils.logging import get_logger
from venue_calendar_api.models.common import ValidationErrorDetail, ValidationErrorResponse

logger = get_logger(__name__)

# Map raised ErrorCodes to HTTP status codes. Rejection codes are never
# raised; they travel inside 200 responses.
ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_DATE: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_MONTH: HTTP_400_BAD_REQUEST,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode, defaulting to 400."""
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    """Convert BookingError to a ToolError JSON response.

    Args:
        request: The incoming request
        exc: The BookingError exception

    Returns:
        JSONResponse with error details and appropriate status code.
    """
    status_code = get_http_status_for_error(exc.code)
    logger.warning(
        "Request rejected: %s %s -> %s",
        request.method,
        request.url.path,
        exc.code.value,
    )

    return JSONResponse(
        status_code=status_code,
        content=exc.to_tool_error().model_dump(mode="json"),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Wrap FastAPI validation errors in the standard error structure."""
    details = [
        ValidationErrorDetail(
            loc=[part if isinstance(part, (str, int)) else str(part) for part in err.get("loc", ())],
            msg=str(err.get("msg", "")),
            type=str(err.get("type", "")),
        )
        for err in exc.errors()
    ]

    return JSONResponse(
        status_code=422,
        content=ValidationErrorResponse(details=details).model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(BookingError, booking_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
