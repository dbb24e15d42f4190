"""Structured logging utilities with correlation ID support.

Provides:
- Correlation ID context management for request tracing
- Structured logging formatter for consistent log output
- Helper for logging range selection events

Usage:
    from venue_calendar.utils.logging import get_logger, set_correlation_id

    # In middleware/request handler:
    set_correlation_id(request.headers.get("X-Correlation-ID"))

    # In service code:
    logger = get_logger(__name__)
    logger.info("Building month", extra={"month": "2024-03"})
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Any

# Context variable for correlation ID - thread-safe and async-safe
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def generate_correlation_id() -> str:
    """Generate a new correlation ID.

    Returns:
        UUID-based correlation ID string
    """
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current request context.

    Args:
        correlation_id: Optional existing correlation ID. If None, generates new one.

    Returns:
        The correlation ID that was set
    """
    cid = correlation_id or generate_correlation_id()
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    """Get the current correlation ID."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "no-correlation-id"
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter for structured log output with correlation ID."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or "no-correlation-id"

        base = super().format(record)

        # Prefix for easy grep/filtering
        return f"[{record.correlation_id}] {base}"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with correlation ID support.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())

    return logger


def configure_logging(level: str | int = logging.INFO) -> None:
    """Install the structured formatter on the root logger.

    Safe to call more than once; existing structured handlers are reused.

    Args:
        level: Log level name or number
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if isinstance(handler.formatter, StructuredFormatter):
            return

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter(DEFAULT_FORMAT))
    handler.addFilter(CorrelationIdFilter())
    root.addHandler(handler)


def log_selection_event(
    logger: logging.Logger,
    outcome: str,
    *,
    day: Any = None,
    start: Any = None,
    end: Any = None,
    reason: str | None = None,
    **extra: Any,
) -> None:
    """Log a range selection event with structured context.

    Rejected picks are routine user behaviour and go to DEBUG,
    everything else to INFO.

    Args:
        logger: Logger instance
        outcome: Transition outcome (e.g., "started", "committed", "rejected")
        day: Day the event was about, if any
        start: Selection start after the event
        end: Selection end after the event
        reason: Rejection reason if the pick was rejected
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"outcome": outcome}

    if day is not None:
        context["day"] = str(day)
    if start is not None:
        context["start"] = str(start)
    if end is not None:
        context["end"] = str(end)
    if reason:
        context["reason"] = reason

    context.update(extra)

    msg_parts = [f"Selection event: {outcome}"]
    for key, value in context.items():
        if key != "outcome":
            msg_parts.append(f"{key}={value}")

    message = " | ".join(msg_parts)

    if outcome == "rejected":
        logger.debug(message, extra=context)
    else:
        logger.info(message, extra=context)
