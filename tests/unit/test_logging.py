"""Unit tests for structured logging helpers."""

import logging

import pytest

from venue_calendar.utils.logging import (
    CorrelationIdFilter,
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_selection_event,
    set_correlation_id,
)


@pytest.fixture(autouse=True)
def reset_correlation_id():
    clear_correlation_id()
    yield
    clear_correlation_id()


class TestCorrelationId:
    """Tests for correlation ID context management."""

    def test_set_generates_when_missing(self) -> None:
        """Should generate an ID when none is given."""
        cid = set_correlation_id()
        assert cid
        assert get_correlation_id() == cid

    def test_set_keeps_given_id(self) -> None:
        """Should keep an ID passed in by the caller."""
        assert set_correlation_id("req-123") == "req-123"
        assert get_correlation_id() == "req-123"

    def test_clear(self) -> None:
        """Should forget the current ID."""
        set_correlation_id("req-123")
        clear_correlation_id()
        assert get_correlation_id() is None


class TestFormatting:
    """Tests for the correlation-aware formatter and filter."""

    def test_formatter_prefixes_correlation_id(self) -> None:
        """Should prefix each line with the correlation ID."""
        set_correlation_id("req-42")
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)

        output = StructuredFormatter("%(message)s").format(record)

        assert output == "[req-42] hello"

    def test_filter_uses_placeholder(self) -> None:
        """Should fill a placeholder when no ID is set."""
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "no-correlation-id"

    def test_get_logger_adds_filter_once(self) -> None:
        """Should not stack filters on repeated lookups."""
        logger = get_logger("venue_calendar.tests.once")
        get_logger("venue_calendar.tests.once")

        filters = [f for f in logger.filters if isinstance(f, CorrelationIdFilter)]
        assert len(filters) == 1


class TestLogSelectionEvent:
    """Tests for selection event logging."""

    def test_commit_logged_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        """Should log state changes at INFO with structured fields."""
        logger = get_logger("venue_calendar.tests.selection")

        with caplog.at_level(logging.DEBUG, logger="venue_calendar.tests.selection"):
            log_selection_event(logger, "committed", day="2024-03-18", start="2024-03-15", end="2024-03-18")

        [record] = caplog.records
        assert record.levelno == logging.INFO
        assert "Selection event: committed" in record.getMessage()
        assert "start=2024-03-15" in record.getMessage()
        assert record.outcome == "committed"

    def test_rejection_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Should log rejected picks at DEBUG."""
        logger = get_logger("venue_calendar.tests.selection")

        with caplog.at_level(logging.DEBUG, logger="venue_calendar.tests.selection"):
            log_selection_event(logger, "rejected", day="2024-03-12", reason="day_blocked")

        [record] = caplog.records
        assert record.levelno == logging.DEBUG
        assert record.reason == "day_blocked"
