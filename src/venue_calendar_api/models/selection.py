"""API models for picker events."""

import datetime as dt
from typing import Optional

from pydantic import Field, model_validator

from venue_calendar.models import (
    DateRange,
    SelectionEvent,
    SelectionEventType,
    SelectionResult,
    SelectionState,
)
from venue_calendar.models.errors import ToolError

from .common import AvailabilityContext, check_stay_length


class SelectionRequest(AvailabilityContext):
    """Current picker state, one event and the venue's availability context."""

    selection: DateRange = Field(default_factory=DateRange)
    hovered: Optional[dt.date] = None
    event: SelectionEvent

    @model_validator(mode="after")
    def limit_stay_length(self) -> "SelectionRequest":
        """A pick that would commit is checked against the maximum stay."""
        if self.event.type == SelectionEventType.PICK and self.selection.end is None:
            check_stay_length(self.selection.start, self.event.day)
        return self


class SelectionResponse(SelectionResult):
    """Next picker state after the event."""

    state: SelectionState
    preview: Optional[DateRange] = Field(
        default=None,
        description="Span between start and hovered day while choosing checkout",
    )
    error: Optional[ToolError] = None
