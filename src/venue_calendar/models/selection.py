"""Range selection events and transition results."""

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .date_range import DateRange, coerce_day
from .enums import RejectReason, SelectionEventType, SelectionOutcome


class SelectionEvent(BaseModel):
    """One user interaction with the date picker.

    ``day`` is required for PICK, optional for HOVER (None ends the
    hover) and ignored for CLEAR.
    """

    model_config = ConfigDict(frozen=True)

    type: SelectionEventType
    day: Optional[dt.date] = None

    @field_validator("day", mode="before")
    @classmethod
    def normalize_day(cls, v: Any) -> Any:
        return coerce_day(v)

    @model_validator(mode="after")
    def require_day_for_pick(self) -> "SelectionEvent":
        if self.type == SelectionEventType.PICK and self.day is None:
            raise ValueError("pick requires a day")
        return self

    @classmethod
    def pick(cls, day: dt.date) -> "SelectionEvent":
        return cls(type=SelectionEventType.PICK, day=day)

    @classmethod
    def hover(cls, day: Optional[dt.date]) -> "SelectionEvent":
        return cls(type=SelectionEventType.HOVER, day=day)

    @classmethod
    def clear(cls) -> "SelectionEvent":
        return cls(type=SelectionEventType.CLEAR)


class SelectionResult(BaseModel):
    """Outcome of applying one event to a selection."""

    model_config = ConfigDict(frozen=True)

    selection: DateRange
    hovered: Optional[dt.date] = None
    outcome: SelectionOutcome
    reason: Optional[RejectReason] = None
    close: bool = Field(
        default=False,
        description="True when a range was committed and the picker should close",
    )

    @property
    def changed(self) -> bool:
        return self.outcome in (
            SelectionOutcome.STARTED,
            SelectionOutcome.COMMITTED,
            SelectionOutcome.CLEARED,
        )
