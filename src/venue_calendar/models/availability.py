"""Availability check results and alternative date suggestions."""

import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import RejectReason


class AlternativeRange(BaseModel):
    """A nearby stay of the requested length that passes validation."""

    model_config = ConfigDict(frozen=True)

    check_in: dt.date
    check_out: dt.date
    nights: int = Field(..., ge=0)
    offset_days: int = Field(
        ...,
        description="Shift from the requested check-in (negative = earlier)",
    )
    direction: Literal["earlier", "later"]


class RangeCheck(BaseModel):
    """Validity of a proposed check-in/check-out range."""

    model_config = ConfigDict(frozen=True)

    check_in: dt.date
    check_out: dt.date
    nights: int = Field(..., ge=0)
    min_nights: int
    is_valid: bool
    reason: Optional[RejectReason] = None
    blocked_dates: list[dt.date] = Field(
        default_factory=list,
        description="Blocked days from check-in through checkout",
    )
    alternatives: list[AlternativeRange] = Field(default_factory=list)
