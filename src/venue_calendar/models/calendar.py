"""Calendar grid models for month rendering."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class CalendarDay(BaseModel):
    """Single cell of a month grid with its display flags."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    is_current_month: bool = Field(
        default=True,
        description="False for leading/trailing days of adjacent months",
    )
    is_start: bool = False
    is_end: bool = False
    is_selected: bool = Field(
        default=False,
        description="Day is the selection start or end",
    )
    is_in_range: bool = False
    is_in_preview: bool = Field(
        default=False,
        description="Between the selection start and the hovered day",
    )
    is_blocked: bool = False
    is_highlighted: bool = Field(
        default=False,
        description="Visually emphasized without being blocked",
    )
    is_today: bool = False


class CalendarMonth(BaseModel):
    """Six-week Monday-first grid for one month."""

    model_config = ConfigDict(frozen=True)

    month: str = Field(..., description="Month key (YYYY-MM)", examples=["2024-03"])
    days: list[CalendarDay] = Field(..., min_length=42, max_length=42)
    blocked_count: int = Field(
        default=0,
        ge=0,
        description="Blocked days within the month itself",
    )
    available_count: int = Field(
        default=0,
        ge=0,
        description="Selectable days within the month itself",
    )
