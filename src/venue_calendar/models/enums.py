"""Enumeration types for venue calendar data models."""

from enum import Enum


class SelectionState(str, Enum):
    """State of a date range selection."""

    EMPTY = "empty"
    START_ONLY = "start_only"
    COMMITTED = "committed"


class SelectionEventType(str, Enum):
    """User interaction fed into the range selection state machine."""

    PICK = "pick"
    HOVER = "hover"
    CLEAR = "clear"


class SelectionOutcome(str, Enum):
    """Result of applying one selection event."""

    STARTED = "started"
    COMMITTED = "committed"
    REJECTED = "rejected"
    CLEARED = "cleared"
    HOVERED = "hovered"


class RejectReason(str, Enum):
    """Why a pick or a proposed range was refused."""

    DAY_BLOCKED = "day_blocked"
    BLOCKED_BETWEEN = "blocked_between"
    MINIMUM_NIGHTS_NOT_MET = "minimum_nights_not_met"
