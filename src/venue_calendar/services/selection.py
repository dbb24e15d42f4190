"""Range selection state machine for the check-in/check-out picker.

A selection moves EMPTY -> START_ONLY -> COMMITTED as days are picked. The
first pick sets check-in; the second either commits the stay (closing the
picker) or is rejected without any state change. Picking before the
current start flips the roles: the earlier day becomes check-in and the old
start becomes checkout. A pick on a committed range starts over.

``apply_event`` is the single transition function; ``RangeSelector`` owns
one selection and wires the transitions to change/close callbacks.
"""

import datetime as dt
from collections.abc import Callable
from typing import Optional

from venue_calendar.models import (
    DateRange,
    RejectReason,
    SelectionEvent,
    SelectionEventType,
    SelectionOutcome,
    SelectionResult,
    SelectionState,
)
from venue_calendar.utils.dates import clamp_to_day, in_preview_range, to_day
from venue_calendar.utils.logging import get_logger, log_selection_event

from .availability import DayPredicate, check_stay

logger = get_logger(__name__)


def _rejected(
    selection: DateRange,
    hovered: Optional[dt.date],
    reason: RejectReason,
) -> SelectionResult:
    return SelectionResult(
        selection=selection,
        hovered=hovered,
        outcome=SelectionOutcome.REJECTED,
        reason=reason,
    )


def _handle_pick(
    selection: DateRange,
    day: dt.date,
    is_blocked: DayPredicate,
    min_nights: int,
    hovered: Optional[dt.date],
) -> SelectionResult:
    start = selection.start

    # Nothing picked yet, or a committed range: start over
    if start is None or selection.end is not None:
        if is_blocked(day):
            return _rejected(selection, hovered, RejectReason.DAY_BLOCKED)
        return SelectionResult(
            selection=DateRange(start=day),
            hovered=hovered,
            outcome=SelectionOutcome.STARTED,
        )

    # The picker never offers blocked days, so a blocked check-in is refused
    # even when it arrives through a flip.
    if day < start and is_blocked(day):
        return _rejected(selection, hovered, RejectReason.DAY_BLOCKED)

    reason = check_stay(day, start, is_blocked, min_nights)
    if reason is not None:
        return _rejected(selection, hovered, reason)

    return SelectionResult(
        selection=DateRange.between(day, start),
        hovered=hovered,
        outcome=SelectionOutcome.COMMITTED,
        close=True,
    )


def apply_event(
    selection: DateRange,
    event: SelectionEvent,
    is_blocked: DayPredicate,
    min_nights: int = 1,
    hovered: Optional[dt.date] = None,
) -> SelectionResult:
    """Apply one picker event to a selection.

    Rejections leave the selection untouched and carry the reason; they are
    never raised.

    Args:
        selection: Current selection
        event: Pick, hover or clear
        is_blocked: Blocked-day predicate for the venue
        min_nights: Minimum stay length (<= 0 allows same-day stays)
        hovered: Currently hovered day, carried through

    Returns:
        SelectionResult with the next selection and hover state
    """
    if event.type == SelectionEventType.CLEAR:
        return SelectionResult(
            selection=DateRange.empty(),
            outcome=SelectionOutcome.CLEARED,
        )

    if event.type == SelectionEventType.HOVER:
        day = clamp_to_day(event.day)
        if day is not None and is_blocked(day):
            day = hovered
        return SelectionResult(
            selection=selection,
            hovered=day,
            outcome=SelectionOutcome.HOVERED,
        )

    return _handle_pick(selection, to_day(event.day), is_blocked, min_nights, hovered)


def preview_range(selection: DateRange, hovered: Optional[dt.date]) -> Optional[DateRange]:
    """Span between the chosen start and the hovered day, while choosing checkout."""
    if selection.state != SelectionState.START_ONLY or hovered is None:
        return None
    return DateRange.between(selection.start, hovered)


class RangeSelector:
    """Owns one date range selection and applies picker events to it.

    Args:
        is_blocked: Blocked-day predicate for the venue
        min_nights: Minimum stay length
        initial: Selection to resume from (defaults to empty)
        on_change: Called with the new selection whenever it changes
        on_close: Called when a range is committed
    """

    def __init__(
        self,
        is_blocked: DayPredicate,
        min_nights: int = 1,
        initial: Optional[DateRange] = None,
        on_change: Optional[Callable[[DateRange], None]] = None,
        on_close: Optional[Callable[[], None]] = None,
    ) -> None:
        self.is_blocked = is_blocked
        self.min_nights = min_nights
        self._selection = initial or DateRange.empty()
        self._hovered: Optional[dt.date] = None
        self.on_change = on_change
        self.on_close = on_close

    @property
    def selection(self) -> DateRange:
        return self._selection

    @property
    def state(self) -> SelectionState:
        return self._selection.state

    @property
    def hovered(self) -> Optional[dt.date]:
        return self._hovered

    @property
    def preview(self) -> Optional[DateRange]:
        return preview_range(self._selection, self._hovered)

    def is_in_preview(self, day: dt.date) -> bool:
        if self.state != SelectionState.START_ONLY:
            return False
        return in_preview_range(day, self._selection.start, self._hovered)

    def dispatch(self, event: SelectionEvent) -> SelectionResult:
        """Apply an event and notify callbacks."""
        previous = self._selection
        result = apply_event(
            previous,
            event,
            self.is_blocked,
            min_nights=self.min_nights,
            hovered=self._hovered,
        )
        self._selection = result.selection
        self._hovered = result.hovered

        if result.outcome != SelectionOutcome.HOVERED:
            log_selection_event(
                logger,
                result.outcome.value,
                day=event.day,
                start=result.selection.start,
                end=result.selection.end,
                reason=result.reason.value if result.reason else None,
            )

        if self.on_change is not None and result.selection != previous:
            self.on_change(result.selection)
        if result.close and self.on_close is not None:
            self.on_close()

        return result

    def pick(self, day: dt.date) -> SelectionResult:
        return self.dispatch(SelectionEvent.pick(day))

    def hover(self, day: Optional[dt.date]) -> SelectionResult:
        return self.dispatch(SelectionEvent.hover(day))

    def clear(self) -> SelectionResult:
        return self.dispatch(SelectionEvent.clear())
