"""API-specific request/response models.

Domain models (DateRange, CalendarMonth, PriceSummary, ...) live in
venue_calendar.models and are reused here where appropriate.

Modules:
- common: Error wrappers, health response, shared availability context
- availability: Range check request/response
- calendar: Month grid request
- selection: Picker event request/response
"""

__all__: list[str] = []
