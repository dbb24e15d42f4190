"""Venue booking calendar: availability, range selection, month grid and pricing."""

__version__ = "0.1.0"
