"""Date arithmetic and logging helpers."""
