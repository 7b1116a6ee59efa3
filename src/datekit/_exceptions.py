class CalendarError(ValueError):
    """Raised when a calendar cannot compute a requested date, interval or range."""
