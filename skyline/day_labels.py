# ABOUTME: Relative day labels for forecast rows ("Today", "Tomorrow", "Wed").
# ABOUTME: Compares calendar dates against the viewer's local clock, not the location's timezone.

from datetime import date, datetime, timedelta

# en-US short weekday names, indexed by date.weekday()
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def format_day(value: str | date, today: date | None = None) -> str:
    """Label a forecast date relative to today.

    Args:
        value: ISO date ("2025-01-15") or datetime string, or a date.
        today: Reference date; defaults to the local calendar date.
    """
    day = _as_date(value)
    today = today or date.today()
    if day == today:
        return "Today"
    if day == today + timedelta(days=1):
        return "Tomorrow"
    return WEEKDAYS[day.weekday()]


def _as_date(value: str | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # Open-Meteo daily times are plain dates; tolerate full timestamps too
    return datetime.fromisoformat(value).date()
