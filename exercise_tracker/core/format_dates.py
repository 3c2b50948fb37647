"""Date Formatting — renders calendar dates the way existing clients expect.

Invariants:
    - Output is "Www Mmm dd yyyy" (e.g. "Mon Jan 01 2024"), always 15 characters
    - Day and month names are English regardless of process locale
"""

from datetime import date


_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_calendar_date(value: date) -> str:
    """Format a date as a human-readable calendar string."""
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )
