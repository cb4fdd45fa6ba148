"""
Window calculator - trailing alert window and week-of-month bucket.
"""

from datetime import date, datetime
from typing import Any

from app.models.risk import QueryWindow
from app.services.errors import InvalidDate


# Fixed English abbreviations; strftime("%b") would follow the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

WINDOW_DAYS = 7
WEEK_BUCKETS = 4


def parse_reference_date(value: Any) -> date:
    """
    Parse a reference date given as a date, datetime or ISO "YYYY-MM-DD" string.

    Raises:
        InvalidDate: value is not a valid calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.strptime(text, "%Y-%m-%d").date()
        except ValueError:
            pass
    raise InvalidDate(f"Reference date {value!r} is not a valid YYYY-MM-DD date")


def compute_window(reference_date: Any) -> QueryWindow:
    """
    Compute the trailing window label and week bucket for a reference date.

    The window spans max(1, day - 6) through day of the same month, so early
    in the month it is shorter than seven days. Days 29-31 fold into the
    last bucket.

    Args:
        reference_date: date or ISO date string

    Returns:
        QueryWindow(window_label="4-10 Mar", week_bucket_index=1)

    Raises:
        InvalidDate: reference_date does not parse
    """
    ref = parse_reference_date(reference_date)
    day = ref.day

    start = max(1, day - (WINDOW_DAYS - 1))
    label = f"{start}-{day} {MONTH_ABBREVIATIONS[ref.month - 1]}"
    bucket = min((day - 1) // WINDOW_DAYS, WEEK_BUCKETS - 1)

    return QueryWindow(window_label=label, week_bucket_index=bucket)
