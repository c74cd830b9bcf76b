"""Calendar-day bucketing shared by token assignment and day queries.

Appointments are grouped by the UTC calendar day of their date. Stored
values are naive datetimes in UTC, so the bounds returned here are naive
as well.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Tuple, Union


def to_calendar_day(value: Union[date, datetime]) -> date:
    """Reduce a date or datetime to its UTC calendar day.

    Naive datetimes are taken to already be in UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def day_bounds(value: Union[date, datetime]) -> Tuple[datetime, datetime]:
    """Return the half-open range ``[day_start, day_end)`` covering the day."""
    day_start = datetime.combine(to_calendar_day(value), time.min)
    return day_start, day_start + timedelta(days=1)
