"""Date and time utilities."""

from datetime import date, datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_iso_timestamp(moment: Optional[datetime] = None) -> str:
    """Render a datetime as ISO-8601 UTC with millisecond precision and a Z suffix."""
    moment = moment or utc_now()
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def format_date(day: Optional[date] = None) -> str:
    """Render a date as YYYY-MM-DD, defaulting to today in UTC."""
    day = day or utc_now().date()
    return day.strftime('%Y-%m-%d')
