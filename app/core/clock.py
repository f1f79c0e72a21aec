"""UTC clock helpers.  Stored timestamps are timezone-aware UTC."""

import datetime


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def utc_today() -> datetime.date:
    """Current calendar date in UTC, the date check-ins are filed under."""
    return utc_now().date()
