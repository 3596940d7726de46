# src/utils/date_utils.py
"""
Calendar helpers shared by the date generators.

An "instant" here is always a timezone-aware UTC datetime truncated to whole
seconds. Year arithmetic goes through dateutil's relativedelta so month
lengths and leap years are respected (Feb 29 + 1 year -> Feb 28).
"""

from datetime import datetime, timedelta, timezone
from dateutil.relativedelta import relativedelta

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
MIN_YEAR = 1
MAX_YEAR = 9999


def to_instant(value):
    """
    Normalise a datetime, epoch seconds or ISO string into a UTC instant.
    Naive datetimes are taken to already be in UTC.
    """
    if isinstance(value, str):
        return parse_instant(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return from_timestamp(int(value))
    if not isinstance(value, datetime):
        raise TypeError(f"Cannot interpret {value!r} as an instant.")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).replace(microsecond=0)


def from_timestamp(seconds):
    """Epoch seconds -> instant. Works for negative (pre-1970) values too."""
    return EPOCH + timedelta(seconds=int(seconds))


def to_timestamp(instant):
    return (to_instant(instant) - EPOCH) // timedelta(seconds=1)


def shift_years(instant, years):
    """Move an instant by whole calendar years, clamping Feb 29 when needed."""
    return instant + relativedelta(years=years)


def shift_days(instant, days):
    return instant + timedelta(days=days)


def seconds_between(start, end):
    return (end - start) // timedelta(seconds=1)


def year_start(year):
    return datetime(year, 1, 1, tzinfo=timezone.utc)


def year_end(year):
    """Last whole second of the given year."""
    return datetime(year, 12, 31, 23, 59, 59, tzinfo=timezone.utc)


def format_iso(instant):
    # strftime does not zero pad years below 1000 on every platform
    return (
        f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}"
        f"T{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}Z"
    )


def format_timestamp(instant):
    return str(to_timestamp(instant))


def parse_instant(text):
    """
    Parse either rendering back into an instant: a (possibly negative) run of
    digits is epoch seconds, anything else must match YYYY-MM-DDTHH:MM:SSZ.
    """
    text = text.strip()
    if text.lstrip("-").isdigit():
        return from_timestamp(int(text))
    return datetime.strptime(text, ISO_FORMAT).replace(tzinfo=timezone.utc)


def age_on(birth, now):
    """Completed years between birth and now."""
    return relativedelta(to_instant(now), to_instant(birth)).years
