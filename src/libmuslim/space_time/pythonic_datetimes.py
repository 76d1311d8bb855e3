from datetime import date, datetime, timedelta, tzinfo

import pytz

from ..constants import HOURS_PER_DAY


def fixed_offset_timezone(utc_offset: float) -> tzinfo:
    """Return a fixed-offset timezone for an offset in decimal hours.

    Args:
        utc_offset: Offset from UTC in hours, e.g. 7 or 5.5

    Returns:
        tzinfo: ``pytz.UTC`` for a zero offset, otherwise a ``pytz.FixedOffset``
    """
    minutes = int(round(utc_offset * 60))
    if minutes == 0:
        return pytz.UTC
    return pytz.FixedOffset(minutes)


def hours_to_datetime(day: date, hours: float, utc_offset: float) -> datetime:
    """Convert a local decimal-hour clock time on ``day`` into an aware datetime.

    Args:
        day: Local calendar date
        hours: Local clock time in decimal hours, in [0, 24)
        utc_offset: Offset from UTC in hours

    Returns:
        datetime: Timezone-aware datetime, rounded to the nearest second
    """
    seconds = int(round((hours % HOURS_PER_DAY) * 3600))
    midnight = datetime(day.year, day.month, day.day)
    local = midnight + timedelta(seconds=seconds)
    return fixed_offset_timezone(utc_offset).localize(local)


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(pytz.UTC)


def local_today(utc_offset: float) -> date:
    """Return the current calendar date on a clock running at ``utc_offset``.

    Args:
        utc_offset: Offset from UTC in hours

    Returns:
        date: Today's date at that offset, which can differ from the host's date
    """
    return utc_now().astimezone(fixed_offset_timezone(utc_offset)).date()
