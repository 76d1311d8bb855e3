"""Rounding and formatting of decimal-hour clock times."""

import math
from typing import Tuple

from ..constants import HOURS_PER_DAY, MINUTES_PER_HOUR


def _round_half_up(value: float) -> int:
    # .5 and above rounds up, like round_to_nearest_minute on datetimes
    return int(math.floor(value + 0.5))


def split_hm(hours: float) -> Tuple[int, int]:
    """Split decimal hours into (hour, minute), rounding to the nearest minute.

    Whole hours are truncated before the minute is rounded; a minute that
    rounds to 60 carries into the hour, and the hour wraps modulo 24.
    """
    hours = hours % HOURS_PER_DAY
    hour = int(hours)
    minute = _round_half_up((hours - hour) * MINUTES_PER_HOUR)
    if minute >= 60:
        minute -= 60
        hour += 1
    return hour % 24, minute


def split_hms(hours: float) -> Tuple[int, int, int]:
    """Split decimal hours into (hour, minute, second), rounding the second."""
    hours = hours % HOURS_PER_DAY
    hour = int(hours)
    minutes = (hours - hour) * MINUTES_PER_HOUR
    minute = int(minutes)
    second = _round_half_up((minutes - minute) * 60)

    # Carry seconds into minutes, and minutes into hours
    if second >= 60:
        second -= 60
        minute += 1
    if minute >= 60:
        minute -= 60
        hour += 1
    return hour % 24, minute, second


def format_hm(hours: float) -> str:
    """Format decimal hours as ``HH:MM``."""
    hour, minute = split_hm(hours)
    return f"{hour:02d}:{minute:02d}"


def format_hms(hours: float) -> str:
    """Format decimal hours as ``HH:MM:SS``."""
    hour, minute, second = split_hms(hours)
    return f"{hour:02d}:{minute:02d}:{second:02d}"


def parse_hm(text: str) -> float:
    """Parse ``HH:MM`` or ``HH:MM:SS`` back into decimal hours.

    Raises:
        ValueError: If the text is not a clock time
    """
    parts = text.strip().split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid clock time: {text}")
    values = [int(part) for part in parts]
    hour, minute = values[0], values[1]
    second = values[2] if len(values) == 3 else 0
    if not (0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 60):
        raise ValueError(f"Invalid clock time: {text}")
    return hour + minute / MINUTES_PER_HOUR + second / 3600.0
