"""Islamic prayer times following the Kemenag conventions."""

from .errors import InvalidDate, InvalidGeo, PolarEdgeCase, PrayerTimeError
from .prayer import (
    GeoParams,
    PrayerTimes,
    PrayerTimesRange,
    compute,
    compute_for,
    compute_range,
    compute_today,
)
from .space_time.calendar import CalendarDate, days_in_month, is_leap, next_day
from .space_time.rounding import format_hm, format_hms

__all__ = [
    "CalendarDate",
    "GeoParams",
    "InvalidDate",
    "InvalidGeo",
    "PolarEdgeCase",
    "PrayerTimeError",
    "PrayerTimes",
    "PrayerTimesRange",
    "compute",
    "compute_for",
    "compute_range",
    "compute_today",
    "days_in_month",
    "format_hm",
    "format_hms",
    "is_leap",
    "next_day",
]
