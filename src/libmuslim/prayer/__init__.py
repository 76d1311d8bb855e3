"""Daily and ranged prayer time assembly."""

from .geo import GeoParams
from .times import PrayerTimes, assemble, compute, compute_for, compute_today
from .range import PrayerTimesRange, compute_range

__all__ = [
    "GeoParams",
    "PrayerTimes",
    "PrayerTimesRange",
    "assemble",
    "compute",
    "compute_for",
    "compute_range",
    "compute_today",
]
