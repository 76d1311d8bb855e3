"""Low-precision apparent position of the sun.

The formulas are the short series published in the Astronomical Almanac
(accurate to about 0.01 degrees between 1950 and 2050). Angles are kept in
degrees; conversion to radians happens only at the trigonometric calls.
"""

import math
from dataclasses import dataclass

from ..constants import (
    DEGREES_PER_HOUR,
    HOURS_PER_DAY,
    OBLIQUITY_COEFF,
    OBLIQUITY_RATE,
    SUN_ECCENTRICITY_AMPLITUDE1,
    SUN_ECCENTRICITY_AMPLITUDE2,
    SUN_MEAN_ANOMALY_OFFSET,
    SUN_MEAN_ANOMALY_RATE,
    SUN_MEAN_LONGITUDE_OFFSET,
    SUN_MEAN_LONGITUDE_RATE,
)
from ..space_time.julian_calc import days_since_epoch


@dataclass(frozen=True)
class SolarState:
    """Solar quantities for a single instant."""

    julian_date: float
    mean_anomaly: float  # degrees
    mean_longitude: float  # degrees
    ecliptic_longitude: float  # degrees
    obliquity: float  # degrees
    declination: float  # degrees
    equation_of_time: float  # hours, apparent minus mean solar time


def normalize_angle(angle: float) -> float:
    """Normalize an angle to the range [0, 360)."""
    return angle % 360.0


def normalize_hours(hours: float) -> float:
    """Wrap an hour difference into the range (-12, 12]."""
    while hours > HOURS_PER_DAY / 2:
        hours -= HOURS_PER_DAY
    while hours <= -HOURS_PER_DAY / 2:
        hours += HOURS_PER_DAY
    return hours


def solar_position(julian_date: float) -> SolarState:
    """Compute the sun's position for a Julian Date.

    Args:
        julian_date: Julian Date on the UTC time scale

    Returns:
        SolarState with declination and equation of time
    """
    d = days_since_epoch(julian_date)

    mean_anomaly = normalize_angle(SUN_MEAN_ANOMALY_OFFSET + SUN_MEAN_ANOMALY_RATE * d)
    mean_longitude = normalize_angle(
        SUN_MEAN_LONGITUDE_OFFSET + SUN_MEAN_LONGITUDE_RATE * d
    )

    m = math.radians(mean_anomaly)
    ecliptic_longitude = (
        mean_longitude
        + SUN_ECCENTRICITY_AMPLITUDE1 * math.sin(m)
        + SUN_ECCENTRICITY_AMPLITUDE2 * math.sin(2 * m)
    )
    obliquity = OBLIQUITY_COEFF - OBLIQUITY_RATE * d

    lam = math.radians(ecliptic_longitude)
    eps = math.radians(obliquity)

    declination = math.degrees(math.asin(math.sin(eps) * math.sin(lam)))

    # Right ascension, brought onto the same [0, 360) turn as the mean longitude
    right_ascension = normalize_angle(
        math.degrees(math.atan2(math.cos(eps) * math.sin(lam), math.cos(lam)))
    )
    equation_of_time = normalize_hours(
        (mean_longitude - right_ascension) / DEGREES_PER_HOUR
    )

    return SolarState(
        julian_date=julian_date,
        mean_anomaly=mean_anomaly,
        mean_longitude=mean_longitude,
        ecliptic_longitude=ecliptic_longitude,
        obliquity=obliquity,
        declination=declination,
        equation_of_time=equation_of_time,
    )
