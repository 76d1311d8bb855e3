"""Astronomical and Kemenag constants used by the prayer time calculation."""

from types import MappingProxyType
from typing import Mapping

# Julian Date of 2000-01-01 12:00 UTC (J2000.0)
JULIAN_EPOCH = 2451545.0

SUN_MEAN_ANOMALY_OFFSET = 357.529
SUN_MEAN_ANOMALY_RATE = 0.98560028

SUN_MEAN_LONGITUDE_OFFSET = 280.459
SUN_MEAN_LONGITUDE_RATE = 0.98564736

# Equation of centre amplitudes (degrees)
SUN_ECCENTRICITY_AMPLITUDE1 = 1.915
SUN_ECCENTRICITY_AMPLITUDE2 = 0.020

OBLIQUITY_COEFF = 23.439
OBLIQUITY_RATE = 0.00000036

DEGREES_PER_HOUR = 15.0
HOURS_PER_DAY = 24.0
MINUTES_PER_HOUR = 60.0

# Atmospheric refraction plus solar semi-diameter at sunrise/sunset (degrees)
REFRACTION_CORRECTION = 0.833

# Kemenag twilight depression angles (degrees below the horizon)
FAJR_ANGLE_KEMENAG = 20.0
ISHA_ANGLE_KEMENAG = 18.0

SHADOW_FACTOR_STANDARD = 1.0

# Dhuha window (minutes)
DHUHA_START_OFFSET = 28.0
DHUHA_END_OFFSET = 5.0

PRAYER_NAMES = ("fajr", "sunrise", "dhuha", "dhuhr", "asr", "maghrib", "isha")

# Ihtiyat (precautionary) adjustments in minutes. Dhuha has none of its own.
IHTIYAT_MINUTES: Mapping[str, float] = MappingProxyType(
    {
        "fajr": 2.0,
        "sunrise": -2.0,
        "dhuhr": 2.0,
        "asr": 2.0,
        "maghrib": 2.0,
        "isha": 2.0,
    }
)

# Widest real-world UTC offsets (UTC-12 to UTC+14) with a little slack
MAX_UTC_OFFSET_HOURS = 14.0
