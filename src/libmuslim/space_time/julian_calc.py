"""Julian date calculation module.

This module converts Gregorian calendar dates to Julian dates using the Meeus
algorithm from "Astronomical Algorithms" (2nd ed.). The calendar is treated as
proleptic Gregorian; there is no handling of the 1582 calendar reform.
"""

from ..constants import HOURS_PER_DAY, JULIAN_EPOCH

# Precision for Julian dates (microsecond precision = 12 decimal places)
JD_PRECISION = 12


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a Gregorian date to Julian Day Number using Meeus algorithm.

    The Julian Day Number is the Julian Date of noon UTC on that day, so
    2000-01-01 maps to 2451545.

    Args:
        year: Year in Gregorian calendar (1 or later)
        month: Month in Gregorian calendar (1-12)
        day: Day in Gregorian calendar

    Returns:
        Julian Day Number
    """
    # Adjust month and year for the algorithm (Jan & Feb are 13 & 14 of prev year)
    if month <= 2:
        year -= 1
        month += 12

    # Calculate A and B terms for the Gregorian calendar
    a = year // 100
    b = 2 - a + (a // 4)

    # Calculate the Julian Day Number using Meeus formula
    jdn = int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + day + b - 1524
    return jdn


def local_midnight_julian_date(
    year: int, month: int, day: int, utc_offset: float = 0.0
) -> float:
    """Julian Date of local midnight, expressed on the UTC time scale.

    Local midnight at ``utc_offset`` hours east of Greenwich happens
    ``utc_offset`` hours before midnight UTC.

    Args:
        year: Year in Gregorian calendar
        month: Month in Gregorian calendar (1-12)
        day: Day in Gregorian calendar
        utc_offset: Local offset from UTC in decimal hours

    Returns:
        Julian Date (JD)
    """
    jdn = gregorian_to_jdn(year, month, day)

    # JDN is anchored at noon, step back half a day to reach 0h UTC
    jd = jdn - 0.5 - utc_offset / HOURS_PER_DAY

    return round(jd, JD_PRECISION)


def days_since_epoch(jd: float) -> float:
    """Return the number of days elapsed since J2000.0."""
    return jd - JULIAN_EPOCH
