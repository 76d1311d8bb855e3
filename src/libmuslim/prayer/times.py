"""Daily prayer times following the Kemenag conventions."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Tuple

from ..constants import (
    DEGREES_PER_HOUR,
    DHUHA_END_OFFSET,
    DHUHA_START_OFFSET,
    FAJR_ANGLE_KEMENAG,
    HOURS_PER_DAY,
    IHTIYAT_MINUTES,
    ISHA_ANGLE_KEMENAG,
    MINUTES_PER_HOUR,
    PRAYER_NAMES,
    REFRACTION_CORRECTION,
)
from ..errors import PolarEdgeCase
from ..logging import get_logger
from ..solar.hour_angle import asr_altitude, hour_angle
from ..solar.position import solar_position
from ..space_time.calendar import CalendarDate
from ..space_time.julian_calc import local_midnight_julian_date
from ..space_time.pythonic_datetimes import hours_to_datetime, local_today
from ..space_time.rounding import format_hm, format_hms, split_hm
from .geo import GeoParams

logger = get_logger(__name__)

_DHUHR_INDEX = PRAYER_NAMES.index("dhuhr")


@dataclass(frozen=True)
class PrayerTimes:
    """The seven daily times as local decimal hours in [0, 24).

    ``clamped`` names the prayers whose hour angle could not be solved
    because the sun never reaches the required altitude that day.
    """

    fajr: float
    sunrise: float
    dhuha: float
    dhuhr: float
    asr: float
    maghrib: float
    isha: float
    date: Optional[CalendarDate] = None
    utc_offset: float = 0.0
    clamped: Tuple[str, ...] = field(default=())

    def as_dict(self) -> Dict[str, float]:
        """Return the seven times keyed by prayer name."""
        values = asdict(self)
        return {name: values[name] for name in PRAYER_NAMES}

    def is_ordered(self) -> bool:
        """True if fajr <= sunrise <= ... <= isha."""
        values = [getattr(self, name) for name in PRAYER_NAMES]
        return all(a <= b for a, b in zip(values, values[1:]))

    def clock_times(self) -> Dict[str, Tuple[int, int]]:
        """Return (hour, minute) pairs rounded to the nearest minute."""
        return {name: split_hm(value) for name, value in self.as_dict().items()}

    def as_datetimes(self) -> Dict[str, datetime]:
        """Return timezone-aware datetimes for each prayer.

        Dhuhr falls on the record's own date. The other prayers are placed
        relative to it, so a time that wrapped past midnight lands on the
        neighbouring day: a clamped Isha at 00:24 is the early morning of the
        next day, not the start of this one.

        Raises:
            ValueError: If the times are not attached to a date
        """
        if self.date is None:
            raise ValueError("PrayerTimes has no date attached")
        noon = hours_to_datetime(self.date.to_date(), self.dhuhr, self.utc_offset)
        result: Dict[str, datetime] = {}
        for index, (name, value) in enumerate(self.as_dict().items()):
            if index < _DHUHR_INDEX:
                delta = -((self.dhuhr - value) % HOURS_PER_DAY)
            else:
                delta = (value - self.dhuhr) % HOURS_PER_DAY
            result[name] = noon + timedelta(seconds=int(round(delta * 3600)))
        return result

    def to_dict(self, seconds: bool = False) -> Dict[str, object]:
        """Return a serializable dictionary with formatted clock times."""
        fmt = format_hms if seconds else format_hm
        result: Dict[str, object] = {"date": str(self.date) if self.date else None}
        result.update({name: fmt(value) for name, value in self.as_dict().items()})
        result["utc_offset"] = self.utc_offset
        result["clamped"] = list(self.clamped)
        return result


def _wrap(hours: float) -> float:
    value = hours % HOURS_PER_DAY
    # A tiny negative input rounds up to exactly 24.0
    if value >= HOURS_PER_DAY:
        return 0.0
    return value


def _minutes(minutes: float) -> float:
    return minutes / MINUTES_PER_HOUR


def assemble(date_: CalendarDate, geo: GeoParams, strict: bool = False) -> PrayerTimes:
    """Compute prayer times for an already validated date and location.

    Args:
        date_: Calendar date, assumed valid
        geo: Observer location and UTC offset
        strict: Raise PolarEdgeCase instead of clamping unsolvable hour angles

    Returns:
        PrayerTimes for the date
    """
    midnight = local_midnight_julian_date(
        date_.year, date_.month, date_.day, geo.utc_offset
    )
    # Sample the sun at local civil noon
    sun = solar_position(midnight + 0.5)
    logger.debug(
        f"{date_}: declination={sun.declination:.4f} "
        f"equation_of_time={sun.equation_of_time:.5f}h"
    )

    noon = (
        12.0
        - geo.longitude / DEGREES_PER_HOUR
        + geo.utc_offset
        - sun.equation_of_time
    )

    lat, dec = geo.latitude, sun.declination
    solves = {
        "fajr": hour_angle(-FAJR_ANGLE_KEMENAG, lat, dec),
        "sunrise": hour_angle(-REFRACTION_CORRECTION, lat, dec),
        "asr": hour_angle(asr_altitude(lat, dec), lat, dec),
        "isha": hour_angle(-ISHA_ANGLE_KEMENAG, lat, dec),
    }

    clamped: List[str] = []
    for name in ("fajr", "sunrise", "asr", "isha"):
        if solves[name].clamped:
            clamped.append(name)
            if name == "sunrise":
                clamped.append("maghrib")
    clamped.sort(key=PRAYER_NAMES.index)

    if clamped:
        message = (
            f"Sun does not reach the required altitude for {', '.join(clamped)} "
            f"on {date_} at latitude {lat}"
        )
        if strict:
            raise PolarEdgeCase(message, clamped)
        logger.warning(f"{message}; hour angle clamped")

    raw = {
        "fajr": noon - solves["fajr"].hours,
        "sunrise": noon - solves["sunrise"].hours,
        "dhuhr": noon,
        "asr": noon + solves["asr"].hours,
        "maghrib": noon + solves["sunrise"].hours,
        "isha": noon + solves["isha"].hours,
    }
    adjusted = {
        name: value + _minutes(IHTIYAT_MINUTES[name]) for name, value in raw.items()
    }

    # Dhuha opens after sunrise and must close before Dhuhr
    dhuha = min(
        adjusted["sunrise"] + _minutes(DHUHA_START_OFFSET),
        adjusted["dhuhr"] - _minutes(DHUHA_END_OFFSET),
    )

    return PrayerTimes(
        fajr=_wrap(adjusted["fajr"]),
        sunrise=_wrap(adjusted["sunrise"]),
        dhuha=_wrap(dhuha),
        dhuhr=_wrap(adjusted["dhuhr"]),
        asr=_wrap(adjusted["asr"]),
        maghrib=_wrap(adjusted["maghrib"]),
        isha=_wrap(adjusted["isha"]),
        date=date_,
        utc_offset=geo.utc_offset,
        clamped=tuple(clamped),
    )


def compute_for(
    date_: CalendarDate, geo: GeoParams, strict: bool = False
) -> PrayerTimes:
    """Validate ``date_`` and compute its prayer times at ``geo``."""
    return assemble(date_.validate(), geo, strict=strict)


def compute(
    year: int,
    month: int,
    day: int,
    latitude: float,
    longitude: float,
    utc_offset: float,
    strict: bool = False,
) -> PrayerTimes:
    """Compute the prayer times for one day.

    Args:
        year: Gregorian year
        month: Month (1-12)
        day: Day of month
        latitude: Latitude in degrees, positive north
        longitude: Longitude in degrees, positive east
        utc_offset: Offset of local clock time from UTC in hours
        strict: Raise PolarEdgeCase instead of clamping unsolvable hour angles

    Returns:
        PrayerTimes with local decimal-hour times

    Raises:
        InvalidDate: If the date does not exist
        InvalidGeo: If the coordinates or offset are out of range
        PolarEdgeCase: In strict mode, if an hour angle cannot be solved
    """
    date_ = CalendarDate(year, month, day).validate()
    geo = GeoParams(latitude, longitude, utc_offset)
    return assemble(date_, geo, strict=strict)


def compute_today(
    latitude: float,
    longitude: float,
    utc_offset: float,
    today: Optional[date] = None,
    strict: bool = False,
) -> PrayerTimes:
    """Compute the prayer times for the current local date.

    Args:
        latitude: Latitude in degrees, positive north
        longitude: Longitude in degrees, positive east
        utc_offset: Offset of local clock time from UTC in hours
        today: Override for the current date
        strict: Raise PolarEdgeCase instead of clamping unsolvable hour angles

    Returns:
        PrayerTimes for today
    """
    geo = GeoParams(latitude, longitude, utc_offset)
    if today is None:
        today = local_today(utc_offset)
    return assemble(CalendarDate.from_date(today), geo, strict=strict)
