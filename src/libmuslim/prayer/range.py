"""Prayer times over an inclusive range of calendar days."""

from typing import Iterator, Union

from ..logging import get_logger
from ..space_time.calendar import CalendarDate, days_in_month, next_day
from ..space_time.julian_calc import gregorian_to_jdn
from .geo import GeoParams
from .times import PrayerTimes, assemble

logger = get_logger(__name__)

DateLike = Union[CalendarDate, tuple]


def _as_calendar_date(value: DateLike) -> CalendarDate:
    if isinstance(value, CalendarDate):
        return value.validate()
    return CalendarDate(*value).validate()


class PrayerTimesRange:
    """Lazy, restartable sequence of daily prayer times.

    Iterating yields one :class:`PrayerTimes` per day from ``start`` to
    ``end`` inclusive, in chronological order. Each call to ``iter()`` starts
    again from ``start``. The range is empty when ``end`` precedes ``start``.
    """

    def __init__(
        self,
        start: DateLike,
        end: DateLike,
        geo: GeoParams,
        strict: bool = False,
    ) -> None:
        self.start = _as_calendar_date(start)
        self.end = _as_calendar_date(end)
        self.geo = geo
        self.strict = strict

    def __iter__(self) -> Iterator[PrayerTimes]:
        year, month, day = self.start.year, self.start.month, self.start.day
        end = (self.end.year, self.end.month, self.end.day)

        month_length = days_in_month(year, month)
        while (year, month, day) <= end:
            logger.debug(
                f"Computing prayer times for {year:04d}-{month:02d}-{day:02d}"
            )
            yield assemble(CalendarDate(year, month, day), self.geo, strict=self.strict)

            previous_month = month
            year, month, day = next_day(year, month, day, month_length)
            if month != previous_month:
                month_length = days_in_month(year, month)

    def __len__(self) -> int:
        if self.end < self.start:
            return 0
        return (
            gregorian_to_jdn(self.end.year, self.end.month, self.end.day)
            - gregorian_to_jdn(self.start.year, self.start.month, self.start.day)
            + 1
        )

    def __repr__(self) -> str:
        return f"PrayerTimesRange({self.start} .. {self.end}, {self.geo})"


def compute_range(
    start: DateLike,
    end: DateLike,
    latitude: float,
    longitude: float,
    utc_offset: float,
    strict: bool = False,
) -> PrayerTimesRange:
    """Prayer times for every day from ``start`` to ``end`` inclusive.

    Args:
        start: First date, as a CalendarDate or (year, month, day)
        end: Last date, as a CalendarDate or (year, month, day)
        latitude: Latitude in degrees, positive north
        longitude: Longitude in degrees, positive east
        utc_offset: Offset of local clock time from UTC in hours
        strict: Raise PolarEdgeCase instead of clamping unsolvable hour angles

    Returns:
        PrayerTimesRange yielding one PrayerTimes per day

    Raises:
        InvalidDate: If either endpoint is not a valid date
        InvalidGeo: If the coordinates or offset are out of range
    """
    return PrayerTimesRange(
        start, end, GeoParams(latitude, longitude, utc_offset), strict=strict
    )
