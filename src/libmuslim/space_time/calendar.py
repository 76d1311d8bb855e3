"""Gregorian calendar helpers.

Pure functions for leap years, month lengths and stepping from one day to the
next, plus the :class:`CalendarDate` value used throughout libmuslim. The
calendar is proleptic Gregorian with no Julian/Gregorian cutover.
"""

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Optional, Tuple

from ..errors import InvalidDate

_THIRTY_DAY_MONTHS = (4, 6, 9, 11)


def is_leap(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month.

    Args:
        year: Gregorian year
        month: Month (1-12)

    Returns:
        28, 29, 30 or 31

    Raises:
        InvalidDate: If month is not in 1-12. Callers are expected to
            validate their input before asking.
    """
    if not 1 <= month <= 12:
        raise InvalidDate(f"Month must be between 1 and 12, got {month}")
    if month == 2:
        return 29 if is_leap(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def next_day(
    year: int, month: int, day: int, month_length: Optional[int] = None
) -> Tuple[int, int, int]:
    """Return the (year, month, day) following the given date.

    Args:
        year: Gregorian year
        month: Month (1-12)
        day: Day of month
        month_length: Length of ``month`` if the caller already knows it

    Returns:
        Tuple of (year, month, day) for the next calendar day
    """
    if month_length is None:
        month_length = days_in_month(year, month)

    day += 1
    if day > month_length:
        day = 1
        month += 1
        if month > 12:
            month = 1
            year += 1
    return year, month, day


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A Gregorian calendar date.

    Ordering is lexicographic on (year, month, day).
    """

    year: int
    month: int
    day: int

    def validate(self) -> "CalendarDate":
        """Check that this is a real calendar date.

        Returns:
            self, so calls can be chained

        Raises:
            InvalidDate: If any component is out of range
        """
        if not MINYEAR <= self.year <= MAXYEAR:
            raise InvalidDate(
                f"Year must be between {MINYEAR} and {MAXYEAR}, got {self.year}"
            )
        length = days_in_month(self.year, self.month)
        if not 1 <= self.day <= length:
            raise InvalidDate(
                f"Day must be between 1 and {length} for "
                f"{self.year:04d}-{self.month:02d}, got {self.day}"
            )
        return self

    def next(self) -> "CalendarDate":
        """Return the following calendar day."""
        return CalendarDate(*next_day(self.year, self.month, self.day))

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(value.year, value.month, value.day)

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """Parse an ISO ``YYYY-MM-DD`` string.

        Raises:
            InvalidDate: If the string is not a valid date
        """
        parts = text.strip().split("-")
        if len(parts) != 3:
            raise InvalidDate(f"Invalid date format: {text}")
        try:
            year, month, day = (int(part) for part in parts)
        except ValueError:
            raise InvalidDate(f"Invalid date format: {text}")
        return cls(year, month, day).validate()

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
