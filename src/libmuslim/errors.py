"""Exceptions raised by the prayer time calculation."""


class PrayerTimeError(ValueError):
    """Base class for all libmuslim calculation errors."""

    pass


class InvalidDate(PrayerTimeError):
    """Raised when a year/month/day triple is not a valid Gregorian date."""

    pass


class InvalidGeo(PrayerTimeError):
    """Raised when latitude, longitude or UTC offset are out of range."""

    pass


class PolarEdgeCase(PrayerTimeError):
    """Raised in strict mode when the sun never reaches a required altitude.

    Attributes:
        prayers: Names of the prayers whose hour angle could not be solved
    """

    def __init__(self, message: str, prayers=()) -> None:
        super().__init__(message)
        self.prayers = tuple(prayers)
