"""Hour angle of the sun at a given altitude."""

import math
from typing import NamedTuple

from ..constants import DEGREES_PER_HOUR, SHADOW_FACTOR_STANDARD


class HourAngle(NamedTuple):
    """Offset from local solar noon at which the sun reaches an altitude.

    ``clamped`` is True when the sun never reaches the altitude on that day
    (polar day or night) and the cosine was forced into [-1, 1]. The hours
    are then 0 (sun never gets that low) or 12 (never that high).
    """

    hours: float
    clamped: bool


def hour_angle(altitude: float, latitude: float, declination: float) -> HourAngle:
    """Solve cos(H) = (sin(h) - sin(phi) sin(delta)) / (cos(phi) cos(delta)).

    Args:
        altitude: Target altitude of the sun's centre in degrees
            (negative below the horizon)
        latitude: Observer latitude in degrees
        declination: Solar declination in degrees

    Returns:
        HourAngle with the offset from solar noon in hours
    """
    h = math.radians(altitude)
    phi = math.radians(latitude)
    delta = math.radians(declination)

    denominator = math.cos(phi) * math.cos(delta)
    numerator = math.sin(h) - math.sin(phi) * math.sin(delta)

    if denominator == 0.0:
        # At a pole the sun circles at constant altitude
        cos_h = 1.0 if numerator >= 0 else -1.0
        clamped = True
    else:
        cos_h = numerator / denominator
        clamped = not -1.0 <= cos_h <= 1.0
        cos_h = max(-1.0, min(1.0, cos_h))

    return HourAngle(math.degrees(math.acos(cos_h)) / DEGREES_PER_HOUR, clamped)


def asr_altitude(
    latitude: float, declination: float, shadow_factor: float = SHADOW_FACTOR_STANDARD
) -> float:
    """Altitude of the sun when an object's shadow reaches the Asr length.

    The shadow equals ``shadow_factor`` times the object's height plus its
    shadow at noon.

    Args:
        latitude: Observer latitude in degrees
        declination: Solar declination in degrees
        shadow_factor: 1.0 for the standard madhab

    Returns:
        Altitude in degrees
    """
    zenith_at_noon = math.radians(abs(latitude - declination))
    return math.degrees(math.atan(1.0 / (shadow_factor + math.tan(zenith_at_noon))))
