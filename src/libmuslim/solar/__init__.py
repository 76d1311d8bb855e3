"""Solar position and hour angle calculations."""

from .position import SolarState, solar_position
from .hour_angle import HourAngle, asr_altitude, hour_angle

__all__ = [
    "SolarState",
    "solar_position",
    "HourAngle",
    "asr_altitude",
    "hour_angle",
]
