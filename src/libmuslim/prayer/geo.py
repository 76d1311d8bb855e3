from dataclasses import dataclass

from ..constants import MAX_UTC_OFFSET_HOURS
from ..errors import InvalidGeo


@dataclass(frozen=True)
class GeoParams:
    """Observer location and the fixed UTC offset its clock times are given in."""

    latitude: float  # in degrees, positive north
    longitude: float  # in degrees, positive east
    utc_offset: float = 0.0  # in hours, positive east of Greenwich

    def __post_init__(self) -> None:
        """Validate the coordinates."""
        if not -90 <= self.latitude <= 90:
            raise InvalidGeo(
                f"Latitude must be between -90 and 90 degrees, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise InvalidGeo(
                f"Longitude must be between -180 and 180 degrees, got {self.longitude}"
            )
        if not -MAX_UTC_OFFSET_HOURS <= self.utc_offset <= MAX_UTC_OFFSET_HOURS:
            raise InvalidGeo(
                f"UTC offset must be between -{MAX_UTC_OFFSET_HOURS:g} and "
                f"{MAX_UTC_OFFSET_HOURS:g} hours, got {self.utc_offset}"
            )

    def __str__(self) -> str:
        return f"{self.latitude:.4f},{self.longitude:.4f} UTC{self.utc_offset:+g}"
