"""
Geospatial helpers.

Great-circle distance and the geofence predicate used by check-ins. Coordinates
are decimal degrees; a latitude or longitude of exactly zero is treated as "unset"
and rejected like any out-of-range value.
"""

from dataclasses import dataclass
from math import atan2, cos, radians, sin, sqrt

from beerlog.core.errors import InvalidArgument, InvalidCoordinate

EARTH_RADIUS_METERS = 6_371_000


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def validate(self) -> "Coordinate":
        if not -90.0 <= self.latitude <= 90.0 or self.latitude == 0:
            raise InvalidCoordinate("Invalid latitude: must be between -90 and 90 and non-zero")
        if not -180.0 <= self.longitude <= 180.0 or self.longitude == 0:
            raise InvalidCoordinate("Invalid longitude: must be between -180 and 180 and non-zero")
        return self

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    """Compute the haversine great-circle distance in meters between two points.

    Raises:
        InvalidCoordinate: If either point is out of range or unset
    """
    a.validate()
    b.validate()

    lat1 = radians(a.latitude)
    lat2 = radians(b.latitude)
    dlat = radians(b.latitude - a.latitude)
    dlon = radians(b.longitude - a.longitude)

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_METERS * atan2(sqrt(h), sqrt(1 - h))


def is_within_range(center: Coordinate, point: Coordinate, max_distance_meters: float) -> bool:
    """Return True when ``point`` lies within ``max_distance_meters`` of ``center``.

    Raises:
        InvalidArgument: If the radius is not positive
        InvalidCoordinate: If either point is out of range or unset
    """
    if not max_distance_meters > 0:
        raise InvalidArgument("Max distance must be positive")

    return distance_meters(center, point) <= max_distance_meters
