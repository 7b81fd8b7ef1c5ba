"""Immutable geographic point in decimal degrees."""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite

from propsurvey.unit import Degree, Radian

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees.

    Points are value objects: two points with the same coordinates compare
    equal and can be used as dict keys. Markers and walls share points
    freely since nothing can move them once created.

    Attributes:
        latitude (float): Degrees north of the equator, in [-90, 90].
        longitude (float): Degrees east of Greenwich, in [-180, 180].

    Raises:
        ValueError: If a coordinate is not finite or lies outside its range.

    Example:
        >>> corner = GeoPoint(28.878639, 77.126111)
        >>> corner.latitude
        28.878639
        >>> GeoPoint.from_deg(0, 0) == GeoPoint(0.0, 0.0)
        True
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        lat = float(self.latitude)
        lon = float(self.longitude)
        if not (isfinite(lat) and isfinite(lon)):
            msg = f"Coordinates must be finite, got ({self.latitude}, {self.longitude})"
            raise ValueError(msg)
        if abs(lat) > MAX_LATITUDE:
            msg = f"Latitude {lat} outside [-{MAX_LATITUDE:g}, {MAX_LATITUDE:g}]"
            raise ValueError(msg)
        if abs(lon) > MAX_LONGITUDE:
            msg = f"Longitude {lon} outside [-{MAX_LONGITUDE:g}, {MAX_LONGITUDE:g}]"
            raise ValueError(msg)
        # Store plain floats even when given units or numpy scalars.
        object.__setattr__(self, "latitude", lat)
        object.__setattr__(self, "longitude", lon)

    @classmethod
    def from_deg(cls, lat: float, lon: float) -> GeoPoint:
        """Create a point from decimal degrees.

        Args:
            lat (float): Latitude, negative for south.
            lon (float): Longitude, negative for west.

        Returns:
            GeoPoint: The new point.
        """
        return cls(lat, lon)

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> GeoPoint:
        """Create a point from radians.

        Args:
            lat (float): Latitude in radians (-π/2 to +π/2).
            lon (float): Longitude in radians (-π to +π).

        Returns:
            GeoPoint: The new point, stored in degrees.
        """
        return cls(Radian(lat).to(Degree), Radian(lon).to(Degree))

    def midpoint(self, other: GeoPoint) -> GeoPoint:
        """Coordinate-wise mean of two points.

        This is a label anchor for short walls, not the great-circle midpoint.

        Args:
            other (GeoPoint): The opposite end of the wall.

        Returns:
            GeoPoint: Point halfway between both coordinates.
        """
        return GeoPoint(
            (self.latitude + other.latitude) / 2,
            (self.longitude + other.longitude) / 2,
        )
