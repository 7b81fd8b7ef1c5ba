"""Bearing and distance between geographic points.

Two layers live here:

* Vectorized spherical formulas, ``initial_bearing`` and
  ``haversine_distance``, which take decimal degrees as Python scalars or
  NumPy arrays. A whole traverse of corners can be measured in one call.
* ``GeodesicCalculator`` implementations working on GeoPoint pairs. The
  measurement session only talks to this contract, so the Earth model can
  be swapped without touching callers:

  - ``SphericalCalculator``: mean-radius sphere, the default.
  - ``EllipsoidalCalculator``: pyproj's geodesic on an ellipsoid (WGS84 by
    default), for when a sphere is not accurate enough.

Bearings are initial compass bearings in degrees clockwise from true north,
always in [0, 360). Identical points have bearing 0 and distance 0.

Example:
    >>> from propsurvey.geo import GeoPoint
    >>> calc = SphericalCalculator()
    >>> origin, east = GeoPoint(0, 0), GeoPoint(0, 1)
    >>> round(calc.bearing(origin, east), 6)
    90.0
    >>> format_distance(calc.distance(origin, east))
    '111.19 km'
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from pyproj import Geod

from propsurvey.config import BASE_TYPE, EARTH_RADIUS_M, KILOMETER_THRESHOLD_M
from propsurvey.unit import Kilometer, Length, Meter

from .geo_point import GeoPoint


def initial_bearing(
    lat1: BASE_TYPE, lon1: BASE_TYPE, lat2: BASE_TYPE, lon2: BASE_TYPE
) -> BASE_TYPE:
    """Initial great-circle bearing from point 1 to point 2.

    Args:
        lat1, lon1: Start coordinates in decimal degrees.
        lat2, lon2: End coordinates in decimal degrees.

    Returns:
        Bearing in degrees, in [0, 360). Arrays broadcast element-wise.
    """
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    d_lambda = np.radians(np.subtract(lon2, lon1))

    y = np.sin(d_lambda) * np.cos(phi2)
    x = np.cos(phi1) * np.sin(phi2) - np.sin(phi1) * np.cos(phi2) * np.cos(d_lambda)
    theta = np.degrees(np.arctan2(y, x))

    # theta + 360 is positive, so the remainder is exact and strictly below 360.
    return np.mod(theta + 360.0, 360.0)


def haversine_distance(
    lat1: BASE_TYPE,
    lon1: BASE_TYPE,
    lat2: BASE_TYPE,
    lon2: BASE_TYPE,
    radius: float = EARTH_RADIUS_M,
) -> BASE_TYPE:
    """Great-circle distance by the haversine formula.

    Uses ``2·atan2(√a, √(1−a))`` rather than ``2·asin(√a)`` so that
    antipodal and coincident points stay well-defined.

    Args:
        lat1, lon1: Start coordinates in decimal degrees.
        lat2, lon2: End coordinates in decimal degrees.
        radius: Sphere radius in meters.

    Returns:
        Distance in meters (same unit as ``radius``). Symmetric in its
        endpoints.
    """
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    d_phi = np.abs(np.radians(np.subtract(lat2, lat1)))
    d_lambda = np.abs(np.radians(np.subtract(lon2, lon1)))

    a = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return radius * c


class GeodesicCalculator(ABC):
    """Bearing and distance between two GeoPoints under some Earth model."""

    @abstractmethod
    def bearing(self, p1: GeoPoint, p2: GeoPoint) -> float:
        """Initial bearing from ``p1`` to ``p2`` in degrees, in [0, 360)."""

    @abstractmethod
    def distance(self, p1: GeoPoint, p2: GeoPoint) -> float:
        """Ground distance between ``p1`` and ``p2`` in meters."""

    def measure(self, p1: GeoPoint, p2: GeoPoint) -> tuple[float, float]:
        """Return ``(bearing, distance)`` for the wall from ``p1`` to ``p2``."""
        return self.bearing(p1, p2), self.distance(p1, p2)


class SphericalCalculator(GeodesicCalculator):
    """Spherical Earth model.

    Args:
        radius (float | Length): Sphere radius. Plain floats are meters;
            length units are converted (``Kilometer(6371)`` works too).
    """

    def __init__(self, radius: float | Length = EARTH_RADIUS_M):
        self.radius = float(radius)

    def bearing(self, p1: GeoPoint, p2: GeoPoint) -> float:
        return float(initial_bearing(p1.latitude, p1.longitude, p2.latitude, p2.longitude))

    def distance(self, p1: GeoPoint, p2: GeoPoint) -> float:
        return float(
            haversine_distance(
                p1.latitude, p1.longitude, p2.latitude, p2.longitude, radius=self.radius
            )
        )

    def __repr__(self) -> str:
        return f"SphericalCalculator(radius={self.radius:g})"


class EllipsoidalCalculator(GeodesicCalculator):
    """Ellipsoidal Earth model backed by ``pyproj.Geod``.

    Solves the inverse geodesic problem on the named ellipsoid, which is
    accurate to millimeters where the sphere can be off by about 0.5 %.

    Args:
        ellps (str): Any ellipsoid name known to PROJ, e.g. ``"WGS84"``, ``"GRS80"``.
    """

    def __init__(self, ellps: str = "WGS84"):
        self.ellps = ellps
        self._geod = Geod(ellps=ellps)

    def measure(self, p1: GeoPoint, p2: GeoPoint) -> tuple[float, float]:
        if p1 == p2:
            return 0.0, 0.0
        az12, _az21, dist = self._geod.inv(p1.longitude, p1.latitude, p2.longitude, p2.latitude)
        return (float(az12) + 360.0) % 360.0, float(dist)

    def bearing(self, p1: GeoPoint, p2: GeoPoint) -> float:
        return self.measure(p1, p2)[0]

    def distance(self, p1: GeoPoint, p2: GeoPoint) -> float:
        return self.measure(p1, p2)[1]

    def __repr__(self) -> str:
        return f"EllipsoidalCalculator(ellps={self.ellps!r})"


def format_bearing(bearing: float) -> str:
    """Bearing label with one decimal, e.g. ``"134.7°"``."""
    return f"{bearing:.1f}°"


def format_distance(distance: float) -> str:
    """Distance label: meters below 1 km, kilometers from 1 km up.

    Args:
        distance (float): Distance in meters.

    Returns:
        str: ``"842.3 m"`` or ``"1.24 km"``. Exactly 1000 m renders as ``"1.00 km"``.
    """
    if distance < KILOMETER_THRESHOLD_M:
        return f"{distance:.1f} m"
    return f"{Meter(distance).to(Kilometer):.2f} km"
