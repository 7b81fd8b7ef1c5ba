"""Geographic values, DMS text codec and geodesic calculators.

Components:
    GeoPoint: Immutable latitude/longitude pair in decimal degrees.
    DMSAngle, Axis: One degrees-minutes-seconds coordinate and its axis.
    parse_dms, is_valid_dms, format_dms, format_decimal: Coordinate text codec.
    GeodesicCalculator: Bearing/distance contract.
    SphericalCalculator: Mean-radius sphere (default).
    EllipsoidalCalculator: pyproj ellipsoidal geodesic.
    format_bearing, format_distance: Wall readout labels.

Typical Usage:
    >>> from propsurvey.geo import SphericalCalculator, format_dms, parse_dms
    >>> a = parse_dms("28°52'43.1\\"N 77°07'34.0\\"E")
    >>> b = parse_dms("28°52'44.0\\"N 77°07'35.2\\"E")
    >>> bearing, distance = SphericalCalculator().measure(a, b)
    >>> format_dms(a)
    '28°52\\'43.1"N 77°07\\'34.0"E'
"""

from .dms import Axis, DMSAngle, format_decimal, format_dms, is_valid_dms, parse_dms
from .geo_point import GeoPoint
from .geodesic import (
    EllipsoidalCalculator,
    GeodesicCalculator,
    SphericalCalculator,
    format_bearing,
    format_distance,
    haversine_distance,
    initial_bearing,
)

__all__ = [
    "GeoPoint",
    "Axis",
    "DMSAngle",
    "parse_dms",
    "is_valid_dms",
    "format_dms",
    "format_decimal",
    "GeodesicCalculator",
    "SphericalCalculator",
    "EllipsoidalCalculator",
    "initial_bearing",
    "haversine_distance",
    "format_bearing",
    "format_distance",
]
