"""Geodetic measurement engine for property-boundary surveys.

propsurvey backs a map where a user clicks property corners and reads off the
compass bearing and ground distance of each wall. It receives coordinates and
UI events from the host application and returns markers, measured walls and
display strings. Map rendering, place search and accounts belong to the host.

Framework Components:
    Coordinate Codec (propsurvey.geo.dms):
        • parse_dms / is_valid_dms: DMS text such as 28°52'43.1"N 77°07'34.0"E
        • format_dms / format_decimal: on-map and list labels

    Geodesic Calculators (propsurvey.geo.geodesic):
        • SphericalCalculator: haversine distance and initial bearing, mean radius
        • EllipsoidalCalculator: pyproj geodesic on WGS84 (or another ellipsoid)
        • initial_bearing / haversine_distance: vectorized NumPy formulas
        • format_bearing / format_distance: "134.7°", "842.3 m", "1.24 km"

    Measurement Session (propsurvey.survey):
        • MeasurementSession: markers, two-slot selection, walls, live preview
        • Marker, Line, MeasurementPreview: immutable records

    Support:
        • propsurvey.unit: type-safe angle and length units
        • propsurvey.state: validated state machine
        • propsurvey.report: rich rendering of a session
        • propsurvey.log: rich logging setup
        • propsurvey.config / propsurvey.errors: constants and error types

Usage:
    >>> from propsurvey import GeoPoint, MeasurementSession, parse_dms
    >>> session = MeasurementSession()
    >>> session.add_marker(parse_dms("28°52'43.1\\"N 77°07'34.0\\"E"))
    >>> session.add_marker(GeoPoint(28.8790, 77.1265))
    >>> wall = session.measure()
    >>> wall.bearing_label, wall.distance_label
"""

from propsurvey.errors import SelectionError, SurveyError
from propsurvey.geo import (
    EllipsoidalCalculator,
    GeoPoint,
    SphericalCalculator,
    format_bearing,
    format_distance,
    format_dms,
    is_valid_dms,
    parse_dms,
)
from propsurvey.survey import Line, Marker, MeasurementPreview, MeasurementSession, SelectionState

__all__ = [
    "GeoPoint",
    "parse_dms",
    "is_valid_dms",
    "format_dms",
    "SphericalCalculator",
    "EllipsoidalCalculator",
    "format_bearing",
    "format_distance",
    "MeasurementSession",
    "SelectionState",
    "Marker",
    "Line",
    "MeasurementPreview",
    "SurveyError",
    "SelectionError",
]

__version__ = "0.1.0"
