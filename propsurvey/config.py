"""Global configuration and shared type definitions for the measurement engine.

This module centralizes the constants used by the coordinate codec, the
geodesic calculators and the measurement session, so that every component
agrees on the Earth model, the selection size and the label formats.

Type Definitions:
    BASE_TYPE: Numeric inputs accepted by the vectorized geodesic functions.
               Python scalars for single walls, NumPy arrays for batches of
               coordinates.

Constants:
    EARTH_RADIUS_M: Mean Earth radius of the spherical model, in meters.
    MAX_SELECTED: Capacity of the marker selection ring buffer.
    KILOMETER_THRESHOLD_M: Distances at or above this switch to kilometers.
    MARKER_LABEL / LINE_LABEL: Display label templates, 1-based.
    MARKER_ID_PREFIX / LINE_ID_PREFIX: Prefixes of generated ids.
    DMS_ROUND_TRIP_TOLERANCE_ARCSEC: Precision lost by one-decimal DMS seconds.

Example:
    >>> from propsurvey.config import EARTH_RADIUS_M, LINE_LABEL
    >>> LINE_LABEL.format(n=3)
    'Wall 3'
"""

from numpy import ndarray

BASE_TYPE = int | float | ndarray

EARTH_RADIUS_M = 6_371_000.0

MAX_SELECTED = 2

KILOMETER_THRESHOLD_M = 1000.0

MARKER_LABEL = "Point {n}"
LINE_LABEL = "Wall {n}"
MARKER_ID_PREFIX = "marker"
LINE_ID_PREFIX = "line"

DMS_ROUND_TRIP_TOLERANCE_ARCSEC = 0.05
