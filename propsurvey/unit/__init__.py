"""Type-safe angle and length units for survey measurements.

Values are stored in SI scale (radians, meters) and converted on demand.
Units of different families cannot be mixed: adding a Degree to a Meter
raises TypeError.

Architecture:
    - unit_base: Unit class with family (ROOT) resolution
    - unit_float: float-backed units with SI conversion
    - unit_angle: Radian, Degree, ArcMinute, ArcSecond
    - unit_distance: Meter, Kilometer

Example:
    >>> from propsurvey.unit import ArcSecond, Degree, Kilometer, Meter
    >>> ArcSecond(3600).to(Degree)
    1.0
    >>> Meter(1500).to(Kilometer)
    1.5
"""

from .unit_angle import Angle, ArcMinute, ArcSecond, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "ArcMinute",
    "ArcSecond",
    "Angle",
    # Length units
    "Meter",
    "Kilometer",
    "Length",
]
