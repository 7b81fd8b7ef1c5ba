"""Angular units for coordinates and bearings.

Angles are stored in radians (SI). Degrees, arc-minutes and arc-seconds are
the scales used by DMS coordinate text; the tolerance of the DMS round trip
is naturally written as ``ArcSecond(0.05)``.

Classes:
    Radian: Root angular unit (SI).
    Degree: 1/360 of a full turn.
    ArcMinute: 1/60 of a degree.
    ArcSecond: 1/60 of an arc-minute.

Type Aliases:
    Angle: Union of all angular units.

Example:
    >>> round(ArcSecond(0.05).to(Degree), 10)
    1.38889e-05
    >>> Radian(3.141592653589793).to(Degree)
    180.0
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles).

    Attributes:
        IS_FAMILY_ROOT (bool): True, this is the root angular unit.
        SCALE_TO_SI (float): 1.0.
        SYMBOL (str): "rad".
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: Degree.

    Used for latitudes, longitudes and compass bearings (0° = north,
    90° = east).
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


class ArcMinute(Radian):
    """Angular unit: arc-minute, the ``M'`` field of a DMS angle."""

    SCALE_TO_SI = pi / (180 * 60)
    SYMBOL = "'"


class ArcSecond(Radian):
    """Angular unit: arc-second, the ``S"`` field of a DMS angle.

    One arc-second of latitude is roughly 31 m on the ground.
    """

    SCALE_TO_SI = pi / (180 * 3600)
    SYMBOL = '"'


Angle = Radian | Degree | ArcMinute | ArcSecond
