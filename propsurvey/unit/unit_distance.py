"""Length units for wall distances and the Earth radius.

Lengths are stored in meters (SI). Wall readouts switch from meters to
kilometers at 1000 m.

Classes:
    Meter: Root length unit (SI).
    Kilometer: 1000 meters.

Type Aliases:
    Length: Union of all length units.

Example:
    >>> Meter(1240).to(Kilometer)
    1.24
    >>> float(Kilometer(6371))
    6371000.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length unit: Meter (SI base unit for length).

    Attributes:
        IS_FAMILY_ROOT (bool): True, this is the root length unit.
        SCALE_TO_SI (float): 1.0.
        SYMBOL (str): "m".
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length unit: Kilometer (1000 meters)."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


Length = Meter | Kilometer
