"""Float-backed units stored in SI scale.

A UnitFloat is a ``float`` whose value is kept in the SI unit of its family
(radians for angles, meters for lengths). Constructing ``Degree(90)`` stores
``pi / 2``; ``Degree(90).to(Degree)`` gives ``90.0`` back. Because the value
is a real float, units drop straight into ``math`` calls.

Classes:
    UnitFloat: Base class for float units with SI conversion.

Example:
    >>> class Meter(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SYMBOL = "m"
    >>> class Kilometer(Meter):
    ...     SCALE_TO_SI = 1000.0
    ...     SYMBOL = "km"
    >>> float(Kilometer(1.24))
    1240.0
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit

Number = int | float


class UnitFloat(float, Unit):
    """Type-safe float unit with automatic SI conversion.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor from the unit's own scale to SI.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a new instance from a value in the unit's own scale.

        Args:
            value: Numeric value in the unit's native scale.

        Returns:
            UnitFloat: New instance with the value stored in SI scale.
        """
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance directly from an SI value.

        Args:
            si_value: Value already in SI scale.

        Returns:
            UnitFloat: New instance holding ``si_value``.
        """
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to a plain float in another unit of the same family.

        Args:
            unit_type: Target unit type.

        Returns:
            float: Value expressed in the target unit's scale.

        Raises:
            TypeError: If ``unit_type`` belongs to another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Re-type this value as another unit of the same family.

        Args:
            unit_type: Target unit type.

        Returns:
            UnitFloat: Instance of ``unit_type`` with the same SI value.
        """
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        """Add another unit of the same family.

        Raises:
            TypeError: If ``other`` is not a unit of the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        """Subtract another unit of the same family.

        Raises:
            TypeError: If ``other`` is not a unit of the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __mul__(self, k: Number) -> UnitFloat:
        """Scale by a plain number.

        Raises:
            TypeError: If ``k`` is not a plain number.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        msg = f"Cannot scale {type(self).__name__} by {type(k).__name__}"
        raise TypeError(msg)

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        """Divide by a plain number.

        Raises:
            TypeError: If ``k`` is not a plain number.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        msg = f"Cannot divide {type(self).__name__} by {type(k).__name__}"
        raise TypeError(msg)

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    def __lt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __str__(self) -> str:
        """Return the value in the unit's own scale with its symbol, e.g. ``"842.3 m"``."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Return the native value with its SI equivalent, e.g. ``"1.24 km (= 1240 SI)"``."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
