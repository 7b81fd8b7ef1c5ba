"""Unit family foundation for survey quantities.

Every concrete unit belongs to exactly one family (angle, length). The family
is represented by a ROOT class resolved automatically from the class
hierarchy: the first ancestor flagged with ``IS_FAMILY_ROOT`` becomes the ROOT
for all of its descendants. Operations are only allowed between units that
share a ROOT, so a bearing can never be added to a wall length by accident.

Classes:
    Unit: Base class carrying ROOT, SYMBOL and the family check.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Foot(Length):
    ...     pass
    >>> Foot.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Concrete units should inherit from UnitFloat rather than directly from
    this class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the root unit of a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve the ROOT class of a newly defined unit.

        Args:
            **kwargs: Forwarded to ``super().__init_subclass__``.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Check that ``unit_type`` measures the same quantity as this unit.

        Args:
            unit_type: The other type taking part in the operation.

        Raises:
            TypeError: If ``unit_type`` is not a unit or belongs to another family.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            msg = f"Incompatible units: {cls.ROOT.__name__} and {unit_type.__name__}"
            raise TypeError(msg)
