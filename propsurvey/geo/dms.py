"""Degrees-minutes-seconds coordinate codec.

Converts between DMS coordinate text such as ``28°52'43.1"N 77°07'34.0"E``
and GeoPoint values. Parsing is used for the coordinate input field,
formatting for on-map labels.

Grammar accepted by ``parse_dms`` (after whitespace is collapsed):

    ANGLE " " ANGLE
    ANGLE := DEG "°" [" "] MIN "'" [" "] SEC '"' [" "] DIRECTION

``DEG`` and ``MIN`` are integers, ``SEC`` an integer or decimal,
``DIRECTION`` one of N, S, E, W (any case). The typographic marks ``º``,
``′`` and ``″`` are accepted in place of ``°``, ``'`` and ``"``. The two
angles may come in either order; each is assigned to latitude or longitude
by its direction letter.

Parsing never raises on bad input. Anything outside the grammar, two angles
on the same axis, minutes or seconds of 60 or more, and angles beyond 90°
latitude or 180° longitude all yield ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import floor
import logging
import re

from .geo_point import MAX_LATITUDE, MAX_LONGITUDE, GeoPoint

logger = logging.getLogger(__name__)

_DEGREE = "[°º]"
_MINUTE = "['′]"
_SECOND = '["″]'
_ANGLE = rf"(\d+){_DEGREE} ?(\d+){_MINUTE} ?(\d+(?:\.\d*)?){_SECOND} ?([NSEWnsew])"
_DMS_PAIR = re.compile(rf"{_ANGLE} {_ANGLE}")
_WHITESPACE = re.compile(r"\s+")


class Axis(Enum):
    """Coordinate axis with its hemisphere letters and magnitude limit."""

    LATITUDE = ("N", "S", MAX_LATITUDE)
    LONGITUDE = ("E", "W", MAX_LONGITUDE)

    def __init__(self, positive: str, negative: str, limit: float):
        self.positive = positive
        self.negative = negative
        self.limit = limit

    @classmethod
    def of(cls, direction: str) -> Axis:
        """Return the axis a direction letter belongs to.

        Raises:
            ValueError: If ``direction`` is not one of N, S, E, W.
        """
        for axis in cls:
            if direction in (axis.positive, axis.negative):
                return axis
        msg = f"Unknown direction letter {direction!r}"
        raise ValueError(msg)


@dataclass(frozen=True)
class DMSAngle:
    """One coordinate written as degrees, minutes, seconds and a hemisphere.

    Attributes:
        degrees (int): Whole degrees, non-negative.
        minutes (int): Whole arc-minutes, 0-59 for a well-formed angle.
        seconds (float): Arc-seconds, in [0, 60) for a well-formed angle.
        direction (str): Hemisphere letter, N/S for latitude, E/W for longitude.

    Example:
        >>> angle = DMSAngle(28, 52, 43.1, "N")
        >>> str(angle)
        '28°52\\'43.1"N'
        >>> round(angle.to_decimal(), 6)
        28.878639
    """

    degrees: int
    minutes: int
    seconds: float
    direction: str

    @property
    def axis(self) -> Axis:
        return Axis.of(self.direction)

    def to_decimal(self) -> float:
        """Signed decimal degrees, negative in the S and W hemispheres."""
        value = self.degrees + self.minutes / 60 + self.seconds / 3600
        if self.direction == self.axis.negative:
            value = -value
        return value

    def is_in_range(self) -> bool:
        """Whether each field is within its range and the angle fits its axis."""
        return (
            self.minutes < 60
            and self.seconds < 60
            and abs(self.to_decimal()) <= self.axis.limit
        )

    @classmethod
    def from_decimal(cls, value: float, axis: Axis) -> DMSAngle:
        """Split signed decimal degrees into DMS fields.

        Zero maps to the positive hemisphere. Seconds are rounded to one
        decimal, the precision of the text form; a value that rounds up to
        60.0 carries into the minutes (and minutes into the degrees).

        Args:
            value (float): Signed decimal degrees.
            axis (Axis): Axis deciding the hemisphere letters.

        Returns:
            DMSAngle: The rounded angle.
        """
        direction = axis.positive if value >= 0 else axis.negative
        absolute = abs(value)
        degrees = floor(absolute)
        minutes_float = (absolute - degrees) * 60
        minutes = floor(minutes_float)
        seconds = round((minutes_float - minutes) * 60, 1)
        if seconds >= 60:
            seconds = 0.0
            minutes += 1
        if minutes >= 60:
            minutes = 0
            degrees += 1
        return cls(int(degrees), int(minutes), seconds, direction)

    def __str__(self) -> str:
        return f"{self.degrees}°{self.minutes:02d}'{self.seconds:04.1f}\"{self.direction}"


def normalize(text: str) -> str:
    """Trim ``text`` and collapse every run of whitespace to one space."""
    return _WHITESPACE.sub(" ", text).strip()


def _angle(degrees: str, minutes: str, seconds: str, direction: str) -> DMSAngle:
    return DMSAngle(int(degrees), int(minutes), float(seconds), direction.upper())


def parse_dms(text: str) -> GeoPoint | None:
    """Parse a DMS coordinate pair.

    Args:
        text (str): Raw input, e.g. ``28°52'43.1"N 77°07'34.0"E``.

    Returns:
        GeoPoint | None: The decoded point, or None when ``text`` is not a
        well-formed DMS pair.

    Example:
        >>> point = parse_dms("77°07'34.0\\"E 28°52'43.1\\"N")
        >>> round(point.latitude, 6), round(point.longitude, 6)
        (28.878639, 77.126111)
        >>> parse_dms("Connaught Place, New Delhi") is None
        True
    """
    normalized = normalize(text)
    match = _DMS_PAIR.fullmatch(normalized)
    if match is None:
        return None

    groups = match.groups()
    first, second = _angle(*groups[:4]), _angle(*groups[4:])
    by_axis = {first.axis: first, second.axis: second}
    if len(by_axis) != 2:
        logger.debug("Rejected %r: both angles on the %s axis", normalized, first.axis.name)
        return None

    latitude = by_axis[Axis.LATITUDE]
    longitude = by_axis[Axis.LONGITUDE]
    for angle in (latitude, longitude):
        if not angle.is_in_range():
            logger.debug("Rejected %r: %s is out of range", normalized, angle)
            return None

    return GeoPoint(latitude.to_decimal(), longitude.to_decimal())


def is_valid_dms(text: str) -> bool:
    """True iff ``parse_dms`` accepts ``text``. Safe for per-keystroke validation."""
    return parse_dms(text) is not None


def format_dms(point: GeoPoint) -> str:
    """Render a point as DMS text, latitude first.

    Args:
        point (GeoPoint): Point to render.

    Returns:
        str: Text such as ``28°52'43.1"N 77°07'34.0"E``.
    """
    latitude = DMSAngle.from_decimal(point.latitude, Axis.LATITUDE)
    longitude = DMSAngle.from_decimal(point.longitude, Axis.LONGITUDE)
    return f"{latitude} {longitude}"


def format_decimal(point: GeoPoint, precision: int = 6) -> str:
    """Render a point as ``"lat, lon"`` decimal degrees.

    Args:
        point (GeoPoint): Point to render.
        precision (int): Digits after the decimal point.

    Returns:
        str: Text such as ``28.878639, 77.126111``.
    """
    return f"{point.latitude:.{precision}f}, {point.longitude:.{precision}f}"
