"""
Records produced by a measurement session.
"""

from dataclasses import dataclass

from propsurvey.geo import GeoPoint, format_bearing, format_distance


@dataclass(frozen=True)
class Marker:
    """A boundary corner placed by a map click."""
    id: str
    position: GeoPoint
    label: str
    sequence_index: int

    def __repr__(self) -> str:
        return f"Marker(id={self.id}, #{self.sequence_index}, {self.position.latitude:.6f}, {self.position.longitude:.6f})"


@dataclass(frozen=True)
class Line:
    """A measured wall between two markers, directed from start to end."""
    id: str
    start: GeoPoint
    end: GeoPoint
    bearing_deg: float
    distance_m: float
    label: str

    @property
    def bearing_label(self) -> str:
        return format_bearing(self.bearing_deg)

    @property
    def distance_label(self) -> str:
        return format_distance(self.distance_m)

    def __repr__(self) -> str:
        return f"Line(id={self.id}, {self.label}, bearing={self.bearing_label}, dist={self.distance_label})"


@dataclass(frozen=True)
class MeasurementPreview:
    """Transient bearing/distance readout for the currently selected pair.

    Never stored; ``midpoint`` is where a host anchors the readout label.
    """
    start: GeoPoint
    end: GeoPoint
    bearing_deg: float
    distance_m: float
    midpoint: GeoPoint

    @property
    def bearing_label(self) -> str:
        return format_bearing(self.bearing_deg)

    @property
    def distance_label(self) -> str:
        return format_distance(self.distance_m)
