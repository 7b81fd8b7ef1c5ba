"""Measurement session: markers, selection and measured walls.

Exports:
    MeasurementSession: Stateful marker/selection/wall engine
    SelectionState: EMPTY / ARMED / READY session states
    Marker: Boundary corner record
    Line: Measured wall record
    MeasurementPreview: Transient readout for the selected pair
"""

from .models import Line, Marker, MeasurementPreview
from .session import MeasurementSession, SelectionState

__all__ = ["MeasurementSession", "SelectionState", "Marker", "Line", "MeasurementPreview"]
