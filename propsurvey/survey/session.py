"""Marker selection and wall measurement for one survey session.

This module implements MeasurementSession, the only stateful part of the
engine. It turns map clicks into Marker records, keeps the selection of at
most two markers, and turns a selected pair into a measured wall (Line)
when the user commits.

Selection States:
    The session state is derived from the selection size and validated by a
    StateMachine on every change:

        EMPTY (0 selected) ⇄ ARMED (1 selected) ⇄ READY (2 selected)

    plus EMPTY → READY when auto-arm selects the two newest markers, and
    READY → EMPTY when a wall is measured or the session is reset.

Selection Policies:
    Auto-arm:
        After each ``add_marker`` the two most recently added markers become
        the selection, so consecutive corners are ready to measure without
        extra clicks. Disable with ``auto_arm=False``.

    Eviction by oldest:
        The selection is a two-slot ring buffer (``deque(maxlen=2)``).
        Selecting a third marker drops the oldest selected one instead of
        rejecting the click.

Measurement Direction:
    Bearings are directional. A wall runs from the older selected marker to
    the newer one, in selection order at the time of ``measure()``.

Threading:
    Not thread-safe. Use one session per user and serialize calls.

Example:
    >>> from propsurvey.geo import GeoPoint
    >>> session = MeasurementSession()
    >>> m1 = session.add_marker(GeoPoint(28.878639, 77.126111))
    >>> m2 = session.add_marker(GeoPoint(28.878889, 77.126444))
    >>> session.state is SelectionState.READY
    True
    >>> session.preview is not None
    True
    >>> wall = session.measure()
    >>> wall.label, session.selection
    ('Wall 1', ())
"""

from __future__ import annotations

from collections import deque
from dataclasses import replace
from enum import Enum, auto
from itertools import count
import logging
from typing import Any

from propsurvey.config import (
    LINE_ID_PREFIX,
    LINE_LABEL,
    MARKER_ID_PREFIX,
    MARKER_LABEL,
    MAX_SELECTED,
)
from propsurvey.errors import SelectionError
from propsurvey.geo import GeodesicCalculator, GeoPoint, SphericalCalculator
from propsurvey.state import Action, StateMachine

from .models import Line, Marker, MeasurementPreview

logger = logging.getLogger(__name__)


class SelectionState(Enum):
    """Session states, one per selection size.

    States:
        EMPTY: Nothing selected.
        ARMED: One marker selected, waiting for a second.
        READY: Two markers selected; a preview is available and
               ``measure()`` may be called.
    """

    EMPTY = auto()
    ARMED = auto()
    READY = auto()


_STATE_BY_SIZE = {
    0: SelectionState.EMPTY,
    1: SelectionState.ARMED,
    2: SelectionState.READY,
}


class MeasurementSession:
    """Markers, measured walls and the marker selection of one session.

    Owns three collections: markers in creation order, lines in measurement
    order, and the selection (marker ids, oldest first). Every operation
    completes immediately and only touches memory.

    Invariants:
        • ``0 <= len(selection) <= 2``
        • every selected id names an existing marker
        • ``state`` matches the selection size
        • marker and line ids are never reused, even across ``reset()``

    Attributes:
        calculator (GeodesicCalculator): Earth model used for walls and previews.
        auto_arm (bool): Whether adding a marker selects the two newest markers.
    """

    def __init__(self, calculator: GeodesicCalculator | None = None, auto_arm: bool = True):
        """Create an empty session.

        Args:
            calculator (GeodesicCalculator | None): Earth model. Defaults to a
                SphericalCalculator with the mean Earth radius.
            auto_arm (bool): Enable the auto-arm policy (see module docs).
        """
        self.calculator = calculator or SphericalCalculator()
        self.auto_arm = auto_arm

        self._markers: dict[str, Marker] = {}
        self._lines: list[Line] = []
        self._selection: deque[str] = deque(maxlen=MAX_SELECTED)
        self._marker_ids = count(1)
        self._line_ids = count(1)

        self._state_machine = StateMachine(
            SelectionState.EMPTY,
            {
                SelectionState.EMPTY: [
                    Action(SelectionState.ARMED, self._enter_armed),
                    Action(SelectionState.READY, self._enter_ready),
                ],
                SelectionState.ARMED: [
                    Action(SelectionState.EMPTY, self._enter_empty),
                    Action(SelectionState.READY, self._enter_ready),
                ],
                SelectionState.READY: [
                    Action(SelectionState.EMPTY, self._enter_empty),
                    Action(SelectionState.ARMED, self._enter_armed),
                ],
            },
        )

    # ------------------------------------------------------------------ views
    @property
    def markers(self) -> tuple[Marker, ...]:
        """Markers in creation order."""
        return tuple(self._markers.values())

    @property
    def lines(self) -> tuple[Line, ...]:
        """Measured walls in measurement order."""
        return tuple(self._lines)

    @property
    def selection(self) -> tuple[str, ...]:
        """Selected marker ids, oldest selection first."""
        return tuple(self._selection)

    @property
    def state(self) -> SelectionState:
        return self._state_machine.current

    def get_marker(self, marker_id: str) -> Marker:
        """Look up a marker by id.

        Raises:
            KeyError: If no marker has this id.
        """
        try:
            return self._markers[marker_id]
        except KeyError:
            msg = f"Unknown marker {marker_id!r}"
            raise KeyError(msg) from None

    @property
    def preview(self) -> MeasurementPreview | None:
        """Bearing and distance of the selected pair, or None unless READY.

        Recomputed on every read and never stored. Markers are immutable, so
        the readout can only change when the selection does.
        """
        if self.state is not SelectionState.READY:
            return None
        start, end = (self._markers[marker_id].position for marker_id in self._selection)
        bearing, distance = self.calculator.measure(start, end)
        return MeasurementPreview(
            start=start,
            end=end,
            bearing_deg=bearing,
            distance_m=distance,
            midpoint=start.midpoint(end),
        )

    # ------------------------------------------------------------- operations
    def add_marker(self, position: GeoPoint, label: str | None = None) -> Marker:
        """Place a new marker, then apply the auto-arm policy.

        Args:
            position (GeoPoint): Where the map was clicked.
            label (str | None): Display label. Defaults to ``"Point N"`` with
                N the marker's 1-based position in the session.

        Returns:
            Marker: The new marker.
        """
        sequence_index = len(self._markers) + 1
        marker = Marker(
            id=f"{MARKER_ID_PREFIX}-{next(self._marker_ids)}",
            position=position,
            label=label or MARKER_LABEL.format(n=sequence_index),
            sequence_index=sequence_index,
        )
        self._markers[marker.id] = marker
        logger.debug("Added %r", marker)

        if self.auto_arm:
            self._arm_newest_pair()
        return marker

    def toggle_select(self, marker_id: str) -> None:
        """Select or deselect a marker.

        A selected marker is deselected. Otherwise the marker is appended
        to the selection; when two are already selected the oldest one is
        evicted. Ids that name no marker are ignored.

        Args:
            marker_id (str): Id of a marker of this session.
        """
        if marker_id not in self._markers:
            logger.debug("Ignoring selection of unknown marker %r", marker_id)
            return

        if marker_id in self._selection:
            self._selection.remove(marker_id)
        else:
            self._selection.append(marker_id)  # full deque drops its oldest id
        self._sync_state()

    def measure(self) -> Line:
        """Commit the selected pair as a measured wall.

        The wall runs from the older selected marker to the newer one and is
        labelled ``"Wall N"``, N being the number of walls including this one.
        The selection is cleared afterwards.

        Returns:
            Line: The new wall.

        Raises:
            SelectionError: If the selection does not hold exactly two
                markers. Nothing is changed in that case.
        """
        if self.state is not SelectionState.READY:
            msg = f"need exactly two points, {len(self._selection)} selected"
            raise SelectionError(msg)

        start_id, end_id = self._selection
        start = self._markers[start_id].position
        end = self._markers[end_id].position
        bearing, distance = self.calculator.measure(start, end)

        line = Line(
            id=f"{LINE_ID_PREFIX}-{next(self._line_ids)}",
            start=start,
            end=end,
            bearing_deg=bearing,
            distance_m=distance,
            label=LINE_LABEL.format(n=len(self._lines) + 1),
        )
        self._lines.append(line)
        self._selection.clear()
        self._sync_state()

        logger.info("Measured %s: %s over %s", line.label, line.bearing_label, line.distance_label)
        return line

    def relabel_marker(self, marker_id: str, label: str) -> Marker:
        """Replace a marker's label, keeping its id, position and order.

        Raises:
            KeyError: If no marker has this id.
        """
        relabeled = replace(self.get_marker(marker_id), label=label)
        self._markers[marker_id] = relabeled
        return relabeled

    def reset(self) -> None:
        """Clear markers, walls and selection. Safe to call repeatedly."""
        self._markers.clear()
        self._lines.clear()
        self._selection.clear()
        self._sync_state()
        logger.info("Session reset")

    def summary(self) -> dict[str, Any]:
        """Counts and totals shown alongside the measurement list."""
        return {
            "marker_count": len(self._markers),
            "selected_count": len(self._selection),
            "line_count": len(self._lines),
            "total_distance_m": sum(line.distance_m for line in self._lines),
        }

    # ---------------------------------------------------------------- helpers
    def _arm_newest_pair(self) -> None:
        """Auto-arm policy: select the two newest markers once two exist."""
        if len(self._markers) < MAX_SELECTED:
            return
        newest = list(self._markers)[-MAX_SELECTED:]
        self._selection.clear()
        self._selection.extend(newest)
        self._sync_state()

    def _sync_state(self) -> None:
        target = _STATE_BY_SIZE[len(self._selection)]
        if target is not self._state_machine.current:
            self._state_machine.request_transition(target)

    def _enter_empty(self) -> None:
        logger.debug("Selection cleared")

    def _enter_armed(self) -> None:
        logger.debug("Selection armed with %s", self._selection[0])

    def _enter_ready(self) -> None:
        logger.debug("Selection ready: %s → %s", *self._selection)
