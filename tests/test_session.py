"""
Tests for the measurement session.
"""

import random
import unittest

from propsurvey.errors import SelectionError, SurveyError
from propsurvey.geo import GeodesicCalculator, GeoPoint, SphericalCalculator
from propsurvey.survey import Line, MeasurementSession, SelectionState

CORNERS = [
    GeoPoint(28.878639, 77.126111),
    GeoPoint(28.878889, 77.126444),
    GeoPoint(28.878500, 77.126700),
    GeoPoint(28.878300, 77.126200),
]


class RecordingCalculator(GeodesicCalculator):
    """Calculator that records the direction it was asked to measure."""

    def __init__(self):
        self.calls = []

    def bearing(self, p1, p2):
        self.calls.append((p1, p2))
        return 12.5

    def distance(self, p1, p2):
        return 42.0


class TestAddMarker(unittest.TestCase):
    """Test marker creation and auto-arm."""

    def setUp(self):
        self.session = MeasurementSession()

    def test_first_marker(self):
        """Test id, label and order of the first marker."""
        marker = self.session.add_marker(CORNERS[0])
        self.assertEqual(marker.id, "marker-1")
        self.assertEqual(marker.label, "Point 1")
        self.assertEqual(marker.sequence_index, 1)
        self.assertEqual(marker.position, CORNERS[0])
        self.assertEqual(self.session.markers, (marker,))
        self.assertEqual(self.session.selection, ())
        self.assertIs(self.session.state, SelectionState.EMPTY)

    def test_auto_arm_selects_newest_pair(self):
        """Test that each new marker re-arms the two newest markers."""
        m1, m2, m3 = (self.session.add_marker(p) for p in CORNERS[:3])
        self.assertEqual(self.session.selection, (m2.id, m3.id))
        self.assertIs(self.session.state, SelectionState.READY)
        self.assertNotIn(m1.id, self.session.selection)

    def test_custom_label(self):
        """Test an explicit label."""
        marker = self.session.add_marker(CORNERS[0], label="Gate")
        self.assertEqual(marker.label, "Gate")

    def test_auto_arm_disabled(self):
        """Test that markers stay unselected without auto-arm."""
        session = MeasurementSession(auto_arm=False)
        for point in CORNERS[:3]:
            session.add_marker(point)
        self.assertEqual(session.selection, ())
        self.assertIs(session.state, SelectionState.EMPTY)

    def test_get_marker(self):
        """Test lookup by id."""
        marker = self.session.add_marker(CORNERS[0])
        self.assertIs(self.session.get_marker(marker.id), marker)
        with self.assertRaises(KeyError):
            self.session.get_marker("marker-99")


class TestToggleSelect(unittest.TestCase):
    """Test manual selection."""

    def setUp(self):
        self.session = MeasurementSession(auto_arm=False)
        self.m1, self.m2, self.m3 = (self.session.add_marker(p) for p in CORNERS[:3])

    def test_select_and_deselect(self):
        """Test that toggling twice returns to the empty selection."""
        self.session.toggle_select(self.m1.id)
        self.assertEqual(self.session.selection, (self.m1.id,))
        self.assertIs(self.session.state, SelectionState.ARMED)
        self.session.toggle_select(self.m1.id)
        self.assertEqual(self.session.selection, ())
        self.assertIs(self.session.state, SelectionState.EMPTY)

    def test_third_selection_evicts_oldest(self):
        """Test the two-slot ring buffer."""
        for marker in (self.m1, self.m2, self.m3):
            self.session.toggle_select(marker.id)
        self.assertEqual(self.session.selection, (self.m2.id, self.m3.id))
        self.assertIs(self.session.state, SelectionState.READY)

    def test_deselect_from_ready(self):
        """Test READY back to ARMED."""
        self.session.toggle_select(self.m1.id)
        self.session.toggle_select(self.m2.id)
        self.session.toggle_select(self.m1.id)
        self.assertEqual(self.session.selection, (self.m2.id,))
        self.assertIs(self.session.state, SelectionState.ARMED)

    def test_unknown_id_ignored(self):
        """Test that an unknown id changes nothing."""
        self.session.toggle_select(self.m1.id)
        self.session.toggle_select("marker-404")
        self.assertEqual(self.session.selection, (self.m1.id,))


class TestMeasure(unittest.TestCase):
    """Test committing walls."""

    def setUp(self):
        self.session = MeasurementSession()

    def test_scenario(self):
        """Test three corners measured as two walls."""
        m1 = self.session.add_marker(CORNERS[0])
        m2 = self.session.add_marker(CORNERS[1])

        wall = self.session.measure()
        self.assertIsInstance(wall, Line)
        self.assertEqual(wall.id, "line-1")
        self.assertEqual(wall.label, "Wall 1")
        self.assertEqual((wall.start, wall.end), (m1.position, m2.position))
        expected = SphericalCalculator().measure(m1.position, m2.position)
        self.assertEqual((wall.bearing_deg, wall.distance_m), expected)
        self.assertEqual(self.session.selection, ())
        self.assertIs(self.session.state, SelectionState.EMPTY)

        m3 = self.session.add_marker(CORNERS[2])
        self.assertEqual(self.session.selection, (m2.id, m3.id))
        second = self.session.measure()
        self.assertEqual(second.label, "Wall 2")
        self.assertEqual((second.start, second.end), (m2.position, m3.position))
        self.assertEqual(self.session.lines, (wall, second))

    def test_measure_requires_two_points(self):
        """Test that measuring with 0 or 1 selected raises and changes nothing."""
        with self.assertRaises(SelectionError):
            self.session.measure()

        self.session.add_marker(CORNERS[0])
        with self.assertRaises(SelectionError) as ctx:
            self.session.measure()
        self.assertIn("need exactly two points", str(ctx.exception))
        self.assertEqual(self.session.lines, ())

        session = MeasurementSession(auto_arm=False)
        marker = session.add_marker(CORNERS[0])
        session.toggle_select(marker.id)
        with self.assertRaises(SurveyError):
            session.measure()
        self.assertEqual(session.selection, (marker.id,))

    def test_selection_error_is_value_error(self):
        """Test the error hierarchy."""
        self.assertTrue(issubclass(SelectionError, ValueError))

    def test_direction_follows_selection_order(self):
        """Test that the wall runs from the older to the newer selection."""
        calc = RecordingCalculator()
        session = MeasurementSession(calculator=calc, auto_arm=False)
        m1 = session.add_marker(CORNERS[0])
        m2 = session.add_marker(CORNERS[1])
        session.toggle_select(m2.id)
        session.toggle_select(m1.id)

        wall = session.measure()
        self.assertEqual(calc.calls[-1], (m2.position, m1.position))
        self.assertEqual((wall.start, wall.end), (m2.position, m1.position))
        self.assertEqual((wall.bearing_deg, wall.distance_m), (12.5, 42.0))
        self.assertEqual((wall.bearing_label, wall.distance_label), ("12.5°", "42.0 m"))

    def test_same_markers_measured_twice(self):
        """Test that a wall can be measured again as a new line."""
        session = MeasurementSession(auto_arm=False)
        m1 = session.add_marker(CORNERS[0])
        m2 = session.add_marker(CORNERS[1])
        for _ in range(2):
            session.toggle_select(m1.id)
            session.toggle_select(m2.id)
            session.measure()
        self.assertEqual([line.id for line in session.lines], ["line-1", "line-2"])
        self.assertEqual([line.label for line in session.lines], ["Wall 1", "Wall 2"])


class TestPreview(unittest.TestCase):
    """Test the live measurement preview."""

    def test_no_preview_unless_ready(self):
        """Test EMPTY and ARMED sessions."""
        session = MeasurementSession()
        self.assertIsNone(session.preview)
        session.add_marker(CORNERS[0])
        self.assertIsNone(session.preview)

    def test_preview_matches_measure(self):
        """Test that the preview shows what measure() will commit."""
        session = MeasurementSession()
        session.add_marker(CORNERS[0])
        session.add_marker(CORNERS[1])
        preview = session.preview
        self.assertEqual(preview.start, CORNERS[0])
        self.assertEqual(preview.end, CORNERS[1])
        self.assertEqual(preview.midpoint, CORNERS[0].midpoint(CORNERS[1]))

        wall = session.measure()
        self.assertEqual(preview.bearing_deg, wall.bearing_deg)
        self.assertEqual(preview.distance_m, wall.distance_m)
        self.assertEqual(preview.distance_label, wall.distance_label)
        self.assertIsNone(session.preview)

    def test_preview_follows_selection(self):
        """Test that the preview tracks a changed selection."""
        session = MeasurementSession()
        m1, m2, m3 = (session.add_marker(p) for p in CORNERS[:3])
        self.assertEqual(session.preview.start, m2.position)
        session.toggle_select(m1.id)
        self.assertEqual((session.preview.start, session.preview.end), (m3.position, m1.position))


class TestResetAndRelabel(unittest.TestCase):
    """Test reset, relabel and summary."""

    def setUp(self):
        self.session = MeasurementSession()
        for point in CORNERS[:2]:
            self.session.add_marker(point)
        self.session.measure()

    def test_reset_clears_everything(self):
        """Test that reset empties the session and is idempotent."""
        self.session.reset()
        self.session.reset()
        self.assertEqual(self.session.markers, ())
        self.assertEqual(self.session.lines, ())
        self.assertEqual(self.session.selection, ())
        self.assertIs(self.session.state, SelectionState.EMPTY)

    def test_ids_not_reused_after_reset(self):
        """Test fresh ids and restarted labels after reset."""
        self.session.reset()
        marker = self.session.add_marker(CORNERS[2])
        self.assertEqual(marker.id, "marker-3")
        self.assertEqual(marker.label, "Point 1")
        self.assertEqual(marker.sequence_index, 1)

        self.session.add_marker(CORNERS[3])
        wall = self.session.measure()
        self.assertEqual(wall.id, "line-2")
        self.assertEqual(wall.label, "Wall 1")

    def test_reset_from_ready(self):
        """Test reset with a pair selected."""
        self.session.add_marker(CORNERS[2])
        self.assertIs(self.session.state, SelectionState.READY)
        self.session.reset()
        self.assertIs(self.session.state, SelectionState.EMPTY)
        self.assertIsNone(self.session.preview)

    def test_relabel_marker(self):
        """Test that relabeling keeps id, position and order."""
        first = self.session.markers[0]
        relabeled = self.session.relabel_marker(first.id, "North-east corner")
        self.assertEqual(relabeled.label, "North-east corner")
        self.assertEqual(relabeled.id, first.id)
        self.assertEqual(relabeled.position, first.position)
        self.assertEqual(self.session.markers[0], relabeled)
        with self.assertRaises(KeyError):
            self.session.relabel_marker("marker-99", "x")

    def test_summary(self):
        """Test counts and total distance."""
        summary = self.session.summary()
        self.assertEqual(summary["marker_count"], 2)
        self.assertEqual(summary["selected_count"], 0)
        self.assertEqual(summary["line_count"], 1)
        self.assertEqual(summary["total_distance_m"], self.session.lines[0].distance_m)


class TestInvariants(unittest.TestCase):
    """Test session invariants under random use."""

    def test_random_operations(self):
        """Test selection size, state and id uniqueness after every step."""
        rng = random.Random(3)
        session = MeasurementSession(auto_arm=False)
        seen_markers, seen_lines = set(), set()
        expected_state = {0: SelectionState.EMPTY, 1: SelectionState.ARMED, 2: SelectionState.READY}

        for _ in range(500):
            action = rng.choice(["add", "toggle", "toggle", "measure", "reset"])
            if action == "add":
                marker = session.add_marker(GeoPoint(rng.uniform(-60, 60), rng.uniform(-170, 170)))
                self.assertNotIn(marker.id, seen_markers)
                seen_markers.add(marker.id)
            elif action == "toggle" and session.markers:
                session.toggle_select(rng.choice(session.markers).id)
            elif action == "measure":
                if len(session.selection) == 2:
                    line = session.measure()
                    self.assertNotIn(line.id, seen_lines)
                    seen_lines.add(line.id)
                    self.assertGreaterEqual(line.bearing_deg, 0.0)
                    self.assertLess(line.bearing_deg, 360.0)
                    self.assertGreaterEqual(line.distance_m, 0.0)
                else:
                    with self.assertRaises(SelectionError):
                        session.measure()
            elif action == "reset":
                session.reset()

            selection = session.selection
            self.assertLessEqual(len(selection), 2)
            self.assertEqual(len(set(selection)), len(selection))
            marker_ids = {marker.id for marker in session.markers}
            self.assertTrue(set(selection) <= marker_ids)
            self.assertIs(session.state, expected_state[len(selection)])


if __name__ == '__main__':
    unittest.main()
