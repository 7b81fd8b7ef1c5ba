"""
Tests for session rendering and logging setup.
"""

import io
import logging
import unittest

from rich.console import Console
from rich.logging import RichHandler

from propsurvey.geo import GeoPoint
from propsurvey.log import LOGGER_NAME, setup_logging
from propsurvey.report import measurements_table, render_session
from propsurvey.survey import MeasurementSession


def record_console() -> Console:
    return Console(record=True, width=160, file=io.StringIO())


class TestReport(unittest.TestCase):
    """Test rich rendering of a session."""

    def setUp(self):
        self.session = MeasurementSession()
        self.session.add_marker(GeoPoint(28.878639, 77.126111))
        self.session.add_marker(GeoPoint(28.878889, 77.126444))

    def test_empty_session(self):
        """Test the placeholder text."""
        console = record_console()
        render_session(MeasurementSession(), console=console)
        text = console.export_text()
        self.assertIn("Measurements", text)
        self.assertIn("No measurements yet", text)

    def test_preview_shown_when_ready(self):
        """Test the selected pair readout."""
        console = record_console()
        render_session(self.session, console=console)
        text = console.export_text()
        preview = self.session.preview
        self.assertIn("Selected pair:", text)
        self.assertIn(preview.bearing_label, text)
        self.assertIn(preview.distance_label, text)

    def test_measured_walls_listed(self):
        """Test one row per wall and the wall total."""
        wall = self.session.measure()
        console = record_console()
        render_session(self.session, console=console)
        text = console.export_text()
        self.assertIn("Wall 1", text)
        self.assertIn(wall.bearing_label, text)
        self.assertIn(wall.distance_label, text)
        self.assertIn("28.878639, 77.126111", text)
        self.assertIn("Total walls measured: 1", text)
        self.assertNotIn("Selected pair:", text)

    def test_table_rows(self):
        """Test the table row count."""
        self.session.measure()
        self.session.add_marker(GeoPoint(28.8785, 77.1267))
        self.session.measure()
        self.assertEqual(measurements_table(self.session).row_count, 2)


class TestLogging(unittest.TestCase):
    """Test setup_logging."""

    def tearDown(self):
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    def test_single_handler(self):
        """Test that repeated setup does not stack handlers."""
        setup_logging(console=record_console())
        logger = setup_logging("debug", console=record_console())
        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        self.assertEqual(len(handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_measure_logged(self):
        """Test that a measured wall is logged at info level."""
        console = record_console()
        setup_logging("INFO", console=console)
        session = MeasurementSession()
        session.add_marker(GeoPoint(0.0, 0.0))
        session.add_marker(GeoPoint(0.0, 0.001))
        session.measure()
        self.assertIn("Measured Wall 1", console.export_text())


if __name__ == '__main__':
    unittest.main()
