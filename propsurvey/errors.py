"""Error types raised by the measurement engine.

Malformed DMS text is not an error: the codec returns ``None`` so callers can
fall back to another interpretation of the input. Only misuse of the
measurement session is raised.
"""


class SurveyError(ValueError):
    """Base class for measurement engine errors."""


class SelectionError(SurveyError):
    """Raised when a wall is measured without exactly two selected markers."""
