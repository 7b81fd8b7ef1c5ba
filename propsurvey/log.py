"""Logging setup for hosts embedding the measurement engine.

Engine modules log through ``logging.getLogger(__name__)`` and stay silent
until a host opts in. ``setup_logging`` attaches a single rich handler to the
``propsurvey`` logger tree.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "propsurvey"


def setup_logging(level: int | str = "INFO", console: Console | None = None) -> logging.Logger:
    """Route ``propsurvey`` log records to a rich console handler.

    Calling it again replaces the previous handler instead of stacking a
    second one, so hosts may call it once per session.

    Args:
        level: Logging level name or number for the package logger.
        console: Console to write to. Defaults to a stderr console.

    Returns:
        logging.Logger: The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level if isinstance(level, int) else level.upper())
    logger.propagate = False
    return logger
