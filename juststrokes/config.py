"""Configuration constants and logging setup for JustStrokes.

This module centralizes the tunables shared by the preprocessing
pipeline, the matcher and the services:

    - Encoding constants (sample count, coordinate space, scoring weight)
    - MatcherOptions, the two bounding-box knobs fixed at matcher creation
    - Service defaults (candidate count, database file)
    - configure_logging() for application-wide log setup

Example:
    Configure logging and build options at startup::

        from juststrokes.config import MatcherOptions, configure_logging

        configure_logging(level='DEBUG')
        options = MatcherOptions(max_ratio=1.5)

Attributes:
    NUM_ENCODED_POINTS (int): Points sampled per stroke (4).
    NUM_ENCODED_VALUES (int): Size of the normalized coordinate space and
        of the angle code range (256).
    FEATURE_LENGTH (int): Values per encoded stroke (10).
    PER_STROKE_WEIGHT (float): Angle penalty weight per stroke (4.0).
    DEFAULT_MAX_RATIO (float): Default max aspect ratio (1.0).
    DEFAULT_MIN_WIDTH (float): Default minimum box extent (8.0).
    DEFAULT_CANDIDATES (int): Candidates returned by the services (10).
    DEFAULT_DATA_FILE (str): Database loaded when none is given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

# Module logger
logger = logging.getLogger(__name__)

# --- Encoding ---
NUM_ENCODED_POINTS = 4
NUM_ENCODED_VALUES = 256
FEATURE_LENGTH = 2 * NUM_ENCODED_POINTS + 2
ANGLE_INDEX = 2 * NUM_ENCODED_POINTS
LENGTH_INDEX = ANGLE_INDEX + 1

# --- Scoring ---
# Fixed tuning constant, multiplied by NUM_ENCODED_POINTS in the angle term.
PER_STROKE_WEIGHT = 4.0

# --- Matcher defaults ---
DEFAULT_MAX_RATIO = 1.0
DEFAULT_MIN_WIDTH = 8.0

# --- Services ---
DEFAULT_CANDIDATES = 10
DEFAULT_DATA_FILE = 'graphics.csv'
DEFAULT_WEB_HOST = '127.0.0.1'
DEFAULT_WEB_PORT = 5000


@dataclass(frozen=True)
class MatcherOptions:
    """Bounding-box normalization knobs, immutable after matcher creation.

    Attributes:
        max_ratio: Maximum aspect ratio allowed before the shorter side of
            the box is widened. Values <= 0 disable the aspect pass.
        min_width: Minimum extent of either box axis; smaller axes are
            expanded symmetrically so projection never divides by zero.
    """
    max_ratio: float = DEFAULT_MAX_RATIO
    min_width: float = DEFAULT_MIN_WIDTH


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Route recognizer, service and Flask logs through one root handler set.

    Used by every CLI subcommand before the database is loaded, so the
    matcher summary and per-request warnings share a format. Handlers
    left by an earlier call are dropped; werkzeug is held at WARNING so
    the web command does not log every request line.

    Args:
        level: Level name, case-insensitive; unknown names fall back to INFO.
        log_file: Extra destination appended to, besides stderr.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logger.info("Logging to %s at %s", log_file or 'stderr', level.upper())
