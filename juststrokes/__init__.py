"""JustStrokes handwriting recognition package.

Recognizes a handwritten ideograph by comparing the user's strokes
against a reference database of encoded character strokes and returning
the closest candidates.

Architecture Overview:
    Raw strokes go through a fixed preprocessing pipeline and are then
    ranked against the database:

    - juststrokes.analysis normalizes the enclosing box, projects points
      into a 0-255 square, resamples each stroke to 4 points and encodes
      its direction and length (10 values per stroke)
    - juststrokes.matching scores encoded characters stroke by stroke and
      keeps the top-K entries with the same stroke count
    - juststrokes.data loads the reference database (JSON or CSV)
    - juststrokes.api serves matches over a socket line protocol or HTTP

The package is organized into the following modules:
    domain: Value objects (Point, BBox, CharacterEntry).
    utils: Geometry helpers.
    analysis: Box normalization, projection, resampling, feature encoding.
    matching: Scoring, top-K ranking, the Matcher, self-identity checks.
    data: Database loaders and JSON to CSV conversion.
    api: Socket service and Flask endpoint.
    config: Constants, MatcherOptions and logging setup.

Example usage:
    Match a drawing against a database::

        from juststrokes import Matcher, load_database

        matcher = Matcher(load_database('graphics.csv'))
        strokes = [[(12, 40), (60, 42), (110, 41)]]
        print(matcher.match(strokes, 5))

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

__version__ = '1.0.0'

from .analysis import encode_strokes
from .config import MatcherOptions, configure_logging
from .data import load_database
from .domain import BBox, CharacterEntry
from .errors import (
    DatabaseFormatError,
    InvalidBBoxError,
    InvalidStrokeError,
    JustStrokesError,
    RequestError,
)
from .matching import Matcher, score_similarity

__all__ = [
    # Domain objects
    'BBox', 'CharacterEntry', 'MatcherOptions',
    # Pipeline
    'encode_strokes', 'score_similarity', 'Matcher',
    # Data
    'load_database',
    # Errors
    'JustStrokesError', 'InvalidStrokeError', 'InvalidBBoxError',
    'DatabaseFormatError', 'RequestError',
    'configure_logging',
]
