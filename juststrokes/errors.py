"""Exception types raised by the recognizer.

Two families are defined here:

Contract violations (raised by the core, never caught inside it):
    InvalidStrokeError: An empty stroke, or an empty stroke set, reached
        the preprocessing pipeline.
    InvalidBBoxError: A bounding box with a negative extent reached
        normalization.

Boundary errors (raised by collaborators and handled there):
    DatabaseFormatError: A reference database file could not be parsed.
    RequestError: A client request line or body was malformed.

All of them derive from JustStrokesError, and from ValueError so callers
that only care about bad input can catch the builtin.
"""

from __future__ import annotations


class JustStrokesError(ValueError):
    """Base class for all recognizer errors."""


class InvalidStrokeError(JustStrokesError):
    """Raised when strokes are empty or the stroke set is empty."""


class InvalidBBoxError(JustStrokesError):
    """Raised when a bounding box has min > max on some axis."""


class DatabaseFormatError(JustStrokesError):
    """Raised when a reference database file is malformed."""


class RequestError(JustStrokesError):
    """Raised when a client request cannot be parsed."""
