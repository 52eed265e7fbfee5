"""Line protocol spoken by the socket service.

Request, one line, tab-separated::

    <width>\t<height>\t<x0,y0,x1,y1,...>\t<x0,y0,...>...

The first two fields are canvas sizing hints; they must be numeric but
do not affect matching. Every following field is one stroke as a flat
comma-separated list of coordinate pairs.

Response, one line::

    <char1>\t<char2>\t...            on success (may be empty)
    ERROR\t<message>                 on a malformed request
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..domain.geometry import Point
from ..errors import RequestError

ERROR_PREFIX = 'ERROR'


@dataclass(frozen=True)
class MatchRequest:
    """A parsed request line."""
    width: float
    height: float
    strokes: list[list[Point]]


def _parse_number(text: str, what: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise RequestError(f"Invalid {what}: {text!r}") from None
    # nan and inf parse but cannot be projected or rounded
    if not math.isfinite(value):
        raise RequestError(f"Invalid {what}: {text!r}")
    return value


def parse_stroke(field: str) -> list[Point]:
    """Parse one ``x0,y0,x1,y1,...`` field into points.

    Raises:
        RequestError: On an empty field, a non-numeric value or an odd
            number of values.
    """
    if not field.strip():
        raise RequestError("Invalid stroke coordinates: empty stroke")
    coords = [_parse_number(v.strip(), 'stroke coordinate') for v in field.split(',')]
    if len(coords) % 2 != 0:
        raise RequestError("Invalid stroke coordinates: odd number of values")
    return [(coords[i], coords[i + 1]) for i in range(0, len(coords), 2)]


def parse_request(line: str) -> MatchRequest:
    """Parse a request line.

    Raises:
        RequestError: If the line has fewer than three fields or any
            field is malformed.

    Example:
        >>> parse_request('400\\t400\\t0,0,100,100\\n').strokes
        [[(0.0, 0.0), (100.0, 100.0)]]
    """
    parts = line.strip('\r\n').split('\t')
    if len(parts) < 3:
        raise RequestError("Invalid input format")

    width = _parse_number(parts[0], 'width')
    height = _parse_number(parts[1], 'height')
    strokes = [parse_stroke(field) for field in parts[2:]]
    return MatchRequest(width=width, height=height, strokes=strokes)


def format_response(candidates: list[str]) -> str:
    return '\t'.join(candidates) + '\n'


def format_error(message: str) -> str:
    # Tabs and newlines would break the line framing
    clean = message.replace('\t', ' ').replace('\n', ' ')
    return f"{ERROR_PREFIX}\t{clean}\n"
