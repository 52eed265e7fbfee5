"""Flask JSON endpoint for handwriting recognition.

HTTP counterpart of the socket service, for clients that would rather
POST JSON than speak the line protocol.

Routes:
    GET  /api/health   -> {"ok": true, "entries": <database size>}
    POST /api/match    body {"strokes": [[[x, y], ...], ...], "candidates": k}
                       -> {"candidates": ["...", ...]}

Malformed bodies get a 400 with {"error": "..."}.

Example:
    Run the development server::

        from juststrokes.api.web import create_app

        app = create_app(matcher)
        app.run(host='127.0.0.1', port=5000)
"""

from __future__ import annotations

import logging
import math

from flask import Flask, current_app, jsonify, request

from ..config import DEFAULT_CANDIDATES
from ..errors import RequestError
from ..matching.matcher import Matcher

logger = logging.getLogger(__name__)


def _to_coordinate(value) -> float | None:
    """Convert a JSON number to a finite float, or None if it is not one."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    try:
        coord = float(value)
    except OverflowError:
        return None
    return coord if math.isfinite(coord) else None


def parse_json_strokes(data) -> list[list[tuple[float, float]]]:
    """Validate the ``strokes`` member of a match request body.

    Raises:
        RequestError: If the structure is not a list of non-empty lists
            of finite numeric [x, y] pairs.
    """
    if not isinstance(data, dict) or 'strokes' not in data:
        raise RequestError("Missing strokes data")
    strokes = data['strokes']
    if not isinstance(strokes, list):
        raise RequestError("strokes must be a list")

    parsed = []
    for i, stroke in enumerate(strokes):
        if not isinstance(stroke, list) or not stroke:
            raise RequestError(f"Stroke {i} must be a non-empty list of points")
        points = []
        for point in stroke:
            coords = [_to_coordinate(v) for v in point] if isinstance(point, list) else []
            if len(coords) != 2 or None in coords:
                raise RequestError(f"Stroke {i} has an invalid point: {point!r}")
            points.append((coords[0], coords[1]))
        parsed.append(points)
    return parsed


def _parse_candidates(data, default: int) -> int:
    value = data.get('candidates', default)
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise RequestError("candidates must be a non-negative integer")
    return value


def create_app(matcher: Matcher, candidates: int = DEFAULT_CANDIDATES) -> Flask:
    """Create the Flask application serving ``matcher``.

    Args:
        matcher: Shared read-only matcher.
        candidates: Default candidate count when a request gives none.

    Returns:
        Configured Flask app.
    """
    app = Flask(__name__)
    app.config['MATCHER'] = matcher
    app.config['DEFAULT_CANDIDATES'] = candidates

    @app.route('/api/health')
    def api_health():
        return jsonify(ok=True, entries=len(current_app.config['MATCHER']))

    @app.route('/api/match', methods=['POST'])
    def api_match():
        data = request.get_json(silent=True)
        try:
            strokes = parse_json_strokes(data)
            how_many = _parse_candidates(data, current_app.config['DEFAULT_CANDIDATES'])
        except RequestError as e:
            logger.warning("Rejected match request: %s", e)
            return jsonify(error=str(e)), 400

        result = current_app.config['MATCHER'].match(strokes, how_many)
        logger.debug("Matched %d strokes -> %d candidates", len(strokes), len(result))
        return jsonify(candidates=result)

    return app
