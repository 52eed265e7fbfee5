"""Service layer for handwriting recognition.

This package exposes a Matcher to clients. Both front ends parse their
input at the boundary, answer malformed requests with an error, and keep
serving.

    SocketService: Line protocol over a Unix socket or TCP.
    create_app: Flask JSON endpoint.
    parse_request, format_response, format_error: The line protocol.

Example usage::

    from juststrokes.api import SocketService

    service = SocketService(matcher, address=('127.0.0.1', 7070))
    service.serve_forever()
"""

from .protocol import MatchRequest, format_error, format_response, parse_request
from .socket_service import SocketService, default_socket_path
from .web import create_app

__all__ = [
    'SocketService', 'default_socket_path', 'create_app',
    'MatchRequest', 'parse_request', 'format_response', 'format_error',
]
