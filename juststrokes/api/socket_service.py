"""Socket service for handwriting recognition.

Serves the line protocol from juststrokes.api.protocol on a Unix domain
socket (the default) or on TCP. Each connection is handled on its own
thread; all threads share one read-only Matcher. A connection may send
any number of request lines and gets one response line per request. A
malformed request is answered with an ERROR line and the connection and
the service carry on.

Example:
    Serve on the default per-user socket::

        from juststrokes.api import SocketService
        from juststrokes.data import load_database
        from juststrokes.matching import Matcher

        service = SocketService(Matcher(load_database('graphics.csv')))
        service.serve_forever()

    Query it from a shell::

        printf '400\\t400\\t0,0,100,100\\n' | nc -U /run/user/1000/handwritten/juststrokes.socket
"""

from __future__ import annotations

import logging
import os
import socketserver
import time
from pathlib import Path

from ..config import DEFAULT_CANDIDATES
from ..errors import RequestError
from ..matching.matcher import Matcher
from .protocol import format_error, format_response, parse_request

logger = logging.getLogger(__name__)


def default_socket_path() -> str:
    """Per-user socket path under the XDG runtime directory."""
    return f"/run/user/{os.getuid()}/handwritten/juststrokes.socket"


class _MatchRequestHandler(socketserver.StreamRequestHandler):
    """Answer each request line of one connection."""

    def handle(self):
        service: SocketService = self.server.service
        for raw in self.rfile:
            self.wfile.write(service.handle_line(raw).encode('utf-8'))


class _UnixServer(socketserver.ThreadingUnixStreamServer):
    daemon_threads = True


class _TCPServer(socketserver.ThreadingTCPServer):
    daemon_threads = True
    allow_reuse_address = True


class SocketService:
    """Line-protocol front end for a Matcher.

    Attributes:
        matcher: Shared matcher used by every connection.
        candidates: Number of candidates returned per request.
        socket_path: Unix socket path, or None when serving TCP.
        address: (host, port) for TCP, or None when serving a Unix socket.
    """

    def __init__(self, matcher: Matcher, socket_path: str | None = None,
                 address: tuple[str, int] | None = None,
                 candidates: int = DEFAULT_CANDIDATES):
        if socket_path is not None and address is not None:
            raise ValueError("Give either socket_path or address, not both")
        if socket_path is None and address is None:
            socket_path = default_socket_path()
        self.matcher = matcher
        self.candidates = candidates
        self.socket_path = socket_path
        self.address = address
        self._server: socketserver.BaseServer | None = None
        self._serving = False

    def handle_line(self, raw: bytes | str) -> str:
        """Process one request line and return the response line."""
        start = time.perf_counter()
        try:
            line = raw.decode('utf-8') if isinstance(raw, bytes) else raw
            request = parse_request(line)
            candidates = self.matcher.match(request.strokes, self.candidates)
        except UnicodeDecodeError:
            logger.warning("Rejected request: not valid UTF-8")
            return format_error("Invalid encoding")
        except RequestError as e:
            logger.warning("Rejected request: %s", e)
            return format_error(str(e))
        except Exception:
            logger.error("Unexpected error handling request", exc_info=True)
            return format_error("internal error")

        logger.debug("Matched %d strokes -> %d candidates in %.2f ms",
                     len(request.strokes), len(candidates),
                     (time.perf_counter() - start) * 1000.0)
        return format_response(candidates)

    def bind(self) -> None:
        """Create and bind the listening server."""
        if self._server is not None:
            return
        if self.socket_path is not None:
            path = Path(self.socket_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            # Stale socket from a previous run
            if path.exists():
                path.unlink()
            self._server = _UnixServer(str(path), _MatchRequestHandler)
        else:
            self._server = _TCPServer(self.address, _MatchRequestHandler)
        self._server.service = self
        logger.info("Listening on %s", self.server_address)

    @property
    def server_address(self):
        """Bound path or (host, port); the real port when bound to port 0."""
        if self._server is not None:
            return self._server.server_address
        return self.socket_path if self.socket_path is not None else self.address

    def serve_forever(self, poll_interval: float = 0.5) -> None:
        """Bind if needed and handle connections until shutdown()."""
        self.bind()
        self._serving = True
        try:
            self._server.serve_forever(poll_interval=poll_interval)
        finally:
            self._serving = False

    def shutdown(self) -> None:
        """Stop serve_forever() (from another thread) and release the socket."""
        if self._server is None:
            return
        if self._serving:
            self._server.shutdown()
        self.close()

    def close(self) -> None:
        """Close the listening socket and remove the socket file."""
        if self._server is None:
            return
        self._server.server_close()
        self._server = None
        if self.socket_path is not None:
            try:
                os.unlink(self.socket_path)
            except FileNotFoundError:
                pass
        logger.info("Socket service stopped")

    def __enter__(self) -> SocketService:
        self.bind()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
