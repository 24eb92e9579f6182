"""HTTP-triggered function handler served by a plain HTTP server."""

from __future__ import annotations

import logging
import os
import sys
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Mapping, Sequence
from urllib.parse import parse_qs, urlsplit

PORT_VARIABLE = "FUNCTIONS_CUSTOMHANDLER_PORT"
DEFAULT_ADDRESS = ":8080"
ROUTE = "/api/HttpExample"

_logger = logging.getLogger(__name__)


def hello_message(name: str = "") -> str:
    """Return the response text for an optional caller name."""
    if name:
        return f"Hello, {name}. This HTTP triggered function executed successfully.\n"
    return (
        "This HTTP triggered function executed successfully. "
        "Pass a name in the query string for a personalized response.\n"
    )


def listen_address(environ: Mapping[str, str] | None = None) -> str:
    """Return the ``:port`` address to listen on, taken from the environment."""
    environ = os.environ if environ is None else environ
    if PORT_VARIABLE in environ:
        return ":" + environ[PORT_VARIABLE]
    return DEFAULT_ADDRESS


class _Handler(BaseHTTPRequestHandler):
    def _handle(self) -> None:
        parts = urlsplit(self.path)
        if parts.path != ROUTE:
            self._reply(404, "404 page not found\n")
            return
        values = parse_qs(parts.query, keep_blank_values=True).get("name", [""])
        self._reply(200, hello_message(values[0]))

    def _reply(self, status: int, text: str) -> None:
        body = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)

    do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = do_HEAD = do_OPTIONS = _handle

    def log_message(self, format: str, *args: object) -> None:
        """Send per-request access lines to the debug log instead of stderr."""
        _logger.debug("%s - " + format, self.address_string(), *args)


def _split_address(address: str) -> tuple[str, int]:
    host, _, port = address.rpartition(":")
    return host, int(port)


def _make_server(address: tuple[str, int]) -> ThreadingHTTPServer:
    return ThreadingHTTPServer(address, _Handler)


def _log(message: str) -> None:
    print(time.strftime("%Y/%m/%d %H:%M:%S ") + message, file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    address = listen_address()
    _log(f"About to listen on {address}. Go to https://127.0.0.1{address}/")
    try:
        with _make_server(_split_address(address)) as server:
            server.serve_forever()
    except (OSError, ValueError) as exc:
        _log(str(exc))
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())