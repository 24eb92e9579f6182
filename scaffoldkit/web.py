"""A small JSON web application with a configurable CORS layer."""

from __future__ import annotations

from datetime import timedelta
from typing import Iterable

from flask import Flask, Response, g, jsonify, request

DEFAULT_CORS_MAX_AGE = timedelta(hours=12)

DEFAULT_ORIGINS = ("*",)
DEFAULT_METHODS = ("GET", "POST", "PUT", "DELETE")
DEFAULT_HEADERS = ("Origin", "Content-Type")


def _canonical_header(name: str) -> str:
    return "-".join(part.capitalize() for part in name.strip().split("-"))


def index():
    """Answer with a greeting document."""
    return jsonify({"message": "Hello, World!"}), 200


def enable_cors(app: Flask, origins: Iterable[str], methods: Iterable[str],
                headers: Iterable[str]) -> Flask:
    """Attach CORS handling with credentials allowed and a 12 hour max age.

    An origin of ``"*"`` admits every origin. Requests from origins that are
    not admitted are refused with 403; preflight requests are answered with 204.
    """
    allowed_origins = [origin.strip() for origin in origins]
    allow_all = "*" in allowed_origins
    allowed_methods = ",".join(method.strip().upper() for method in methods)
    allowed_headers = ",".join(_canonical_header(h) for h in headers)
    max_age = str(int(DEFAULT_CORS_MAX_AGE.total_seconds()))

    def _same_host(origin: str) -> bool:
        host = request.host
        return origin in (f"http://{host}", f"https://{host}")

    def _apply_origin(response: Response, origin: str) -> None:
        if allow_all:
            response.headers["Access-Control-Allow-Origin"] = "*"
        else:
            response.headers.add("Vary", "Origin")
            response.headers["Access-Control-Allow-Origin"] = origin

    @app.before_request
    def _cors_before():
        origin = request.headers.get("Origin", "")
        g.cors_origin = None
        if not origin or _same_host(origin):
            return None
        if not allow_all and origin not in allowed_origins:
            return Response(status=403)
        if request.method == "OPTIONS":
            response = Response(status=204)
            response.headers["Access-Control-Allow-Credentials"] = "true"
            if allowed_methods:
                response.headers["Access-Control-Allow-Methods"] = allowed_methods
            if allowed_headers:
                response.headers["Access-Control-Allow-Headers"] = allowed_headers
            response.headers["Access-Control-Max-Age"] = max_age
            if allow_all:
                response.headers["Access-Control-Allow-Origin"] = "*"
            else:
                for vary in ("Origin", "Access-Control-Request-Method",
                             "Access-Control-Request-Headers"):
                    response.headers.add("Vary", vary)
                response.headers["Access-Control-Allow-Origin"] = origin
            return response
        g.cors_origin = origin
        return None

    @app.after_request
    def _cors_after(response: Response) -> Response:
        origin = g.get("cors_origin")
        if origin:
            response.headers["Access-Control-Allow-Credentials"] = "true"
            _apply_origin(response, origin)
        return response

    return app


def create_app() -> Flask:
    """Build the application with its routes and middleware registered."""
    app = Flask(__name__)
    app.add_url_rule("/", "index", index, methods=["GET"])
    enable_cors(app, DEFAULT_ORIGINS, DEFAULT_METHODS, DEFAULT_HEADERS)
    return app