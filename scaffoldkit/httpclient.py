"""A small HTTP client with a cookie jar and a short default timeout."""

from __future__ import annotations

from http.cookiejar import Cookie
from typing import IO, Any, Union
from urllib.parse import urlsplit

import requests
from requests.adapters import HTTPAdapter

DEFAULT_TIMEOUT = 5.0
MAX_IDLE_CONNECTIONS = 10

Body = Union[bytes, str, IO[Any], None]


class HttpClient:
    """Thin wrapper over a pooled ``requests`` session."""

    def __init__(self, timeout: float | None = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout
        self._session = requests.Session()
        adapter = HTTPAdapter(
            pool_connections=MAX_IDLE_CONNECTIONS, pool_maxsize=MAX_IDLE_CONNECTIONS
        )
        self._session.mount("http://", adapter)
        self._session.mount("https://", adapter)

    @property
    def cookies(self) -> requests.cookies.RequestsCookieJar:
        return self._session.cookies

    def with_cookie(self, url: str, *args: Cookie | tuple[str, str]) -> "HttpClient":
        """Store cookies for ``url``; each is a Cookie or a ``(name, value)`` pair."""
        parts = urlsplit(url)
        if not parts.hostname:
            raise ValueError(f"url has no host: {url!r}")
        path = parts.path or "/"
        for cookie in args:
            if isinstance(cookie, Cookie):
                self._session.cookies.set_cookie(cookie)
            else:
                name, value = cookie
                self._session.cookies.set(name, value, domain=parts.hostname, path=path)
        return self

    def reset_cookie(self) -> "HttpClient":
        self._session.cookies = requests.cookies.RequestsCookieJar()
        return self

    def _send(self, method: str, url: str, content_type: str | None = None,
              body: Body = None) -> requests.Response:
        headers = {"Content-Type": content_type} if content_type is not None else None
        return self._session.request(
            method, url, data=body, headers=headers, timeout=self.timeout
        )

    def get(self, url: str) -> requests.Response:
        return self._send("GET", url)

    def post(self, url: str, content_type: str, body: Body) -> requests.Response:
        return self._send("POST", url, content_type, body)

    def put(self, url: str, content_type: str, body: Body) -> requests.Response:
        return self._send("PUT", url, content_type, body)

    def patch(self, url: str, content_type: str, body: Body) -> requests.Response:
        return self._send("PATCH", url, content_type, body)

    def delete(self, url: str) -> requests.Response:
        return self._send("DELETE", url)

    def close(self) -> None:
        """Close idle pooled connections."""
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()