"""Helpers for talking to container image registries."""

from __future__ import annotations

import base64


def auth_string(username: str, password: str) -> str:
    """Return the URL-safe base64 registry credential used for pulls and pushes.

    The values are inserted into the JSON text verbatim, without escaping.
    """
    payload = '{"username":"' + username + '","password":"' + password + '"}'
    return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")