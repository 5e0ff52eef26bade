"""Security – HMAC-signed session cookie values.

A signed value is ``<value>.<base64(HMAC-SHA256(value))>``. The value itself
may contain dots (a session token does), so the signature is split off at the
last one.
"""
from __future__ import annotations

import hashlib
import hmac
from datetime import timedelta
from typing import Any

from storefront_security.config.validation import ConfigurationError
from storefront_security.kernel.errors import AuthenticationError, FormatError
from storefront_security.security.encoding import b64encode

__all__ = [
    "SESSION_COOKIE_NAME",
    "session_cookie_options",
    "sign_cookie_value",
    "unsign_cookie_value",
]

SESSION_COOKIE_NAME = "token"


def _signature(value: str, secret: str) -> str:
    if not secret:
        raise ConfigurationError("Cookie signing secret is not configured")
    mac = hmac.new(secret.encode("utf-8"), value.encode("utf-8"), hashlib.sha256)
    return b64encode(mac.digest())


def sign_cookie_value(value: str, secret: str) -> str:
    return f"{value}.{_signature(value, secret)}"


def unsign_cookie_value(signed: str, secret: str) -> str:
    """Return the original value or raise if the signature does not match."""
    value, sep, signature = signed.rpartition(".")
    if not sep or not value or not signature:
        raise FormatError("Signed cookie has no signature", kind="signed_cookie")
    expected = _signature(value, secret)
    if not hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8")):
        raise AuthenticationError()
    return value


def session_cookie_options(ttl: timedelta) -> dict[str, Any]:
    """Cookie attributes for the session token; passed through by the HTTP layer."""
    return {
        "httponly": True,
        "secure": True,
        "samesite": "none",
        "path": "/",
        "max_age": int(ttl.total_seconds()),
    }
