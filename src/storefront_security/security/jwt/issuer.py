from __future__ import annotations

import json
import math
from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Union

import jwt as pyjwt

from storefront_security.config.validation import ConfigurationError
from storefront_security.kernel.errors import ValidationError
from storefront_security.kernel.time import Clock, SystemClock
from storefront_security.observability.logging import get_logger

__all__ = [
    "ALGORITHM",
    "DEFAULT_SESSION_TTL",
    "MIN_SESSION_TTL",
    "JSONValue",
    "SessionTokenIssuer",
    "sign_token",
]

JSONValue = Union[None, bool, int, float, str, list["JSONValue"], dict[str, "JSONValue"]]

ALGORITHM = "HS256"
DEFAULT_SESSION_TTL = timedelta(hours=24)

_log = get_logger(__name__)

# Registered claims PyJWT type-checks as strings.
_STRING_CLAIMS = ("iss", "sub", "jti")
MIN_SESSION_TTL = timedelta(seconds=1)


def _invalid(field: str, reason: str) -> ValidationError:
    return ValidationError(
        f"Cannot sign token: {field} {reason}",
        errors=[{"field": field, "reason": reason}],
    )


def _numeric_date(field: str, value: Any) -> int:
    # bool is an int subclass; True is not a timestamp.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _invalid(field, "must be an integer")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise _invalid(field, "must be finite")
        if not value.is_integer():
            raise _invalid(field, "must be an integer")
        value = int(value)
    return value


def _check_claims(claims: Any) -> None:
    if claims is None or not isinstance(claims, Mapping):
        raise _invalid("claims", "must be a mapping")
    for key in claims:
        if not isinstance(key, str):
            raise _invalid("claims", "keys must be strings")
    try:
        json.dumps(dict(claims), allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise _invalid("claims", "must be JSON-serialisable") from exc
    for name in _STRING_CLAIMS:
        if name in claims and not isinstance(claims[name], str):
            raise _invalid("claims", f"{name} must be a string")


def sign_token(
    claims: Mapping[str, JSONValue],
    secret: str,
    issued_at: int,
    expires_at: int,
) -> str:
    """Build ``header.payload.signature`` signed with HMAC-SHA256.

    Every precondition is checked before any signing happens; a violation
    raises :class:`ValidationError` whose ``errors`` names the failed field.
    The payload is a copy of *claims* with ``iat``/``exp`` overwritten.

    PyJWT emits ``InsecureKeyLengthWarning`` for secrets shorter than 32
    bytes; the token is still signed.
    """
    _check_claims(claims)
    if not isinstance(secret, str) or not secret:
        raise _invalid("secret", "must be a non-empty string")
    iat = _numeric_date("issued_at", issued_at)
    exp = _numeric_date("expires_at", expires_at)
    if exp <= iat:
        raise _invalid("expires_at", "must be greater than issued_at")

    payload = dict(claims)
    payload["iat"] = iat
    payload["exp"] = exp
    try:
        return pyjwt.encode(payload, secret, algorithm=ALGORITHM)
    except (TypeError, ValueError) as exc:
        raise _invalid("claims", str(exc)) from exc


class SessionTokenIssuer:
    """Issues session tokens for an account identity with a fixed lifetime."""

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_SESSION_TTL,
        clock: Clock | None = None,
    ) -> None:
        if not secret:
            raise ConfigurationError("Session signing secret is not configured")
        if ttl < MIN_SESSION_TTL:
            raise ConfigurationError("Session lifetime must be at least one second")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock or SystemClock()

    def __repr__(self) -> str:
        return f"SessionTokenIssuer(ttl={self._ttl!r})"

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, account_id: int | str, email: str, **extra: JSONValue) -> str:
        iat = self._clock.epoch_seconds()
        exp = iat + int(self._ttl.total_seconds())
        claims: dict[str, JSONValue] = {**extra, "id": account_id, "email": email}
        token = sign_token(claims, self._secret, iat, exp)
        _log.debug("session_issued", account_id=account_id, exp=exp)
        return token
