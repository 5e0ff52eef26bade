"""Security – session token verification (PyJWT-backed).

Signature checks go through PyJWT with the same HS256 parameters used for
signing; expiry is checked here against an injectable clock so that tests and
callers with their own notion of "now" get deterministic results.
"""
from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Any

import jwt as pyjwt

from storefront_security.config.validation import ConfigurationError
from storefront_security.kernel.errors import AuthenticationError, FormatError, SessionExpiredError
from storefront_security.kernel.time import Clock, SystemClock
from storefront_security.observability.logging import get_logger
from storefront_security.security.encoding import b64url_decode
from storefront_security.security.jwt.issuer import ALGORITHM

__all__ = [
    "SessionClaims",
    "SessionTokenVerifier",
    "verify_token",
]

_log = get_logger(__name__)

_DECODE_OPTIONS: dict[str, Any] = {
    "verify_signature": True,
    "verify_exp": False,
    "verify_iat": False,
    "verify_nbf": False,
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "require": ["iat", "exp"],
}


def _decode_header(segment: str) -> dict[str, Any]:
    try:
        header = json.loads(b64url_decode(segment))
    except (ValueError, UnicodeDecodeError) as exc:
        raise FormatError("Session token header is malformed", kind="session_token", cause=exc) from exc
    if not isinstance(header, dict):
        raise FormatError("Session token header is malformed", kind="session_token")
    return header


def _is_numeric(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def verify_token(token: str, secret: str, *, now: int | None = None) -> dict[str, Any]:
    """Return the claims of *token* after signature and expiry checks.

    Raises
    ------
    ConfigurationError
        *secret* is empty.
    FormatError
        Not three non-empty segments, undecodable JSON, or missing
        ``iat``/``exp``.
    AuthenticationError
        Unexpected algorithm or bad signature.
    SessionExpiredError
        ``now >= exp``.
    """
    if not secret:
        raise ConfigurationError("Session signing secret is not configured")
    if not isinstance(token, str):
        raise FormatError("Session token must be a string", kind="session_token")
    segments = token.split(".")
    if len(segments) != 3 or not all(segments):
        raise FormatError("Session token must have 3 segments", kind="session_token")

    header = _decode_header(segments[0])
    if header.get("alg") != ALGORITHM:
        _log.warning("session_token_rejected", reason="algorithm")
        raise AuthenticationError()

    try:
        payload = pyjwt.decode(token, secret, algorithms=[ALGORITHM], options=_DECODE_OPTIONS)
    except pyjwt.InvalidSignatureError as exc:
        _log.warning("session_token_rejected", reason="signature")
        raise AuthenticationError(cause=exc) from exc
    except pyjwt.MissingRequiredClaimError as exc:
        raise FormatError("Session token lacks iat/exp", kind="session_token", cause=exc) from exc
    except pyjwt.DecodeError as exc:
        raise FormatError("Session token is malformed", kind="session_token", cause=exc) from exc
    except pyjwt.PyJWTError as exc:
        raise AuthenticationError(cause=exc) from exc

    if not _is_numeric(payload["iat"]) or not _is_numeric(payload["exp"]):
        raise FormatError("Session token iat/exp must be numeric", kind="session_token")

    current = SystemClock().epoch_seconds() if now is None else now
    if current >= payload["exp"]:
        raise SessionExpiredError(expired_at=int(payload["exp"]))
    return payload


@dataclass(frozen=True)
class SessionClaims:
    subject_id: Any
    email: str | None
    issued_at: int
    expires_at: int
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> SessionClaims:
        known = {"id", "email", "iat", "exp"}
        return cls(
            subject_id=payload.get("id"),
            email=payload.get("email"),
            issued_at=int(payload["iat"]),
            expires_at=int(payload["exp"]),
            extra={k: v for k, v in payload.items() if k not in known},
        )

    def is_expired(self, now: int) -> bool:
        return now >= self.expires_at


class SessionTokenVerifier:
    """Verifies presented session tokens against the signing secret."""

    def __init__(self, secret: str, clock: Clock | None = None) -> None:
        if not secret:
            raise ConfigurationError("Session signing secret is not configured")
        self._secret = secret
        self._clock = clock or SystemClock()

    def __repr__(self) -> str:
        return "SessionTokenVerifier(secret='***')"

    def verify(self, token: str) -> SessionClaims:
        payload = verify_token(token, self._secret, now=self._clock.epoch_seconds())
        return SessionClaims.from_payload(payload)
