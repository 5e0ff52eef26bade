"""Security – session tokens (compact HS256 JWS, PyJWT-backed)."""
from storefront_security.security.jwt.issuer import (
    ALGORITHM,
    DEFAULT_SESSION_TTL,
    JSONValue,
    SessionTokenIssuer,
    sign_token,
)
from storefront_security.security.jwt.verifier import (
    SessionClaims,
    SessionTokenVerifier,
    verify_token,
)

__all__ = [
    "ALGORITHM",
    "DEFAULT_SESSION_TTL",
    "JSONValue",
    "SessionClaims",
    "SessionTokenIssuer",
    "SessionTokenVerifier",
    "sign_token",
    "verify_token",
]
