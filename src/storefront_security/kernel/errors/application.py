"""Application-layer errors — authentication outcomes surfaced to request handlers."""

from __future__ import annotations

from typing import Any

from storefront_security.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class AuthenticationError(ApplicationError):
    """Integrity or signature check failed.

    The message is uniform regardless of root cause: a wrong key and tampered
    data are reported identically.
    """

    default_code = "authentication_failed"

    def __init__(self, message: str = "Authentication failed", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class SessionExpiredError(AuthenticationError):
    """A session token is well-formed and authentic but past its ``exp``."""

    default_code = "session_expired"

    def __init__(
        self,
        message: str = "Session expired",
        *,
        expired_at: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.expired_at = expired_at


class InvalidCredentialsError(ApplicationError):
    """Sign-in failed; unknown account and wrong password are not distinguished."""

    default_code = "invalid_credentials"

    def __init__(self, message: str = "Invalid credentials", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "SessionExpiredError",
]
