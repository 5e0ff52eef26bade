"""Kernel security – default sensitive field names and inline PII patterns."""
from __future__ import annotations

import re

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "passphrase", "secret", "jwt_secret", "token",
    "authorization", "cookie", "salt", "hash", "password_hash",
    "encryption_passphrase", "webhook_secret", "signature",
})

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}\b")


def mask_email(text: str) -> str:
    """Replace e-mail addresses inside *text* with ``[EMAIL]``."""
    return EMAIL_RE.sub("[EMAIL]", text)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "EMAIL_RE", "mask_email"]
