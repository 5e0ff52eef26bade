"""Security – base64 / base64url helpers shared by the cipher, hasher and tokens."""
from __future__ import annotations

import base64
import binascii
import re

from storefront_security.kernel.errors import FormatError

__all__ = ["b64decode", "b64encode", "b64url_decode", "b64url_encode"]

_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def b64encode(data: bytes) -> str:
    """Standard alphabet, padded."""
    return base64.b64encode(data).decode("ascii")


def b64decode(text: str) -> bytes:
    """Strict inverse of :func:`b64encode`; raises :class:`FormatError`."""
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError, ValueError) as exc:
        raise FormatError("Invalid base64 component", kind="base64", cause=exc) from exc


def b64url_encode(data: bytes | str) -> str:
    """URL-safe alphabet with ``=`` padding stripped (JWS segment form)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    """Decode unpadded base64url (JWS segments); raises :class:`FormatError`.

    Only the URL-safe alphabet is accepted; ``+``, ``/`` and ``=`` are rejected.
    """
    if not isinstance(text, str) or not _B64URL_RE.fullmatch(text):
        raise FormatError("Invalid base64url component", kind="base64url")
    try:
        return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))
    except (binascii.Error, ValueError) as exc:
        raise FormatError("Invalid base64url component", kind="base64url", cause=exc) from exc
