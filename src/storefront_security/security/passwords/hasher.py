from __future__ import annotations

import hmac
import os

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from storefront_security.kernel.errors import FormatError
from storefront_security.kernel.security import PasswordCredential, PasswordHasher
from storefront_security.observability.logging import get_logger
from storefront_security.security.encoding import b64decode, b64encode

__all__ = [
    "Pbkdf2PasswordHasher",
    "hash_password",
    "verify_password",
]

SALT_LEN = 16
HASH_LEN = 32
ITERATIONS = 100_000

_log = get_logger(__name__)


def _derive(password: str, salt: bytes) -> bytes:
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=HASH_LEN,
        salt=salt,
        iterations=ITERATIONS,
    )
    return kdf.derive(password.encode("utf-8"))


def hash_password(password: str) -> PasswordCredential:
    """Derive a storable credential from *password* with a fresh 16-byte salt."""
    salt = os.urandom(SALT_LEN)
    return PasswordCredential(salt=b64encode(salt), hash=b64encode(_derive(password, salt)))


def verify_password(password: str, salt: str, hash: str) -> bool:  # noqa: A002
    """Return ``True`` iff *password* re-derives the stored *hash* under *salt*.

    Wrong passwords and undecodable salt/hash values give ``False``. Only a
    stored value that is not a string at all raises :class:`FormatError`.
    """
    if not isinstance(salt, str) or not isinstance(hash, str):
        raise FormatError("Stored password credential is incomplete", kind="password_credential")
    try:
        salt_bytes = b64decode(salt)
        expected = b64decode(hash)
    except FormatError:
        _log.warning("password_credential_undecodable")
        return False
    if not salt_bytes:
        return False
    return hmac.compare_digest(_derive(password, salt_bytes), expected)


class Pbkdf2PasswordHasher(PasswordHasher):
    """:class:`PasswordHasher` port backed by PBKDF2-HMAC-SHA256."""

    def hash(self, password: str) -> PasswordCredential:  # noqa: A003
        return hash_password(password)

    def verify(self, password: str, credential: PasswordCredential) -> bool:
        return verify_password(password, credential.salt, credential.hash)
