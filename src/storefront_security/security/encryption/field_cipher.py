from __future__ import annotations

import os
from collections.abc import Mapping

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from storefront_security.config.validation import ConfigurationError
from storefront_security.kernel.errors import AuthenticationError, FormatError
from storefront_security.kernel.security import FieldEncryptor
from storefront_security.observability.logging import get_logger
from storefront_security.security.encoding import b64decode, b64encode

__all__ = [
    "FieldCipher",
    "decrypt_field",
    "derive_field_key",
    "encrypt_field",
]

SALT_LEN = 16
NONCE_LEN = 12
KEY_LEN = 32  # AES-256
KDF_ITERATIONS = 100_000
DELIMITER = ":"

_log = get_logger(__name__)


def _require_passphrase(passphrase: str | None) -> str:
    if not isinstance(passphrase, str) or not passphrase:
        raise ConfigurationError("Encryption passphrase is not configured")
    return passphrase


def derive_field_key(passphrase: str, salt: bytes) -> bytes:
    """PBKDF2-HMAC-SHA256 over *passphrase* and *salt*, 32 raw bytes."""
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LEN,
        salt=salt,
        iterations=KDF_ITERATIONS,
    )
    return kdf.derive(passphrase.encode("utf-8"))


def encrypt_field(plaintext: str, passphrase: str) -> str:
    """Encrypt *plaintext* into ``b64(salt):b64(iv):b64(ciphertext||tag)``.

    Salt and nonce are fresh per call, so equal plaintexts never yield equal
    tokens.
    """
    passphrase = _require_passphrase(passphrase)
    salt = os.urandom(SALT_LEN)
    nonce = os.urandom(NONCE_LEN)
    key = derive_field_key(passphrase, salt)
    ciphertext = AESGCM(key).encrypt(nonce, plaintext.encode("utf-8"), None)
    return DELIMITER.join((b64encode(salt), b64encode(nonce), b64encode(ciphertext)))


def decrypt_field(token: str, passphrase: str) -> str:
    """Reverse :func:`encrypt_field`.

    Raises
    ------
    ConfigurationError
        The passphrase is empty or absent.
    FormatError
        *token* is not three base64 components of the expected sizes.
    AuthenticationError
        The GCM tag did not verify. Wrong passphrase and tampered bytes are
        reported identically.
    """
    passphrase = _require_passphrase(passphrase)
    if not isinstance(token, str):
        raise FormatError("Encrypted field must be a string", kind="encrypted_field")
    parts = token.split(DELIMITER)
    if len(parts) != 3:
        raise FormatError("Encrypted field must have 3 components", kind="encrypted_field")

    salt, nonce, ciphertext = (b64decode(p) for p in parts)
    if len(salt) != SALT_LEN or len(nonce) != NONCE_LEN:
        raise FormatError("Encrypted field has invalid salt or iv length", kind="encrypted_field")

    key = derive_field_key(passphrase, salt)
    try:
        plaintext = AESGCM(key).decrypt(nonce, ciphertext, None)
    except InvalidTag as exc:
        _log.warning("field_decrypt_failed")
        raise AuthenticationError(cause=exc) from exc
    return plaintext.decode("utf-8")


class FieldCipher(FieldEncryptor):
    """Field encryption bound to the process-wide passphrase.

    The passphrase is checked once here so that a missing secret fails at
    start-up rather than on the first request.
    """

    def __init__(self, passphrase: str) -> None:
        self._passphrase = _require_passphrase(passphrase)

    def __repr__(self) -> str:
        return "FieldCipher(passphrase='***')"

    def encrypt(self, plaintext: str) -> str:
        return encrypt_field(plaintext, self._passphrase)

    def decrypt(self, token: str) -> str:
        return decrypt_field(token, self._passphrase)

    def encrypt_fields(self, values: Mapping[str, str | None]) -> dict[str, str | None]:
        """Encrypt each value independently; ``None`` and ``""`` pass through."""
        return {k: (self.encrypt(v) if v else v) for k, v in values.items()}

    def decrypt_fields(self, values: Mapping[str, str | None]) -> dict[str, str | None]:
        """Inverse of :meth:`encrypt_fields`; the first failing field raises."""
        return {k: (self.decrypt(v) if v else v) for k, v in values.items()}
