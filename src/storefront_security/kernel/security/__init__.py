"""Kernel security – hashing/encryption ports and sensitive-field registry."""
from storefront_security.kernel.security.crypto import (
    FieldEncryptor,
    PasswordCredential,
    PasswordHasher,
)
from storefront_security.kernel.security.pii import (
    DEFAULT_SENSITIVE_FIELDS,
    mask_email,
)

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "FieldEncryptor",
    "PasswordCredential",
    "PasswordHasher",
    "mask_email",
]
