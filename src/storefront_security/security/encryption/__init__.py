"""Security – field-level authenticated encryption."""
from storefront_security.security.encryption.field_cipher import (
    FieldCipher,
    decrypt_field,
    derive_field_key,
    encrypt_field,
)
from storefront_security.security.encryption.key_rotation import FieldKeyRotation

__all__ = [
    "FieldCipher",
    "FieldKeyRotation",
    "decrypt_field",
    "derive_field_key",
    "encrypt_field",
]
