"""Security – salted password hashing."""
from storefront_security.kernel.security import PasswordCredential
from storefront_security.security.passwords.hasher import (
    Pbkdf2PasswordHasher,
    hash_password,
    verify_password,
)

__all__ = ["PasswordCredential", "Pbkdf2PasswordHasher", "hash_password", "verify_password"]
