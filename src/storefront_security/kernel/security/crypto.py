"""Kernel security – PasswordHasher, FieldEncryptor ports and the stored credential."""
from __future__ import annotations

import abc
from dataclasses import dataclass


@dataclass(frozen=True)
class PasswordCredential:
    """Stored password credential.

    ``salt`` and ``hash`` are independent base64 strings persisted as two
    columns; the hash is unverifiable without its salt.
    """

    salt: str
    hash: str

    def __repr__(self) -> str:
        return f"PasswordCredential(salt={self.salt!r}, hash='***')"


class PasswordHasher(abc.ABC):
    """Port: one-way password hashing."""

    @abc.abstractmethod
    def hash(self, password: str) -> PasswordCredential: ...

    @abc.abstractmethod
    def verify(self, password: str, credential: PasswordCredential) -> bool: ...


class FieldEncryptor(abc.ABC):
    """Port: reversible authenticated protection of single string values."""

    @abc.abstractmethod
    def encrypt(self, plaintext: str) -> str: ...

    @abc.abstractmethod
    def decrypt(self, token: str) -> str: ...


__all__ = ["FieldEncryptor", "PasswordCredential", "PasswordHasher"]
